# recite

A small library for keeping a vocabulary notebook. Words are kept in pages,
one JSON file per page. Each word has a spelling, a part of speech and lists
of meanings, synonyms, antonyms, near-synonyms, look-alike words, related
nouns, verbs, adjectives, adverbs and useful expressions. An in-memory,
keyboard-driven tree lets you browse the current page or edit it.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `recite.word`: the `Word` dataclass and the `Category` enum of its list
  fields. A category can be given as a `Category` member or as its tree label
  (for example `"释义"` for meanings). `Word.entries`, `add_entry`,
  `remove_entry`, `replace_entry` and `copy` work on those lists.
  `Word.placeholder()` gives the `"NaN"` word that a new notebook starts with.
  While a list still holds `"NaN"`, `add_entry` refuses to add to it, and a
  list holding only `"NaN"` is never emptied by `remove_entry`.
- `recite.storage`: reads and writes the configuration file (current page and
  page count) and the page files. The functions are `read_config`,
  `write_config`, `read_words`, `write_words`, `append_word`, `insert_word`,
  `update_word`, `object_count`, `word_to_json` and `word_from_json`.
  `read_config` creates a missing configuration file holding zeros. Files that
  cannot be read, are not valid JSON or do not have the expected shape raise
  `StorageError`. `update_word` raises `ValueError` if asked to change a
  word's spelling.
- `recite.signals`: `Signal`, a list of callbacks with `connect`,
  `disconnect` and `emit`.
- `recite.keys`: the `Key` enum and `KeyFilter`. `KeyFilter.filter` consumes
  `I`, `R` and `ENTER` (auto-repeats pass through) and emits `i_pressed`,
  `r_pressed` and `enter_pressed`.
- `recite.tree`: `TreeItem`, `build_edit_item`, `build_recite_item` and
  `WordTree`. Connected to a `KeyFilter`, a tree enters edit mode on `I` and
  leaves it on `R`. `WordTree.key_press` handles:
  - arrow keys: move through the visible items; `RIGHT` expands an item,
    `LEFT` collapses it or moves to its parent;
  - `ENTER` / `RETURN` in recite mode: emits `selected_word_changed` with a
    copy of the selected word;
  - `A` in edit mode: `add_item` on the selection. On a word this adds a copy
    of the top template word; on a category entry it adds the bottom
    template's spelling to that category. Templates are set with
    `set_top_template` / `set_bottom_template`; adding without one raises
    `RuntimeError`. Nothing is added to a page that still holds `"NaN"`;
  - `D` in edit mode: `remove_item` deletes the selection and its subtree
    from the tree and the page;
  - `W` in edit mode: `begin_edit` marks the selection editable and remembers
    its text; after changing the item's text, call
    `on_item_modified(item, column)` to write the change into the page.
- `recite.wordbook`: `WordBook` ties it together. It keeps a recite tree and
  an edit tree over the same pages, loads every page from the word-list
  directory (`1.json`, `2.json`, ...), keeps the configuration file in step,
  switches between the two views with `set_edit_mode` and writes everything
  back with `save()`.

## Example

```python
from recite.keys import Key, KeyFilter
from recite.wordbook import WordBook

keys = KeyFilter()
book = WordBook("config.json", "WordList", keys)
book.read_config()
book.read_all()
book.show_words()

keys.filter(Key.I)          # switch both trees to edit mode
print(book.edit_mode, book.page_label)

book.save()
```

A new notebook starts with one page holding a single `"NaN"` placeholder word.
Adding a word to a page that already holds more than 60 words starts a new
page and moves to it.

## File format

The configuration file is a JSON object with `curPageIndex` and
`countWordList`. A page file is a JSON array of word objects with the keys
`pageIndex`, `spelling`, `type`, `meanings`, `synonyms`, `antonym`,
`nearSynonyms`, `similar`, `noun`, `verb`, `adj`, `adv` and
`usefulExpressions`. When reading, antonyms are taken from `antonyms` if
present and otherwise from `antonym`. Files are written as indented UTF-8
JSON with sorted keys.

## What it does not do

There is no graphical window and no command-line program. The trees are
in-memory models driven by calls such as `key_press`; drawing them, and
showing the details of the selected word, is left to the application that
uses the library.