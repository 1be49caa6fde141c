"""Reading and writing word pages and the page configuration as JSON files."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from .word import Category, Word

PathLike = Union[str, "os.PathLike[str]"]

# Keys used on disk; the antonym list is written under the singular key.
_LIST_KEYS: tuple[tuple[Category, str], ...] = (
    (Category.MEANINGS, "meanings"),
    (Category.SYNONYMS, "synonyms"),
    (Category.ANTONYMS, "antonym"),
    (Category.NEAR_SYNONYMS, "nearSynonyms"),
    (Category.SIMILAR, "similar"),
    (Category.NOUN, "noun"),
    (Category.VERB, "verb"),
    (Category.ADJ, "adj"),
    (Category.ADV, "adv"),
    (Category.USEFUL_EXPRESSIONS, "usefulExpressions"),
)
_READ_ALIASES = {Category.ANTONYMS: ("antonyms", "antonym")}


class StorageError(Exception):
    """A word file or configuration file is missing or malformed."""


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not value.is_integer():
        return 0
    return int(value)


def _dump(data: Any, path: PathLike) -> None:
    text = json.dumps(data, indent=4, ensure_ascii=False, sort_keys=True) + "\n"
    Path(path).write_text(text, encoding="utf-8")


def _load(path: PathLike) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"cannot read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageError(f"{path} is not valid JSON") from exc


def _load_array(path: PathLike) -> list[Any]:
    data = _load(path)
    if not isinstance(data, list):
        raise StorageError(f"{path} does not hold a JSON array")
    return data


def word_to_json(word: Word) -> dict[str, Any]:
    """The JSON object stored for ``word``."""
    obj: dict[str, Any] = {
        "pageIndex": word.page_index,
        "spelling": word.spelling,
        "type": word.part_of_speech,
    }
    for category, key in _LIST_KEYS:
        obj[key] = list(word.entries(category))
    return obj


def word_from_json(obj: Any) -> Word:
    """Build a word from a stored JSON object.

    Missing or mistyped scalar fields fall back to defaults; a list entry
    that is not a string raises StorageError.
    """
    if not isinstance(obj, dict):
        raise StorageError("a word must be a JSON object")
    spelling = obj.get("spelling")
    part = obj.get("type")
    word = Word(
        page_index=_to_int(obj.get("pageIndex")),
        spelling=spelling if isinstance(spelling, str) else "",
        part_of_speech=part if isinstance(part, str) else "",
    )
    for category, key in _LIST_KEYS:
        candidates = _READ_ALIASES.get(category, (key,))
        values = next((obj[name] for name in candidates if name in obj), [])
        if not isinstance(values, list):
            continue
        for value in values:
            if not isinstance(value, str):
                raise StorageError(f"entry under {key!r} is not a string: {value!r}")
            word.entries(category).append(value)
    return word


def object_count(path: PathLike) -> int:
    """Number of words stored in the array at ``path``."""
    return len(_load_array(path))


def read_config(path: PathLike) -> tuple[int, int]:
    """Return ``(cur_page_index, count_word_list)``.

    A missing file is created holding zeros.
    """
    if not Path(path).exists():
        write_config(path, 0, 0)
        return 0, 0
    data = _load(path)
    if not isinstance(data, dict):
        raise StorageError(f"{path} does not hold a JSON object")
    return _to_int(data.get("curPageIndex")), _to_int(data.get("countWordList"))


def write_config(path: PathLike, cur_page_index: int, count_word_list: int) -> None:
    """Store the current page and the number of pages."""
    _dump({"curPageIndex": cur_page_index, "countWordList": count_word_list}, path)


def write_words(words: Mapping[str, Word], path: PathLike) -> None:
    """Replace the file at ``path`` with the given words."""
    _dump([word_to_json(word) for word in words.values()], path)


def append_word(word: Word, path: PathLike) -> None:
    """Add ``word`` at the end of an existing word file."""
    items = _load_array(path)
    items.append(word_to_json(word))
    _dump(items, path)


def insert_word(word: Word, index: int, path: PathLike) -> None:
    """Insert ``word`` at position ``index`` of an existing word file."""
    items = _load_array(path)
    items.insert(index, word_to_json(word))
    _dump(items, path)


def update_word(spelling: str, word: Word, path: PathLike) -> None:
    """Replace the stored word spelled ``spelling`` by ``word`` in place.

    The spelling itself cannot change. If no stored word matches, the
    new word goes to the front of the file.
    """
    if word.spelling != spelling:
        raise ValueError("an update cannot change the spelling of a word")
    items = _load_array(path)
    index = 0
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise StorageError(f"{path} holds an element that is not an object")
        if item.get("spelling") == spelling:
            del items[position]
            index = position
            break
    items.insert(index, word_to_json(word))
    _dump(items, path)


def read_words(path: PathLike) -> dict[str, Word]:
    """All words of the file at ``path``, keyed by spelling."""
    words: dict[str, Word] = {}
    for item in _load_array(path):
        if not isinstance(item, dict):
            raise StorageError(f"{path} holds an element that is not an object")
        word = word_from_json(item)
        words[word.spelling] = word
    return words