"""The word tree: browsing and editing the words of the current page."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from .keys import Key, KeyFilter
from .signals import Signal
from .word import PLACEHOLDER, Category, Word

Page = dict[str, Word]

PAGE_CAPACITY = 60

_NAVIGATION = (Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN)


class TreeItem:
    """A node of the tree with two text columns."""

    def __init__(self, text0: str = "", text1: str = "") -> None:
        self.texts = [text0, text1]
        self.children: list[TreeItem] = []
        self.parent: Optional[TreeItem] = None
        self.expanded = False
        self.editable = False

    def add_child(self, child: "TreeItem") -> None:
        """Append ``child``; it must not already belong to a node."""
        if child.parent is not None:
            raise ValueError("item already has a parent")
        node: Optional[TreeItem] = self
        while node is not None:
            if node is child:
                raise ValueError("an item cannot be placed below itself")
            node = node.parent
        child.parent = self
        self.children.append(child)

    def detach(self) -> None:
        """Remove this item from its parent, if it has one."""
        if self.parent is None:
            return
        self.parent.children = [c for c in self.parent.children if c is not self]
        self.parent = None

    @property
    def grandparent(self) -> Optional["TreeItem"]:
        return self.parent.parent if self.parent is not None else None

    def __repr__(self) -> str:
        return f"TreeItem({self.texts[0]!r}, {self.texts[1]!r})"


def _leaves(texts: Iterable[str]) -> Iterator[TreeItem]:
    return (TreeItem("", text) for text in texts)


def build_edit_item(word: Word) -> TreeItem:
    """A word node grouped by category, as shown in edit mode."""
    root = TreeItem(word.spelling)
    for category in Category:
        node = TreeItem(category.label)
        for leaf in _leaves(word.entries(category)):
            node.add_child(leaf)
        root.add_child(node)
        if category is Category.MEANINGS:
            root.add_child(TreeItem(word.part_of_speech))
    return root


def build_recite_item(word: Word) -> TreeItem:
    """A word node listing every entry flat, as shown in recite mode."""
    root = TreeItem(word.spelling)
    for category in Category:
        for leaf in _leaves(word.entries(category)):
            root.add_child(leaf)
        if category is Category.MEANINGS:
            root.add_child(TreeItem("", word.part_of_speech))
    return root


def _category_of(label: str) -> Optional[Category]:
    try:
        return Category(label)
    except ValueError:
        return None


class WordTree:
    """The tree of words on the current page, with keyboard editing.

    ``pages`` is shared with the owner; page indices start at 1.
    """

    def __init__(self, key_filter: Optional[KeyFilter] = None, pages: Optional[list[Page]] = None) -> None:
        self.pages: list[Page] = pages if pages is not None else []
        self.top_level: list[TreeItem] = []
        self.selected: Optional[TreeItem] = None
        self.selected_column = 0

        self.mode_changed = Signal()
        self.selected_word_changed = Signal()
        self.page_index_changed = Signal()
        self.word_count_changed = Signal()

        self._edit_mode = False
        self._page_index = 0
        self._word_count = 0
        self._top_template: Optional[Word] = None
        self._bottom_template: Optional[Word] = None
        self._spelling_before = ""
        self._top_spelling = ""
        self._category_label = ""
        self._presses = dict.fromkeys((Key.A, Key.D, Key.W), 0)

        if key_filter is not None:
            key_filter.i_pressed.connect(self._on_key_i)
            key_filter.r_pressed.connect(self._on_key_r)

    @property
    def edit_mode(self) -> bool:
        return self._edit_mode

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def top_template(self) -> Optional[Word]:
        return self._top_template

    @property
    def bottom_template(self) -> Optional[Word]:
        return self._bottom_template

    def set_edit_mode(self, value: bool) -> None:
        if value != self._edit_mode:
            self._edit_mode = value
            self.mode_changed.emit(value)

    def set_page_index(self, index: int) -> None:
        if index != self._page_index:
            self._page_index = index
            self.page_index_changed.emit(index)

    def set_word_count(self, count: int) -> None:
        if count != self._word_count:
            self._word_count = count
            self.word_count_changed.emit(count)

    def set_top_template(self, word: Word) -> None:
        """The word added as a new top-level entry."""
        if word is not self._top_template:
            self._top_template = word

    def set_bottom_template(self, word: Word) -> None:
        """The word whose spelling is added as a new category entry."""
        if word is not self._bottom_template:
            self._bottom_template = word

    def current_page(self) -> Page:
        index = self._page_index
        if not 1 <= index <= len(self.pages):
            raise IndexError(f"page {index} is not loaded")
        return self.pages[index - 1]

    def add_top_level_item(self, item: TreeItem) -> None:
        if item.parent is not None:
            raise ValueError("a top-level item cannot have a parent")
        self.top_level.append(item)

    def clear(self) -> None:
        self.top_level.clear()
        self.selected = None

    def select(self, item: Optional[TreeItem]) -> None:
        self.selected = item

    def remove_item(self, item: TreeItem) -> None:
        """Delete ``item`` and its subtree from the tree and the page."""
        page = self.current_page()
        if len(page) == 1 and PLACEHOLDER in page:
            return
        self._remove(item, page)
        if self.selected is not None and not self._is_attached(self.selected):
            self.selected = None

    def _remove(self, item: TreeItem, page: Page) -> None:
        if item.children:
            for child in list(item.children):
                self._remove(child, page)
            if item.parent is None:
                page.pop(item.texts[0], None)
        else:
            grandparent = item.grandparent
            if grandparent is not None:
                word = page.get(grandparent.texts[0])
                category = _category_of(item.parent.texts[0])
                if word is not None and category is not None:
                    word.remove_entry(category, item.texts[1])
            elif item.parent is None:
                page.pop(item.texts[0], None)
        self._drop(item)

    def _drop(self, item: TreeItem) -> None:
        if item.parent is None:
            self.top_level = [top for top in self.top_level if top is not item]
        else:
            item.detach()

    def _is_attached(self, item: TreeItem) -> bool:
        node = item
        while node.parent is not None:
            node = node.parent
        return any(top is node for top in self.top_level)

    @staticmethod
    def _require(template: Optional[Word], which: str) -> Word:
        if template is None:
            raise RuntimeError(f"no {which} template word has been set")
        return template

    def add_item(self, item: TreeItem) -> None:
        """Add the template word next to ``item``.

        On a top-level item a new word is added, starting a new page once
        the current one holds more than the page capacity; on an entry the
        bottom template's spelling joins the same category.
        """
        page = self.current_page()
        if item.parent is None:
            if PLACEHOLDER in page:
                return
            word = self._require(self._top_template, "top").copy()
            node = build_edit_item(word)
            if len(page) <= PAGE_CAPACITY:
                self.add_top_level_item(node)
                self.select(node)
                self.selected_word_changed.emit(word)
                page[word.spelling] = word
            else:
                self.pages.append({word.spelling: word})
                self.set_page_index(self._page_index + 1)
                self.clear()
                self.add_top_level_item(node)
                self.select(node)
                self.selected_word_changed.emit(word)
        elif not item.children:
            grandparent = item.grandparent
            if grandparent is None:
                return
            category = _category_of(item.parent.texts[0])
            if category is None:
                return
            template = self._require(self._bottom_template, "bottom")
            word = page[grandparent.texts[0]]
            if not word.add_entry(category, template.spelling):
                return
            leaf = TreeItem("", template.spelling)
            item.parent.add_child(leaf)
            self.select(leaf)
            self.selected_word_changed.emit(template.copy())

    def begin_edit(self) -> Optional[tuple[TreeItem, int]]:
        """Make the selected item editable and remember its current text."""
        item = self.selected
        if item is None:
            return None
        item.editable = True
        if item.parent is None:
            self._spelling_before = item.texts[0]
        elif not item.children and item.grandparent is not None:
            self._top_spelling = item.grandparent.texts[0]
            self._category_label = item.parent.texts[0]
            self._spelling_before = item.texts[1]
        return item, self.selected_column

    def on_item_modified(self, item: TreeItem, column: int) -> None:
        """Write the edited text of ``item`` back into the page."""
        page = self.current_page()
        new_text = item.texts[column]
        if item.parent is None:
            old = self._spelling_before
            page[old].spelling = new_text
            if new_text != old:
                entries = list(page.items())
                page.clear()
                for key, word in entries:
                    page[new_text if key == old else key] = word
        elif not item.children and item.grandparent is not None:
            word = page.get(self._top_spelling)
            category = _category_of(self._category_label)
            if word is None or category is None:
                return
            word.replace_entry(category, self._spelling_before, new_text)

    def _visible(self) -> Iterator[TreeItem]:
        def walk(items: list[TreeItem]) -> Iterator[TreeItem]:
            for item in items:
                yield item
                if item.expanded:
                    yield from walk(item.children)

        return walk(self.top_level)

    def _navigate(self, key: Key) -> None:
        if key not in _NAVIGATION:
            return
        items = list(self._visible())
        if not items:
            return
        current = self.selected
        position = next((i for i, x in enumerate(items) if x is current), None)
        if position is None:
            self.select(items[0])
            return
        if key is Key.UP:
            if position > 0:
                self.select(items[position - 1])
        elif key is Key.DOWN:
            if position < len(items) - 1:
                self.select(items[position + 1])
        elif key is Key.LEFT:
            if current.children and current.expanded:
                current.expanded = False
            elif current.parent is not None:
                self.select(current.parent)
        elif current.children:
            if not current.expanded:
                current.expanded = True
            else:
                self.select(current.children[0])

    def _update_column(self) -> None:
        if self.selected is not None:
            self.selected_column = 0 if self.selected.children else 1

    def _press(self, key: Key) -> bool:
        for other in self._presses:
            if other is not key:
                self._presses[other] = 0
        self._presses[key] += 1
        if self._presses[key] != 1 or self.selected is None:
            return False
        self._presses[key] = 0
        return True

    def _show_selected(self) -> None:
        item = self.selected
        if item is None:
            return
        word = self.current_page().get(item.texts[self.selected_column])
        self.selected_word_changed.emit(word.copy() if word is not None else Word())

    def key_press(self, key: Key, auto_repeat: bool = False) -> None:
        """React to a key press on the tree."""
        if key in _NAVIGATION and (key is Key.DOWN or not auto_repeat):
            self._navigate(key)
            self._update_column()
        elif key is Key.ENTER or (key is Key.RETURN and not auto_repeat):
            if not self._edit_mode:
                self._show_selected()
        elif self._edit_mode and key is Key.A and not auto_repeat:
            if self._press(key):
                self.add_item(self.selected)
        elif self._edit_mode and key is Key.D and not auto_repeat:
            if self._press(key):
                self.remove_item(self.selected)
        elif key is Key.W and not auto_repeat:
            if not self._edit_mode:
                return
            if self._press(key):
                self.begin_edit()
        else:
            self._navigate(key)

    def _on_key_i(self) -> None:
        self.set_edit_mode(True)

    def _on_key_r(self) -> None:
        self.set_edit_mode(False)