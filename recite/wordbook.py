"""The word book: pages of words on disk, shown in a recite tree and an edit tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from . import storage
from .keys import KeyFilter
from .signals import Signal
from .tree import Page, WordTree, build_edit_item, build_recite_item
from .word import Word

PathLike = Union[str, "os.PathLike[str]"]


class WordBook:
    """Holds every page of words and keeps the page configuration on disk.

    Pages are stored as ``1.json`` .. ``N.json`` inside ``word_list_dir``;
    the current page and the number of pages live in ``config_path``.
    Two trees share the pages: one for reciting and one for editing.
    """

    def __init__(
        self,
        config_path: PathLike,
        word_list_dir: PathLike,
        key_filter: Optional[KeyFilter] = None,
    ) -> None:
        self.config_path = Path(config_path)
        self.word_list_dir = Path(word_list_dir)
        self.pages: list[Page] = []

        self.cur_page_index = 0
        self.count_word_list = 0
        self.edit_mode = False
        self.selected_word: Optional[Word] = None
        self.progress = 0
        self.mode_label = "recite"

        self.edit_mode_changed = Signal()
        self.selected_word_changed = Signal()

        self.recite_tree = WordTree(key_filter, self.pages)
        self.edit_tree = WordTree(key_filter, self.pages)
        self.recite_tree.set_edit_mode(False)
        self.edit_tree.set_edit_mode(True)

        for tree in (self.recite_tree, self.edit_tree):
            tree.mode_changed.connect(self._on_mode_changed)
            tree.selected_word_changed.connect(self._on_selected_word_changed)
            tree.page_index_changed.connect(self._on_page_index_changed)
            tree.word_count_changed.connect(self._on_word_count_changed)

    @property
    def trees(self) -> tuple[WordTree, WordTree]:
        return self.recite_tree, self.edit_tree

    @property
    def active_tree(self) -> WordTree:
        """The tree currently shown: the edit tree in edit mode."""
        return self.edit_tree if self.edit_mode else self.recite_tree

    @property
    def page_label(self) -> str:
        return f"{self.cur_page_index}/{self.count_word_list}"

    @property
    def current_page(self) -> Page:
        index = self.cur_page_index
        if not 1 <= index <= len(self.pages):
            raise IndexError(f"page {index} is not loaded")
        return self.pages[index - 1]

    def _page_path(self, number: int) -> Path:
        return self.word_list_dir / f"{number}.json"

    def _propagate(self) -> None:
        for tree in self.trees:
            tree.set_page_index(self.cur_page_index)
            tree.set_word_count(self.count_word_list)

    def read_config(self) -> None:
        """Load the current page and page count from the configuration file."""
        cur, count = storage.read_config(self.config_path)
        self.cur_page_index = cur
        self.count_word_list = count
        self._propagate()

    def create_word_list_dir(self) -> None:
        """Make sure the directory holding the page files exists."""
        self.word_list_dir.mkdir(parents=True, exist_ok=True)

    def read_all(self) -> None:
        """Load every page file; a first run starts with one placeholder page."""
        self.create_word_list_dir()
        cur, count = self.cur_page_index, self.count_word_list
        if cur > count or cur < 0 or count < 0:
            return

        if cur == 0 and count == 0:
            placeholder = Word.placeholder()
            self.pages.append({placeholder.spelling: placeholder})
            self.update_config(cur + 1, count + 1)
            return

        for number in range(1, count + 1):
            self.pages.append(storage.read_words(self._page_path(number)))
            self.progress = 100 * number // count
        self.update_config(cur, len(self.pages))

    def update_config(self, cur_page: int, count_word_list: int) -> None:
        """Change the page position and write it to the configuration file."""
        if cur_page == self.cur_page_index and count_word_list == self.count_word_list:
            return
        self.cur_page_index = cur_page
        self.count_word_list = count_word_list
        self._propagate()
        storage.write_config(self.config_path, self.cur_page_index, self.count_word_list)

    def set_edit_mode(self, value: bool) -> None:
        """Switch between recite and edit mode, redrawing the shown tree."""
        if value == self.edit_mode:
            return
        self.edit_mode = value
        self.show_words()
        self.edit_mode_changed.emit(value)

    def show_words(self) -> None:
        """Fill the active tree with the words of the current page."""
        page = self.current_page
        tree = self.active_tree
        build = build_edit_item if self.edit_mode else build_recite_item
        tree.clear()
        for word in page.values():
            item = build(word)
            tree.add_top_level_item(item)
            tree.select(item)

    def set_top_template(self, word: Optional[Word]) -> None:
        """The word the edit tree adds as a new top-level entry."""
        if word is not None:
            self.edit_tree.set_top_template(word)

    def set_bottom_template(self, word: Optional[Word]) -> None:
        """The word whose spelling the edit tree adds to a category."""
        if word is not None:
            self.edit_tree.set_bottom_template(word)

    def save(self) -> None:
        """Write the configuration and every page file."""
        self.create_word_list_dir()
        self.count_word_list = max(self.count_word_list, len(self.pages))
        storage.write_config(self.config_path, self.cur_page_index, self.count_word_list)
        total = max(self.count_word_list, 1)
        for number, page in enumerate(self.pages, start=1):
            storage.write_words(page, self._page_path(number))
            self.progress = 100 * (number - 1) // total

    def _on_mode_changed(self, value: bool) -> None:
        self.set_edit_mode(value)
        self.mode_label = "Edit" if value else "Recite"

    def _on_selected_word_changed(self, word: Word) -> None:
        self.selected_word = word
        self.selected_word_changed.emit(word)

    def _on_page_index_changed(self, index: int) -> None:
        self.cur_page_index = index

    def _on_word_count_changed(self, count: int) -> None:
        self.count_word_list = count