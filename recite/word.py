"""The vocabulary entry and its categories of related words."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PLACEHOLDER = "NaN"


class Category(Enum):
    """The list-valued parts of a word, labelled as they appear in the tree."""

    MEANINGS = "释义"
    SYNONYMS = "同义词"
    ANTONYMS = "反义词"
    NEAR_SYNONYMS = "近义词"
    SIMILAR = "形近词"
    NOUN = "名词"
    VERB = "动词"
    ADJ = "形容词"
    ADV = "副词"
    USEFUL_EXPRESSIONS = "常用搭配"

    @property
    def label(self) -> str:
        return self.value

    @property
    def field_name(self) -> str:
        return self.name.lower()


@dataclass
class Word:
    """A word with its meanings, part of speech and related word lists."""

    page_index: int = 0
    spelling: str = PLACEHOLDER
    meanings: list[str] = field(default_factory=list)
    part_of_speech: str = ""
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    near_synonyms: list[str] = field(default_factory=list)
    similar: list[str] = field(default_factory=list)
    noun: list[str] = field(default_factory=list)
    verb: list[str] = field(default_factory=list)
    adj: list[str] = field(default_factory=list)
    adv: list[str] = field(default_factory=list)
    useful_expressions: list[str] = field(default_factory=list)

    @classmethod
    def placeholder(cls) -> "Word":
        """The entry that fills an empty first page."""
        word = cls(page_index=1, spelling=PLACEHOLDER, part_of_speech=PLACEHOLDER)
        for category in Category:
            word.entries(category).append(PLACEHOLDER)
        return word

    def entries(self, category: Category | str) -> list[str]:
        """The live list for ``category`` (a Category or its label)."""
        return getattr(self, Category(category).field_name)

    def add_entry(self, category: Category | str, item: str) -> bool:
        """Append ``item`` unless the list still holds the placeholder."""
        items = self.entries(category)
        if PLACEHOLDER in items:
            return False
        items.append(item)
        return True

    def remove_entry(self, category: Category | str, item: str) -> bool:
        """Remove the first ``item``; a lone placeholder is kept."""
        items = self.entries(category)
        if items == [PLACEHOLDER]:
            return False
        if item not in items:
            return False
        items.remove(item)
        return True

    def replace_entry(self, category: Category | str, old: str, new: str) -> None:
        """Replace the first ``old`` with ``new``; ValueError if absent."""
        items = self.entries(category)
        try:
            position = items.index(old)
        except ValueError:
            raise ValueError(f"{old!r} is not listed under {Category(category).label}") from None
        items[position] = new

    def copy(self) -> "Word":
        """An independent copy whose lists can be changed separately."""
        duplicate = Word(
            page_index=self.page_index,
            spelling=self.spelling,
            part_of_speech=self.part_of_speech,
        )
        for category in Category:
            duplicate.entries(category).extend(self.entries(category))
        return duplicate