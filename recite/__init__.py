"""Paged vocabulary notebook with a keyboard-driven word tree and JSON storage."""

__version__ = "0.1.0"

__all__ = ["keys", "signals", "storage", "tree", "word", "wordbook"]