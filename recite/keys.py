"""Application-wide key handling that turns a few keys into mode signals."""

from __future__ import annotations

from enum import Enum, auto

from .signals import Signal


class Key(Enum):
    """The keys the word book reacts to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    RETURN = auto()
    CONTROL = auto()
    ESCAPE = auto()
    A = auto()
    D = auto()
    I = auto()  # noqa: E741
    R = auto()
    W = auto()


class KeyFilter:
    """Intercepts I, R and Enter before any widget sees them.

    ``I`` asks for edit mode, ``R`` for recite mode and the keypad Enter
    is announced on its own signal. Auto-repeated presses pass through.
    """

    def __init__(self) -> None:
        self.i_pressed = Signal()
        self.r_pressed = Signal()
        self.enter_pressed = Signal()

    def filter(self, key: Key, auto_repeat: bool = False) -> bool:
        """Handle a key press; True when the press was consumed."""
        if auto_repeat:
            return False
        signal = {
            Key.I: self.i_pressed,
            Key.R: self.r_pressed,
            Key.ENTER: self.enter_pressed,
        }.get(key)
        if signal is None:
            return False
        signal.emit()
        return True