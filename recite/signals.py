"""A small synchronous observer used to announce state changes."""

from __future__ import annotations

from typing import Any, Callable

Handler = Callable[..., Any]


class Signal:
    """A list of handlers called in connection order when the signal is emitted."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def connect(self, handler: Handler) -> None:
        """Register ``handler`` to be called on every emission."""
        if not callable(handler):
            raise TypeError("signal handler must be callable")
        self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        """Remove the first registration of ``handler``.

        Raises ValueError if the handler was never connected.
        """
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError("handler is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected handler with ``args``."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)