from __future__ import annotations

import threading
from typing import Any, Callable


class Accumulator:
    """A running-product cell whose every read-modify-write holds one lock."""

    def __init__(self, initial: int = 1):
        self._value = initial
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def update(self, fn: Callable[..., int], *args: Any) -> int:
        """Replace the value with ``fn(value, *args)`` and return the new value."""
        with self._lock:
            self._value = fn(self._value, *args)
            return self._value
