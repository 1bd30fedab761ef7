"""A thread-safe progress counter."""

from __future__ import annotations

import threading
from collections.abc import Callable

_REPORT_MASK = 0xFFFFFF


class Progress:
    """Count steps and report to a callback every 2**24 - 1 of them."""

    def __init__(self, maximum: int, callback: Callable[[int, int], object]) -> None:
        self.maximum = maximum
        self.callback = callback
        self.current = 0
        self._lock = threading.Lock()

    def inc(self) -> None:
        """Count one step, calling ``callback(current, maximum)`` when due."""
        with self._lock:
            self.current += 1
            if self.current & _REPORT_MASK == _REPORT_MASK:
                self.callback(self.current, self.maximum)