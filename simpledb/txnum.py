"""Thread-safe source of transaction numbers."""

from __future__ import annotations

import itertools
import threading


class TxNumberGenerator:
    """Hands out increasing transaction numbers starting at 1."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = itertools.count(1)

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


_default: TxNumberGenerator | None = None
_default_lock = threading.Lock()


def default_generator() -> TxNumberGenerator:
    """Return the process-wide generator, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = TxNumberGenerator()
        return _default