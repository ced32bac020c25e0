"""Buffers currently pinned by one transaction, with their pin counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable
from typing import Any


class BufferList:
    """Maps pinned blocks to their buffers and counts how often each is pinned."""

    def __init__(self, buffer_mgr: Any):
        self._bm = buffer_mgr
        self._buffers: dict[Hashable, Any] = {}
        self._pins: Counter = Counter()

    def get_buffer(self, block: Hashable) -> Any | None:
        """Return the buffer holding the block, or None if it is not pinned."""
        return self._buffers.get(block)

    def pin(self, block: Hashable) -> None:
        buffer = self._bm.pin(block)
        self._buffers[block] = buffer
        self._pins[block] += 1

    def unpin(self, block: Hashable) -> None:
        """Drop one pin on the block; unknown blocks are ignored."""
        buffer = self._buffers.get(block)
        if buffer is None:
            return
        self._bm.unpin(buffer)
        self._pins[block] -= 1
        if self._pins[block] <= 0:
            del self._pins[block]
            del self._buffers[block]

    def unpin_all(self) -> None:
        """Release every pin held."""
        for block, count in self._pins.items():
            buffer = self._buffers.get(block)
            if buffer is None:
                continue
            for _ in range(count):
                self._bm.unpin(buffer)
        self._buffers.clear()
        self._pins.clear()

    def pin_count(self, block: Hashable) -> int:
        """Return how many times the block is pinned."""
        return self._pins.get(block, 0)