"""Per-transaction lock bookkeeping on top of a lock table.

Before reading a block a shared lock is taken; before modifying it an
exclusive lock is taken; all locks are released on commit or rollback.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable, Mapping
from types import MappingProxyType

from .lock import LockTable


class LockType(str, enum.Enum):
    S = "S"
    X = "X"


class ConcurrencyManager:
    """Tracks the locks held by one transaction."""

    def __init__(self, lock_table: LockTable | None = None):
        self._table = lock_table if lock_table is not None else LockTable()
        self._locks: dict[Hashable, LockType] = {}

    @property
    def locks(self) -> Mapping[Hashable, LockType]:
        """A read-only view of the locks held, by block."""
        return MappingProxyType(self._locks)

    def s_lock(self, block: Hashable) -> None:
        if block in self._locks:
            return
        self._table.s_lock(block)
        self._locks[block] = LockType.S

    def x_lock(self, block: Hashable) -> None:
        if self.has_x_lock(block):
            return
        self.s_lock(block)
        self._table.x_lock(block)
        self._locks[block] = LockType.X

    def release(self) -> None:
        """Release every lock held."""
        for block in list(self._locks):
            self._table.unlock(block)
            del self._locks[block]

    def has_x_lock(self, block: Hashable) -> bool:
        return self._locks.get(block) is LockType.X