"""Lock table granting shared and exclusive block locks with a wait limit."""

from __future__ import annotations

import threading
from collections.abc import Hashable

from .clock import SystemClock
from .lock_state import (
    UNLOCKED,
    X_LOCKED,
    is_multiple_s_locked,
    is_x_locked,
    next_state,
)

DEFAULT_MAX_WAIT_TIME = 10.0


class LockAbortError(Exception):
    """Raised when a lock could not be obtained within the wait limit."""


class LockTable:
    """Shared and exclusive locks on blocks, safe to use from many threads."""

    def __init__(self, max_wait_time: float = DEFAULT_MAX_WAIT_TIME, clock=None):
        self.max_wait_time = max_wait_time
        self._clock = clock if clock is not None else SystemClock()
        self._locks: dict[Hashable, int] = {}
        self._cond = threading.Condition()

    def s_lock(self, block: Hashable) -> None:
        """Grant a shared lock, waiting while another holds an exclusive one."""
        with self._cond:
            start = self._clock.now()
            while self._has_x_lock(block) and not self._waited_too_long(start):
                self._cond.wait(timeout=self.max_wait_time)
            if self._has_x_lock(block):
                raise LockAbortError(f"lock: SLock: block {block} has X lock")
            self._locks[block] = next_state(self.state(block))

    def x_lock(self, block: Hashable) -> None:
        """Grant an exclusive lock.

        The caller is expected to hold a shared lock already, so any count
        above one means another holder is present.
        """
        with self._cond:
            start = self._clock.now()
            while self._has_other_s_locks(block) and not self._waited_too_long(start):
                self._cond.wait(timeout=self.max_wait_time)
            if self._has_other_s_locks(block):
                raise LockAbortError(f"lock: XLock: block {block} has other S locks")
            self._locks[block] = X_LOCKED

    def unlock(self, block: Hashable) -> None:
        """Release one lock on the block, waking waiters once it is free."""
        with self._cond:
            state = self.state(block)
            if is_multiple_s_locked(state):
                self._locks[block] = state - 1
                return
            self._locks.pop(block, None)
            self._cond.notify_all()

    def state(self, block: Hashable) -> int:
        """Return the current lock state of the block."""
        return self._locks.get(block, UNLOCKED)

    def _has_x_lock(self, block: Hashable) -> bool:
        return is_x_locked(self.state(block))

    def _has_other_s_locks(self, block: Hashable) -> bool:
        return is_multiple_s_locked(self.state(block))

    def _waited_too_long(self, start: float) -> bool:
        return self._clock.since(start) > self.max_wait_time