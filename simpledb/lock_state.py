"""Lock states for a single block.

A state is an integer: ``X_LOCKED`` (-1) for an exclusive lock,
``UNLOCKED`` (0) for no lock, and a positive count of shared locks otherwise.
"""

from __future__ import annotations

X_LOCKED = -1
UNLOCKED = 0


class LockStateError(Exception):
    """Raised when a lock state has no successor or predecessor."""


def is_unlocked(state: int) -> bool:
    return state == UNLOCKED


def is_x_locked(state: int) -> bool:
    return state == X_LOCKED


def is_s_locked(state: int) -> bool:
    return state > UNLOCKED


def is_multiple_s_locked(state: int) -> bool:
    return state > UNLOCKED + 1


def next_state(state: int) -> int:
    """Return the state after granting one more shared lock."""
    if state == X_LOCKED:
        raise LockStateError("lock: cannot get next lock state for X_LOCKED")
    return state + 1


def prev_state(state: int) -> int:
    """Return the state after releasing one lock."""
    if state == UNLOCKED:
        raise LockStateError("lock: cannot get previous lock state for UNLOCKED")
    return state - 1