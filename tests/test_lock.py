import threading
import time

import pytest

from simpledb.lock import DEFAULT_MAX_WAIT_TIME, LockAbortError, LockTable
from simpledb.lock_state import UNLOCKED, X_LOCKED

BLOCK = ("test", 0)


class FakeClock:
    def __init__(self, elapsed=0.0):
        self.elapsed = elapsed
        self.now_calls = 0

    def now(self):
        self.now_calls += 1
        return 0.0

    def sleep(self, seconds):
        pass

    def since(self, start):
        return self.elapsed


def test_default_wait_time():
    assert LockTable().max_wait_time == DEFAULT_MAX_WAIT_TIME == 10.0


def test_custom_wait_time():
    assert LockTable(max_wait_time=5).max_wait_time == 5


@pytest.mark.parametrize("method, expected", [("s_lock", 1), ("x_lock", X_LOCKED)])
def test_lock_when_free(method, expected):
    clock = FakeClock()
    table = LockTable(clock=clock)
    getattr(table, method)(BLOCK)
    assert table.state(BLOCK) == expected
    assert clock.now_calls == 1


WAIT_CASES = [
    (["x_lock"], "s_lock", 1),
    (["s_lock", "s_lock"], "x_lock", X_LOCKED),
]


@pytest.mark.parametrize("held, wanted, expected", WAIT_CASES)
def test_lock_waits_for_release(held, wanted, expected):
    table = LockTable(max_wait_time=5)
    for method in held:
        getattr(table, method)(BLOCK)
    errors = []
    done = threading.Event()

    def worker():
        try:
            getattr(table, wanted)(BLOCK)
        except LockAbortError as exc:
            errors.append(exc)
        done.set()

    thread = threading.Thread(target=worker)
    thread.start()
    time.sleep(0.1)
    assert not done.is_set()
    for _ in held:
        threading.Thread(target=table.unlock, args=(BLOCK,)).start()
    assert done.wait(1.0)
    thread.join()
    assert errors == []
    assert table.state(BLOCK) == expected


@pytest.mark.parametrize(
    "held, wanted, remaining",
    [(["x_lock"], "s_lock", X_LOCKED), (["s_lock", "s_lock"], "x_lock", 2)],
)
def test_lock_aborts_when_wait_exceeded(held, wanted, remaining):
    table = LockTable(max_wait_time=1, clock=FakeClock(elapsed=2))
    for method in held:
        getattr(table, method)(BLOCK)
    with pytest.raises(LockAbortError):
        getattr(table, wanted)(BLOCK)
    assert table.state(BLOCK) == remaining


def test_s_lock_times_out_with_real_clock():
    table = LockTable(max_wait_time=0.05)
    table.x_lock(BLOCK)
    with pytest.raises(LockAbortError):
        table.s_lock(BLOCK)


@pytest.mark.parametrize("s_locks, expected", [(2, 1), (1, UNLOCKED), (0, UNLOCKED)])
def test_unlock(s_locks, expected):
    table = LockTable(clock=FakeClock())
    for _ in range(s_locks):
        table.s_lock(BLOCK)
    table.unlock(BLOCK)
    assert table.state(BLOCK) == expected


def test_locks_are_per_block():
    table = LockTable(clock=FakeClock())
    other = ("test", 1)
    table.x_lock(BLOCK)
    table.s_lock(other)
    assert (table.state(BLOCK), table.state(other)) == (X_LOCKED, 1)