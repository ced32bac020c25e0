"""Clock abstraction used by the lock table to measure waiting time."""

from __future__ import annotations

import time


class SystemClock:
    """Clock backed by the process's monotonic timer, in seconds."""

    def now(self) -> float:
        """Return the current instant."""
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        """Block the calling thread for ``seconds``."""
        time.sleep(seconds)

    def since(self, start: float) -> float:
        """Return the seconds elapsed since ``start``."""
        return self.now() - start