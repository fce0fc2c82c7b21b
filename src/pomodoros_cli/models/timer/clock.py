"""Monotonic clock source for the timer loop."""

import time


class MonotonicClock:
    """Supplies monotonic timestamps in seconds."""

    def now(self) -> float:
        return time.monotonic()
