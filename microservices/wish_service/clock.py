"""
Wish Service Clock

Time source for deadline checks. Timestamps are Unix epoch milliseconds,
the unit block timestamps use.
"""

import time


class SystemClock:
    """Wall-clock time in epoch milliseconds"""

    def now(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    """Clock pinned to a settable timestamp, for replays and tests"""

    def __init__(self, timestamp: int = 0):
        self.timestamp = timestamp

    def now(self) -> int:
        return self.timestamp

    def set(self, timestamp: int) -> None:
        self.timestamp = timestamp

    def advance(self, delta: int) -> int:
        self.timestamp += delta
        return self.timestamp


__all__ = ["SystemClock", "FixedClock"]
