"""Frame timer measuring elapsed milliseconds."""

from __future__ import annotations

import time
from collections.abc import Callable

# Accumulated time starts at 2**32 ms so the double keeps a fixed precision.
TIME_ADDITION = 4294967296.0


def _clock_ms() -> float:
    return float(time.perf_counter_ns() // 1_000_000)


class Timer:
    """Measures time between updates; the clock returns milliseconds."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or _clock_ms
        self._last_time_ms = self._clock()
        self._time_ms = TIME_ADDITION

    def update(self) -> float:
        """Advance the timer and return the milliseconds since the last update."""
        current = self._clock()
        delta = current - self._last_time_ms
        self._last_time_ms = current
        self._time_ms += delta
        return delta

    def time_ms(self) -> float:
        """Total milliseconds measured since the timer was created."""
        return self._time_ms - TIME_ADDITION