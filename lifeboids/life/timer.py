"""Stopwatch that records elapsed processor time in milliseconds."""

from __future__ import annotations

import math
import time
from typing import Callable


def _process_millis() -> float:
    return time.process_time() * 1000.0


class Timer:
    """Measures intervals and keeps every stored interval for averaging."""

    def __init__(
        self,
        verbose: bool = False,
        clock: Callable[[], float] = _process_millis,
    ) -> None:
        self.verbose = verbose
        self._clock = clock
        self._start: float | None = None
        self._elapsed: float = 0.0
        self._saved: list[float] = []

    @property
    def saved_times(self) -> list[float]:
        """All stored elapsed times, oldest first."""
        return self._saved

    def start(self) -> None:
        """Begin timing an interval."""
        self._start = self._clock()
        if self.verbose:
            print(f"Timer started {self._start}ms")

    def stop(self) -> None:
        """End the current interval; the result is held until stored."""
        if self._start is None:
            raise RuntimeError("timer was stopped before it was started")
        self._elapsed = self._clock() - self._start

    def store(self) -> None:
        """Keep the last measured interval."""
        self._saved.append(self._elapsed)
        if self.verbose:
            print(f"Timer stopped {self._elapsed}ms")

    def latest(self) -> float:
        """The most recently measured interval."""
        return self._elapsed

    def average_time(self) -> float:
        """Mean of the stored intervals; NaN when nothing is stored."""
        if not self._saved:
            return math.nan
        return sum(self._saved) / len(self._saved)

    def clear(self) -> None:
        """Forget all stored intervals."""
        self._saved.clear()