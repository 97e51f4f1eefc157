"""Stopwatch that measures study time."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from datetime import timedelta


class Timer:
    """A pausable stopwatch with an extra offset that debug tools can add to."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.start_time: float | None = None
        self.accumulated_time = timedelta(0)
        self.is_running = False
        self.time_offset = timedelta(0)

    def start(self) -> None:
        """Start or resume timing; does nothing when already running."""
        if not self.is_running:
            self.start_time = self._clock()
            self.is_running = True

    def pause(self) -> None:
        """Stop timing and keep the time counted so far."""
        if self.is_running and self.start_time is not None:
            self.accumulated_time += self._since_start()
            self.start_time = None
            self.is_running = False

    def reset(self) -> None:
        """Clear counted time; the debug offset is kept."""
        self.start_time = None
        self.accumulated_time = timedelta(0)
        self.is_running = False

    def add_time(self, minutes: float) -> None:
        """Add whole seconds of the given minutes to the offset; negatives add nothing."""
        seconds = minutes * 60.0
        whole = 0 if math.isnan(seconds) or seconds <= 0 else int(seconds)
        self.time_offset += timedelta(seconds=whole)

    def elapsed(self) -> timedelta:
        """Return counted time plus the running stretch and the offset."""
        real = self.accumulated_time
        if self.is_running and self.start_time is not None:
            real += self._since_start()
        return real + self.time_offset

    def elapsed_minutes(self) -> float:
        """Return elapsed time in minutes."""
        return self.elapsed().total_seconds() / 60.0

    def _since_start(self) -> timedelta:
        assert self.start_time is not None
        return timedelta(seconds=max(0.0, self._clock() - self.start_time))