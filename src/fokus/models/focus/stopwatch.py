"""Stopwatch state machine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Literal

from .formatting import elapsed_between, format_duration

StopwatchStatus = Literal["idle", "running"]

ZERO_DISPLAY = format_duration(timedelta(0))


@dataclass
class Stopwatch:
    """Counts up from the moment it is started.

    Times are monotonic clock readings in seconds; the elapsed time is
    always recomputed from ``start`` so repeated ticks never drift.
    """

    status: StopwatchStatus = "idle"
    start: float = 0.0
    display: str = ZERO_DISPLAY

    @property
    def running(self) -> bool:
        return self.status == "running"

    def elapsed(self, now: float) -> timedelta:
        """Time since start, or zero when idle."""
        if not self.running:
            return timedelta(0)
        return elapsed_between(self.start, now)

    def start_session(self, now: float) -> None:
        self.status = "running"
        self.start = now

    def stop(self, now: float) -> int:
        """
        Stop the stopwatch and reset the display.

        Returns:
            Whole minutes elapsed, to be committed to history. Partial
            minutes are discarded.
        """
        if not self.running:
            return 0
        minutes = int(self.elapsed(now).total_seconds()) // 60
        self.status = "idle"
        self.display = ZERO_DISPLAY
        return minutes

    def toggle(self, now: float) -> int:
        """Start when idle, stop when running. Returns minutes to commit."""
        if self.running:
            return self.stop(now)
        self.start_session(now)
        return 0

    def tick(self, now: float) -> None:
        if self.running:
            self.display = format_duration(self.elapsed(now))
