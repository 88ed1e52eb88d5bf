"""Countdown timer state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Literal

from .formatting import elapsed_between, format_duration

TimerStatus = Literal["idle", "running", "done"]

TIMER_STEP = timedelta(minutes=1)
TIMER_MIN = timedelta(minutes=1)
TIMER_MAX = timedelta(minutes=999)


@dataclass
class Timer:
    """Counts down from ``total``.

    ``logged`` makes the expiry commit edge-triggered: it is cleared on
    start and set by the first tick that sees the countdown reach zero.
    """

    total: timedelta = field(default_factory=lambda: timedelta(minutes=25))
    status: TimerStatus = "idle"
    start: float = 0.0
    logged: bool = False
    display: str = ""

    def __post_init__(self):
        self.total = min(max(self.total, TIMER_MIN), TIMER_MAX)
        if not self.display:
            self.display = format_duration(self.total)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Timer":
        return cls(total=timedelta(minutes=minutes))

    @property
    def running(self) -> bool:
        return self.status == "running"

    @property
    def done(self) -> bool:
        return self.status == "done"

    @property
    def total_minutes(self) -> int:
        return int(self.total.total_seconds()) // 60

    def remaining(self, now: float) -> timedelta:
        """Time left in the countdown, floored at zero."""
        if not self.running:
            return self.total
        left = self.total - elapsed_between(self.start, now)
        return max(left, timedelta(0))

    def increase(self) -> bool:
        """Add one step to the total. Only accepted while idle."""
        if self.status != "idle":
            return False
        self.total = min(self.total + TIMER_STEP, TIMER_MAX)
        self.display = format_duration(self.total)
        return True

    def decrease(self) -> bool:
        """Remove one step from the total. Only accepted while idle."""
        if self.status != "idle":
            return False
        self.total = max(self.total - TIMER_STEP, TIMER_MIN)
        self.display = format_duration(self.total)
        return True

    def toggle(self, now: float) -> None:
        """Start, stop, or acknowledge a finished countdown."""
        if self.status == "done":
            self.status = "idle"
            self.display = format_duration(self.total)
        elif self.status == "running":
            self.status = "idle"
            self.display = format_duration(self.total)
        else:
            self.status = "running"
            self.start = now
            self.logged = False

    def tick(self, now: float) -> int:
        """
        Refresh the display from the clock.

        Returns:
            The total's whole minutes on the single tick that observes the
            countdown reach zero, otherwise 0.
        """
        if not self.running:
            return 0

        remaining = self.remaining(now)
        self.display = format_duration(remaining)
        if remaining > timedelta(0) or self.logged:
            return 0

        self.status = "done"
        self.logged = True
        return self.total_minutes
