"""Application state shared by the focus screen's tick, render and dispatch."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from fokus.utils.logger import get_logger

from .history import FocusHistory
from .navigation import PAGE_STOPWATCH, PAGE_TIMER, PageNavigator
from .stopwatch import Stopwatch
from .timer import Timer


class HistoryStore(Protocol):
    """Anything that can persist the full history mapping."""

    def save(self, entries: dict[str, int]) -> None: ...


@dataclass
class AppState:
    """Everything the focus screen owns, constructed once at startup."""

    history: FocusHistory
    store: HistoryStore
    timer: Timer = field(default_factory=Timer)
    stopwatch: Stopwatch = field(default_factory=Stopwatch)
    pages: PageNavigator = field(default_factory=PageNavigator)
    history_offset: int = 0
    today: Callable[[], date] = date.today

    @property
    def page(self) -> int:
        return self.pages.index

    @property
    def session_running(self) -> bool:
        return self.stopwatch.running or self.timer.running

    @property
    def minutes_today(self) -> int:
        return self.history.minutes_on(self.today())

    @property
    def show_minutes_today(self) -> bool:
        """The "minutes focused today" line is hidden on the history page
        and while the current page's session is running."""
        if self.page == PAGE_STOPWATCH:
            return not self.stopwatch.running
        if self.page == PAGE_TIMER:
            return not self.timer.running
        return False

    def tick(self, now: float) -> None:
        """Advance both clocks; commits the timer once when it expires."""
        self.stopwatch.tick(now)
        minutes = self.timer.tick(now)
        if self.timer.done and minutes:
            get_logger().info("timer finished after %d minutes", minutes)
            self.commit(minutes)

    def commit(self, minutes: int) -> bool:
        """Add *minutes* to today's entry and persist. Returns False for 0."""
        if minutes < 1:
            return False
        total = self.history.add_minutes(self.today(), minutes)
        get_logger().info("committed %d minutes (today: %d)", minutes, total)
        self.persist()
        return True

    def persist(self) -> bool:
        """Save the history; a failure is logged and in-memory state kept."""
        try:
            self.store.save(self.history.to_dict())
        except OSError as e:
            get_logger().error("failed to save history: %s", e)
            return False
        return True

    def clamp_history_offset(self, visible_rows: int) -> None:
        self.history_offset = self.history.clamp_offset(
            self.history_offset, visible_rows
        )

    def scroll_history(self, delta: int) -> None:
        # Clamped against the rendered height on the next frame.
        self.history_offset = max(0, self.history_offset + delta)

    def stop_stopwatch(self, now: float) -> int:
        """Stop a running stopwatch and commit its whole minutes."""
        minutes = self.stopwatch.stop(now)
        self.commit(minutes)
        return minutes
