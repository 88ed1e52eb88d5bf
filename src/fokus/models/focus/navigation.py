"""Page selection for the focus screen."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_STOPWATCH = 0
PAGE_TIMER = 1
PAGE_HISTORY = 2

PAGE_TITLES = (" Stopwatch ", " Timer ", " History ")
PAGE_COUNT = len(PAGE_TITLES)


@dataclass
class PageNavigator:
    """Cyclic index over the three pages."""

    index: int = PAGE_STOPWATCH

    @property
    def title(self) -> str:
        return PAGE_TITLES[self.index]

    @property
    def header(self) -> str:
        return f"< Page {self.index + 1} of {PAGE_COUNT} >"

    def next(self, locked: bool = False) -> bool:
        """Move right. Rejected while *locked* (a session is running)."""
        if locked:
            return False
        self.index = (self.index + 1) % PAGE_COUNT
        return True

    def previous(self, locked: bool = False) -> bool:
        """Move left. Rejected while *locked* (a session is running)."""
        if locked:
            return False
        self.index = (self.index + PAGE_COUNT - 1) % PAGE_COUNT
        return True
