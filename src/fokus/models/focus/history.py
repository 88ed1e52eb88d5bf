"""Daily focus history: in-memory totals and the paged history view."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
TABLE_RULE_WIDTH = 21


def date_key(day: date) -> str:
    """History key for *day*."""
    return day.strftime(DATE_FORMAT)


def _parse_key(key: str) -> date | None:
    try:
        return datetime.strptime(key, DATE_FORMAT).date()
    except ValueError:
        return None


class FocusHistory:
    """Mapping from ``YYYY-MM-DD`` to minutes focused that day."""

    def __init__(self, entries: Mapping[str, int] | None = None):
        self._entries: dict[str, int] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def to_dict(self) -> dict[str, int]:
        """Copy of the underlying mapping, for persistence."""
        return dict(self._entries)

    def minutes_on(self, day: date | str) -> int:
        key = day if isinstance(day, str) else date_key(day)
        return self._entries.get(key, 0)

    def add_minutes(self, day: date | str, minutes: int) -> int:
        """
        Add *minutes* to the total for *day*.

        Zero or negative amounts are ignored so that a short session never
        creates an empty entry.

        Returns:
            The new total for the day
        """
        key = day if isinstance(day, str) else date_key(day)
        if minutes > 0:
            self._entries[key] = self._entries.get(key, 0) + minutes
        return self._entries.get(key, 0)

    def sorted_keys(self) -> list[str]:
        """Valid dates newest first, then unparsable keys in stored order."""
        parsed: list[tuple[date, str]] = []
        unparsable: list[str] = []
        for key in self._entries:
            day = _parse_key(key)
            if day is None:
                unparsable.append(key)
            else:
                parsed.append((day, key))
        parsed.sort(key=lambda item: item[0], reverse=True)
        return [key for _, key in parsed] + unparsable

    def rows(self) -> list[tuple[str, int]]:
        return [(key, self._entries[key]) for key in self.sorted_keys()]

    def clamp_offset(self, offset: int, visible_rows: int) -> int:
        """Clamp a scroll offset so the last page is never partially empty."""
        return clamp_offset(offset, len(self._entries), visible_rows)

    def window(self, offset: int, visible_rows: int) -> list[tuple[str, int]]:
        """Rows visible at *offset* (after clamping)."""
        rows = self.rows()
        start = clamp_offset(offset, len(rows), visible_rows)
        return rows[start : start + max(visible_rows, 0)]


def clamp_offset(offset: int, total_rows: int, visible_rows: int) -> int:
    if total_rows <= visible_rows:
        return 0
    return min(max(offset, 0), total_rows - max(visible_rows, 0))


def format_history_table(rows: Iterable[tuple[str, int]]) -> str:
    """Render rows as the fixed ``Date | Minutes`` text table."""
    lines = [f"{'Date':<11} | {'Minutes':>6}", "-" * TABLE_RULE_WIDTH]
    for key, minutes in rows:
        lines.append(f"{key:<11} | {minutes:>6}")
    return "\n".join(lines)
