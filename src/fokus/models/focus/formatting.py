"""Stopwatch/timer display formatting."""

from datetime import timedelta


def format_duration(duration: timedelta) -> str:
    """Format *duration* as ``MM:SS.CC``.

    Minutes are never wrapped into hours, so 999 minutes renders as
    ``999:00.00``. Centiseconds are truncated, never rounded.
    """
    if duration < timedelta(0):
        duration = timedelta(0)
    total_seconds = duration.days * 86400 + duration.seconds
    mins, secs = divmod(total_seconds, 60)
    centis = duration.microseconds // 10_000
    return f"{mins:02d}:{secs:02d}.{centis:02d}"


def elapsed_between(start: float, now: float) -> timedelta:
    """Clock difference in seconds as a timedelta, floored at zero."""
    return timedelta(seconds=max(0.0, now - start))
