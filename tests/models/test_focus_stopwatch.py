"""Unit tests for the Stopwatch state machine."""

from __future__ import annotations

from datetime import timedelta

from fokus.models.focus.stopwatch import ZERO_DISPLAY, Stopwatch


class TestStopwatchStart:
    def test_starts_idle_with_zero_display(self):
        sw = Stopwatch()
        assert sw.status == "idle"
        assert not sw.running
        assert sw.display == "00:00.00"

    def test_toggle_from_idle_starts(self):
        sw = Stopwatch()
        assert sw.toggle(100.0) == 0
        assert sw.running
        assert sw.start == 100.0

    def test_elapsed_is_zero_when_idle(self):
        assert Stopwatch().elapsed(500.0) == timedelta(0)


class TestStopwatchTick:
    def test_tick_recomputes_display_from_start(self):
        sw = Stopwatch()
        sw.start_session(100.0)
        sw.tick(175.5)
        assert sw.display == "01:15.50"

    def test_repeated_ticks_are_idempotent(self):
        sw = Stopwatch()
        sw.start_session(100.0)
        sw.tick(130.25)
        sw.tick(130.25)
        assert sw.display == "00:30.25"

    def test_tick_when_idle_leaves_display(self):
        sw = Stopwatch()
        sw.tick(1000.0)
        assert sw.display == ZERO_DISPLAY

    def test_no_upper_bound(self):
        sw = Stopwatch()
        sw.start_session(0.0)
        sw.tick(1000 * 60.0)
        assert sw.display == "1000:00.00"


class TestStopwatchStop:
    def test_stop_returns_whole_minutes(self):
        sw = Stopwatch()
        sw.start_session(100.0)
        assert sw.stop(250.0) == 2  # 150 s

    def test_stop_under_a_minute_returns_zero(self):
        sw = Stopwatch()
        sw.start_session(100.0)
        assert sw.stop(159.0) == 0

    def test_stop_resets_display_and_status(self):
        sw = Stopwatch()
        sw.start_session(0.0)
        sw.tick(75.0)
        sw.stop(75.0)
        assert sw.status == "idle"
        assert sw.display == ZERO_DISPLAY

    def test_stop_when_idle_is_noop(self):
        assert Stopwatch().stop(10.0) == 0

    def test_toggle_from_running_stops(self):
        sw = Stopwatch()
        sw.toggle(0.0)
        assert sw.toggle(61.0) == 1
        assert not sw.running
