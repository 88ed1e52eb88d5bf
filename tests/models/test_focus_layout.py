"""Unit tests for the pure screen geometry."""

from __future__ import annotations

from fokus.models.focus.layout import Region, compute_layout
from fokus.models.focus.navigation import PAGE_HISTORY, PAGE_STOPWATCH, PAGE_TIMER


class TestClockPages:
    def test_header_body_footer(self):
        layout = compute_layout(100, 40, PAGE_STOPWATCH)
        assert layout.header == Region(0, 0, 100, 2)
        assert layout.body == Region(0, 2, 100, 36)
        assert layout.footer == Region(0, 38, 100, 2)

    def test_content_block_is_centred(self):
        layout = compute_layout(100, 40, PAGE_TIMER)
        # 36 body rows: 3 content + 1 secondary, 32 split evenly
        assert layout.body_bands == (16, 3, 1, 16)
        assert layout.widget == Region(30, 18, 40, 3)
        assert layout.secondary == Region(0, 21, 100, 1)

    def test_odd_padding_goes_to_the_bottom(self):
        layout = compute_layout(80, 25, PAGE_STOPWATCH)
        assert layout.body_bands == (8, 3, 1, 9)

    def test_horizontal_bands_fill_width(self):
        layout = compute_layout(101, 30, PAGE_STOPWATCH)
        assert layout.content_bands == (30, 40, 31)


class TestHistoryPage:
    def test_larger_content_region(self):
        layout = compute_layout(100, 40, PAGE_HISTORY)
        assert layout.widget.height == 18
        assert layout.body_bands == (8, 18, 1, 9)

    def test_history_rows_exclude_borders_and_table_header(self):
        layout = compute_layout(100, 40, PAGE_HISTORY)
        assert layout.history_rows == 14

    def test_content_never_exceeds_body(self):
        layout = compute_layout(80, 8, PAGE_HISTORY)
        assert layout.body.height == 4
        assert layout.widget.height == 3
        assert layout.history_rows == 0


class TestTinyTerminals:
    def test_body_smaller_than_content(self):
        layout = compute_layout(40, 5, PAGE_STOPWATCH)
        assert layout.body_bands == (0, 1, 0, 0)

    def test_no_body(self):
        layout = compute_layout(40, 3, PAGE_STOPWATCH)
        assert layout.header.height == 2
        assert layout.footer.height == 1
        assert layout.body.height == 0
        assert layout.body_bands == (0, 0, 0, 0)

    def test_zero_size(self):
        layout = compute_layout(0, 0, PAGE_HISTORY)
        assert layout.widget.height == 0
        assert layout.history_rows == 0
