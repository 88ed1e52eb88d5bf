"""Screen geometry for the focus screen, recomputed every frame."""

from __future__ import annotations

from dataclasses import dataclass

from .navigation import PAGE_HISTORY

HEADER_HEIGHT = 2
FOOTER_HEIGHT = 2
CLOCK_CONTENT_HEIGHT = 3
SECONDARY_HEIGHT = 1
PANEL_BORDER_ROWS = 2
TABLE_HEADER_ROWS = 2
SIDE_PERCENT = 30
CENTER_PERCENT = 40


@dataclass(frozen=True)
class Region:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class ScreenLayout:
    """Regions of the screen for one frame.

    ``body_bands`` and ``content_bands`` hold the band sizes (top padding,
    content, secondary line, bottom padding; and left, widget, right) that
    the renderer feeds into rich's Layout.
    """

    width: int
    height: int
    header: Region
    body: Region
    footer: Region
    widget: Region
    secondary: Region
    body_bands: tuple[int, int, int, int]
    content_bands: tuple[int, int, int]

    @property
    def history_rows(self) -> int:
        """Table rows that fit inside the bordered history widget."""
        return max(0, self.widget.height - PANEL_BORDER_ROWS - TABLE_HEADER_ROWS)


def _center_band(body_height: int, content_height: int) -> tuple[int, int, int, int]:
    content = min(content_height, body_height)
    secondary = SECONDARY_HEIGHT if body_height > content else 0
    remaining = body_height - content - secondary
    top = remaining // 2
    return top, content, secondary, remaining - top


def _split_width(width: int) -> tuple[int, int, int]:
    left = width * SIDE_PERCENT // 100
    center = width * CENTER_PERCENT // 100
    return left, center, width - left - center


def content_height_for(page: int, height: int) -> int:
    if page == PAGE_HISTORY:
        return max(height // 2 - 2, CLOCK_CONTENT_HEIGHT)
    return CLOCK_CONTENT_HEIGHT


def compute_layout(width: int, height: int, page: int) -> ScreenLayout:
    """Split a *width* x *height* terminal into the regions for *page*."""
    width = max(width, 0)
    height = max(height, 0)
    header_h = min(HEADER_HEIGHT, height)
    footer_h = min(FOOTER_HEIGHT, height - header_h)
    body_h = height - header_h - footer_h
    body_y = header_h

    top, content, secondary, bottom = _center_band(
        body_h, content_height_for(page, height)
    )
    left, center, right = _split_width(width)

    return ScreenLayout(
        width=width,
        height=height,
        header=Region(0, 0, width, header_h),
        body=Region(0, body_y, width, body_h),
        footer=Region(0, body_y + body_h, width, footer_h),
        widget=Region(left, body_y + top, center, content),
        secondary=Region(0, body_y + top + content, width, secondary),
        body_bands=(top, content, secondary, bottom),
        content_bands=(left, center, right),
    )
