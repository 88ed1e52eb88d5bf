"""Full-screen stopwatch/timer/history UI."""

import time
from collections.abc import Callable

from rich.console import Console, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from fokus.utils.logger import get_logger

from .dispatcher import dispatch, quit_session
from .history import format_history_table
from .keyboard import get_keyboard_handler
from .layout import ScreenLayout, compute_layout
from .navigation import PAGE_HISTORY, PAGE_STOPWATCH, PAGE_TIMER
from .state import AppState
from .stopwatch import ZERO_DISPLAY

POLL_TIMEOUT = 0.01
FOOTER_HINTS = (
    "[space] Start/Reset [q] Quit [h]/[l] Change Page [j]/[k] Adjust/Scroll"
)


def _split(parent: Layout, parts: list[tuple[RenderableType, int]], row: bool) -> None:
    # rich treats size=0 as flexible, so empty bands are left out entirely.
    children = [Layout(renderable, size=size) for renderable, size in parts if size > 0]
    if not children:
        return
    if row:
        parent.split_row(*children)
    else:
        parent.split_column(*children)


def _blank() -> Text:
    return Text("")


class FocusScreen:
    """Renders AppState and runs the single-threaded input loop."""

    def __init__(
        self,
        state: AppState,
        console: Console | None = None,
        keyboard_factory: Callable = get_keyboard_handler,
        clock: Callable[[], float] = time.monotonic,
        poll_timeout: float = POLL_TIMEOUT,
    ):
        self.state = state
        self.console = console or Console()
        self.keyboard_factory = keyboard_factory
        self.clock = clock
        self.poll_timeout = poll_timeout

    def body_text(self, layout: ScreenLayout) -> str:
        """Main widget text for the active page."""
        state = self.state
        if state.page == PAGE_STOPWATCH:
            return state.stopwatch.display
        if state.page == PAGE_TIMER:
            return state.timer.display
        rows = state.history.window(state.history_offset, layout.history_rows)
        return format_history_table(rows)

    def widget_style(self) -> str:
        timer = self.state.timer
        if (
            self.state.page == PAGE_TIMER
            and not timer.running
            and timer.display == ZERO_DISPLAY
        ):
            return "red"
        return ""

    def render_screen(self, layout: ScreenLayout) -> Layout:
        """Build the rich Layout for one frame. Reads state only."""
        state = self.state

        header = Text(f"\n{state.pages.header}", style="cyan", justify="center")
        footer = Text(FOOTER_HINTS, style="grey50", justify="center")

        widget = Panel(
            Text(self.body_text(layout), justify="center"),
            title=Text(state.pages.title, style="green"),
            title_align="left",
            border_style="grey50",
            style=self.widget_style(),
        )

        if state.show_minutes_today:
            secondary = Text(
                f"{state.minutes_today} minutes focused today",
                style="yellow",
                justify="center",
            )
        else:
            secondary = _blank()

        content = Layout(_blank())
        left, center, right = layout.content_bands
        _split(content, [(_blank(), left), (widget, center), (_blank(), right)], row=True)

        body = Layout(_blank())
        top, content_h, secondary_h, bottom = layout.body_bands
        _split(
            body,
            [(_blank(), top), (content, content_h), (secondary, secondary_h), (_blank(), bottom)],
            row=False,
        )

        screen = Layout(_blank(), name="screen")
        _split(
            screen,
            [
                (header, layout.header.height),
                (body, layout.body.height),
                (footer, layout.footer.height),
            ],
            row=False,
        )
        return screen

    def frame(self) -> Layout:
        """Advance clocks, lay out the current terminal size and render."""
        self.state.tick(self.clock())
        width, height = self.console.size
        layout = compute_layout(width, height, self.state.page)
        if self.state.page == PAGE_HISTORY:
            self.state.clamp_history_offset(layout.history_rows)
        return self.render_screen(layout)

    def run(self) -> None:
        """
        Run the focus screen until the user quits.

        The alternate screen and the terminal's input mode are restored on
        every exit path. Ctrl-C is treated like 'q'.
        """
        logger = get_logger()
        with self.keyboard_factory() as keyboard, Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
        ) as live:
            try:
                while True:
                    live.update(self.frame(), refresh=True)
                    key = keyboard.poll(self.poll_timeout)
                    if key is None:
                        continue
                    if dispatch(self.state, key, self.clock()):
                        logger.info("quit requested")
                        break
            except KeyboardInterrupt:
                logger.info("interrupted")
                quit_session(self.state, self.clock())
