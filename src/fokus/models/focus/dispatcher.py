"""Maps key presses to state transitions."""

from __future__ import annotations

from fokus.utils.logger import get_logger

from .keyboard import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from .navigation import PAGE_HISTORY, PAGE_STOPWATCH, PAGE_TIMER
from .state import AppState

NEXT_PAGE_KEYS = (KEY_RIGHT, "l")
PREVIOUS_PAGE_KEYS = (KEY_LEFT, "h")
UP_KEYS = (KEY_UP, "k")
DOWN_KEYS = (KEY_DOWN, "j")
TOGGLE_KEY = " "
QUIT_KEY = "q"


def dispatch(state: AppState, key: str, now: float) -> bool:
    """
    Apply a single key press to *state*.

    Args:
        state: The application state to mutate
        key: Key name as returned by KeyboardHandler.poll
        now: Current monotonic clock reading in seconds

    Returns:
        True if the loop should exit
    """
    if key in NEXT_PAGE_KEYS:
        state.pages.next(locked=state.session_running)
    elif key in PREVIOUS_PAGE_KEYS:
        state.pages.previous(locked=state.session_running)
    elif key in UP_KEYS:
        if state.page == PAGE_TIMER:
            state.timer.increase()
        elif state.page == PAGE_HISTORY:
            state.scroll_history(-1)
    elif key in DOWN_KEYS:
        if state.page == PAGE_TIMER:
            state.timer.decrease()
        elif state.page == PAGE_HISTORY:
            state.scroll_history(1)
    elif key == TOGGLE_KEY:
        _toggle(state, now)
    elif key == QUIT_KEY:
        quit_session(state, now)
        return True
    return False


def quit_session(state: AppState, now: float) -> None:
    """Commit a running stopwatch before the loop exits."""
    if state.stopwatch.running:
        state.stop_stopwatch(now)


def _toggle(state: AppState, now: float) -> None:
    logger = get_logger()
    if state.page == PAGE_STOPWATCH:
        if state.stopwatch.running:
            minutes = state.stop_stopwatch(now)
            logger.info("stopwatch stopped after %d minutes", minutes)
        else:
            state.stopwatch.start_session(now)
            logger.info("stopwatch started")
    elif state.page == PAGE_TIMER:
        state.timer.toggle(now)
        logger.info("timer %s (%d minutes)", state.timer.status, state.timer.total_minutes)
