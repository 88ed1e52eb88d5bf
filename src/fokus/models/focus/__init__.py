"""Focus mode - stopwatch, countdown timer and daily history."""

from .formatting import format_duration
from .history import FocusHistory, format_history_table
from .keyboard import KeyboardHandler, get_keyboard_handler
from .navigation import PageNavigator
from .state import AppState
from .stopwatch import Stopwatch
from .timer import Timer
from .ui import FocusScreen

__all__ = [
    "AppState",
    "FocusHistory",
    "FocusScreen",
    "KeyboardHandler",
    "PageNavigator",
    "Stopwatch",
    "Timer",
    "format_duration",
    "format_history_table",
    "get_keyboard_handler",
]
