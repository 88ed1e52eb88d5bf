"""Cross-platform keyboard input handler for the focus screen."""

import os
import select
import sys
import time
from collections import deque
from typing import Optional

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

KEY_UP = "up"
KEY_DOWN = "down"
KEY_RIGHT = "right"
KEY_LEFT = "left"
KEY_ESCAPE = "escape"

_ARROWS = {"A": KEY_UP, "B": KEY_DOWN, "C": KEY_RIGHT, "D": KEY_LEFT}


def parse_keys(data: str) -> list[str]:
    """
    Split raw terminal input into key names.

    Arrow keys arrive as ``ESC [ X`` (or ``ESC O X`` in application mode)
    and become ``"up"``/``"down"``/``"right"``/``"left"``. Other keys are
    passed through unchanged, so bindings are case sensitive.
    """
    keys = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == "\x1b":
            if i + 2 < len(data) and data[i + 1] in "[O" and data[i + 2] in _ARROWS:
                keys.append(_ARROWS[data[i + 2]])
                i += 3
                continue
            keys.append(KEY_ESCAPE)
        else:
            keys.append(ch)
        i += 1
    return keys


class KeyboardHandler:
    """Non-blocking keyboard input handler (POSIX terminals)."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self.pending: deque[str] = deque()
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode so keys arrive unbuffered."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError):
            # Not a TTY (e.g. piped input)
            self.old_settings = None

    def poll(self, timeout: float) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a key press.

        Returns the key name or None if no key was pressed. Several keys read
        in one go are queued and returned by later calls, one per call.
        """
        if self.pending:
            return self.pending.popleft()

        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None

        data = os.read(self.fd, 64)
        if not data:
            return None
        self.pending.extend(parse_keys(data.decode("utf-8", errors="ignore")))
        return self.pending.popleft() if self.pending else None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    # Second byte after the 0xE0/0x00 prefix msvcrt uses for arrow keys
    _SCAN_CODES = {"H": KEY_UP, "P": KEY_DOWN, "M": KEY_RIGHT, "K": KEY_LEFT}

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def poll(self, timeout: float) -> Optional[str]:
        """Wait up to *timeout* seconds for a key press."""
        if not self.msvcrt:
            time.sleep(timeout)
            return None

        deadline = time.monotonic() + timeout
        while not self.msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.005)

        key = self.msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return self._SCAN_CODES.get(self.msvcrt.getwch())
        if key == "\x1b":
            return KEY_ESCAPE
        return key

    def stop(self):
        """No cleanup needed on Windows."""
        pass

    def __enter__(self) -> "WindowsKeyboardHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


def get_keyboard_handler():
    """Return the keyboard handler for the current platform."""
    if termios is None:
        return WindowsKeyboardHandler()
    return KeyboardHandler()
