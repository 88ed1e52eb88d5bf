"""Single-instance locking through a PID file."""

from __future__ import annotations

import os
from pathlib import Path

from fokus.utils.logger import get_logger


class AlreadyRunningError(Exception):
    """Another live fokus process holds the lock."""

    def __init__(self, pid: int):
        self.pid = pid
        super().__init__(
            f"Another instance is already running (pid {pid}). "
            "There can only be one fokus instance at a time."
        )


def _pid_alive(pid: int) -> bool:
    if pid <= 0:
        return False
    proc = Path("/proc")
    if proc.is_dir():
        return (proc / str(pid)).exists()
    if os.name != "posix":
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    return True


class InstanceLock:
    """PID lock file held for the lifetime of the focus screen.

    Usable as a context manager; ``release`` runs exactly once on every
    exit path.
    """

    def __init__(self, path: Path):
        self.path = path
        self.acquired = False

    def acquire(self) -> None:
        """Take the lock or raise AlreadyRunningError."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        if self.path.exists():
            holder = self._read_pid()
            if holder is not None and _pid_alive(holder):
                raise AlreadyRunningError(holder)
            get_logger().info("removing stale lock %s (pid %s)", self.path, holder)
            self.path.unlink(missing_ok=True)

        with open(self.path, "x", encoding="utf-8") as f:
            f.write(str(os.getpid()))
        self.acquired = True
        get_logger().debug("lock acquired: %s", self.path)

    def release(self) -> None:
        """Remove the lock file if this instance holds it."""
        if not self.acquired:
            return
        self.acquired = False
        self.path.unlink(missing_ok=True)
        get_logger().debug("lock released: %s", self.path)

    def _read_pid(self) -> int | None:
        try:
            return int(self.path.read_text(encoding="utf-8").strip())
        except (OSError, ValueError):
            return None

    def __enter__(self) -> "InstanceLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
