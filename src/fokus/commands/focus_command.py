"""Command that runs the full-screen focus stopwatch/timer."""

from typing import Optional

import typer

from fokus.config import ConfigManager, get_config_manager
from fokus.models.focus import AppState, FocusHistory, FocusScreen, Timer
from fokus.services.history_service import HistoryService
from fokus.services.lock_service import AlreadyRunningError, InstanceLock
from fokus.utils.exit_codes import ERROR_ALREADY_RUNNING
from fokus.utils.logger import get_logger
from fokus.utils.ui.console import get_console

console = get_console()


def run_focus(
    duration: Optional[int] = None,
    manager: Optional[ConfigManager] = None,
    screen_factory=FocusScreen,
) -> None:
    """
    Take the instance lock, run the focus screen, then persist and release.

    Args:
        duration: Timer minutes for this run; defaults to the configured value
        manager: Configuration manager; defaults to the global one
        screen_factory: Callable building the screen from an AppState
    """
    logger = get_logger()
    manager = manager or get_config_manager()
    minutes = duration or manager.config.default_timer_duration

    lock = InstanceLock(manager.lock_file)
    try:
        lock.acquire()
    except AlreadyRunningError as e:
        logger.error("refusing to start: %s", e)
        console.print(f"[red]There is something wrong: {e}[/red]")
        raise typer.Exit(ERROR_ALREADY_RUNNING) from e

    state: Optional[AppState] = None
    try:
        service = HistoryService(manager.history_file)
        state = AppState(
            history=FocusHistory(service.load()),
            store=service,
            timer=Timer.from_minutes(minutes),
        )
        logger.info("focus screen started (timer: %d minutes)", minutes)
        screen_factory(state).run()
    finally:
        if state is not None:
            state.persist()
        lock.release()
        logger.info("focus screen closed")

