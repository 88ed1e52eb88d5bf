"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, history and
log directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from fokus.config import ConfigManager, get_config_manager
from fokus.models.focus.history import FocusHistory
from fokus.models.focus.state import AppState

TODAY = date(2024, 5, 17)


class FakeStore:
    """In-memory stand-in for HistoryService.save."""

    def __init__(self, fail: bool = False):
        self.saved: list[dict[str, int]] = []
        self.fail = fail

    def save(self, entries: dict[str, int]) -> None:
        if self.fail:
            raise OSError("disk full")
        self.saved.append(dict(entries))


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to tmp_path and reset the singleton."""
    import fokus.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("fokus").handlers.clear()
    with patch("fokus.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    for handler in logging.getLogger("fokus").handlers:
        handler.close()
    logging.getLogger("fokus").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def config_manager(tmp_path) -> ConfigManager:
    """ConfigManager rooted in a temporary directory."""
    get_config_manager.cache_clear()
    yield ConfigManager(config_dir=tmp_path / "config")
    get_config_manager.cache_clear()


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def app_state(store) -> AppState:
    """AppState with an empty history, a fake store and a fixed day."""
    return AppState(history=FocusHistory(), store=store, today=lambda: TODAY)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def failing_store() -> FakeStore:
    return FakeStore(fail=True)
