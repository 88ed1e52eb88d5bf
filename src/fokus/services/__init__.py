"""Services for fokus: history persistence and process locking."""

from .history_service import HistoryService
from .lock_service import AlreadyRunningError, InstanceLock

__all__ = ["HistoryService", "InstanceLock", "AlreadyRunningError"]
