"""File persistence for the daily focus history."""

from __future__ import annotations

import json
import shutil
from datetime import datetime
from json import JSONDecodeError
from pathlib import Path

from fokus.utils.logger import get_logger


class HistoryService:
    """Loads and saves the ``date -> minutes`` mapping as a JSON file."""

    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> dict[str, int]:
        """
        Load the history mapping.

        A missing file is created empty. A corrupt file (bad encoding, bad
        JSON or bad values) is copied to a timestamped ``.bak`` next to it
        and replaced with an empty mapping. An unreadable file is left alone
        and an empty mapping is returned.

        Returns:
            The stored mapping, or an empty dict
        """
        if not self.path.exists():
            self.save({})
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (JSONDecodeError, UnicodeDecodeError):
            data = None
        except OSError as e:
            get_logger().error("cannot read history at %s: %s", self.path, e)
            return {}

        if not _is_valid(data):
            backup = self.backup()
            get_logger().warning(
                "corrupt history at %s, backed up to %s", self.path, backup
            )
            self.save({})
            return {}

        return dict(data)

    def save(self, entries: dict[str, int]) -> None:
        """Overwrite the history file with *entries*. Raises OSError on failure."""
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=2, sort_keys=True)

    def backup(self) -> Path:
        """Copy the current file to ``history_YYYYmmdd_HHMMSS.json.bak``."""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = self.path.with_name(f"history_{stamp}.json.bak")
        shutil.copyfile(self.path, backup_path)
        return backup_path


def _is_valid(data: object) -> bool:
    if not isinstance(data, dict):
        return False
    return all(
        isinstance(value, int) and not isinstance(value, bool) and value >= 0
        for value in data.values()
    )
