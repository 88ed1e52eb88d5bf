"""Configuration management for fokus."""

import json
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from fokus.utils.logger import get_logger

TIMER_MINUTES_MIN = 1
TIMER_MINUTES_MAX = 999


class Config(BaseModel):
    """Main configuration."""

    default_timer_duration: int = Field(
        default=25,
        ge=TIMER_MINUTES_MIN,
        le=TIMER_MINUTES_MAX,
        description="Default timer duration in minutes",
    )


class ConfigManager:
    """Manages the fokus configuration directory and config.json."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(user_config_dir("fokus"))
        self.config_file = self.config_dir / "config.json"
        self.history_file = self.config_dir / "history.json"
        self.lock_file = self.config_dir / "fokus.lock"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_or_create()
        return self._config

    def load_or_create(self) -> Config:
        """Load configuration from file.

        A missing file is created with defaults. A file that is not valid
        JSON or holds an out-of-range duration is overwritten with defaults.
        """
        if not self.config_file.exists():
            config = Config()
            self.save_config(config)
            return config

        try:
            with open(self.config_file, encoding="utf-8") as f:
                return Config.model_validate_json(f.read())
        except (JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            get_logger().warning(
                "invalid config at %s, restoring defaults: %s", self.config_file, e
            )
            config = Config()
            self.save_config(config)
            return config

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    return ConfigManager()
