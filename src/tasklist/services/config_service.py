"""Configuration service for managing tasklist configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated get/set/reset of individual settings
- Building the configured storage backend and session
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tasklist.adapters import create_storage
from tasklist.models.config_models import AppConfig
from tasklist.repositories import KeyValueStorage
from tasklist.services.persistence import TaskPersistence
from tasklist.services.session_service import TaskListSession
from tasklist.services.task_store import TaskStore
from tasklist.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigService:
    """Service for loading, saving and querying the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("tasklist"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("tasklist"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run - write the defaults
            self._config = AppConfig()
            self.save_config()
        except PydanticValidationError as e:
            logger.warning("Config file %s is invalid, using defaults: %s", self.config_path, e)
            self._config = AppConfig()
        except OSError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dot-separated key and save.

        The whole config is re-validated, so bad values raise
        ``pydantic.ValidationError`` and leave the current config untouched.

        Raises:
            KeyError: If the key does not exist
        """
        self.get(key)
        parts = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()
        return self._config

    def reset(self, key: str | None = None) -> AppConfig:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return self._config

        self.get(key)
        default_value: Any = AppConfig()
        for part in key.split("."):
            default_value = getattr(default_value, part)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        return self.set(key, default_value)

    def create_storage(self) -> KeyValueStorage:
        """Build the storage backend selected by the configuration."""
        return create_storage(self.config.storage, self.data_dir)

    def create_session(self) -> TaskListSession:
        """Build a fresh, not yet started session for the configured storage."""
        storage_config = self.config.storage
        persistence = TaskPersistence(self.create_storage(), key=storage_config.key)
        return TaskListSession(
            TaskStore(), persistence, write_mode=storage_config.write_mode
        )


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide config service."""
    return ConfigService()
