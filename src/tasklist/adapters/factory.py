"""Storage factory for instantiating the configured key-value adapter."""

from __future__ import annotations

from pathlib import Path

from tasklist.adapters.json_file import JsonFileStorage
from tasklist.adapters.memory import InMemoryStorage
from tasklist.adapters.sqlite import SqliteKeyValueStorage
from tasklist.models.config_models import StorageConfig
from tasklist.repositories import KeyValueStorage


class StorageFactoryError(Exception):
    """Exception raised when the storage backend cannot be built."""


def create_storage(config: StorageConfig, data_dir: Path) -> KeyValueStorage:
    """Build the key-value storage selected by *config*.

    Args:
        config: Storage section of the application config
        data_dir: Directory for default file locations

    Returns:
        A KeyValueStorage adapter

    Raises:
        StorageFactoryError: If the backend name is unknown
    """
    if config.backend == "sqlite":
        db_path = Path(config.path) if config.path else data_dir / "tasklist.db"
        return SqliteKeyValueStorage(db_path)
    if config.backend == "json":
        directory = Path(config.path) if config.path else data_dir / "store"
        return JsonFileStorage(directory)
    if config.backend == "memory":
        return InMemoryStorage()
    raise StorageFactoryError(f"Unknown storage backend: {config.backend}")
