"""Storage adapters (the "Adapters" side of Ports & Adapters)."""

from .factory import StorageFactoryError, create_storage
from .json_file import JsonFileStorage
from .memory import InMemoryStorage
from .sqlite import SqliteKeyValueStorage

__all__ = [
    "create_storage",
    "StorageFactoryError",
    "InMemoryStorage",
    "JsonFileStorage",
    "SqliteKeyValueStorage",
]
