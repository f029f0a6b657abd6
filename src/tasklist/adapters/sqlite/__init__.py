"""SQLite adapter for local storage."""

from .connection import DatabaseConnection, get_connection
from .kv_storage import SqliteKeyValueStorage

__all__ = [
    "DatabaseConnection",
    "get_connection",
    "SqliteKeyValueStorage",
]
