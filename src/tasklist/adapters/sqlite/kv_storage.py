"""SQLite implementation of KeyValueStorage."""

from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path

from tasklist.adapters.sqlite.connection import get_connection
from tasklist.models import PersistenceError
from tasklist.repositories import KeyValueStorage


class SqliteKeyValueStorage(KeyValueStorage):
    """SQLite implementation of key-value storage.

    Blocking sqlite3 calls run in a worker thread so the event loop stays free
    while a write is in flight. The connection is opened lazily on first use,
    so filesystem errors from creating the database show up as
    ``PersistenceError`` too.
    """

    def __init__(self, db_path: str | Path | None = None):
        """Initialize SQLite key-value storage.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    @property
    def storage_type(self) -> str:
        return "sqlite"

    def _get(self, key: str) -> str | None:
        row = self.connection.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return row[0] if row is not None else None

    def _set(self, key: str, value: str) -> None:
        with self.connection:
            self.connection.execute(
                """
                INSERT INTO kv_store (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )

    async def get_item(self, key: str) -> str | None:
        try:
            return await asyncio.to_thread(self._get, key)
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Failed to read '{key}' from SQLite: {e}") from e

    async def set_item(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._set, key, value)
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Failed to write '{key}' to SQLite: {e}") from e
