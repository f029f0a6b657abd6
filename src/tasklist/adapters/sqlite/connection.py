"""Database connection management for the local SQLite store.

This module provides a singleton connection manager for the local SQLite
database, ensuring proper connection lifecycle, WAL mode and the key-value
table the task collection is stored in.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

KV_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
"""


class DatabaseConnection:
    """Singleton connection manager for the local SQLite store.

    Provides:
    - Single connection per process (connection reuse)
    - WAL mode
    - Automatic directory creation
    - Proper file permissions (owner read/write only)
    - Graceful cleanup on exit
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None
    _atexit_registered: bool = False

    def __new__(cls) -> DatabaseConnection:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create database connection.

        Args:
            db_path: Path to database file. If None, uses default location.

        Returns:
            sqlite3.Connection configured with the key-value table in place
        """
        instance = cls()

        if db_path is None:
            db_path = Path(user_data_dir("tasklist")) / "tasklist.db"
        else:
            db_path = Path(db_path)

        # If connection exists and path hasn't changed, return it
        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        # Close existing connection if path changed
        if instance._connection is not None:
            instance._connection.close()
            instance._connection = None
            instance._db_path = None

        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        connection = sqlite3.connect(
            str(db_path),
            check_same_thread=False,  # Calls arrive from worker threads
            timeout=30.0,  # Wait up to 30s for locks
        )
        connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(db_path, 0o600)

        connection.execute(KV_TABLE_SQL)
        connection.commit()

        instance._connection = connection
        instance._db_path = db_path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close database connection gracefully."""
        instance = cls()
        if instance._connection is not None:
            try:
                instance._connection.commit()
                instance._connection.close()
            finally:
                instance._connection = None
                instance._db_path = None

    @classmethod
    def get_db_path(cls) -> Path | None:
        """Get current database path."""
        instance = cls()
        return instance._db_path


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get database connection.

    Args:
        db_path: Optional path to database file

    Returns:
        Configured sqlite3.Connection
    """
    return DatabaseConnection.get_connection(db_path)
