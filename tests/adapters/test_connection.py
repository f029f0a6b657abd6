"""Unit tests for DatabaseConnection (connection.py)."""

from __future__ import annotations

import sqlite3
import stat
from unittest.mock import patch

import pytest

from tasklist.adapters.sqlite.connection import DatabaseConnection, get_connection


# ---------------------------------------------------------------------------
# Helpers – reset singleton state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset DatabaseConnection singleton state before and after each test."""
    DatabaseConnection.close_connection()
    DatabaseConnection._instance = None
    yield
    DatabaseConnection.close_connection()
    DatabaseConnection._instance = None


class TestSingleton:
    def test_same_instance_returned_twice(self):
        assert DatabaseConnection() is DatabaseConnection()


class TestGetConnection:
    def test_creates_db_file_and_parent_dirs(self, tmp_path):
        db_file = tmp_path / "nested" / "tasks.db"
        conn = get_connection(db_file)
        assert isinstance(conn, sqlite3.Connection)
        assert db_file.exists()

    def test_new_file_is_owner_only(self, tmp_path):
        db_file = tmp_path / "tasks.db"
        get_connection(db_file)
        assert stat.S_IMODE(db_file.stat().st_mode) == 0o600

    def test_kv_table_exists(self, tmp_path):
        conn = get_connection(tmp_path / "tasks.db")
        row = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='kv_store'"
        ).fetchone()
        assert row is not None

    def test_wal_mode(self, tmp_path):
        conn = get_connection(tmp_path / "tasks.db")
        assert conn.execute("PRAGMA journal_mode").fetchone()[0].lower() == "wal"

    def test_same_connection_for_same_path(self, tmp_path):
        db_file = tmp_path / "tasks.db"
        assert get_connection(db_file) is get_connection(str(db_file))

    def test_path_change_reopens(self, tmp_path):
        first = get_connection(tmp_path / "one.db")
        second = get_connection(tmp_path / "two.db")
        assert first is not second
        assert DatabaseConnection.get_db_path() == tmp_path / "two.db"
        with pytest.raises(sqlite3.ProgrammingError):
            first.execute("SELECT 1")

    def test_default_path_uses_user_data_dir(self, tmp_path):
        with patch(
            "tasklist.adapters.sqlite.connection.user_data_dir",
            return_value=str(tmp_path),
        ):
            get_connection()
        assert DatabaseConnection.get_db_path() == tmp_path / "tasklist.db"


class TestCloseConnection:
    def test_close_resets_state(self, tmp_path):
        get_connection(tmp_path / "tasks.db")
        DatabaseConnection.close_connection()
        assert DatabaseConnection.get_db_path() is None

    def test_close_without_connection_is_noop(self):
        DatabaseConnection.close_connection()
        assert DatabaseConnection.get_db_path() is None


class TestFailedOpen:
    def test_failed_path_change_forgets_old_connection(self, tmp_path):
        good = tmp_path / "tasks.db"
        first = get_connection(good)
        blocker = tmp_path / "afile"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            get_connection(blocker / "sub" / "tasks.db")

        assert DatabaseConnection.get_db_path() is None
        reopened = get_connection(good)
        assert reopened is not first
        assert reopened.execute("SELECT 1").fetchone() == (1,)
