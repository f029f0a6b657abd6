"""Tests for the storage factory."""

from __future__ import annotations

import pytest

from tasklist.adapters import (
    InMemoryStorage,
    JsonFileStorage,
    SqliteKeyValueStorage,
    StorageFactoryError,
    create_storage,
)
from tasklist.models.config_models import StorageConfig


def test_sqlite_default_location(tmp_path):
    storage = create_storage(StorageConfig(), tmp_path)
    assert isinstance(storage, SqliteKeyValueStorage)
    assert storage.db_path == tmp_path / "tasklist.db"


def test_sqlite_custom_path(tmp_path):
    storage = create_storage(StorageConfig(path=str(tmp_path / "x.db")), tmp_path / "unused")
    assert storage.db_path == tmp_path / "x.db"


def test_json_default_location(tmp_path):
    storage = create_storage(StorageConfig(backend="json"), tmp_path)
    assert isinstance(storage, JsonFileStorage)
    assert storage.directory == tmp_path / "store"


def test_memory(tmp_path):
    assert isinstance(create_storage(StorageConfig(backend="memory"), tmp_path), InMemoryStorage)


def test_unknown_backend(tmp_path):
    config = StorageConfig.model_construct(backend="floppy", path=None)
    with pytest.raises(StorageFactoryError, match="floppy"):
        create_storage(config, tmp_path)
