"""Unit tests for TaskPersistence - whole-collection load/save."""

from __future__ import annotations

import json
import logging
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from tasklist.adapters.memory import InMemoryStorage
from tasklist.adapters.sqlite import SqliteKeyValueStorage
from tasklist.models import PersistenceError, Task
from tasklist.services.persistence import TASKS_KEY, TaskPersistence

SAMPLE = [
    Task(id="a", text="Buy milk"),
    Task(id="b", text="Pay rent", completed=True, due_date=date(2024, 1, 1)),
    Task(id="c", text="Call mom", due_date=date(2024, 12, 31)),
]


def _failing_storage(error: Exception):
    storage = MagicMock()
    storage.storage_type = "broken"
    storage.get_item = AsyncMock(side_effect=error)
    storage.set_item = AsyncMock(side_effect=error)
    return storage


@pytest.mark.asyncio
async def test_round_trip_preserves_order_and_fields(memory_storage):
    persistence = TaskPersistence(memory_storage)

    assert await persistence.save(SAMPLE) is True
    assert await persistence.load() == SAMPLE


@pytest.mark.asyncio
async def test_round_trip_empty_collection(memory_storage):
    persistence = TaskPersistence(memory_storage)
    await persistence.save(SAMPLE)
    await persistence.save([])
    assert await persistence.load() == []


@pytest.mark.asyncio
async def test_writes_single_fixed_key(memory_storage):
    persistence = TaskPersistence(memory_storage)
    await persistence.save(SAMPLE)
    await persistence.save(SAMPLE[:1])

    assert list(memory_storage.items) == [TASKS_KEY]
    assert [t["id"] for t in json.loads(memory_storage.items[TASKS_KEY])] == ["a"]


@pytest.mark.asyncio
async def test_custom_key():
    storage = InMemoryStorage()
    persistence = TaskPersistence(storage, key="work")
    await persistence.save(SAMPLE)
    assert "work" in storage.items
    assert await TaskPersistence(storage).load() == []


@pytest.mark.asyncio
async def test_load_absent_key_returns_empty(memory_storage):
    assert await TaskPersistence(memory_storage).load() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        "{corrupted",
        '{"tasks": []}',
        '[{"id": "a"}]',
        "42",
        '"text"',
        '[{"id": "1", "text": "A"}, {"id": "1", "text": "B"}]',
    ],
)
async def test_load_corrupted_content_returns_empty(content, caplog):
    storage = InMemoryStorage({TASKS_KEY: content})

    with caplog.at_level(logging.WARNING, logger="tasklist"):
        tasks = await TaskPersistence(storage).load()

    assert tasks == []
    assert "malformed" in caplog.text


@pytest.mark.asyncio
async def test_load_read_failure_returns_empty(caplog):
    storage = _failing_storage(PersistenceError("disk on fire"))

    with caplog.at_level(logging.ERROR, logger="tasklist"):
        tasks = await TaskPersistence(storage).load()

    assert tasks == []
    assert "disk on fire" in caplog.text


@pytest.mark.asyncio
async def test_save_failure_is_logged_not_raised(caplog):
    storage = _failing_storage(PersistenceError("read-only"))

    with caplog.at_level(logging.ERROR, logger="tasklist"):
        ok = await TaskPersistence(storage).save(SAMPLE)

    assert ok is False
    assert "Failed to save 3 tasks" in caplog.text


@pytest.mark.asyncio
async def test_unexpected_errors_propagate():
    """Only storage failures are absorbed; programming errors are not."""
    storage = _failing_storage(RuntimeError("bug"))
    with pytest.raises(RuntimeError):
        await TaskPersistence(storage).save(SAMPLE)


@pytest.mark.asyncio
async def test_save_accepts_any_iterable(memory_storage):
    persistence = TaskPersistence(memory_storage)
    await persistence.save(task for task in SAMPLE)
    assert await persistence.load() == SAMPLE


@pytest.mark.asyncio
async def test_unusable_sqlite_location_is_absorbed(tmp_path, caplog):
    blocker = tmp_path / "afile"
    blocker.write_text("not a directory")
    persistence = TaskPersistence(SqliteKeyValueStorage(blocker / "sub" / "tasks.db"))

    with caplog.at_level(logging.ERROR, logger="tasklist"):
        assert await persistence.load() == []
        assert await persistence.save(SAMPLE) is False

    assert "Failed to load tasks" in caplog.text
    assert "Failed to save 3 tasks" in caplog.text
