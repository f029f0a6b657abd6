"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from tasklist.adapters.memory import InMemoryStorage
from tasklist.models import Task, dump_tasks, parse_tasks
from tasklist.models.config_models import AppConfig
from tasklist.services.persistence import TASKS_KEY, TaskPersistence
from tasklist.services.session_service import TaskListSession
from tasklist.services.task_store import TaskStore
from tasklist.utils.logger import reset_logging


@pytest.fixture(autouse=True)
def isolate_logging():
    """Undo any file logging a test switched on, so caplog keeps working."""
    yield
    reset_logging()


@pytest.fixture()
def store():
    return TaskStore()


@pytest.fixture()
def memory_storage():
    return InMemoryStorage()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from tasklist.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("tasklist.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("tasklist.services.config_service.user_data_dir", return_value=tmpdir):
            from tasklist.services.config_service import ConfigService

            svc = ConfigService()
            yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def mock_config_service(memory_storage):
    """Provide a MagicMock that stands in for get_config_service().

    Every create_session() call returns a fresh session on the same in-memory
    storage, so state carries over between command invocations like it does
    on disk.
    """
    config = AppConfig()

    svc = MagicMock()
    svc.config = config
    svc.create_session.side_effect = lambda: TaskListSession(
        TaskStore(), TaskPersistence(memory_storage)
    )
    return svc


@pytest.fixture()
def patch_config_service(mock_config_service):
    """Patch get_config_service for the command layer."""
    with patch(
        "tasklist.commands.utils.get_config_service",
        return_value=mock_config_service,
    ):
        yield mock_config_service


@pytest.fixture()
def seed_tasks(memory_storage):
    """Write tasks into the shared in-memory storage before a command runs."""

    def _seed(*tasks: Task) -> None:
        memory_storage.items[TASKS_KEY] = dump_tasks(tasks)

    return _seed


@pytest.fixture()
def stored_tasks(memory_storage):
    """Read back what the commands left in storage."""

    def _stored() -> list[Task]:
        return parse_tasks(memory_storage.items.get(TASKS_KEY, "[]"))

    return _stored
