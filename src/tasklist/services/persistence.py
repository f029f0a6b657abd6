"""Persistence of the whole task collection under a single storage key.

Failures never reach the caller: a failed or malformed load yields an empty
collection and a failed save is logged, leaving the in-memory store as the
source of truth for the rest of the session.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import ValidationError as PydanticValidationError

from tasklist.models import PersistenceError, Task, dump_tasks, parse_tasks
from tasklist.repositories import KeyValueStorage
from tasklist.utils.logger import get_logger

TASKS_KEY = "tasks"

logger = get_logger(__name__)


class TaskPersistence:
    """Load/save the task collection through a key-value storage adapter."""

    def __init__(self, storage: KeyValueStorage, key: str = TASKS_KEY):
        """Initialize the persistence adapter.

        Args:
            storage: KeyValueStorage implementation for data access
            key: Key the serialized collection lives under
        """
        self.storage = storage
        self.key = key

    async def load(self) -> list[Task]:
        """Read the stored collection.

        Returns:
            The stored tasks in order, or an empty list if nothing usable is
            stored or the read failed
        """
        try:
            blob = await self.storage.get_item(self.key)
        except PersistenceError as e:
            logger.error("Failed to load tasks: %s", e)
            return []

        if not blob:
            logger.debug("no stored tasks under '%s'", self.key)
            return []

        try:
            tasks = parse_tasks(blob)
        except PydanticValidationError as e:
            logger.warning(
                "Ignoring malformed tasks under '%s' (%d errors): %s",
                self.key,
                e.error_count(),
                e.errors(include_url=False)[:3],
            )
            return []

        logger.info("loaded %d tasks from %s", len(tasks), self.storage.storage_type)
        return tasks

    async def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the stored collection with *tasks*.

        Returns:
            True if the write succeeded, False if it failed (the failure is
            logged)
        """
        snapshot = list(tasks)
        blob = dump_tasks(snapshot)
        try:
            await self.storage.set_item(self.key, blob)
        except PersistenceError as e:
            logger.error("Failed to save %d tasks: %s", len(snapshot), e)
            return False
        logger.debug("saved %d tasks to %s", len(snapshot), self.storage.storage_type)
        return True
