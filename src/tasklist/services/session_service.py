"""Session service - wires a TaskStore to its persistence.

A session loads the stored collection once, then listens to the store and
writes the full collection after every change. Writes run as asyncio tasks on
the running loop, so the store never waits on storage.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Literal

from tasklist.models import Task
from tasklist.services.persistence import TaskPersistence
from tasklist.services.task_store import TaskStore
from tasklist.utils.logger import get_logger

logger = get_logger(__name__)

WriteMode = Literal["immediate", "deferred"]


class TaskListSession:
    """One run of the app: a store plus its load-on-start/save-on-change wiring.

    In ``immediate`` mode each change schedules its own save of that change's
    snapshot. Saves may overlap; whichever finishes last is what storage holds.
    In ``deferred`` mode changes only mark the session dirty and ``flush``
    writes the latest snapshot once.
    """

    def __init__(
        self,
        store: TaskStore,
        persistence: TaskPersistence,
        write_mode: WriteMode = "immediate",
    ):
        self.store = store
        self.persistence = persistence
        self.write_mode = write_mode
        self._pending: set[asyncio.Task[bool]] = set()
        self._dirty_snapshot: list[Task] | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self.failed_saves = 0

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    @property
    def dirty(self) -> bool:
        return self._dirty_snapshot is not None

    async def start(self) -> list[Task]:
        """Load the stored collection into the store and start saving changes."""
        if self.started:
            return self.store.tasks
        tasks = await self.persistence.load()
        self.store.hydrate(tasks)
        self._unsubscribe = self.store.subscribe(self._on_tasks_changed)
        logger.info("session started with %d tasks (%s)", len(tasks), self.write_mode)
        return tasks

    def _on_tasks_changed(self, tasks: list[Task]) -> None:
        if self.write_mode == "deferred":
            self._dirty_snapshot = tasks
            return
        self._schedule_save(tasks)

    def _schedule_save(self, tasks: list[Task]) -> None:
        loop = asyncio.get_running_loop()
        save = loop.create_task(self.persistence.save(tasks))
        self._pending.add(save)
        save.add_done_callback(self._on_save_done)

    def _on_save_done(self, save: asyncio.Task[bool]) -> None:
        self._pending.discard(save)
        if not save.cancelled() and save.result() is False:
            self.failed_saves += 1

    async def flush(self) -> bool:
        """Wait for outstanding writes (or write the dirty snapshot).

        Returns:
            True if every write finished successfully
        """
        ok = True
        if self._dirty_snapshot is not None:
            snapshot, self._dirty_snapshot = self._dirty_snapshot, None
            if not await self.persistence.save(snapshot):
                self.failed_saves += 1
                ok = False
        while self._pending:
            results = await asyncio.gather(*list(self._pending))
            ok = ok and all(results)
        return ok

    async def close(self) -> bool:
        """Flush pending writes and stop listening to the store."""
        ok = await self.flush()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        return ok

    async def __aenter__(self) -> TaskListSession:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
