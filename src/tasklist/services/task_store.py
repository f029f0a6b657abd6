"""Task store - the in-memory task collection and the edit session.

The store is the only holder of application state. Every operation runs
synchronously; listeners registered with ``subscribe`` are told about each
change to the collection so they can persist it or re-render.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from datetime import date

from tasklist.models import (
    Composing,
    Draft,
    EditMode,
    Editing,
    Task,
    TaskFilter,
    TaskNotFoundError,
    ValidationError,
)
from tasklist.utils.logger import get_logger

logger = get_logger(__name__)

TasksListener = Callable[[list[Task]], None]


def generate_task_id() -> str:
    """Generate a new task id."""
    return str(uuid.uuid4())


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise ValidationError("Task text cannot be empty")


class TaskStore:
    """Ordered task collection plus the draft/edit state of the input fields."""

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        id_factory: Callable[[], str] = generate_task_id,
    ):
        """Initialize the store.

        Args:
            tasks: Initial collection, kept in the given order
            id_factory: Callable producing fresh task ids
        """
        self._tasks: list[Task] = list(tasks or [])
        self._issued_ids: set[str] = {task.id for task in self._tasks}
        self._id_factory = id_factory
        self._listeners: list[TasksListener] = []
        self.mode: EditMode = Composing()
        self.draft = Draft()
        self.active_filter = TaskFilter.ALL

    # -------------------- queries --------------------

    @property
    def tasks(self) -> list[Task]:
        """Copy of the full collection in insertion order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def filter(self, predicate: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
        """Derived view of the collection; never mutates it."""
        task_filter = TaskFilter.parse(predicate)
        return [task for task in self._tasks if task_filter.matches(task)]

    @property
    def visible_tasks(self) -> list[Task]:
        return self.filter(self.active_filter)

    def set_filter(self, predicate: TaskFilter | str) -> TaskFilter:
        self.active_filter = TaskFilter.parse(predicate)
        return self.active_filter

    # -------------------- mutations --------------------

    def create(self, text: str, due_date: date | None = None) -> Task:
        """Append a new, not completed task.

        Raises:
            ValidationError: If text is empty or whitespace only
        """
        _require_text(text)
        task = Task(id=self._new_id(), text=text, completed=False, due_date=due_date)
        self._tasks.append(task)
        logger.debug("task created: %s", task.id)
        self._notify()
        return task

    def update(self, task_id: str, text: str, due_date: date | None = None) -> Task:
        """Replace text and due date of a task, keeping completion and position.

        Raises:
            ValidationError: If text is empty or whitespace only
            TaskNotFoundError: If no task has this id
        """
        _require_text(text)
        index = self._index_of(task_id)
        task = self._tasks[index].model_copy(update={"text": text, "due_date": due_date})
        self._tasks[index] = task
        logger.debug("task updated: %s", task_id)
        self._notify()
        return task

    def toggle_completed(self, task_id: str) -> Task:
        """Flip the completion flag of a task.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        index = self._index_of(task_id)
        current = self._tasks[index]
        task = current.model_copy(update={"completed": not current.completed})
        self._tasks[index] = task
        logger.debug("task %s completed=%s", task_id, task.completed)
        self._notify()
        return task

    def remove(self, task_id: str) -> None:
        """Remove a task if present; unknown ids are ignored."""
        remaining = [task for task in self._tasks if task.id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._tasks = remaining
        if self.editing_id == task_id:
            self.cancel_edit()
        logger.debug("task removed: %s", task_id)
        self._notify()

    def hydrate(self, tasks: Iterable[Task]) -> None:
        """Replace the collection with loaded tasks without notifying listeners."""
        self._tasks = list(tasks)
        self._issued_ids.update(task.id for task in self._tasks)
        self.mode = Composing()
        self.draft.clear()

    # -------------------- edit session --------------------

    @property
    def editing_id(self) -> str | None:
        if isinstance(self.mode, Editing):
            return self.mode.task_id
        return None

    @property
    def submit_label(self) -> str:
        return "Save" if isinstance(self.mode, Editing) else "Add"

    def begin_edit(self, task_id: str) -> Task:
        """Copy a task into the draft and make it the edit target.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self.get(task_id)
        self.draft.text = task.text
        self.draft.due_date = task.due_date
        self.mode = Editing(task_id)
        return task

    def cancel_edit(self) -> None:
        self.mode = Composing()
        self.draft.clear()

    def set_draft_text(self, text: str) -> None:
        self.draft.text = text

    def pick_due_date(self, due_date: date | None) -> None:
        self.draft.due_date = due_date

    def submit(self) -> Task | None:
        """Commit the draft: create while composing, update while editing.

        Returns:
            The created or updated task, or None if nothing was committed.
            A blank draft leaves draft and mode untouched so it can be fixed.
        """
        match self.mode:
            case Editing(task_id=task_id):
                try:
                    task = self.update(task_id, self.draft.text, self.draft.due_date)
                except ValidationError:
                    logger.debug("blank draft rejected while editing %s", task_id)
                    return None
                except TaskNotFoundError:
                    logger.warning("edit target %s no longer exists", task_id)
                    self.cancel_edit()
                    return None
            case _:
                try:
                    task = self.create(self.draft.text, self.draft.due_date)
                except ValidationError:
                    logger.debug("blank draft rejected")
                    return None
        self.cancel_edit()
        return task

    # -------------------- listeners --------------------

    def subscribe(self, listener: TasksListener) -> Callable[[], None]:
        """Register a listener for collection changes.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------- internals --------------------

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def _new_id(self) -> str:
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id

    def _notify(self) -> None:
        snapshot = list(self._tasks)
        for listener in list(self._listeners):
            listener(snapshot)
