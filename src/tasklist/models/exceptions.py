"""Exceptions raised by the task list core."""


class TaskListError(Exception):
    """Base class for task list errors."""


class ValidationError(TaskListError, ValueError):
    """Raised when task text is empty or whitespace only."""


class TaskNotFoundError(TaskListError, KeyError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: str):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task '{self.task_id}' not found"


class InvalidFilterError(TaskListError, ValueError):
    """Raised for an unknown filter predicate name."""


class PersistenceError(TaskListError):
    """Raised by storage adapters when a read or write fails."""
