"""tasklist domain models.

This package contains the Pydantic models and plain data types that the
store, the persistence layer and the command-line front end share.
"""

from .exceptions import (
    InvalidFilterError,
    PersistenceError,
    TaskListError,
    TaskNotFoundError,
    ValidationError,
)
from .session import Composing, Draft, EditMode, Editing
from .task import Task, TaskFilter, dump_tasks, parse_tasks

__all__ = [
    # Task models
    "Task",
    "TaskFilter",
    "dump_tasks",
    "parse_tasks",
    # Edit session
    "Composing",
    "Editing",
    "EditMode",
    "Draft",
    # Errors
    "TaskListError",
    "ValidationError",
    "TaskNotFoundError",
    "InvalidFilterError",
    "PersistenceError",
]
