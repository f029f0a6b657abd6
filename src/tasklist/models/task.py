"""Task data models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)

from tasklist.models.exceptions import InvalidFilterError


class Task(BaseModel):
    """Task model representing one committed to-do item.

    Instances are immutable; every change produces a new instance that takes
    the place of the old one in the collection.

    Attributes:
        id: Opaque unique identifier, assigned at creation
        text: Task label, never blank
        completed: Completion status
        due_date: Optional calendar date, stored under ``dueDate``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    completed: bool = False
    due_date: date | None = Field(default=None, alias="dueDate")

    @field_validator("due_date", mode="before")
    @classmethod
    def truncate_datetime(cls, v):
        """Accept full ISO timestamps and keep only their date part."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v


class TaskFilter(str, Enum):
    """Named predicates for the derived task view."""

    ALL = "All"
    DONE = "Done"
    TODO = "Todo"

    @classmethod
    def parse(cls, value: TaskFilter | str) -> TaskFilter:
        """Resolve a filter from an enum member or its (case-insensitive) name.

        Raises:
            InvalidFilterError: If the name is not a known filter
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise InvalidFilterError(
            f"Unknown filter '{value}'. Use one of: "
            + ", ".join(member.value for member in cls)
        )

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.DONE:
            return task.completed
        if self is TaskFilter.TODO:
            return not task.completed
        return True


def _unique_ids(tasks: list[Task]) -> list[Task]:
    seen: set[str] = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError(f"duplicate task id '{task.id}'")
        seen.add(task.id)
    return tasks


# Serialized form of the whole collection
TaskList = TypeAdapter(Annotated[list[Task], AfterValidator(_unique_ids)])


def dump_tasks(tasks: list[Task]) -> str:
    """Serialize a task collection to the JSON blob stored under one key."""
    return TaskList.dump_json(list(tasks), by_alias=True).decode("utf-8")


def parse_tasks(blob: str | bytes) -> list[Task]:
    """Parse a stored JSON blob back into tasks.

    Raises:
        pydantic.ValidationError: If the blob is not valid JSON, has the
            wrong shape or holds two tasks with the same id
    """
    return TaskList.validate_json(blob)
