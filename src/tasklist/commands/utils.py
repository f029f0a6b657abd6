"""Shared plumbing for commands that work on the task list."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from tasklist.models import TaskNotFoundError
from tasklist.services.config_service import get_config_service
from tasklist.services.session_service import TaskListSession
from tasklist.utils.dates import parse_due_date
from tasklist.utils.task_helpers import resolve_task_id
from tasklist.utils.ui.formatters import format_warning

from .decorators import AppError


@asynccontextmanager
async def open_session() -> AsyncIterator[TaskListSession]:
    """Start a session on the configured storage and flush it on the way out."""
    session = get_config_service().create_session()
    await session.start()
    try:
        yield session
    finally:
        if not await session.close():
            format_warning(
                "Changes could not be saved; they only exist until this command exits."
            )


def resolve_ref(session: TaskListSession, ref: str) -> str:
    """Resolve an ID or unique suffix against the session's tasks."""
    try:
        return resolve_task_id(session.store.tasks, ref)
    except TaskNotFoundError:
        raise AppError(f"No task matches '{ref}'") from None
    except ValueError as e:
        raise AppError(str(e)) from e


def parse_due_option(value: str | None):
    """Parse a --due option, turning bad input into a user-facing error."""
    if value is None:
        return None
    try:
        return parse_due_date(value)
    except ValueError as e:
        raise AppError(str(e)) from e


def date_style() -> str:
    return get_config_service().config.output.date_format
