"""Command 'edit' of tasklist"""

from typing import Annotated

import typer

from tasklist.utils.dates import format_due_date
from tasklist.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import date_style, open_session, parse_due_option, resolve_ref

app = typer.Typer()


@app.command("edit")
@command_wrapper
async def edit_command(
    task_ref: Annotated[str, typer.Argument(help="Task ID or suffix")],
    text: Annotated[
        str | None, typer.Option("--text", "-t", help="New task text")
    ] = None,
    due: Annotated[
        str | None,
        typer.Option("--due", "-d", help="New due date (YYYY-MM-DD, today, tomorrow)"),
    ] = None,
    no_due: Annotated[
        bool, typer.Option("--no-due", help="Clear the due date")
    ] = False,
) -> None:
    """Edit a task's text or due date. Completion is left as it is."""
    if text is None and due is None and not no_due:
        raise AppError("Nothing to change. Pass --text, --due or --no-due.")
    if due is not None and no_due:
        raise AppError("--due and --no-due cannot be used together.")
    due_date = parse_due_option(due)

    async with open_session() as session:
        store = session.store
        store.begin_edit(resolve_ref(session, task_ref))
        if text is not None:
            store.set_draft_text(text)
        if due is not None:
            store.pick_due_date(due_date)
        elif no_due:
            store.pick_due_date(None)
        task = store.submit()
        if task is None:
            store.cancel_edit()
            raise AppError("Task text cannot be empty")

    message = f"Updated: {task.text}"
    if task.due_date:
        message += f" (due {format_due_date(task.due_date, date_style())})"
    format_success(message)
