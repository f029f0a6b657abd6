"""Command 'add' of tasklist"""

from typing import Annotated

import typer

from tasklist.utils.dates import format_due_date
from tasklist.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import date_style, open_session, parse_due_option

app = typer.Typer()


@app.command("add")
@command_wrapper
async def add_command(
    text: Annotated[str, typer.Argument(help="Task text")],
    due: Annotated[
        str | None,
        typer.Option("--due", "-d", help="Due date (YYYY-MM-DD, today, tomorrow)"),
    ] = None,
) -> None:
    """Add a new task."""
    due_date = parse_due_option(due)

    async with open_session() as session:
        task = session.store.create(text, due_date)

    message = f"Added: {task.text}"
    if task.due_date:
        message += f" (due {format_due_date(task.due_date, date_style())})"
    format_success(message)
