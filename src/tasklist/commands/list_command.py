"""Command 'list' of tasklist"""

from typing import Annotated

import typer

from tasklist.models import TaskFilter
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import (
    format_filter_bar,
    format_json,
    format_task_table,
)

from .decorators import command_wrapper
from .utils import date_style, open_session

app = typer.Typer()
console = get_console()


@app.command("list")
@command_wrapper
async def list_command(
    filter_name: Annotated[
        str, typer.Option("--filter", "-f", help="All, Done or Todo")
    ] = "All",
    json_opt: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List tasks."""
    task_filter = TaskFilter.parse(filter_name)

    async with open_session() as session:
        tasks = session.store.filter(task_filter)
        all_ids = [task.id for task in session.store.tasks]

    if json_opt:
        format_json(tasks)
        return

    console.print(format_filter_bar(task_filter))
    format_task_table(tasks, all_task_ids=all_ids, date_style=date_style())
