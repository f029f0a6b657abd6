"""Command 'delete' of tasklist"""

from typing import Annotated

import typer

from tasklist.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import open_session, resolve_ref

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete_command(
    task_ref: Annotated[str, typer.Argument(help="Task ID or suffix")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete a task."""
    async with open_session() as session:
        task = session.store.get(resolve_ref(session, task_ref))

        if not force and not typer.confirm(f"Delete task '{task.text}'?"):
            format_info("Cancelled")
            return

        session.store.remove(task.id)

    format_success(f"Deleted: {task.text}")
