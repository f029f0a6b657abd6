"""Command 'toggle' of tasklist"""

from typing import Annotated

import typer

from tasklist.utils.ui.console import get_console

from .decorators import command_wrapper
from .utils import open_session, resolve_ref

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
async def toggle_command(
    task_refs: Annotated[
        list[str], typer.Argument(help="Task ID(s) or suffixes - can specify multiple")
    ],
) -> None:
    """Mark tasks done, or back to to-do if they already are."""
    async with open_session() as session:
        task_ids = [resolve_ref(session, ref) for ref in task_refs]
        for task_id in task_ids:
            task = session.store.toggle_completed(task_id)
            mark = "✅" if task.completed else "⬜"
            console.print(f"{mark} {task.text}")
