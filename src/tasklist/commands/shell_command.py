"""Command 'shell' of tasklist - an interactive session over one task store.

The shell keeps a single store alive for the whole run and re-renders after
every intent. Changes are saved in the background as they happen.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import typer
from rich.prompt import Prompt

from tasklist.models import TaskListError
from tasklist.services.session_service import TaskListSession
from tasklist.services.task_store import TaskStore
from tasklist.utils.dates import parse_due_date
from tasklist.utils.task_helpers import resolve_task_id
from tasklist.utils.typer_helpers import print_suggestions, suggest_commands
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import format_error, format_info, render_store

from .decorators import command_wrapper
from .utils import date_style, open_session

app = typer.Typer()
console = get_console()

HELP_TEXT = """\
[bold]text[/bold] WORDS      set the draft text
[bold]due[/bold] DATE|none   set or clear the draft due date
[bold]save[/bold]            add the draft, or save it while editing
[bold]add[/bold] WORDS       set the draft text and add it in one go
[bold]edit[/bold] REF        load a task into the draft for editing
[bold]cancel[/bold]          leave edit mode and clear the draft
[bold]toggle[/bold] REF      mark a task done / to do
[bold]rm[/bold] REF          delete a task
[bold]filter[/bold] NAME     show All, Done or Todo
[bold]help[/bold]            show this help
[bold]quit[/bold]            leave the shell

REF is a task ID or the suffix shown in the ID column."""

ALIASES = {
    "t": "text",
    "s": "save",
    "submit": "save",
    "x": "toggle",
    "done": "toggle",
    "delete": "rm",
    "f": "filter",
    "?": "help",
    "q": "quit",
    "exit": "quit",
}


class ShellController:
    """Turns shell input lines into store intents."""

    def __init__(self, store: TaskStore):
        self.store = store

    def handle(self, line: str) -> bool:
        """Run one input line.

        Returns:
            False when the shell should stop, True otherwise
        """
        command, _, arg = line.strip().partition(" ")
        command = ALIASES.get(command.lower(), command.lower())
        arg = arg.strip()

        if not command:
            return True
        if command == "quit":
            return False

        handler = getattr(self, f"do_{command}", None)
        if handler is None:
            self._unknown(command)
            return True

        try:
            handler(arg)
        except (TaskListError, ValueError) as e:
            format_error(str(e))
        return True

    def command_names(self) -> list[str]:
        """Every word the shell understands, aliases included."""
        names = [name[3:] for name in dir(self) if name.startswith("do_")]
        return [*names, *ALIASES, "quit"]

    def _unknown(self, command: str) -> None:
        suggestions = suggest_commands(command, self.command_names())
        if suggestions:
            print_suggestions(command, "shell", suggestions)
        else:
            format_error(f"Unknown command '{command}'. Type 'help' for commands.")

    def _resolve(self, ref: str) -> str:
        if not ref:
            raise ValueError("Which task? Pass its ID or suffix.")
        return resolve_task_id(self.store.tasks, ref)

    def do_help(self, arg: str) -> None:
        console.print(HELP_TEXT)

    def do_text(self, arg: str) -> None:
        self.store.set_draft_text(arg)

    def do_due(self, arg: str) -> None:
        if arg.lower() in ("", "none", "clear"):
            self.store.pick_due_date(None)
        else:
            self.store.pick_due_date(parse_due_date(arg))

    def do_save(self, arg: str) -> None:
        if arg:
            self.store.set_draft_text(arg)
        if self.store.draft.is_blank:
            format_error("Type your task first.")
            return
        self.store.submit()

    def do_add(self, arg: str) -> None:
        self.do_save(arg)

    def do_edit(self, arg: str) -> None:
        task = self.store.begin_edit(self._resolve(arg))
        format_info(f"Editing '{task.text}'. Change it with text/due, then save.")

    def do_cancel(self, arg: str) -> None:
        self.store.cancel_edit()

    def do_toggle(self, arg: str) -> None:
        self.store.toggle_completed(self._resolve(arg))

    def do_rm(self, arg: str) -> None:
        self.store.remove(self._resolve(arg))

    def do_filter(self, arg: str) -> None:
        self.store.set_filter(arg or "All")


async def run_shell(
    session: TaskListSession,
    read_line: Callable[[], str],
    style: str = "long",
) -> None:
    """Read-handle-render loop until quit or end of input."""
    controller = ShellController(session.store)
    render_store(session.store, style)
    while True:
        try:
            line = await asyncio.to_thread(read_line)
        except (EOFError, KeyboardInterrupt):
            break
        if not controller.handle(line):
            break
        # Give scheduled saves a chance to start before blocking on input
        await asyncio.sleep(0)
        render_store(session.store, style)


def _prompt() -> str:
    return Prompt.ask("[bold cyan]tasklist[/bold cyan]", console=console)


@app.command("shell")
@command_wrapper
async def shell_command() -> None:
    """Open an interactive task list."""
    console.print("[bold]Todo List 📝[/bold]  [dim]type 'help' for commands[/dim]")
    async with open_session() as session:
        await run_shell(session, _prompt, date_style())
