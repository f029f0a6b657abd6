"""Output formatters for the task list."""

from __future__ import annotations

import json

from rich.table import Table
from rich.text import Text

from tasklist.models import Draft, Task, TaskFilter
from tasklist.services.task_store import TaskStore
from tasklist.utils.dates import format_due_date
from tasklist.utils.task_helpers import calculate_unique_suffixes
from tasklist.utils.ui.console import get_console

EMPTY_MESSAGE = "Nothing left to do. 🎉"

console = get_console()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def format_json(tasks: list[Task]) -> None:
    """Print tasks as JSON in their stored field layout."""
    data = [task.model_dump(mode="json", by_alias=True) for task in tasks]
    print(json.dumps(data, indent=2, ensure_ascii=False))


def task_label(task: Task) -> Text:
    """Checkbox and text of a task, struck through once completed."""
    if task.completed:
        return Text.assemble("✅ ", (task.text, "strike dim"))
    return Text.assemble("⬜ ", task.text)


def format_filter_bar(active: TaskFilter) -> Text:
    """Filter choices with the active one highlighted."""
    bar = Text()
    for index, task_filter in enumerate(TaskFilter):
        if index:
            bar.append("  ")
        if task_filter is active:
            bar.append(f"[{task_filter.value}]", style="bold green")
        else:
            bar.append(f" {task_filter.value} ", style="dim")
    return bar


def format_draft(draft: Draft, submit_label: str, date_style: str = "long") -> Text:
    """One-line view of the input fields and the submit button."""
    line = Text()
    line.append(f"{submit_label}: ", style="bold")
    line.append(draft.text or "(type your task)", style="" if draft.text else "dim")
    if draft.due_date:
        line.append(f"  📅 {format_due_date(draft.due_date, date_style)}", style="cyan")
    return line


def format_task_table(
    tasks: list[Task],
    all_task_ids: list[str] | None = None,
    date_style: str = "long",
) -> None:
    """Display tasks as a table, or the empty message when there are none.

    Args:
        tasks: Tasks to show, in order
        all_task_ids: IDs used to compute unique suffixes (defaults to
            the shown tasks)
        date_style: ``long`` or ``iso``
    """
    if not tasks:
        console.print(f"[italic dim]{EMPTY_MESSAGE}[/italic dim]")
        return

    suffixes = calculate_unique_suffixes(
        all_task_ids if all_task_ids is not None else [task.id for task in tasks]
    )

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Task")
    table.add_column("Due", style="yellow", no_wrap=True)

    for task in tasks:
        table.add_row(
            suffixes.get(task.id, task.id),
            task_label(task),
            format_due_date(task.due_date, date_style),
        )

    console.print(table)


def render_store(store: TaskStore, date_style: str = "long", show_draft: bool = True) -> None:
    """Render the whole screen: input line, filter bar and the visible tasks."""
    if show_draft:
        console.print(format_draft(store.draft, store.submit_label, date_style))
    console.print(format_filter_bar(store.active_filter))
    format_task_table(
        store.visible_tasks,
        all_task_ids=[task.id for task in store.tasks],
        date_style=date_style,
    )
