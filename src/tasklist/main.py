"""Main entry point for tasklist."""

import typer

from tasklist import __version__
from tasklist.commands import (
    add_command,
    config_command,
    delete_command,
    edit_command,
    list_command,
    shell_command,
    toggle_command,
)
from tasklist.services.config_service import get_config_service
from tasklist.utils.logger import setup_logging
from tasklist.utils.typer_helpers import SuggestingGroup
from tasklist.utils.ui.console import configure_console, get_console

app = typer.Typer(
    name="tasklist",
    cls=SuggestingGroup,
    help="A local task list: add, edit, complete, filter and delete tasks",
    no_args_is_help=True,
)

console = get_console()

# Task commands
app.add_typer(add_command.app)
app.add_typer(list_command.app)
app.add_typer(edit_command.app)
app.add_typer(toggle_command.app)
app.add_typer(delete_command.app)
app.add_typer(shell_command.app)

# Configuration
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.callback()
def main_callback() -> None:
    """Apply logging and output settings before any command runs."""
    config = get_config_service().config
    setup_logging(config.logging.level)
    configure_console(color=config.output.color)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tasklist[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
