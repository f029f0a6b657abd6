"""Typer helper utilities."""

from collections.abc import Iterable
from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tasklist.utils.ui.console import get_console


def suggest_commands(attempted: str, choices: Iterable[str], limit: int = 3) -> list[str]:
    """Known command names close to a mistyped one, best match first."""
    return get_close_matches(attempted.lower(), sorted(set(choices)), n=limit, cutoff=0.6)


def print_suggestions(attempted: str, where: str, suggestions: list[str]) -> None:
    """Print the unknown-command line followed by the close matches."""
    console = get_console()
    console.print(f'[red]Error:[/red] unknown command "{attempted}" for "{where}"')
    console.print()
    if len(suggestions) == 1:
        console.print("[yellow]Did you mean this?[/yellow]")
    else:
        console.print("[yellow]Did you mean one of these?[/yellow]")
    for suggestion in suggestions:
        console.print(f"        {suggestion}")


class SuggestingGroup(TyperGroup):
    """Typer group that suggests commands on typos."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                suggestions = suggest_commands(args[0], self.commands)
                if suggestions:
                    print_suggestions(args[0], ctx.info_name, suggestions)
                    raise typer.Exit(1) from e
            raise
