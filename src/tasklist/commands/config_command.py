"""Command 'config' of tasklist"""

from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from tasklist.services.config_service import get_config_service
from tasklist.utils.typer_helpers import SuggestingGroup
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config_service = get_config_service()
    console.print(f"[dim]{config_service.config_path}[/dim]")
    console.print_json(config_service.config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Dot-separated key, e.g. storage.backend")],
) -> None:
    """Show one configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        raise AppError(f"Unknown config key: {key}") from None
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Dot-separated key, e.g. storage.backend")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError:
        raise AppError(f"Unknown config key: {key}") from None
    except PydanticValidationError as e:
        raise AppError(
            f"Invalid value for {key}: {e.errors(include_url=False)[0]['msg']}"
        ) from e
    format_success(f"{key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[
        str | None, typer.Argument(help="Key to reset (omit to reset everything)")
    ] = None,
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except KeyError:
        raise AppError(f"Unknown config key: {key}") from None
    format_success(f"Reset {key or 'configuration'} to defaults")
