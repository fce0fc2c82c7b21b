"""Commands managing the stored timer defaults."""

from typing import Optional

import typer
from pydantic import ValidationError

from pomodoros_cli.config import Settings, get_config_manager
from pomodoros_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoros_cli.utils.ui.console import get_console
from pomodoros_cli.utils.ui.formatters import format_settings, format_success

from .decorators import AppError, command_wrapper
from .timer import describe_validation_error

app = typer.Typer(help="Manage stored timer defaults")
console = get_console(highlight=False)

_KEYS = ", ".join(Settings.model_fields)


def _check_key(key: str) -> None:
    if key not in Settings.model_fields:
        raise AppError(
            f"Unknown setting '{key}'. Known settings: {_KEYS}", ERROR_INVALID_ARGS
        )


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View all stored defaults."""
    format_settings(get_config_manager().settings.model_dump())


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help=f"Setting name ({_KEYS})"),
) -> None:
    """Get a stored default."""
    _check_key(key)
    value = get_config_manager().get(key)
    console.print(str(value).lower() if isinstance(value, bool) else value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help=f"Setting name ({_KEYS})"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a stored default."""
    _check_key(key)
    manager = get_config_manager()
    try:
        manager.set(key, value)
    except ValidationError as e:
        raise AppError(describe_validation_error(e), ERROR_INVALID_ARGS) from e
    format_success(f"'{key}' set to '{manager.get(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Setting to reset (all if omitted)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset stored defaults."""
    if key is not None:
        _check_key(key)
    if not yes:
        target = "all settings" if key is None else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {target}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    get_config_manager().reset(key)
    if key:
        format_success(f"'{key}' reset to default")
    else:
        format_success("Settings reset to defaults")
