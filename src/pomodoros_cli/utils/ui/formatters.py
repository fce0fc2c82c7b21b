"""Message formatters for command output."""

from typing import Any

from rich.table import Table

from .console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_settings(values: dict[str, Any]) -> None:
    """Display settings as a two-column table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, str(value).lower() if isinstance(value, bool) else str(value))
    get_console().print(table)
