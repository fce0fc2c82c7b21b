"""Main entry point for pomodoros."""

from typing import Optional

import typer

from pomodoros_cli import __version__
from pomodoros_cli.commands import config, version_command
from pomodoros_cli.commands.decorators import command_wrapper
from pomodoros_cli.commands.timer import build_timer_config, run_pomodoro
from pomodoros_cli.utils.typer_helpers import SuggestingGroup
from pomodoros_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoros",
    cls=SuggestingGroup,
    help=(
        "Terminal Pomodoro timer. Space starts/pauses, n or → skips the "
        "current phase, r resets it, q or Esc quits."
    ),
    add_completion=False,
)

console = get_console()

app.add_typer(config.app, name="config", help="Manage stored timer defaults")
app.command("version")(version_command.version)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pomodoros {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
@command_wrapper
def timer(
    ctx: typer.Context,
    focus: Optional[int] = typer.Option(
        None, "--focus", "-f", min=1, help="Focus duration in minutes [default: 25]"
    ),
    short: Optional[int] = typer.Option(
        None, "--short", "-s", min=1, help="Short break duration in minutes [default: 5]"
    ),
    long: Optional[int] = typer.Option(
        None, "--long", "-l", min=1, help="Long break duration in minutes [default: 15]"
    ),
    every: Optional[int] = typer.Option(
        None,
        "--every",
        "-e",
        min=1,
        help="Take a long break after every N focus sessions [default: 4]",
    ),
    mute: Optional[bool] = typer.Option(
        None, "--mute/--no-mute", help="Silence the terminal bell"
    ),
    tick: Optional[int] = typer.Option(
        None, "--tick", min=1, help="Tick interval in milliseconds [default: 200]"
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Run the full-screen Pomodoro timer."""
    if ctx.invoked_subcommand is not None:
        return

    timer_config = build_timer_config(
        focus=focus, short=short, long=long, every=every, tick=tick, mute=mute
    )
    run_pomodoro(timer_config, console)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
