"""Full-screen Pomodoro timer command."""

from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from pomodoros_cli.config import get_config_manager
from pomodoros_cli.models.timer import (
    EventLoop,
    MonotonicClock,
    TerminalBell,
    TerminalError,
    TimerConfig,
    TimerDisplay,
    TimerState,
    get_keyboard_handler,
    show_summary,
)
from pomodoros_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_TERMINAL
from pomodoros_cli.utils.ui.console import get_console

from .decorators import AppError


def describe_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into one line per field."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "value"
        parts.append(f"{field}: {item['msg']}")
    return "Invalid configuration - " + "; ".join(parts)


def build_timer_config(
    focus: Optional[int] = None,
    short: Optional[int] = None,
    long: Optional[int] = None,
    every: Optional[int] = None,
    tick: Optional[int] = None,
    mute: Optional[bool] = None,
) -> TimerConfig:
    """Merge command-line options over the stored settings."""
    try:
        return get_config_manager().settings.to_timer_config(
            focus_minutes=focus,
            short_break_minutes=short,
            long_break_minutes=long,
            long_break_every=every,
            tick_ms=tick,
            mute=mute,
        )
    except ValidationError as e:
        raise AppError(describe_validation_error(e), ERROR_INVALID_ARGS) from e


def run_pomodoro(config: TimerConfig, console: Optional[Console] = None) -> TimerState:
    """
    Run the full-screen timer until the user quits.

    The terminal is restored on every exit path.
    """
    console = console or get_console()
    try:
        keyboard = get_keyboard_handler()
    except TerminalError as e:
        raise AppError(f"{e}. pomodoros needs an interactive terminal.", ERROR_TERMINAL) from e

    with keyboard, TimerDisplay(console) as display:
        loop = EventLoop(
            config,
            clock=MonotonicClock(),
            poller=keyboard,
            renderer=display,
            bell=TerminalBell(console),
        )
        state = loop.run()

    show_summary(state, console)
    return state
