"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomodoros_cli.utils.exit_codes import ERROR_GENERAL
from pomodoros_cli.utils.logger import get_logger
from pomodoros_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Application error carrying the process exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Log a command's lifetime and turn failures into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except AppError as e:
            logger.error(
                "command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Typer's own exits (--help, --version, explicit Exit)
            raise

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
