"""Unit tests for main.py, the CLI entry point.

Tests focus on:
- --help and --version at the top level
- timer options are validated and forwarded to the runner
- sub-commands are registered and typos get suggestions
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from typer.testing import CliRunner

from pomodoros_cli import __version__
from pomodoros_cli.commands.decorators import AppError
from pomodoros_cli.main import app, main
from pomodoros_cli.models.timer import TimerConfig
from pomodoros_cli.utils.exit_codes import ERROR_TERMINAL

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _invoke(*args, catch_exceptions: bool = True):
    return runner.invoke(app, list(args), catch_exceptions=catch_exceptions)


@pytest.fixture()
def run_pomodoro(mocker):
    """Replace the full-screen runner; tests inspect the config it receives."""
    return mocker.patch("pomodoros_cli.main.run_pomodoro")


def _config_passed(run_pomodoro) -> TimerConfig:
    run_pomodoro.assert_called_once()
    return run_pomodoro.call_args[0][0]


# ---------------------------------------------------------------------------
# Help and version
# ---------------------------------------------------------------------------


class TestTopLevel:
    def test_help_flag_exits_zero(self):
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "pomodoro" in result.output.lower()

    def test_help_lists_options_and_commands(self):
        result = _invoke("--help")
        for text in ("--focus", "--short", "--long", "--every", "--mute", "config", "version"):
            assert text in result.output

    def test_version_flag(self, run_pomodoro):
        result = _invoke("--version")
        assert result.exit_code == 0
        assert f"pomodoros {__version__}" in result.output
        run_pomodoro.assert_not_called()

    def test_version_command(self, run_pomodoro):
        result = _invoke("version")
        assert result.exit_code == 0
        assert __version__ in result.output
        run_pomodoro.assert_not_called()

    def test_main_is_callable(self):
        assert callable(main)


# ---------------------------------------------------------------------------
# Timer options
# ---------------------------------------------------------------------------


class TestTimerOptions:
    def test_no_args_runs_with_defaults(self, run_pomodoro):
        result = _invoke()
        assert result.exit_code == 0
        assert _config_passed(run_pomodoro) == TimerConfig()

    def test_short_flags(self, run_pomodoro):
        result = _invoke("-f", "50", "-s", "10", "-l", "20", "-e", "3")

        assert result.exit_code == 0
        config = _config_passed(run_pomodoro)
        assert config.focus_duration == timedelta(minutes=50)
        assert config.short_break_duration == timedelta(minutes=10)
        assert config.long_break_duration == timedelta(minutes=20)
        assert config.sessions_per_long_break == 3

    def test_long_flags(self, run_pomodoro):
        result = _invoke("--focus", "1", "--mute", "--tick", "50")

        assert result.exit_code == 0
        config = _config_passed(run_pomodoro)
        assert config.focus_duration == timedelta(minutes=1)
        assert config.mute is True
        assert config.tick_interval == timedelta(milliseconds=50)

    def test_no_mute_overrides_stored_setting(self, run_pomodoro):
        from pomodoros_cli.config import get_config_manager

        get_config_manager().set("mute", True)

        result = _invoke("--no-mute")

        assert result.exit_code == 0
        assert _config_passed(run_pomodoro).mute is False

    @pytest.mark.parametrize(
        "args",
        [
            ("-f", "0"),
            ("--short", "0"),
            ("-l", "-5"),
            ("--every", "0"),
            ("--tick", "0"),
            ("-f", "abc"),
        ],
    )
    def test_invalid_values_exit_with_usage_error(self, run_pomodoro, args):
        result = _invoke(*args)
        assert result.exit_code == 2
        run_pomodoro.assert_not_called()

    def test_terminal_error_exit_code(self, run_pomodoro):
        run_pomodoro.side_effect = AppError("not a terminal", ERROR_TERMINAL)

        result = _invoke()

        assert result.exit_code == ERROR_TERMINAL
        assert "not a terminal" in result.output

    def test_unexpected_error_exit_code(self, run_pomodoro):
        run_pomodoro.side_effect = OSError("terminal gone")

        result = _invoke()

        assert result.exit_code == 1
        assert "unexpected error" in result.output

    def test_without_tty_exits_with_terminal_code(self):
        # CliRunner stdin is not a terminal
        result = _invoke()
        assert result.exit_code == ERROR_TERMINAL
        assert "interactive" in result.output


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------


class TestSubCommands:
    def test_config_subcommand_does_not_start_timer(self, run_pomodoro):
        result = _invoke("config", "get", "focus_minutes")
        assert result.exit_code == 0
        assert "25" in result.output
        run_pomodoro.assert_not_called()

    def test_typo_suggests_command(self, run_pomodoro):
        result = _invoke("confg")
        assert result.exit_code == 2
        assert "Did you mean this?" in result.output
        assert "config" in result.output
        run_pomodoro.assert_not_called()
