"""Shared test fixtures and configuration.

Keeps log files and stored settings out of the real user directories.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from unittest.mock import patch

import pytest

from pomodoros_cli.models.timer.config import TimerConfig


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path):
    """Send the application log to a temporary directory."""
    import pomodoros_cli.utils.logger as logger_mod

    log_dir = tmp_path / "logs"
    app_logger = logging.getLogger(logger_mod.APP_LOGGER_NAME)
    app_logger.handlers.clear()
    logger_mod._configured = False
    with patch("pomodoros_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    logger_mod._configured = False


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point the settings store at a temporary directory."""
    from pomodoros_cli.config import get_config_manager

    config_dir = tmp_path / "config"
    get_config_manager.cache_clear()
    with patch("pomodoros_cli.config.user_config_dir", return_value=str(config_dir)):
        yield config_dir
    get_config_manager.cache_clear()


@pytest.fixture()
def config() -> TimerConfig:
    """Standard 25/5/15 configuration, long break every 4 sessions."""
    return TimerConfig()


@pytest.fixture()
def short_config() -> TimerConfig:
    """Second-scale durations for loop tests."""
    return TimerConfig(
        focus_duration=timedelta(seconds=3),
        short_break_duration=timedelta(seconds=1),
        long_break_duration=timedelta(seconds=2),
        sessions_per_long_break=2,
        tick_interval=timedelta(milliseconds=200),
    )
