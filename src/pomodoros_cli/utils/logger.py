"""Application logging to a rotating file under platformdirs user_log_dir.

The terminal belongs to the live timer display, so nothing is logged to it.
Modules ask for a child logger (``get_logger("timer")``) and share the one
file handler installed on the ``pomodoros_cli`` logger.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "pomodoros_cli"
LOG_FILE_NAME = "pomodoros.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_configured = False


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(APP_LOGGER_NAME)) / LOG_FILE_NAME


def _build_handler() -> logging.Handler:
    path = log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        # Unwritable log dir: run without a log file.
        return logging.NullHandler()

    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger or one of its children.

    The file handler is installed on first use.
    """
    global _configured
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if not _configured:
        app_logger.setLevel(logging.DEBUG)
        if not app_logger.handlers:
            app_logger.addHandler(_build_handler())
        app_logger.propagate = False
        _configured = True

    if name:
        return app_logger.getChild(name)
    return app_logger
