"""Stored defaults for the timer's command-line options."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from pomodoros_cli.models.timer.config import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    DEFAULT_TICK_MS,
    TimerConfig,
)
from pomodoros_cli.utils.logger import get_logger

SETTINGS_FILE = "settings.json"


class Settings(BaseModel):
    """User defaults, in command-line units."""

    focus_minutes: int = Field(default=DEFAULT_FOCUS_MINUTES, ge=1)
    short_break_minutes: int = Field(default=DEFAULT_SHORT_BREAK_MINUTES, ge=1)
    long_break_minutes: int = Field(default=DEFAULT_LONG_BREAK_MINUTES, ge=1)
    long_break_every: int = Field(default=DEFAULT_LONG_BREAK_EVERY, ge=1)
    tick_ms: int = Field(default=DEFAULT_TICK_MS, ge=1)
    mute: bool = Field(default=False)

    def to_timer_config(self, **overrides: Any) -> TimerConfig:
        """Build a TimerConfig, letting non-None *overrides* win."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return TimerConfig.from_cli(
            focus_minutes=values["focus_minutes"],
            short_minutes=values["short_break_minutes"],
            long_minutes=values["long_break_minutes"],
            every=values["long_break_every"],
            tick_ms=values["tick_ms"],
            mute=values["mute"],
        )


class ConfigManager:
    """Loads and saves the settings file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(user_config_dir("pomodoros"))
        self.config_file = self.config_dir / SETTINGS_FILE
        self._settings: Optional[Settings] = None

    @property
    def settings(self) -> Settings:
        """Get the current settings."""
        if self._settings is None:
            self._settings = self.load_settings()
        return self._settings

    def load_settings(self) -> Settings:
        """Load settings from file, falling back to defaults."""
        if not self.config_file.exists():
            return Settings()
        try:
            with open(self.config_file) as f:
                data = json.load(f)
            return Settings(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            get_logger("config").warning(
                "ignoring unreadable settings file %s: %s", self.config_file, e
            )
            return Settings()

    def save_settings(self, settings: Optional[Settings] = None) -> None:
        """Save settings to file."""
        if settings is None:
            settings = self.settings

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(settings.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a setting value by name."""
        if key not in Settings.model_fields:
            raise KeyError(key)
        return getattr(self.settings, key)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by name and persist it.

        Raises:
            KeyError: If *key* is not a known setting
            ValidationError: If *value* is invalid for *key*
        """
        if key not in Settings.model_fields:
            raise KeyError(key)
        data = self.settings.model_dump()
        data[key] = value
        self._settings = Settings(**data)
        self.save_settings()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset one setting, or all of them, to defaults."""
        if key is None:
            self._settings = Settings()
            self.save_settings()
            return
        if key not in Settings.model_fields:
            raise KeyError(key)
        self.set(key, Settings.model_fields[key].default)


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get the shared config manager."""
    return ConfigManager()
