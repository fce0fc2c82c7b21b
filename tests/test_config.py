"""Tests for stored settings."""

import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from pomodoros_cli.config import SETTINGS_FILE, ConfigManager, Settings, get_config_manager
from pomodoros_cli.models.timer import TimerConfig


def test_default_settings():
    """Test default settings."""
    settings = Settings()
    assert settings.focus_minutes == 25
    assert settings.short_break_minutes == 5
    assert settings.long_break_minutes == 15
    assert settings.long_break_every == 4
    assert settings.tick_ms == 200
    assert settings.mute is False


def test_settings_to_timer_config():
    """Default settings produce the default timer config."""
    assert Settings().to_timer_config() == TimerConfig()


def test_to_timer_config_overrides():
    """Non-None overrides win; None keeps the stored value."""
    settings = Settings(focus_minutes=40, mute=True)
    config = settings.to_timer_config(focus_minutes=None, short_break_minutes=7, mute=False)

    assert config.focus_duration == timedelta(minutes=40)
    assert config.short_break_duration == timedelta(minutes=7)
    assert config.mute is False


@pytest.mark.parametrize("field", ["focus_minutes", "long_break_every", "tick_ms"])
def test_settings_reject_non_positive(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 0})


def test_config_manager_uses_user_config_dir(isolated_settings):
    manager = ConfigManager()
    assert manager.config_dir == isolated_settings
    assert manager.config_file == isolated_settings / SETTINGS_FILE


def test_missing_file_gives_defaults(tmp_path):
    manager = ConfigManager(config_dir=tmp_path / "none")
    assert manager.settings == Settings()


def test_save_and_load(tmp_path):
    """Values written by one manager are read by the next."""
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("focus_minutes", 50)
    manager.set("mute", "true")

    data = json.loads((tmp_path / SETTINGS_FILE).read_text())
    assert data["focus_minutes"] == 50
    assert data["mute"] is True

    fresh = ConfigManager(config_dir=tmp_path)
    assert fresh.get("focus_minutes") == 50
    assert fresh.get("mute") is True


def test_set_coerces_strings(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("tick_ms", "100")
    assert manager.get("tick_ms") == 100


def test_set_invalid_value_keeps_old_settings(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("tick_ms", 100)

    with pytest.raises(ValidationError):
        manager.set("tick_ms", 0)

    assert manager.get("tick_ms") == 100
    assert ConfigManager(config_dir=tmp_path).get("tick_ms") == 100


def test_unknown_key(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    with pytest.raises(KeyError):
        manager.get("volume")
    with pytest.raises(KeyError):
        manager.set("volume", 3)
    with pytest.raises(KeyError):
        manager.reset("volume")


def test_reset_single_key(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("focus_minutes", 50)
    manager.set("long_break_every", 2)

    manager.reset("focus_minutes")

    assert manager.get("focus_minutes") == 25
    assert manager.get("long_break_every") == 2


def test_reset_all(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("focus_minutes", 50)

    manager.reset()

    assert manager.settings == Settings()
    assert ConfigManager(config_dir=tmp_path).settings == Settings()


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]", '{"focus_minutes": 0}', '{"focus_minutes": "soon"}'],
)
def test_unreadable_file_falls_back_to_defaults(tmp_path, isolated_logging, content):
    (tmp_path / SETTINGS_FILE).write_text(content)

    manager = ConfigManager(config_dir=tmp_path)

    assert manager.settings == Settings()
    log_text = (isolated_logging / "pomodoros.log").read_text()
    assert "ignoring unreadable settings file" in log_text


def test_get_config_manager_is_shared():
    assert get_config_manager() is get_config_manager()
