"""
Tests for settings persistence and configuration paths
"""

import json

from nas_notes.core.app_state import AppState, DEFAULT_SETTINGS
from nas_notes.core.config import get_app_dir, get_config_path, get_log_path
from nas_notes.core.link_formatter import LinkSettings


def test_config_paths_follow_env(data_dir):
    assert get_app_dir() == data_dir
    assert data_dir.is_dir()
    assert get_config_path() == data_dir / "config" / "settings.json"
    assert get_log_path() == data_dir / "debug.log"


def test_defaults_without_settings_file(data_dir):
    app_state = AppState()

    assert app_state.settings == DEFAULT_SETTINGS
    assert (data_dir / "config").is_dir()
    assert app_state.settings_file == get_config_path()


def test_set_setting_saves_immediately(data_dir):
    app_state = AppState()
    app_state.set_setting("last_color", "teal")

    saved = json.loads((data_dir / "config" / "settings.json").read_text(encoding="utf-8"))
    assert saved["last_color"] == "teal"
    assert AppState().get_setting("last_color") == "teal"


def test_corrupt_settings_keep_defaults(data_dir, caplog):
    config_dir = data_dir / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "settings.json").write_text("{not json", encoding="utf-8")

    app_state = AppState()

    assert app_state.settings == DEFAULT_SETTINGS
    assert "Error loading settings" in caplog.text


def test_link_settings_from_preferences(data_dir):
    app_state = AppState()
    app_state.set_setting("windows_drive", "Y:")
    app_state.set_setting("mac_mount", "/Volumes/Media")

    assert app_state.get_link_settings() == LinkSettings(windows_drive="Y:", mac_mount="/Volumes/Media")


def test_invalid_link_settings_fall_back(data_dir, caplog):
    app_state = AppState()
    app_state.settings["windows_drive"] = "not a drive"

    assert app_state.get_link_settings() == LinkSettings()
    assert "Invalid link settings" in caplog.text
