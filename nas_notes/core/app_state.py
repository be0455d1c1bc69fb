# nas_notes/core/app_state.py - Application state management
"""
Application state management for NAS Link Notes

Handles user settings and the link translation configuration.
"""

import json
import logging

from nas_notes.core.config import get_app_dir, get_config_path
from nas_notes.core.link_formatter import (
    LinkSettings, DEFAULT_WINDOWS_DRIVE, DEFAULT_MAC_MOUNT, MOBILE_PLACEHOLDER
)
from nas_notes.core.text_color import DEFAULT_COLOR

logger = logging.getLogger(__name__)

# Default application settings
DEFAULT_SETTINGS = {
    "theme": "dark",
    "font_size": "medium",
    # Prefixes used to translate share paths between Windows and macOS
    "windows_drive": DEFAULT_WINDOWS_DRIVE,
    "mac_mount": DEFAULT_MAC_MOUNT,
    "mobile_placeholder": MOBILE_PLACEHOLDER,
    "default_preview": False,
    "last_color": DEFAULT_COLOR,
    "last_file": None,
    "show_preview": True,
    "editor_state": {},
}


class AppState:
    """
    Manages user preferences and session data
    """

    def __init__(self):
        """Initialize application state and load user preferences"""
        self.settings = dict(DEFAULT_SETTINGS)

        self.app_dir = get_app_dir()
        self.settings_file = get_config_path()
        self.config_dir = self.settings_file.parent

        self._ensure_directories()
        self._load_settings()

    def _ensure_directories(self):
        """Create application directories if they don't exist"""
        self.config_dir.mkdir(exist_ok=True, parents=True)

    def _load_settings(self):
        """Load user settings from configuration file"""
        if not self.settings_file.exists():
            return
        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                loaded_settings = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings from {self.settings_file}: {e}")
            return

        if not isinstance(loaded_settings, dict):
            logger.error(f"Ignoring settings file {self.settings_file}: expected a JSON object")
            return
        self.settings.update(loaded_settings)

    def save_settings(self):
        """Save current settings to configuration file"""
        try:
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")

    def get_setting(self, key, default=None):
        """Get a setting value with an optional default"""
        return self.settings.get(key, default)

    def set_setting(self, key, value):
        """Update a setting value"""
        self.settings[key] = value
        # Save settings immediately for persistence
        self.save_settings()

    def get_link_settings(self):
        """
        Build the link translation settings from user preferences

        Returns:
            LinkSettings: Stored prefixes, or the defaults when they are invalid
        """
        try:
            return LinkSettings(
                windows_drive=self.get_setting("windows_drive", DEFAULT_WINDOWS_DRIVE),
                mac_mount=self.get_setting("mac_mount", DEFAULT_MAC_MOUNT),
                mobile_placeholder=self.get_setting("mobile_placeholder", MOBILE_PLACEHOLDER),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid link settings, using defaults: {e}")
            return LinkSettings()

    def close(self):
        """Persist settings before shutdown"""
        self.save_settings()
