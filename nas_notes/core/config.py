"""
Configuration settings for the NAS Link Notes application

Provides centralized configuration and path management.
"""

import os
from pathlib import Path


def get_app_dir():
    """
    Get the application directory based on platform

    Returns:
        Path: Path to the application data directory
    """
    # Check for environment variable first (for development/testing)
    if "NAS_NOTES_DATA_DIR" in os.environ:
        app_dir = Path(os.environ["NAS_NOTES_DATA_DIR"])
        os.makedirs(app_dir, exist_ok=True)
        return app_dir

    home = Path.home()

    if os.name == "nt":  # Windows
        app_dir = home / "AppData" / "Local" / "NAS_Link_Notes"
    elif os.name == "posix":
        # macOS keeps a Library folder in the home directory
        if os.path.exists(home / "Library"):
            app_dir = home / "Library" / "Application Support" / "NAS_Link_Notes"
        else:  # Linux
            app_dir = home / ".local" / "share" / "nas_link_notes"
    else:
        app_dir = home / ".nas_link_notes"

    os.makedirs(app_dir, exist_ok=True)

    return app_dir


def get_config_path():
    """
    Get the path to the user settings file

    Returns:
        Path: Path to the settings file
    """
    return get_app_dir() / "config" / "settings.json"


def get_log_path():
    """
    Get the path to the debug log file

    Returns:
        Path: Path to the log file
    """
    return get_app_dir() / "debug.log"
