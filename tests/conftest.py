"""
Shared fixtures for the NAS Link Notes tests
"""

import os

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point the application data directory at a temporary folder"""
    directory = tmp_path / "app_data"
    monkeypatch.setenv("NAS_NOTES_DATA_DIR", str(directory))
    return directory


@pytest.fixture(scope="session")
def qapp():
    """Create the QApplication once for all widget tests"""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
