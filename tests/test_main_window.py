"""
Tests for the main window wiring
"""

from unittest.mock import patch

import pytest

from PySide6.QtCore import QEvent
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QApplication, QDialog

from nas_notes.core.app_state import AppState
from nas_notes.core.link_formatter import create_content
from nas_notes.ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    window = MainWindow(AppState())
    yield window
    window.editor_panel.editor.document().setModified(False)
    window.deleteLater()


def test_commands_menu(window):
    assert list(window.command_actions) == ["add-nas-links", "colorize-text"]
    assert window.command_actions["add-nas-links"].text() == "Add NAS Links"
    assert window.command_actions["colorize-text"].shortcut().toString() == "Ctrl+Shift+K"


def test_untitled_title(window):
    assert window.windowTitle() == "Untitled - NAS Link Notes"


def test_color_command_updates_editor(window):
    """The colorize command wraps the editor selection once the dialog submits"""
    panel = window.editor_panel
    panel.set_text("alert")
    panel.editor.selectAll()

    window.run_command("colorize-text")
    dialog = window.extension._open_dialog
    dialog.set_color("red")
    dialog.submit()

    assert panel.text() == '<span style="color:red">alert</span>'
    assert window.app_state.get_setting("last_color") == "red"
    assert window.windowTitle().startswith("*")


def test_unknown_command_warns(window):
    with patch("nas_notes.ui.main_window.QMessageBox.warning") as warning:
        window.run_command("missing")

    warning.assert_called_once()


def test_open_file_remembers_path(window, tmp_path):
    note = tmp_path / "links.md"
    note.write_text("# Links", encoding="utf-8")

    assert window.open_file(str(note)) is True

    assert window.editor_panel.text() == "# Links"
    assert window.app_state.get_setting("last_file") == str(note)
    assert window.windowTitle() == "links.md - NAS Link Notes"


def test_open_missing_file_warns(window, tmp_path):
    with patch("nas_notes.ui.main_window.QMessageBox.warning") as warning:
        assert window.open_file(str(tmp_path / "missing.md")) is False

    warning.assert_called_once()


def test_add_links_command_inserts_table(window):
    """The add-nas-links command inserts the table at the editor cursor"""
    panel = window.editor_panel
    panel.set_text("Before\n")
    panel.editor.moveCursor(QTextCursor.End)

    window.run_command("add-nas-links")
    dialog = window.extension._open_dialog
    dialog.path_edit.setText(r"Z:\Shared\file.pdf")
    dialog.submit()

    assert panel.text() == "Before\n" + create_content(r"Z:\Shared\file.pdf", False)


def test_closed_dialogs_are_deleted(window):
    """Repeated commands do not pile up hidden dialogs on the window"""
    window.editor_panel.set_text("alert")
    for _ in range(5):
        window.editor_panel.editor.selectAll()
        window.run_command("colorize-text")
        window.extension._open_dialog.submit()

    QApplication.sendPostedEvents(None, QEvent.DeferredDelete)

    assert window.findChildren(QDialog) == []


def test_font_size_menu(window):
    assert list(window.font_size_actions) == ["small", "medium", "large", "x-large"]
    assert window.font_size_actions["x-large"].text() == "X-large"

    window.font_size_actions["small"].trigger()

    assert window.font().pointSize() == 10
    assert window.app_state.get_setting("font_size") == "small"


def test_font_size_survives_theme_change(window):
    window._change_font_size("large")
    window._change_theme("light")

    assert window.font().pointSize() == 14
    assert window.app_state.get_setting("font_size") == "large"
    assert window.app_state.get_setting("theme") == "light"
