"""
Tests for the NAS link and text color commands
"""

import pytest
from unittest.mock import MagicMock

from PySide6.QtCore import Qt

from nas_notes.core.commands import CommandRegistry
from nas_notes.core.link_formatter import LinkSettings, create_content
from nas_notes.ui.nas_links_extension import ADD_NAS_LINKS, COLORIZE_TEXT, NasLinksExtension


@pytest.fixture
def app_state():
    """Create a mock app_state for testing"""
    app_state = MagicMock()
    settings = {"default_preview": False, "last_color": "#fff"}
    app_state.get_setting.side_effect = lambda key, default=None: settings.get(key, default)
    app_state.get_link_settings.return_value = LinkSettings()
    return app_state


@pytest.fixture
def editor():
    editor = MagicMock()
    editor.get_cursor.return_value = 7
    editor.get_selection.return_value = "Important"
    return editor


@pytest.fixture
def extension(app_state):
    return NasLinksExtension(
        app_state, links_dialog_cls=MagicMock(), color_dialog_cls=MagicMock()
    )


def test_load_registers_commands(extension):
    registry = CommandRegistry()
    extension.load(registry)

    assert [c.command_id for c in registry.commands()] == [ADD_NAS_LINKS, COLORIZE_TEXT]
    assert registry.get(ADD_NAS_LINKS).name == "Add NAS Links"
    assert registry.get(COLORIZE_TEXT).name == "Apply Color to Text"


def test_add_nas_links_inserts_at_cursor(extension, editor):
    """Submitting the path dialog inserts the table at the cursor"""
    assert extension.add_nas_links(editor) is True

    dialog_cls = extension.links_dialog_cls
    args, kwargs = dialog_cls.call_args
    assert kwargs["preview"] is False
    dialog_cls.return_value.open.assert_called_once()

    on_submit = args[1]
    on_submit(r"Z:\Shared\file.pdf", True)

    editor.replace_range.assert_called_once_with(create_content(r"Z:\Shared\file.pdf", True), 7)


def test_insert_uses_stored_link_settings(extension, app_state, editor):
    app_state.get_link_settings.return_value = LinkSettings(windows_drive="Y:")

    extension.insert_nas_links(editor, "/Volumes/Files/a.txt", False)

    content = editor.replace_range.call_args[0][0]
    assert "<file:///Y:/a.txt>" in content


def test_colorize_text_replaces_selection(extension, app_state, editor):
    """Submitting the color dialog wraps the selection and remembers the color"""
    assert extension.colorize_text(editor) is True

    dialog_cls = extension.color_dialog_cls
    args, kwargs = dialog_cls.call_args
    assert kwargs["color"] == "#fff"

    args[1]("red")

    editor.replace_selection.assert_called_once_with('<span style="color:red">Important</span>')
    app_state.set_setting.assert_called_once_with("last_color", "red")


def test_add_nas_links_browses_from_last_note(extension, app_state, editor, tmp_path):
    note = tmp_path / "notes" / "today.md"
    app_state.get_setting.side_effect = (
        lambda key, default=None: str(note) if key == "last_file" else default
    )

    extension.add_nas_links(editor)

    assert extension.links_dialog_cls.call_args[1]["start_dir"] == str(note.parent)


def test_add_nas_links_without_last_note(extension, editor):
    extension.add_nas_links(editor)

    assert extension.links_dialog_cls.call_args[1]["start_dir"] == ""


def test_dialogs_delete_on_close(extension, editor):
    """Each dialog is marked for deletion once it closes"""
    extension.colorize_text(editor)

    dialog = extension.color_dialog_cls.return_value
    dialog.setAttribute.assert_called_once_with(Qt.WA_DeleteOnClose)
    assert extension._open_dialog is dialog
