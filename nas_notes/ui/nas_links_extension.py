# nas_notes/ui/nas_links_extension.py - NAS link and color commands
"""
Editor commands for inserting NAS link tables and coloring text

Add NAS Links asks for a path and inserts the link table at the cursor.
Apply Color to Text asks for a color and wraps the selection in a span.
"""

import logging
from pathlib import Path

from PySide6.QtCore import Qt

from nas_notes.core.commands import EditorCommand
from nas_notes.core.link_formatter import create_content
from nas_notes.core.text_color import apply_color, DEFAULT_COLOR
from nas_notes.ui.dialogs.nas_links_dialog import NasLinksDialog
from nas_notes.ui.dialogs.color_dialog import ColorDialog

logger = logging.getLogger(__name__)

ADD_NAS_LINKS = "add-nas-links"
COLORIZE_TEXT = "colorize-text"


class NasLinksExtension:
    """Registers the NAS link and text color commands"""

    def __init__(self, app_state, parent=None,
                 links_dialog_cls=NasLinksDialog, color_dialog_cls=ColorDialog):
        """Initialize the extension

        Args:
            app_state: Application state holding link and color settings
            parent: Parent widget for the dialogs
            links_dialog_cls: Dialog class used to collect the path
            color_dialog_cls: Dialog class used to collect the color
        """
        self.app_state = app_state
        self.parent = parent
        self.links_dialog_cls = links_dialog_cls
        self.color_dialog_cls = color_dialog_cls
        # Dialogs are non-modal, keep a reference so they are not collected
        self._open_dialog = None

    def load(self, registry):
        """Register both commands with a command registry"""
        registry.register(EditorCommand(
            ADD_NAS_LINKS, "Add NAS Links", self.add_nas_links, "Ctrl+Shift+L"
        ))
        registry.register(EditorCommand(
            COLORIZE_TEXT, "Apply Color to Text", self.colorize_text, "Ctrl+Shift+K"
        ))

    def add_nas_links(self, editor):
        """Ask for a NAS path and insert the link table at the cursor"""
        dialog = self.links_dialog_cls(
            self.parent,
            lambda path, preview: self.insert_nas_links(editor, path, preview),
            preview=self.app_state.get_setting("default_preview", False),
            start_dir=self._start_dir(),
        )
        self._show(dialog)
        return True

    def insert_nas_links(self, editor, path, preview):
        content = create_content(path, preview, self.app_state.get_link_settings())
        editor.replace_range(content, editor.get_cursor())
        logger.info(f"Inserted NAS links for {path!r} (preview={preview})")

    def colorize_text(self, editor):
        """Ask for a color and apply it to the current selection"""
        dialog = self.color_dialog_cls(
            self.parent,
            lambda color: self.apply_color_to_selection(editor, color),
            color=self.app_state.get_setting("last_color", DEFAULT_COLOR),
        )
        self._show(dialog)
        return True

    def apply_color_to_selection(self, editor, color):
        selection = editor.get_selection()
        editor.replace_selection(apply_color(selection, color))
        self.app_state.set_setting("last_color", color)
        logger.info(f"Applied color {color} to {len(selection)} characters")

    def _start_dir(self):
        """Folder of the last opened note, where Browse starts"""
        last_file = self.app_state.get_setting("last_file")
        return str(Path(last_file).parent) if last_file else ""

    def _show(self, dialog):
        # Closed dialogs are deleted, only the latest one is kept alive here
        dialog.setAttribute(Qt.WA_DeleteOnClose)
        self._open_dialog = dialog
        dialog.open()
