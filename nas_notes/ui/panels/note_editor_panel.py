"""
Note Editor Panel

Markdown editor with a live HTML preview. Editor commands reach the text
through an EditorBridge wrapped around the plain text editor.
"""

import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QVBoxLayout, QSplitter, QPlainTextEdit, QTextBrowser
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QTextCursor, QDesktopServices, QFont

from nas_notes.ui.panels.base_panel import BasePanel
from nas_notes.utils.markdown_utils import markdown_to_html

logger = logging.getLogger(__name__)

# QTextCursor.selectedText() separates lines with U+2029
_PARAGRAPH_SEPARATOR = "\u2029"


class EditorBridge:
    """Exposes cursor and selection operations of a QPlainTextEdit to commands"""

    def __init__(self, text_edit):
        self.text_edit = text_edit

    def get_cursor(self):
        """Current cursor position as a character offset"""
        return self.text_edit.textCursor().position()

    def replace_range(self, text, position):
        """Insert text at the given offset"""
        cursor = QTextCursor(self.text_edit.document())
        cursor.setPosition(position)
        cursor.insertText(text)
        self.text_edit.setTextCursor(cursor)

    def get_selection(self):
        return self.text_edit.textCursor().selectedText().replace(_PARAGRAPH_SEPARATOR, "\n")

    def replace_selection(self, text):
        cursor = self.text_edit.textCursor()
        cursor.insertText(text)
        self.text_edit.setTextCursor(cursor)


class NoteEditorPanel(BasePanel):
    """
    Panel for writing a markdown note with a rendered preview
    """

    PANEL_ID = "editor"

    # Emitted when the unsaved-changes state flips
    modified_changed = Signal(bool)

    def __init__(self, app_state, parent=None):
        """Initialize the note editor panel"""
        self.file_path = None
        super().__init__(app_state, parent)
        self.bridge = EditorBridge(self.editor)

    def _setup_ui(self):
        """Set up the panel UI components"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(3, 3, 3, 3)

        self.splitter = QSplitter(Qt.Horizontal)

        # Left pane - markdown source
        self.editor = QPlainTextEdit()
        font = QFont("Monospace")
        font.setStyleHint(QFont.TypeWriter)
        self.editor.setFont(font)
        self.editor.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.editor.textChanged.connect(self._refresh_preview)
        self.editor.modificationChanged.connect(self.modified_changed)
        self.splitter.addWidget(self.editor)

        # Right pane - rendered preview
        self.preview = QTextBrowser()
        self.preview.setOpenLinks(False)
        self.preview.setOpenExternalLinks(False)
        self.preview.anchorClicked.connect(self._handle_link_clicked)
        self.splitter.addWidget(self.preview)

        self.splitter.setSizes([400, 400])
        layout.addWidget(self.splitter)

        self.set_preview_visible(self.app_state.get_setting("show_preview", True))

    def _refresh_preview(self):
        """Re-render the preview from the editor text"""
        if not self.preview.isVisibleTo(self):
            return
        self.preview.setHtml(markdown_to_html(self.editor.toPlainText()))

    def _handle_link_clicked(self, url):
        """Open clicked links (file:// share links included) with the OS handler"""
        logger.info(f"Opening link: {url.toString()}")
        if not QDesktopServices.openUrl(url):
            logger.warning(f"No handler could open {url.toString()}")

    def set_preview_visible(self, visible):
        self.preview.setVisible(bool(visible))
        if visible:
            self._refresh_preview()

    def is_preview_visible(self):
        return self.preview.isVisibleTo(self)

    def text(self):
        return self.editor.toPlainText()

    def set_text(self, text):
        self.editor.setPlainText(text)
        self.editor.document().setModified(False)

    def is_modified(self):
        return self.editor.document().isModified()

    def new_note(self):
        """Clear the editor for a new unsaved note"""
        self.file_path = None
        self.set_text("")

    def load_file(self, file_path):
        """
        Load a markdown file into the editor

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(file_path)
        text = path.read_text(encoding="utf-8")
        self.set_text(text)
        self.file_path = path
        logger.info(f"Loaded note {path}")

    def save_file(self, file_path=None):
        """
        Write the editor text to disk

        Args:
            file_path: Target path, defaults to the file that was loaded

        Raises:
            ValueError: If there is no path to save to
            OSError: If the file cannot be written
        """
        path = Path(file_path) if file_path else self.file_path
        if path is None:
            raise ValueError("No file path to save the note to")
        path.write_text(self.text(), encoding="utf-8")
        self.file_path = path
        self.editor.document().setModified(False)
        logger.info(f"Saved note {path}")
        return path

    def save_state(self):
        """Save splitter sizes and preview visibility"""
        return {
            "splitter_sizes": self.splitter.sizes(),
            "preview_visible": self.is_preview_visible(),
        }

    def restore_state(self, state):
        """Restore splitter sizes and preview visibility"""
        if not state:
            return
        sizes = state.get("splitter_sizes")
        if sizes:
            self.splitter.setSizes([int(size) for size in sizes])
        if "preview_visible" in state:
            self.set_preview_visible(state["preview_visible"])
