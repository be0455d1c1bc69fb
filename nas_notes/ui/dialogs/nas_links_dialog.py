# nas_notes/ui/dialogs/nas_links_dialog.py - NAS path input dialog
"""
Dialog for entering the path of a file on the NAS

Collects the path and whether the generated links should embed a preview,
then hands both to the caller-supplied callback.
"""

import logging

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLineEdit,
    QPushButton, QCheckBox, QFileDialog
)
from PySide6.QtCore import Qt

logger = logging.getLogger(__name__)


class NasLinksDialog(QDialog):
    """Dialog asking for a NAS file path and the preview flag"""

    def __init__(self, parent=None, on_submit=None, preview=False, start_dir=""):
        """Initialize the NAS links dialog

        Args:
            parent: Parent widget
            on_submit: Callable receiving (path, preview) once submitted
            preview: Initial state of the preview checkbox
            start_dir: Directory the browse dialog opens in
        """
        super().__init__(parent)
        self.on_submit = on_submit
        self.path = ""
        self.preview = bool(preview)
        self.start_dir = start_dir

        self.setWindowTitle("Input File Path")
        self.setMinimumWidth(450)

        self._setup_ui()

    def _setup_ui(self):
        """Set up the dialog UI"""
        layout = QVBoxLayout(self)
        form_layout = QFormLayout()

        # Path input with a browse button
        path_layout = QHBoxLayout()
        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText(r"Z:\Shared\... or /Volumes/Files/Shared/...")
        self.path_edit.textChanged.connect(self._path_changed)
        path_layout.addWidget(self.path_edit)

        self.browse_button = QPushButton("Browse...")
        self.browse_button.setAutoDefault(False)
        self.browse_button.clicked.connect(self._browse)
        path_layout.addWidget(self.browse_button)

        form_layout.addRow("Path:", path_layout)

        self.preview_checkbox = QCheckBox("Enable Preview")
        self.preview_checkbox.setChecked(self.preview)
        self.preview_checkbox.toggled.connect(self._preview_toggled)
        form_layout.addRow("", self.preview_checkbox)

        layout.addLayout(form_layout)

        # Submit button
        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.submit_button = QPushButton("Submit")
        self.submit_button.setAutoDefault(False)
        self.submit_button.clicked.connect(self.submit)
        button_layout.addWidget(self.submit_button)
        layout.addLayout(button_layout)

    def _path_changed(self, value):
        self.path = value

    def _preview_toggled(self, checked):
        self.preview = checked

    def _browse(self):
        """Pick the file with the native open dialog"""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Select File", self.start_dir, "All Files (*)"
        )
        if file_path:
            logger.debug(f"Selected file from browse dialog: {file_path}")
            self.path_edit.setText(file_path)

    def keyPressEvent(self, event):
        """Enter submits the dialog from any field"""
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            event.accept()
            self.submit()
        else:
            super().keyPressEvent(event)

    def submit(self):
        """Close the dialog and pass the entered values on"""
        self.accept()
        if self.on_submit:
            self.on_submit(self.path, self.preview)
