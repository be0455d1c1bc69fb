# nas_notes/ui/dialogs/color_dialog.py - Text color selection dialog
"""
Dialog for choosing the color applied to selected text

Offers a free color picker and a dropdown of named HTML colors; whichever was
used last wins.
"""

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QComboBox, QColorDialog
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

from nas_notes.core.text_color import DEFAULT_COLOR, NAMED_COLORS, color_label


class ColorDialog(QDialog):
    """Dialog returning a CSS color through the on_submit callback"""

    def __init__(self, parent=None, on_submit=None, color=DEFAULT_COLOR):
        super().__init__(parent)
        self.on_submit = on_submit
        self.color = color or DEFAULT_COLOR

        self.setWindowTitle("Select Color")
        self._setup_ui()

    def _setup_ui(self):
        """Set up the dialog UI"""
        layout = QVBoxLayout(self)

        # Color picker row
        picker_layout = QHBoxLayout()
        picker_layout.addWidget(QLabel("Color:"))
        self.swatch_button = QPushButton()
        self.swatch_button.setAutoDefault(False)
        self.swatch_button.setFixedSize(60, 30)
        self.swatch_button.setCursor(Qt.PointingHandCursor)
        self.swatch_button.clicked.connect(self._pick_color)
        picker_layout.addWidget(self.swatch_button)
        picker_layout.addStretch()
        layout.addLayout(picker_layout)

        # Named color dropdown
        dropdown_layout = QHBoxLayout()
        dropdown_layout.addWidget(QLabel("Or select a named color:"))
        self.color_combo = QComboBox()
        for name in NAMED_COLORS:
            self.color_combo.addItem(color_label(name), name)
        self.color_combo.setPlaceholderText("Choose...")
        self.color_combo.setCurrentIndex(-1)
        self.color_combo.currentIndexChanged.connect(self._named_color_selected)
        dropdown_layout.addWidget(self.color_combo)
        layout.addLayout(dropdown_layout)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.submit_button = QPushButton("Submit")
        self.submit_button.setAutoDefault(False)
        self.submit_button.clicked.connect(self.submit)
        button_layout.addWidget(self.submit_button)
        layout.addLayout(button_layout)

        self._update_swatch()

    def _update_swatch(self):
        """Show the current color on the picker button"""
        self.swatch_button.setStyleSheet(
            f"background-color: {self.color}; border: 1px solid #888888;"
        )
        self.swatch_button.setToolTip(self.color)

    def _pick_color(self):
        """Open the color picker seeded with the current color"""
        chosen = QColorDialog.getColor(QColor(self.color), self, "Select Color")
        if chosen.isValid():
            self.set_color(chosen.name())

    def _named_color_selected(self, index):
        if index < 0:
            return
        self.set_color(self.color_combo.itemData(index))

    def set_color(self, color):
        """Set the color to submit and sync the swatch"""
        self.color = color
        self._update_swatch()

    def keyPressEvent(self, event):
        """Enter submits the dialog"""
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            event.accept()
            self.submit()
        else:
            super().keyPressEvent(event)

    def submit(self):
        """Close the dialog and hand the color to the callback"""
        self.accept()
        if self.on_submit:
            self.on_submit(self.color)
