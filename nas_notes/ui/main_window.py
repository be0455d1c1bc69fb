# nas_notes/ui/main_window.py - Main application window
"""
Main window for the NAS Link Notes application

Hosts the note editor and exposes the registered editor commands through the
Commands menu.
"""

import logging
from pathlib import Path

from PySide6.QtWidgets import QMainWindow, QFileDialog, QMessageBox
from PySide6.QtGui import QAction, QKeySequence

from nas_notes.core.commands import CommandRegistry
from nas_notes.ui.nas_links_extension import NasLinksExtension
from nas_notes.ui.panels.note_editor_panel import NoteEditorPanel
from nas_notes.ui.theme_manager import FONT_SIZES, apply_theme, set_font_size

logger = logging.getLogger(__name__)

NOTE_FILE_FILTER = "Markdown Notes (*.md *.markdown);;Text Files (*.txt);;All Files (*)"


class MainWindow(QMainWindow):
    """
    Main application window with the note editor and command menu
    """

    def __init__(self, app_state):
        """Initialize the main window and UI components"""
        super().__init__()
        self.app_state = app_state
        self.command_actions = {}
        self.font_size_actions = {}

        # Register editor commands
        self.command_registry = CommandRegistry()
        self.extension = NasLinksExtension(app_state, self)
        self.extension.load(self.command_registry)

        self.current_theme = app_state.get_setting("theme", "dark")
        apply_theme(self, self.current_theme, app_state.get_setting("font_size"))

        self._setup_ui()
        self._create_menus()
        self._create_status_bar()

        self._open_last_file()
        self._update_title()

    def _setup_ui(self):
        """Configure the main window UI properties"""
        self.setMinimumSize(900, 600)

        self.editor_panel = NoteEditorPanel(self.app_state, self)
        self.editor_panel.restore_stored_state()
        self.editor_panel.modified_changed.connect(lambda _modified: self._update_title())
        self.setCentralWidget(self.editor_panel)

    def _create_menus(self):
        """Create the main application menus"""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        new_action = QAction("New", self)
        new_action.setShortcut(QKeySequence.New)
        new_action.triggered.connect(self._new_note)
        file_menu.addAction(new_action)

        open_action = QAction("Open...", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self._open_note)
        file_menu.addAction(open_action)

        save_action = QAction("Save", self)
        save_action.setShortcut(QKeySequence.Save)
        save_action.triggered.connect(self._save_note)
        file_menu.addAction(save_action)

        save_as_action = QAction("Save As...", self)
        save_as_action.setShortcut(QKeySequence.SaveAs)
        save_as_action.triggered.connect(self._save_note_as)
        file_menu.addAction(save_as_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Commands menu, one entry per registered editor command
        commands_menu = menu_bar.addMenu("&Commands")
        for command in self.command_registry.commands():
            action = QAction(command.name, self)
            if command.shortcut:
                action.setShortcut(QKeySequence(command.shortcut))
            action.triggered.connect(
                lambda checked=False, command_id=command.command_id: self.run_command(command_id)
            )
            commands_menu.addAction(action)
            self.command_actions[command.command_id] = action

        # View menu
        view_menu = menu_bar.addMenu("&View")

        self.preview_action = QAction("Show Preview", self)
        self.preview_action.setCheckable(True)
        self.preview_action.setChecked(self.editor_panel.is_preview_visible())
        self.preview_action.toggled.connect(self._toggle_preview)
        view_menu.addAction(self.preview_action)

        theme_menu = view_menu.addMenu("Theme")

        dark_theme_action = QAction("Dark Theme", self)
        dark_theme_action.triggered.connect(lambda: self._change_theme("dark"))
        theme_menu.addAction(dark_theme_action)

        light_theme_action = QAction("Light Theme", self)
        light_theme_action.triggered.connect(lambda: self._change_theme("light"))
        theme_menu.addAction(light_theme_action)

        font_menu = view_menu.addMenu("Font Size")
        for size_name in FONT_SIZES:
            size_action = QAction(size_name.capitalize(), self)
            size_action.triggered.connect(
                lambda checked=False, name=size_name: self._change_font_size(name)
            )
            font_menu.addAction(size_action)
            self.font_size_actions[size_name] = size_action

        # Help menu
        help_menu = menu_bar.addMenu("&Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _create_status_bar(self):
        self.statusBar().showMessage("Ready")

    def run_command(self, command_id):
        """Run an editor command against the note editor"""
        try:
            self.command_registry.run(command_id, self.editor_panel.bridge)
        except (KeyError, ValueError) as e:
            logger.error(f"Command {command_id} failed: {e}", exc_info=True)
            QMessageBox.warning(self, "Command Failed", f"Could not run {command_id}: {e}")
            return
        self.statusBar().showMessage(f"Ran {self.command_registry.get(command_id).name}", 3000)

    def _update_title(self):
        """Show the note name and an asterisk for unsaved changes"""
        path = self.editor_panel.file_path
        name = path.name if path else "Untitled"
        marker = "*" if self.editor_panel.is_modified() else ""
        self.setWindowTitle(f"{marker}{name} - NAS Link Notes")

    def _confirm_discard(self):
        """Ask before throwing away unsaved changes

        Returns:
            bool: True if it is safe to continue
        """
        if not self.editor_panel.is_modified():
            return True
        reply = QMessageBox.question(
            self, "Unsaved Changes",
            "The current note has unsaved changes. Save them first?",
            QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel,
            QMessageBox.Save
        )
        if reply == QMessageBox.Save:
            return self._save_note()
        return reply == QMessageBox.Discard

    def _new_note(self):
        if not self._confirm_discard():
            return
        self.editor_panel.new_note()
        self._update_title()
        self.statusBar().showMessage("New note", 3000)

    def _open_note(self):
        """Open a markdown note from disk"""
        if not self._confirm_discard():
            return
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Note", self._dialog_dir(), NOTE_FILE_FILTER
        )
        if file_path:
            self.open_file(file_path)

    def open_file(self, file_path):
        """Load a file into the editor, reporting failures to the user"""
        try:
            self.editor_panel.load_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error opening {file_path}: {e}", exc_info=True)
            QMessageBox.warning(self, "Open Failed", f"Could not open {file_path}:\n{e}")
            return False

        self.app_state.set_setting("last_file", str(file_path))
        self._update_title()
        self.statusBar().showMessage(f"Opened {file_path}", 3000)
        return True

    def _save_note(self):
        """Save to the current file, asking for a name for new notes"""
        if self.editor_panel.file_path is None:
            return self._save_note_as()
        return self._write_note(None)

    def _save_note_as(self):
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Note", self._dialog_dir(), NOTE_FILE_FILTER
        )
        if not file_path:
            return False
        return self._write_note(file_path)

    def _write_note(self, file_path):
        try:
            path = self.editor_panel.save_file(file_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving note: {e}", exc_info=True)
            QMessageBox.warning(self, "Save Failed", f"Could not save the note:\n{e}")
            return False

        self.app_state.set_setting("last_file", str(path))
        self._update_title()
        self.statusBar().showMessage(f"Saved {path}", 3000)
        return True

    def _open_last_file(self):
        """Reopen the note that was open when the app last closed"""
        last_file = self.app_state.get_setting("last_file")
        if not last_file:
            return
        if not Path(last_file).exists():
            logger.info(f"Last note {last_file} no longer exists")
            return
        try:
            self.editor_panel.load_file(last_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not reopen last note {last_file}: {e}")

    def _dialog_dir(self):
        path = self.editor_panel.file_path
        return str(path.parent) if path else str(Path.home())

    def _toggle_preview(self, visible):
        self.editor_panel.set_preview_visible(visible)
        self.app_state.set_setting("show_preview", visible)

    def _change_theme(self, theme_name):
        """Change the application theme"""
        self.current_theme = theme_name
        apply_theme(self, theme_name, self.app_state.get_setting("font_size"))
        self.app_state.set_setting("theme", theme_name)
        self.statusBar().showMessage(f"Theme changed to {theme_name}", 3000)

    def _change_font_size(self, size_name):
        """Change the editor font size, keeping it across theme switches"""
        set_font_size(self, size_name)
        self.app_state.set_setting("font_size", size_name)
        self.statusBar().showMessage(f"Font size changed to {size_name}", 3000)

    def _show_about(self):
        QMessageBox.about(
            self, "About NAS Link Notes",
            "NAS Link Notes\n\n"
            "A markdown note editor that turns NAS file paths into "
            "Windows and macOS link tables and colors selected text."
        )

    def closeEvent(self, event):
        """Save state on close, giving the user a chance to keep edits"""
        if not self._confirm_discard():
            event.ignore()
            return
        self.editor_panel.store_state()
        super().closeEvent(event)
