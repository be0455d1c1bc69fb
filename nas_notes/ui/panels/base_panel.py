# nas_notes/ui/panels/base_panel.py - Base panel class
"""
Base panel class for NAS Link Notes panels

A panel builds its widgets in _setup_ui and describes its layout with
save_state/restore_state. The base class keeps that state in the user
settings under "<PANEL_ID>_state" so it survives restarts.
"""

from PySide6.QtWidgets import QWidget


class BasePanel(QWidget):
    """
    Base class for panels whose layout is remembered between sessions
    """

    PANEL_ID = "panel"

    def __init__(self, app_state, parent=None):
        """Initialize the base panel"""
        super().__init__(parent)
        self.app_state = app_state
        self._setup_ui()

    @property
    def state_key(self):
        """Settings key the panel state is stored under"""
        return f"{self.PANEL_ID}_state"

    def _setup_ui(self):
        raise NotImplementedError

    def save_state(self):
        """
        Returns:
            A dictionary of panel state data
        """
        raise NotImplementedError

    def restore_state(self, state):
        raise NotImplementedError

    def store_state(self):
        """Persist the current panel state in the user settings"""
        self.app_state.set_setting(self.state_key, self.save_state())

    def restore_stored_state(self):
        """Apply the state saved by store_state, if there is any"""
        self.restore_state(self.app_state.get_setting(self.state_key) or {})
