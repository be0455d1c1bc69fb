# nas_notes/core/commands.py - Editor command registry
"""
Registry of named editor commands

Commands are plain callables that receive the active editor. The editor only
needs to offer get_cursor(), replace_range(text, position), get_selection()
and replace_selection(text); the Qt implementation lives in the note editor
panel.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class EditorCommand:
    """A command that can be triggered from the menu or a shortcut"""

    command_id: str
    name: str
    callback: Callable[[Any], None]
    shortcut: Optional[str] = None


class CommandRegistry:
    """Keeps registered commands in the order they were added"""

    def __init__(self):
        self._commands: Dict[str, EditorCommand] = {}

    def register(self, command: EditorCommand) -> EditorCommand:
        """Add a command, refusing duplicate ids"""
        if command.command_id in self._commands:
            raise ValueError(f"Command '{command.command_id}' is already registered")
        self._commands[command.command_id] = command
        logger.debug("Registered command %s (%s)", command.command_id, command.name)
        return command

    def get(self, command_id: str) -> Optional[EditorCommand]:
        return self._commands.get(command_id)

    def commands(self) -> List[EditorCommand]:
        return list(self._commands.values())

    def run(self, command_id: str, editor) -> None:
        """
        Run a command against an editor

        Raises:
            KeyError: If no command with that id is registered
        """
        command = self._commands.get(command_id)
        if command is None:
            raise KeyError(command_id)
        logger.info("Running command %s", command_id)
        command.callback(editor)
