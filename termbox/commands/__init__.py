# commands/__init__.py

from typing import Dict, Iterable, List, Optional

from .base import Command, CommandRun
from .tiktok import TIKTOK_ANIMATION_HEIGHT, TikTok

class CommandDispatcher:
    """
    Recognises submitted text as a command and starts runs for it.

    Unrecognised text is not an error; `run_for` simply returns None.
    """
    def __init__(self, commands: Optional[Iterable[Command]] = None):
        commands = list(commands) if commands is not None else [TikTok()]
        self._commands: Dict[str, Command] = {}
        for command in commands:
            if command.name in self._commands:
                raise ValueError(f"Duplicate command name '{command.name}'")
            self._commands[command.name] = command

    def from_input(self, text: str) -> Optional[Command]:
        return self._commands.get(text.strip())

    def run_for(self, text: str) -> Optional[CommandRun]:
        """Create a run if `text` names a command."""
        command = self.from_input(text)
        return CommandRun(command) if command else None

    def list_commands(self) -> List[str]:
        return sorted(self._commands)

__all__ = [
    'Command',
    'CommandRun',
    'CommandDispatcher',
    'TikTok',
    'TIKTOK_ANIMATION_HEIGHT',
]
