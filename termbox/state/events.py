# state/events.py

from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Char:
    """A printable character typed at the cursor."""
    char: str

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"Char events carry exactly one character, got {self.char!r}")

@dataclass(frozen=True)
class Backspace:
    pass

@dataclass(frozen=True)
class Enter:
    pass

@dataclass(frozen=True)
class AltEnter:
    pass

@dataclass(frozen=True)
class CtrlJ:
    pass

@dataclass(frozen=True)
class Esc:
    pass

@dataclass(frozen=True)
class CtrlC:
    pass

@dataclass(frozen=True)
class CtrlD:
    pass

@dataclass(frozen=True)
class Resize:
    columns: int
    rows: int

@dataclass(frozen=True)
class Tick:
    """Animation tick requested by the command run with id `run_id`."""
    run_id: int

@dataclass(frozen=True)
class Shutdown:
    """External request to stop, e.g. SIGTERM."""


KeyEvent = Union[Char, Backspace, Enter, AltEnter, CtrlJ, Esc, CtrlC, CtrlD]
Event = Union[KeyEvent, Resize, Tick, Shutdown]

NEWLINE_EVENTS = (AltEnter, CtrlJ)
EXIT_EVENTS = (Esc, CtrlC, CtrlD, Shutdown)
