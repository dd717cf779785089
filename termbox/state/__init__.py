# state/__init__.py

from .events import (
    AltEnter,
    Backspace,
    Char,
    CtrlC,
    CtrlD,
    CtrlJ,
    Enter,
    Esc,
    Event,
    KeyEvent,
    Resize,
    Shutdown,
    Tick,
)
from .input import InputState, KeyAction, Mode, Outcome
from .log import SubmittedLine, SubmittedLog

__all__ = [
    'InputState',
    'KeyAction',
    'Mode',
    'Outcome',
    'SubmittedLine',
    'SubmittedLog',
    'Event',
    'KeyEvent',
    'Char',
    'Backspace',
    'Enter',
    'AltEnter',
    'CtrlJ',
    'Esc',
    'CtrlC',
    'CtrlD',
    'Resize',
    'Tick',
    'Shutdown',
]
