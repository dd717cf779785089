# keys.py

from typing import Iterable, List

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from .state.events import (
    AltEnter,
    Backspace,
    Char,
    CtrlC,
    CtrlD,
    CtrlJ,
    Enter,
    Esc,
    KeyEvent,
)

# Seconds to wait before a lone Escape is taken as the Esc key itself
ESCAPE_TIMEOUT = 0.05

_SIMPLE_KEYS = {
    Keys.ControlC: CtrlC,
    Keys.ControlD: CtrlD,
    Keys.ControlJ: CtrlJ,
    Keys.ControlM: Enter,
    Keys.ControlH: Backspace,
}


class KeyDecoder:
    """
    Maps prompt_toolkit key presses onto the logical input events.

    Alt+Enter arrives as Escape followed by Enter (ControlM); any other
    Escape is the Esc key. Keys outside the event set are dropped.
    """

    def decode(self, key_presses: Iterable[KeyPress]) -> List[KeyEvent]:
        events: List[KeyEvent] = []
        pending_escape = False
        for press in key_presses:
            key = press.key
            if pending_escape:
                pending_escape = False
                if key == Keys.ControlM:
                    events.append(AltEnter())
                    continue
                events.append(Esc())

            if key == Keys.Escape:
                pending_escape = True
            elif key == Keys.BracketedPaste:
                events.extend(self._paste(press.data))
            elif key in _SIMPLE_KEYS:
                events.append(_SIMPLE_KEYS[key]())
            elif not isinstance(key, Keys) and len(key) == 1 and key.isprintable():
                events.append(Char(key))

        if pending_escape:
            events.append(Esc())
        return events

    def _paste(self, data: str) -> List[KeyEvent]:
        """Pasted text is typed, never submitted: line breaks become newlines."""
        events: List[KeyEvent] = []
        for ch in data.replace("\r\n", "\n").replace("\r", "\n"):
            if ch == "\n":
                events.append(CtrlJ())
            elif ch.isprintable():
                events.append(Char(ch))
        return events
