# test_keys.py

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from termbox.keys import KeyDecoder
from termbox.state import (
    AltEnter,
    Backspace,
    Char,
    CtrlC,
    CtrlD,
    CtrlJ,
    Enter,
    Esc,
)


class TestKeyDecoder:
    """Test suite for mapping key presses to input events."""

    def setup_method(self):
        self.decoder = KeyDecoder()

    def test_printable_characters(self):
        presses = [KeyPress("h", "h"), KeyPress("🌍", "🌍")]
        assert self.decoder.decode(presses) == [Char("h"), Char("🌍")]

    def test_control_keys(self):
        presses = [
            KeyPress(Keys.ControlM, "\r"),
            KeyPress(Keys.ControlJ, "\n"),
            KeyPress(Keys.ControlH, "\x7f"),
            KeyPress(Keys.ControlC, "\x03"),
            KeyPress(Keys.ControlD, "\x04"),
        ]
        assert self.decoder.decode(presses) == [Enter(), CtrlJ(), Backspace(), CtrlC(), CtrlD()]

    def test_escape_then_enter_is_alt_enter(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress(Keys.ControlM, "\r")]
        assert self.decoder.decode(presses) == [AltEnter()]

    def test_lone_escape(self):
        assert self.decoder.decode([KeyPress(Keys.Escape, "\x1b")]) == [Esc()]

    def test_escape_before_other_key(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress("a", "a")]
        assert self.decoder.decode(presses) == [Esc(), Char("a")]

    def test_unmapped_keys_dropped(self):
        presses = [KeyPress(Keys.Up, "\x1b[A"), KeyPress(Keys.F1, "\x1bOP")]
        assert self.decoder.decode(presses) == []

    def test_paste_types_newlines(self):
        presses = [KeyPress(Keys.BracketedPaste, "a\r\nb")]
        assert self.decoder.decode(presses) == [Char("a"), CtrlJ(), Char("b")]
