# errors.py


class TermboxError(Exception):
    """Base class for every error raised by termbox."""


class LayoutContractViolation(TermboxError, ValueError):
    """A caller passed a width or terminal size the layout cannot honour."""


class TerminalWriteFailure(TermboxError, OSError):
    """
    A write-sink operation failed.

    The current redraw is abandoned; the next processed event triggers a
    fresh full redraw attempt.
    """


class GeometryDesync(TermboxError):
    """The applied scroll region no longer matches the computed frame geometry."""

    def __init__(self, expected, applied):
        self.expected = expected
        self.applied = applied
        super().__init__(f"Scroll region desync: expected {expected}, applied {applied}")


__all__ = [
    'TermboxError',
    'LayoutContractViolation',
    'TerminalWriteFailure',
    'GeometryDesync',
]
