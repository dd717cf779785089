# display/terminal.py

import sys
import shutil
from dataclasses import dataclass
from typing import List, Optional, TextIO

from ..errors import TerminalWriteFailure
from .ops import TerminalOp, encode


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """
    Write sink for terminal operations.

    Operations are queued and sent in one write per flush, so a frame never
    reaches the terminal half-drawn.
    """

    def __init__(self, stream: Optional[TextIO] = None, logger=None):
        self._stream = stream if stream is not None else sys.stdout
        self._pending: List[str] = []
        self.logger = logger

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.get_size().columns

    @property
    def height(self) -> int:
        """Return terminal height."""
        return self.get_size().lines

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    @property
    def pending(self) -> str:
        """Output queued since the last flush."""
        return "".join(self._pending)

    def queue(self, *ops: TerminalOp) -> None:
        for op in ops:
            self._pending.append(encode(op))

    def queue_all(self, ops) -> None:
        self.queue(*ops)

    def discard(self) -> None:
        """Drop queued output from an abandoned redraw."""
        self._pending.clear()

    def flush(self) -> None:
        """
        Send everything queued to the stream.

        Raises:
            TerminalWriteFailure: If the stream rejects the write. Queued
                output is dropped either way.
        """
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()
        try:
            self._stream.write(data)
            self._stream.flush()
        except OSError as e:
            if self.logger:
                self.logger.error(f"Terminal write failed: {e}")
            raise TerminalWriteFailure(f"Terminal write failed: {e}") from e
