# display/ops.py

from dataclasses import dataclass
from typing import Iterable, Union

CSI = '\033['

@dataclass(frozen=True)
class MoveTo:
    """Place the cursor at a 0-based (row, col)."""
    row: int
    col: int

@dataclass(frozen=True)
class WriteText:
    text: str

@dataclass(frozen=True)
class SetScrollRegion:
    """DECSTBM with 0-based, inclusive rows."""
    top: int
    bottom: int

@dataclass(frozen=True)
class ScrollRegionBy:
    """
    Scroll the current region.

    A positive delta feeds lines at `bottom` (the region's last row), which
    pushes content up and into the scrollback. A negative delta scrolls the
    region down, leaving blank rows at its top.
    """
    delta: int
    bottom: int = 0

@dataclass(frozen=True)
class ResetScrollRegion:
    """Give the terminal its full screen back."""


TerminalOp = Union[MoveTo, WriteText, SetScrollRegion, ScrollRegionBy, ResetScrollRegion]


def encode(op: TerminalOp) -> str:
    """Return the escape sequence (or text) for a single operation."""
    if isinstance(op, MoveTo):
        return f"{CSI}{op.row + 1};{op.col + 1}H"
    if isinstance(op, WriteText):
        return op.text
    if isinstance(op, SetScrollRegion):
        return f"{CSI}{op.top + 1};{op.bottom + 1}r"
    if isinstance(op, ScrollRegionBy):
        if op.delta > 0:
            return f"{CSI}{op.bottom + 1};1H" + "\n" * op.delta
        if op.delta < 0:
            return f"{CSI}{-op.delta}T"
        return ""
    if isinstance(op, ResetScrollRegion):
        return f"{CSI}r"
    raise TypeError(f"Not a terminal operation: {op!r}")


def encode_all(ops: Iterable[TerminalOp]) -> str:
    return "".join(encode(op) for op in ops)
