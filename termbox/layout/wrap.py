# layout/wrap.py

from dataclasses import dataclass
from typing import List, Tuple

from rich.cells import cell_len

from ..errors import LayoutContractViolation

# "│ > " on the left of every content row, "│" on the right
LEFT_FRAME_CHARS = 4
RIGHT_FRAME_CHARS = 1
FRAME_CHARS = LEFT_FRAME_CHARS + RIGHT_FRAME_CHARS


@dataclass(frozen=True)
class WrappedLine:
    """
    One rendered row of the buffer.

    `start` and `end` are offsets into the source buffer. `wrapped` is True
    when the row was cut by the wrap width rather than by a newline or the
    end of the buffer. A soft break consumes the whitespace at `end`; a
    hard break consumes nothing, so the next row starts at `end`.
    """
    text: str
    start: int
    end: int
    wrapped: bool = False


def content_width(columns: int) -> int:
    """Return the wrap width left inside a frame `columns` cells wide."""
    return columns - FRAME_CHARS


def _check_width(width: int) -> None:
    if width <= 0:
        raise LayoutContractViolation(f"Wrap width must be positive, got {width}")


def _fit(buffer: str, start: int, stop: int, width: int) -> int:
    """Return the end of the longest run of buffer[start:stop] that fits in `width` cells."""
    used = 0
    index = start
    while index < stop:
        size = cell_len(buffer[index])
        if used + size > width:
            break
        used += size
        index += 1
    return index


def _wrap_segment(buffer: str, start: int, stop: int, width: int) -> List[WrappedLine]:
    lines = []
    pos = start
    while True:
        if cell_len(buffer[pos:stop]) <= width:
            lines.append(WrappedLine(buffer[pos:stop], pos, stop))
            return lines

        # At least one character per row, even when it is wider than the row
        cut = max(_fit(buffer, pos, stop, width), pos + 1)

        # The character right after the fitting run may itself be the break
        brk = next(
            (i for i in range(min(cut, stop - 1), pos, -1) if buffer[i].isspace()),
            None
        )
        if brk is not None:
            lines.append(WrappedLine(buffer[pos:brk], pos, brk, wrapped=True))
            pos = brk + 1
        else:
            lines.append(WrappedLine(buffer[pos:cut], pos, cut, wrapped=True))
            pos = cut


def wrap_lines(buffer: str, width: int) -> List[WrappedLine]:
    """
    Split the buffer into display rows no wider than `width` cells.

    Newlines always start a new row. Inside a logical line the break goes at
    the last whitespace at or before column `width`, falling back to a hard
    break when there is none. An empty buffer yields a single empty row.

    Raises:
        LayoutContractViolation: If width is not positive.
    """
    _check_width(width)
    lines: List[WrappedLine] = []
    start = 0
    for segment in buffer.split('\n'):
        stop = start + len(segment)
        lines.extend(_wrap_segment(buffer, start, stop, width))
        start = stop + 1
    return lines


def required_lines(buffer: str, width: int) -> int:
    """Return the number of wrapped rows the buffer occupies."""
    return len(wrap_lines(buffer, width))


def render_lines(buffer: str, width: int) -> List[str]:
    """Return the literal text of every wrapped row."""
    return [line.text for line in wrap_lines(buffer, width)]


def cursor_position(buffer: str, cursor_offset: int, width: int) -> Tuple[int, int]:
    """
    Locate the cursor among the wrapped rows.

    Args:
        buffer: Text being edited
        cursor_offset: Offset into the buffer, 0 <= offset <= len(buffer)
        width: Wrap width in cells

    Returns:
        (row, col) where row indexes the wrapped rows and col is measured in
        cells from the start of that row. A cursor sitting on a wrap boundary
        is reported at column 0 of the following row. At the end of a
        logical line that exactly fills the row, col equals `width`; the
        renderer places that cursor on the right border cell, still inside
        the frame.
    """
    if not 0 <= cursor_offset <= len(buffer):
        raise LayoutContractViolation(
            f"Cursor offset {cursor_offset} outside buffer of length {len(buffer)}"
        )
    lines = wrap_lines(buffer, width)
    for row, line in enumerate(lines):
        if cursor_offset > line.end:
            continue
        if cursor_offset == line.end and line.wrapped:
            return row + 1, 0
        return row, cell_len(buffer[line.start:cursor_offset])
    # The final row always ends at len(buffer) and is never wrapped
    raise AssertionError("unreachable: cursor beyond final row")
