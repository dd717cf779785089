# display/geometry.py

from dataclasses import dataclass

from ..errors import LayoutContractViolation
from ..layout import FRAME_CHARS, content_width, required_lines

BORDER_ROWS = 2
MIN_HEIGHT = BORDER_ROWS + 1
# The frame always leaves at least one scrollable row above it
MIN_TERMINAL_ROWS = MIN_HEIGHT + 1


@dataclass(frozen=True)
class ScrollRegion:
    """Inclusive, 0-based row range the terminal is allowed to scroll."""
    top: int
    bottom: int


@dataclass(frozen=True)
class FrameGeometry:
    """
    Placement of the frame on a terminal `rows` tall.

    The frame occupies rows [origin, origin + height) and spans the full
    terminal width.
    """
    width: int
    height: int
    rows: int

    @property
    def origin(self) -> int:
        return self.rows - self.height

    @property
    def text_rows(self) -> int:
        return self.height - BORDER_ROWS

    @property
    def scroll_region(self) -> ScrollRegion:
        return ScrollRegion(0, self.origin - 1)

    def contains(self, row: int) -> bool:
        return self.origin <= row < self.origin + self.height


def compute_geometry(text_lines: int, columns: int, rows: int) -> FrameGeometry:
    """
    Size the frame for `text_lines` wrapped rows.

    The height is clamped so that one scrollable row always remains; the
    renderer then shows a window of the wrapped rows around the cursor.

    Raises:
        LayoutContractViolation: If the terminal is too small to hold a frame.
    """
    if columns <= FRAME_CHARS:
        raise LayoutContractViolation(f"Terminal too narrow for the frame: {columns} columns")
    if rows < MIN_TERMINAL_ROWS:
        raise LayoutContractViolation(f"Terminal too short for the frame: {rows} rows")
    height = max(text_lines + BORDER_ROWS, MIN_HEIGHT)
    return FrameGeometry(width=columns, height=min(height, rows - 1), rows=rows)


def geometry_for(buffer: str, columns: int, rows: int) -> FrameGeometry:
    """Compute the geometry needed to show `buffer` on a columns x rows terminal."""
    if columns <= FRAME_CHARS:
        raise LayoutContractViolation(f"Terminal too narrow for the frame: {columns} columns")
    return compute_geometry(required_lines(buffer, content_width(columns)), columns, rows)
