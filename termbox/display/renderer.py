# display/renderer.py

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from rich.cells import set_cell_size

from ..layout import FRAME_CHARS, LEFT_FRAME_CHARS
from .definitions import FrameDefinitions
from .geometry import FrameGeometry
from .ops import MoveTo, TerminalOp, WriteText

@dataclass(frozen=True)
class CursorScreenPosition:
    """Cursor placement relative to the frame's top-left corner."""
    row: int
    col: int


class FrameRenderer:
    """
    Turns a frame snapshot into terminal write instructions.

    Rendering is a pure function of its arguments: identical inputs give
    identical instruction lists, and nothing outside the frame rows is
    ever targeted.
    """
    def __init__(self, definitions: Optional[FrameDefinitions] = None):
        self.definitions = definitions or FrameDefinitions()

    @property
    def glyphs(self):
        return self.definitions.glyphs

    def viewport(self, geometry: FrameGeometry, line_count: int, cursor_row: int) -> int:
        """
        Return the index of the first wrapped row shown in the frame.

        Only differs from 0 when the frame was clamped to the terminal height.
        """
        visible = geometry.text_rows
        if line_count <= visible:
            return 0
        return min(max(0, cursor_row - visible + 1), line_count - visible)

    def cursor_on_screen(
        self,
        geometry: FrameGeometry,
        line_count: int,
        cursor: Tuple[int, int]
    ) -> CursorScreenPosition:
        """
        Translate a layout (row, col) into a position inside the frame.

        Columns run from the first content cell up to the right border cell,
        where a cursor ending a full-width line sits.
        """
        row, col = cursor
        first = self.viewport(geometry, line_count, row)
        return CursorScreenPosition(row=1 + row - first, col=LEFT_FRAME_CHARS + col)

    def frame_rows(
        self,
        geometry: FrameGeometry,
        lines: Sequence[str],
        cursor_row: int = 0
    ) -> List[str]:
        """
        Build the literal text of every frame row, top border first.

        Every row is exactly geometry.width cells wide.
        """
        g = self.glyphs
        wrap = geometry.width - FRAME_CHARS
        first = self.viewport(geometry, len(lines), cursor_row)
        visible = list(lines[first:first + geometry.text_rows])

        rows = [g.top(geometry.width)]
        for i in range(geometry.text_rows):
            index = first + i
            text = visible[i] if i < len(visible) else ""
            prefix = self.definitions.prompt if index == 0 else self.definitions.continuation
            rows.append(f"{g.vertical} {prefix}{set_cell_size(text, wrap)}{g.vertical}")
        rows.append(g.bottom(geometry.width))
        return rows

    def render(
        self,
        geometry: FrameGeometry,
        lines: Sequence[str],
        cursor: Tuple[int, int]
    ) -> List[TerminalOp]:
        """
        Produce the instructions that redraw the whole frame.

        Args:
            geometry: Current frame placement
            lines: Wrapped rows from the layout engine
            cursor: Layout (row, col) of the cursor

        Returns:
            Ordered list of MoveTo/WriteText operations, ending with the
            cursor placement.
        """
        ops: List[TerminalOp] = []
        for offset, text in enumerate(self.frame_rows(geometry, lines, cursor[0])):
            ops.append(MoveTo(geometry.origin + offset, 0))
            ops.append(WriteText(text))

        position = self.cursor_on_screen(geometry, len(lines), cursor)
        ops.append(MoveTo(geometry.origin + position.row, position.col))
        return ops

    def clear(self, geometry: FrameGeometry, extra_above: int = 0) -> List[TerminalOp]:
        """Blank the frame rows, plus `extra_above` rows directly above it."""
        blank = " " * geometry.width
        first = max(0, geometry.origin - extra_above)
        ops: List[TerminalOp] = []
        for row in range(first, geometry.rows):
            ops.append(MoveTo(row, 0))
            ops.append(WriteText(blank))
        return ops
