# display/scroll.py

from typing import Callable, Dict, Hashable, List, Optional, Sequence, Tuple

from rich.text import Text

from ..errors import GeometryDesync, TerminalWriteFailure
from .geometry import FrameGeometry, ScrollRegion
from .ops import (
    MoveTo,
    ResetScrollRegion,
    ScrollRegionBy,
    SetScrollRegion,
    TerminalOp,
    WriteText,
)
from .renderer import FrameRenderer
from .terminal import DisplayTerminal

Relayout = Callable[[int, int], FrameGeometry]


class ScrollRegionCoordinator:
    """
    Keeps the terminal's scroll region in step with the frame geometry.

    The coordinator is the only component that moves content above the
    frame: growing the frame pushes that content up, shrinking it scrolls
    the content back down, and transcript writes scroll it by the rows they
    print. Rows of content it placed itself (anchors) are tracked through
    all of these so they can be updated in place later.
    """

    def __init__(self, terminal: DisplayTerminal, renderer: FrameRenderer, logger=None):
        self.terminal = terminal
        self.renderer = renderer
        self.logger = logger
        self.geometry: Optional[FrameGeometry] = None
        self.applied: Optional[ScrollRegion] = None
        self._anchors: Dict[Hashable, int] = {}
        self._closed = False

    @property
    def region(self) -> Optional[ScrollRegion]:
        return self.geometry.scroll_region if self.geometry else None

    def _debug(self, msg: str) -> None:
        if self.logger:
            self.logger.debug(msg)

    def _shift_anchors(self, delta: int) -> None:
        """Move every anchor by `delta` rows (negative is up)."""
        for key in self._anchors:
            self._anchors[key] += delta

    def _write_boundary(self, ops: List[TerminalOp], geometry: FrameGeometry) -> None:
        """Send push/boundary ops as one write; the frame is unusable if it fails."""
        self.geometry = geometry
        self.terminal.queue_all(ops)
        try:
            self.terminal.flush()
        except TerminalWriteFailure:
            self.applied = None
            raise
        self.applied = geometry.scroll_region

    def plan_geometry(
        self,
        previous: Optional[FrameGeometry],
        next: FrameGeometry,
        relayout: Optional[Relayout] = None
    ) -> Tuple[List[TerminalOp], FrameGeometry]:
        """
        Work out the operations that move the terminal from `previous` to `next`.

        Returns:
            (ops, geometry) where geometry is the one that will be in force
            once the ops are written. It differs from `next` only when a
            width change made `relayout` produce a different frame.
        """
        if previous is None:
            return [SetScrollRegion(0, next.origin - 1)], next

        if next.height != previous.height:
            delta = next.height - previous.height
            region = SetScrollRegion(0, next.origin - 1)
            if delta > 0:
                # Push inside the old region, then shrink the region. The old
                # frame top is measured on the current screen, which a resize
                # may have made shorter.
                push_row = max(0, next.rows - previous.height - 1)
                return [ScrollRegionBy(delta, push_row), region], next
            # Enlarge the region first so the reclaim scrolls into the freed rows
            return [region, ScrollRegionBy(delta, next.origin - 1)], next

        if next.width != previous.width and relayout is not None:
            recomputed = relayout(next.width, next.rows)
            if recomputed != next:
                return self.plan_geometry(previous, recomputed, relayout)

        if next.origin != previous.origin:
            return [SetScrollRegion(0, next.origin - 1)], next
        return [], next

    def apply_geometry(
        self,
        previous: Optional[FrameGeometry],
        next: FrameGeometry,
        relayout: Optional[Relayout] = None,
        force: bool = False
    ) -> bool:
        """
        Bring the scroll region in line with `next`.

        Push/reclaim and the boundary sequence are written together before
        the caller redraws the frame. With `force` (after a terminal resize,
        which may drop the margins) the boundary is written even when the
        geometry alone would not need it, but never twice.

        Returns:
            True when anything was written, meaning the frame must be fully
            redrawn.

        Raises:
            TerminalWriteFailure: If the boundary could not be written. The
                applied region is then unknown and the next verify() fails.
        """
        ops, geometry = self.plan_geometry(previous, next, relayout)
        if force and not any(isinstance(op, SetScrollRegion) for op in ops):
            ops.append(SetScrollRegion(0, geometry.origin - 1))
        if not ops:
            self.geometry = geometry
            return False

        for op in ops:
            if isinstance(op, ScrollRegionBy):
                self._shift_anchors(-op.delta)
        self._debug(f"Geometry {previous} -> {geometry}: {ops}")
        self._write_boundary(ops, geometry)
        return True

    def verify(self) -> None:
        """
        Raises:
            GeometryDesync: If the region last written is not the one the
                current geometry requires.
        """
        if self.geometry is None:
            return
        if self.applied != self.geometry.scroll_region:
            raise GeometryDesync(self.geometry.scroll_region, self.applied)

    def resync(self, geometry: FrameGeometry) -> None:
        """Reapply the region for `geometry` without moving any content."""
        self._debug(f"Resynchronising scroll region to {geometry.scroll_region}")
        self._write_boundary([SetScrollRegion(0, geometry.origin - 1)], geometry)

    def startup(self, geometry: FrameGeometry) -> None:
        """
        Reserve the bottom rows for the frame.

        The whole screen is pushed up by the frame height first, so nothing
        already on screen is drawn over.
        """
        self._closed = False
        self._anchors.clear()
        ops = [
            ResetScrollRegion(),
            ScrollRegionBy(geometry.height, geometry.rows - 1),
            SetScrollRegion(0, geometry.origin - 1),
        ]
        self._debug(f"Startup with {geometry}")
        self._write_boundary(ops, geometry)

    def shutdown(self) -> None:
        """
        Clear the frame and restore the terminal's full scroll region.

        Safe to call more than once; only the first call writes anything.
        """
        if self._closed:
            return
        self._closed = True
        self._anchors.clear()
        ops: List[TerminalOp] = []
        if self.geometry is not None:
            ops.extend(self.renderer.clear(self.geometry, extra_above=1))
        ops.append(ResetScrollRegion())
        if self.geometry is not None:
            ops.append(MoveTo(self.geometry.origin, 0))
        self.geometry = None
        self.applied = None
        self.terminal.queue_all(ops)
        self.terminal.flush()

    def redraw(self, lines: Sequence[str], cursor: Tuple[int, int]) -> None:
        """Render the whole frame at the current geometry and flush it."""
        self.terminal.queue_all(self.renderer.render(self.geometry, lines, cursor))
        self.terminal.flush()

    def _rows_used(self, line: str) -> int:
        width = max(1, self.geometry.width)
        cells = Text.from_ansi(line).cell_len
        return max(1, -(-cells // width))

    def emit_above(self, lines: Sequence[str]) -> int:
        """
        Print lines into the scroll region, as a shell would print output.

        Each line is fed in at the bottom of the region so earlier content
        scrolls up. Returns the number of rows scrolled.
        """
        if not lines:
            return 0
        bottom = self.geometry.origin - 1
        scrolled = sum(self._rows_used(line) for line in lines)
        self.terminal.queue(
            MoveTo(bottom, 0),
            WriteText("\r\n" + "\r\n".join(lines))
        )
        self._shift_anchors(-scrolled)
        return scrolled

    def place_block(self, key: Hashable, lines: Sequence[str]) -> int:
        """
        Make room for `lines` directly above the frame and draw them.

        The block's top row is remembered under `key` and follows later
        scrolling. Returns that row.
        """
        bottom = self.geometry.origin - 1
        height = len(lines)
        self.terminal.queue(ScrollRegionBy(height, bottom))
        self._shift_anchors(-height)
        top = bottom - height + 1
        for offset, line in enumerate(lines):
            self.terminal.queue(MoveTo(top + offset, 0), WriteText(line))
        self._anchors[key] = top
        return top

    def anchor(self, key: Hashable) -> Optional[int]:
        return self._anchors.get(key)

    def update_block_line(self, key: Hashable, offset: int, text: str) -> bool:
        """
        Rewrite one line of a placed block, if it is still on screen.

        Returns False when the line has scrolled off the top (or the block
        is unknown); nothing is written then.
        """
        top = self._anchors.get(key)
        if top is None:
            return False
        row = top + offset
        if row < 0 or row > self.geometry.origin - 1:
            return False
        self.terminal.queue(MoveTo(row, 0), WriteText(text))
        return True

    def drop_block(self, key: Hashable) -> None:
        self._anchors.pop(key, None)
