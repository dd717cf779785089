# scheduler.py

import asyncio
from typing import Callable, Dict, List, Optional

from .commands import CommandRun
from .display import Display, FrameGeometry, geometry_for
from .errors import GeometryDesync, TerminalWriteFailure
from .state import InputState, KeyAction, Mode, Shutdown, Tick
from .state.events import Event


class EventScheduler:
    """
    Single point of coordination for everything that touches the terminal.

    Key presses, resizes and animation ticks all arrive on one queue and are
    processed strictly one at a time. `process` is synchronous, so a state
    change, the scroll-region update it causes and the redraw that follows
    always complete together, with no other event interleaved.
    """

    def __init__(
        self,
        state: InputState,
        display: Display,
        logger=None,
        tick_interval: float = 0.5,
        max_write_failures: int = 3,
        on_error: Optional[Callable[[TerminalWriteFailure], bool]] = None,
    ):
        self.state = state
        self.display = display
        self.coordinator = display.coordinator
        self.terminal = display.terminal
        self.logger = logger
        self.tick_interval = tick_interval
        self.max_write_failures = max_write_failures
        self.on_error = on_error or self._default_on_error
        self.queue: asyncio.Queue = asyncio.Queue()
        self.preface_lines: List[str] = []
        self._tickers: Dict[int, asyncio.Task] = {}
        self._failures = 0

    def _log(self, level: str, msg: str) -> None:
        if self.logger:
            getattr(self.logger, level)(msg)

    def post(self, event: Event) -> None:
        """Queue an event from any source running on the event loop."""
        self.queue.put_nowait(event)

    def _geometry(self, columns: Optional[int] = None, rows: Optional[int] = None) -> FrameGeometry:
        return geometry_for(
            self.state.buffer,
            columns if columns is not None else self.state.cols,
            rows if rows is not None else self.state.rows
        )

    # ── processing step ──────────────────────────────────────────────

    def start(self) -> None:
        """Reserve the frame, print any preface, draw the empty prompt."""
        geometry = self._geometry()
        self.coordinator.startup(geometry)
        self.coordinator.emit_above(self.preface_lines)
        self.state.geometry_dirty = False
        self._redraw()

    def process(self, event: Event) -> bool:
        """
        Apply one event and bring the terminal up to date.

        Returns:
            False once the input state has moved to exiting.

        Raises:
            TerminalWriteFailure: If any write for this step failed. The
                rest of the step is abandoned.
        """
        outcome = self.state.handle(event)

        if outcome.replaced is not None:
            self._retire(outcome.replaced)

        if outcome.action is KeyAction.EXIT:
            if outcome.finished is not None:
                self._retire(outcome.finished)
            self._log('debug', f"Exiting on {event}")
            return False

        if outcome.submitted is not None:
            if outcome.started is not None:
                self._begin(outcome.started)
            else:
                self.coordinator.emit_above(outcome.submitted.split("\n"))

        if outcome.progressed is not None:
            self._draw_progress(outcome.progressed)

        if outcome.finished is not None:
            self._retire(outcome.finished)

        self._sync_geometry()
        self._redraw()
        return True

    def _sync_geometry(self) -> None:
        geometry = self._geometry()
        try:
            self.coordinator.verify()
            self.coordinator.apply_geometry(
                self.coordinator.geometry,
                geometry,
                relayout=self._geometry,
                force=self.state.geometry_dirty
            )
        except GeometryDesync as e:
            self._log('warning', str(e))
            self.coordinator.resync(geometry)
        self.state.geometry_dirty = False

    def _redraw(self) -> None:
        self.coordinator.redraw(self.state.lines(), self.state.cursor_position())

    # ── command runs ─────────────────────────────────────────────────

    def _begin(self, run: CommandRun) -> None:
        lines = run.render(self.state.cols, self.display.definitions)
        self.coordinator.place_block(run.id, lines)
        run.request_tick = lambda r: self.post(Tick(r.id))
        loop = asyncio.get_running_loop()
        self._tickers[run.id] = loop.create_task(run.animate(self.tick_interval))
        self._log('debug', f"Started {run.command.name} run {run.id}")

    def _draw_progress(self, run: CommandRun) -> None:
        line = run.render(self.state.cols, self.display.definitions)[run.command.progress_row]
        if not self.coordinator.update_block_line(run.id, run.command.progress_row, line):
            self._log('debug', f"Run {run.id} progress scrolled out of view")

    def _retire(self, run: CommandRun) -> None:
        task = self._tickers.pop(run.id, None)
        if task is not None and task is not asyncio.current_task():
            task.cancel()
        self.coordinator.drop_block(run.id)
        self._log('debug', f"Retired run {run.id} at {run.progress}/{run.total_steps}")

    # ── loop ─────────────────────────────────────────────────────────

    def _default_on_error(self, exc: TerminalWriteFailure) -> bool:
        """Keep going until too many consecutive writes have failed."""
        self._failures += 1
        self._log('error', f"Redraw abandoned ({self._failures}/{self.max_write_failures}): {exc}")
        return self._failures < self.max_write_failures

    async def run(self) -> None:
        """
        Process events until exit, then restore the terminal.

        Cleanup runs on every path out of the loop, including errors and
        cancellation; failures the error policy declines are re-raised
        after it.
        """
        try:
            self.start()
            while True:
                event = await self.queue.get()
                try:
                    if not self.process(event):
                        break
                    self._failures = 0
                except TerminalWriteFailure as e:
                    self.terminal.discard()
                    if not self.on_error(e):
                        raise
        except BaseException:
            self._stop_quietly()
            raise
        else:
            self.stop()

    def stop(self) -> None:
        """Cancel animations and hand the full screen back to the terminal."""
        for task in self._tickers.values():
            task.cancel()
        self._tickers.clear()
        if self.state.mode is not Mode.EXITING:
            self.state.handle(Shutdown())
        self.coordinator.shutdown()

    def _stop_quietly(self) -> None:
        self.terminal.discard()
        try:
            self.stop()
        except TerminalWriteFailure as e:
            self._log('error', f"Cleanup failed: {e}")
