# state/input.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..commands import CommandDispatcher, CommandRun
from ..layout import content_width, cursor_position, render_lines, required_lines
from .events import (
    EXIT_EVENTS,
    NEWLINE_EVENTS,
    Backspace,
    Char,
    Enter,
    Event,
    Resize,
    Tick,
)
from .log import SubmittedLog


class Mode(Enum):
    EDITING = "editing"
    AWAITING_COMMAND_COMPLETION = "awaiting_command_completion"
    EXITING = "exiting"


class KeyAction(Enum):
    CONTINUE = "continue"
    SUBMIT = "submit"
    EXIT = "exit"


@dataclass
class Outcome:
    """
    What a single event did to the input state.

    `started` is a run created by this submission, `replaced` a run that was
    retired immediately because a new one took its place, `progressed` a
    run whose progress should be redrawn, and `finished` a run that was
    destroyed (completed or cancelled).
    """
    action: KeyAction = KeyAction.CONTINUE
    submitted: Optional[str] = None
    started: Optional[CommandRun] = None
    replaced: Optional[CommandRun] = None
    progressed: Optional[CommandRun] = None
    finished: Optional[CommandRun] = None
    resized: bool = False


class InputState:
    """
    Text buffer, cursor and command state for the input frame.

    Every event is applied in full by `handle`; nothing here writes to the
    terminal.
    """

    def __init__(self, cols: int, rows: int, dispatcher: Optional[CommandDispatcher] = None):
        self.buffer = ""
        self.cursor = 0
        self.cols = cols
        self.rows = rows
        self.mode = Mode.EDITING
        self.log = SubmittedLog()
        self.dispatcher = dispatcher or CommandDispatcher()
        self.active_run: Optional[CommandRun] = None
        self.geometry_dirty = True

    @property
    def wrap_width(self) -> int:
        return content_width(self.cols)

    @property
    def required_lines(self) -> int:
        """Wrapped rows the buffer needs at the current width."""
        return required_lines(self.buffer, self.wrap_width)

    def lines(self):
        return render_lines(self.buffer, self.wrap_width)

    def cursor_position(self) -> Tuple[int, int]:
        return cursor_position(self.buffer, self.cursor, self.wrap_width)

    def _insert(self, text: str) -> None:
        self.buffer = self.buffer[:self.cursor] + text + self.buffer[self.cursor:]
        self.cursor += len(text)

    def _backspace(self) -> None:
        if self.cursor == 0:
            return
        self.buffer = self.buffer[:self.cursor - 1] + self.buffer[self.cursor:]
        self.cursor -= 1

    def handle(self, event: Event) -> Outcome:
        """Apply one event and report its effects."""
        if self.mode is Mode.EXITING:
            return Outcome(action=KeyAction.EXIT)

        if isinstance(event, EXIT_EVENTS):
            return self._exit()

        if isinstance(event, Resize):
            self.cols, self.rows = event.columns, event.rows
            self.geometry_dirty = True
            return Outcome(resized=True)

        if isinstance(event, Tick):
            return self._tick(event.run_id)

        if isinstance(event, Char):
            self._insert(event.char)
        elif isinstance(event, NEWLINE_EVENTS):
            self._insert("\n")
        elif isinstance(event, Backspace):
            self._backspace()
        elif isinstance(event, Enter):
            return self._submit()
        return Outcome()

    def _submit(self) -> Outcome:
        if not self.buffer:
            return Outcome()

        text = self.buffer
        self.buffer = ""
        self.cursor = 0

        outcome = Outcome(action=KeyAction.SUBMIT, submitted=text)
        previous = self.active_run
        run = self.dispatcher.run_for(text)
        self.log.append(text, run.command.name if run else None)

        if run is not None:
            if previous is not None:
                previous.cancel()
                previous.destroy()
                outcome.replaced = previous
            self.active_run = run
            self.mode = Mode.AWAITING_COMMAND_COMPLETION
            outcome.started = run
        elif previous is not None:
            # Retired by its next tick
            previous.cancel()
        return outcome

    def _tick(self, run_id: int) -> Outcome:
        run = self.active_run
        if run is None or run.id != run_id:
            return Outcome()
        if run.cancelled:
            self._finish()
            return Outcome(finished=run)
        if run.done:
            self._finish()
            return Outcome(progressed=run, finished=run)
        return Outcome(progressed=run)

    def _finish(self) -> None:
        self.active_run.destroy()
        self.active_run = None
        self.mode = Mode.EDITING

    def _exit(self) -> Outcome:
        outcome = Outcome(action=KeyAction.EXIT)
        if self.active_run is not None:
            self.active_run.cancel()
            outcome.finished = self.active_run
            self._finish()
        self.mode = Mode.EXITING
        return outcome
