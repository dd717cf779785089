# commands/base.py

import asyncio
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar, List, Optional, Set

from ..display.definitions import FrameDefinitions

class Command(ABC):
    """
    A named command with a bounded, step-driven animation.

    Subclasses set `name`, `total_steps` and `height` (rows of output the
    animation occupies above the frame) and implement `render`.
    """
    name: ClassVar[str]
    total_steps: ClassVar[int]
    height: ClassVar[int]
    # Row within the rendered block that changes from tick to tick
    progress_row: ClassVar[int] = 0

    def step(self, progress: int) -> int:
        """Return the progress value after one tick."""
        return min(progress + 1, self.total_steps)

    @abstractmethod
    def render(self, progress: int, width: int, definitions: FrameDefinitions) -> List[str]:
        """Return the `height` lines showing `progress`, each `width` cells wide."""


_run_ids = itertools.count(1)

@dataclass(eq=False)
class CommandRun:
    """
    A live invocation of a command.

    The run only changes its own counters and asks for ticks through
    `request_tick`; it never touches the terminal.
    """
    command: Command
    progress: int = 0
    cancelled: bool = False
    request_tick: Optional[Callable[["CommandRun"], None]] = None
    id: int = field(default_factory=lambda: next(_run_ids))

    _active: ClassVar[Set[int]] = set()

    def __post_init__(self):
        CommandRun._active.add(self.id)

    @classmethod
    def active_runs(cls) -> int:
        """Number of runs created and not yet destroyed."""
        return len(cls._active)

    @property
    def total_steps(self) -> int:
        return self.command.total_steps

    @property
    def done(self) -> bool:
        return self.progress >= self.total_steps

    @property
    def alive(self) -> bool:
        return self.id in CommandRun._active

    def advance(self) -> None:
        """Take one step and request a redraw tick."""
        if not (self.cancelled or self.done):
            self.progress = self.command.step(self.progress)
        if self.request_tick:
            self.request_tick(self)

    def cancel(self) -> None:
        """Flag the run; the next tick ends it without drawing."""
        self.cancelled = True

    def destroy(self) -> None:
        CommandRun._active.discard(self.id)

    def render(self, width: int, definitions: FrameDefinitions) -> List[str]:
        return self.command.render(self.progress, width, definitions)

    async def animate(self, interval: float) -> None:
        """
        Advance once per `interval` seconds until done or cancelled.

        A cancelled run still requests one last tick so the scheduler can
        retire it.
        """
        while True:
            await asyncio.sleep(interval)
            self.advance()
            if self.cancelled or self.done:
                return
