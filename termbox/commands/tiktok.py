# commands/tiktok.py

from typing import List

from rich.cells import set_cell_size

from ..display.definitions import FrameDefinitions
from .base import Command

# The height of the TikTok animation box in terminal lines
TIKTOK_ANIMATION_HEIGHT = 3

class TikTok(Command):
    """Ten-step progress bar drawn in a box above the input frame."""
    name = "tiktok"
    total_steps = 10
    height = TIKTOK_ANIMATION_HEIGHT
    progress_row = 1

    def progress_text(self, progress: int, definitions: FrameDefinitions) -> str:
        filled = definitions.progress_filled * progress
        empty = definitions.progress_empty * (self.total_steps - progress)
        return f"[{filled}{empty}] {progress}/{self.total_steps}"

    def render(self, progress: int, width: int, definitions: FrameDefinitions) -> List[str]:
        g = definitions.glyphs
        inner = set_cell_size(self.progress_text(progress, definitions), max(0, width - 4))
        return [
            g.top(width),
            f"{g.vertical} {inner} {g.vertical}",
            g.bottom(width),
        ]
