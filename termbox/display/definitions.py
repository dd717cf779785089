# display/definitions.py

from dataclasses import dataclass
from typing import Dict

from rich.cells import cell_len

from ..layout import LEFT_FRAME_CHARS

@dataclass(frozen=True)
class BorderGlyphs:
    """Box-drawing characters used for the frame and the progress box."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str

    def top(self, width: int) -> str:
        return f"{self.top_left}{self.horizontal * (width - 2)}{self.top_right}"

    def bottom(self, width: int) -> str:
        return f"{self.bottom_left}{self.horizontal * (width - 2)}{self.bottom_right}"


ROUNDED = BorderGlyphs('╭', '╮', '╰', '╯', '─', '│')
ASCII = BorderGlyphs('+', '+', '+', '+', '-', '|')

GLYPHS: Dict[str, BorderGlyphs] = {
    'rounded': ROUNDED,
    'ascii': ASCII,
}

@dataclass
class FrameDefinitions:
    """
    Frame constants shared by the renderer and the commands.

    The prompt and its continuation fill the two cells after "│ ", so every
    row keeps the same wrap width.
    """
    glyphs: BorderGlyphs = ROUNDED
    prompt: str = '> '
    continuation: str = '  '
    progress_filled: str = '█'
    progress_empty: str = '░'

    def __post_init__(self):
        prompt_cells = LEFT_FRAME_CHARS - 2
        if cell_len(self.prompt) != prompt_cells or cell_len(self.continuation) != prompt_cells:
            raise ValueError(f"prompt and continuation must be {prompt_cells} cells wide")

    @classmethod
    def named(cls, name: str) -> "FrameDefinitions":
        """Return definitions for one of the GLYPHS sets."""
        if name not in GLYPHS:
            raise ValueError(f"Unknown glyph set: {name}")
        glyphs = GLYPHS[name]
        if glyphs is ASCII:
            return cls(glyphs=glyphs, progress_filled='#', progress_empty='.')
        return cls(glyphs=glyphs)
