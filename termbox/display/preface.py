# display/preface.py

from dataclasses import dataclass
from typing import List, Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel

@dataclass
class PrefaceContent:
    """Container for a banner shown above the frame at startup."""
    text: str
    title: Optional[str] = None
    border_color: Optional[str] = None

class Preface:
    """Renders banner panels into plain lines for the transcript area."""
    def __init__(self):
        self.content_items: List[PrefaceContent] = []

    def add_content(self, text: str, title: Optional[str] = None,
                    border_color: Optional[str] = None) -> None:
        self.content_items.append(PrefaceContent(text, title, border_color))

    def clear(self) -> None:
        self.content_items.clear()

    def render(self, width: int) -> List[str]:
        """
        Format every banner as a centred panel `width` cells wide.

        Returns:
            Output lines, ANSI styled, without trailing newlines.
        """
        if not self.content_items:
            return []

        console = Console(force_terminal=True, color_system="truecolor",
                          width=width, highlight=False)
        lines: List[str] = []
        for content in self.content_items:
            with console.capture() as capture:
                console.print(
                    Panel(
                        Align.center(content.text.rstrip()),
                        title=content.title,
                        title_align="right",
                        border_style=content.border_color or "dim yellow",
                        padding=(0, 2),
                        expand=True,
                        width=width
                    )
                )
            lines.extend(capture.get().rstrip("\n").split("\n"))
        return lines
