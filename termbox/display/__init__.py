# display/__init__.py

from typing import Optional, TextIO

from .definitions import ASCII, ROUNDED, BorderGlyphs, FrameDefinitions
from .geometry import FrameGeometry, ScrollRegion, compute_geometry, geometry_for
from .ops import (
    MoveTo,
    ResetScrollRegion,
    ScrollRegionBy,
    SetScrollRegion,
    WriteText,
    encode,
    encode_all,
)
from .preface import Preface
from .renderer import CursorScreenPosition, FrameRenderer
from .scroll import ScrollRegionCoordinator
from .terminal import DisplayTerminal, TerminalSize

class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    DisplayTerminal (base) → FrameRenderer → ScrollRegionCoordinator
    """
    def __init__(self, definitions: Optional[FrameDefinitions] = None,
                 stream: Optional[TextIO] = None, logger=None):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal(stream=stream, logger=logger)
        self.renderer = FrameRenderer(definitions)
        self.coordinator = ScrollRegionCoordinator(self.terminal, self.renderer, logger=logger)
        self.preface = Preface()

    @property
    def definitions(self) -> FrameDefinitions:
        return self.renderer.definitions

__all__ = [
    'Display',
    'DisplayTerminal',
    'TerminalSize',
    'FrameRenderer',
    'CursorScreenPosition',
    'ScrollRegionCoordinator',
    'FrameGeometry',
    'ScrollRegion',
    'compute_geometry',
    'geometry_for',
    'BorderGlyphs',
    'FrameDefinitions',
    'ROUNDED',
    'ASCII',
    'Preface',
    'MoveTo',
    'WriteText',
    'SetScrollRegion',
    'ScrollRegionBy',
    'ResetScrollRegion',
    'encode',
    'encode_all',
]
