# layout/__init__.py

from .wrap import (
    FRAME_CHARS,
    LEFT_FRAME_CHARS,
    RIGHT_FRAME_CHARS,
    WrappedLine,
    content_width,
    cursor_position,
    render_lines,
    required_lines,
    wrap_lines,
)

__all__ = [
    'FRAME_CHARS',
    'LEFT_FRAME_CHARS',
    'RIGHT_FRAME_CHARS',
    'WrappedLine',
    'content_width',
    'cursor_position',
    'render_lines',
    'required_lines',
    'wrap_lines',
]
