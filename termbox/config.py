# config.py

import os
from dataclasses import dataclass, fields
from typing import Optional

GLYPH_SETS = ('rounded', 'ascii')

@dataclass
class TermboxConfig:
    """
    Runtime settings for the input frame.

    Values come from the defaults below, then TERMBOX_* environment
    variables, then command-line flags.
    """
    tick_interval: float = 0.5
    glyphs: str = 'rounded'
    max_write_failures: int = 3
    logging_enabled: bool = False
    log_file: Optional[str] = None
    banner: Optional[str] = None

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.glyphs not in GLYPH_SETS:
            raise ValueError(f"Unknown glyph set: {self.glyphs}")
        if self.max_write_failures < 1:
            raise ValueError("max_write_failures must be at least 1")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "TermboxConfig":
        """Build a config from TERMBOX_* variables; keyword overrides win."""
        environ = os.environ if environ is None else environ
        values = {}
        if (interval := environ.get('TERMBOX_TICK_INTERVAL')):
            values['tick_interval'] = float(interval)
        if (glyphs := environ.get('TERMBOX_GLYPHS')):
            values['glyphs'] = glyphs.lower()
        if (log_file := environ.get('TERMBOX_LOG_FILE')):
            values['log_file'] = log_file
            values['logging_enabled'] = True

        known = {f.name for f in fields(cls)}
        values.update({k: v for k, v in overrides.items() if k in known and v is not None})
        return cls(**values)
