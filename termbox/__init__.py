# __init__.py

from .config import TermboxConfig
from .errors import GeometryDesync, LayoutContractViolation, TermboxError, TerminalWriteFailure
from .interface import Interface
from .logger import Logger

__all__ = [
    "Interface",
    "Logger",
    "TermboxConfig",
    "TermboxError",
    "LayoutContractViolation",
    "TerminalWriteFailure",
    "GeometryDesync",
]
