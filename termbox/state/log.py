# state/log.py

from dataclasses import dataclass
from typing import Iterator, List, Optional

@dataclass(frozen=True)
class SubmittedLine:
    """One submitted entry; `command` names the command it started, if any."""
    text: str
    turn_number: int
    command: Optional[str] = None


class SubmittedLog:
    """
    Append-only record of submitted input.
    """
    def __init__(self):
        self._entries: List[SubmittedLine] = []

    def append(self, text: str, command: Optional[str] = None) -> SubmittedLine:
        entry = SubmittedLine(text, len(self._entries) + 1, command)
        self._entries.append(entry)
        return entry

    @property
    def last(self) -> Optional[SubmittedLine]:
        return self._entries[-1] if self._entries else None

    def texts(self) -> List[str]:
        return [entry.text for entry in self._entries]

    def __iter__(self) -> Iterator[SubmittedLine]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
