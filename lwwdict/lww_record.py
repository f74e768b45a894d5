"""Records stored in an LWW-Element-Dict and the rule that picks a winner."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Record:
    """When and by whom an operation on a key was made."""

    timestamp: Any
    peer_id: Any


@dataclass(frozen=True)
class Assignment(Record):
    """A key was set to a value."""

    value: Any = None

    def __str__(self):
        return f"Assignment({self.value!r}, ts={self.timestamp}, peer={self.peer_id})"


@dataclass(frozen=True)
class Deletion(Record):
    """A key was removed (tombstone)."""

    def __str__(self):
        return f"Deletion(ts={self.timestamp}, peer={self.peer_id})"


def supersedes(a: Record, b: Record) -> bool:
    """Does record a win over record b?

    Later timestamp wins. On a tie the higher-or-equal peer id wins, so a
    record always supersedes an identical copy of itself.
    """
    if a.timestamp > b.timestamp:
        return True
    if a.timestamp < b.timestamp:
        return False
    return a.peer_id >= b.peer_id
