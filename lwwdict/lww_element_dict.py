"""Last-Write-Wins Element Dictionary (state-based CRDT)."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from lww_record import Assignment, Deletion, Record, supersedes


@dataclass
class LWWElementDict:
    """Key/value store that converges when replicas are merged.

    Every set and remove is kept as a record stamped with a timestamp from
    `clock` and this replica's `peer_id`. Assignments and deletions live in
    separate tables; a key is visible if it has an assignment and no deletion
    supersedes that assignment. Neither table ever shrinks.

    `==` compares peer_id and both tables. Use `content_equals` to check
    whether replicas with different peer ids have converged.
    """

    peer_id: Any
    clock: Callable[[], Any] = field(compare=False, repr=False)
    assignments: Dict[Any, Assignment] = field(default_factory=dict)
    deletions: Dict[Any, Deletion] = field(default_factory=dict)

    def get(self, key: Any) -> Optional[Any]:
        """Get the value for a key, or None if it is absent or removed.

        A key holding None looks the same as a missing key: use
        `contains_key` to tell them apart.
        """
        assignment = self.assignments.get(key)
        if assignment is None or not self._is_active(key, assignment):
            return None
        return assignment.value

    def contains_key(self, key: Any) -> bool:
        """Is the key currently in the dictionary?"""
        assignment = self.assignments.get(key)
        return assignment is not None and self._is_active(key, assignment)

    def set(self, key: Any, value: Any):
        """Assign a value to a key (dropped if an existing assignment wins)."""
        record = Assignment(timestamp=self.clock(), peer_id=self.peer_id, value=value)
        self._offer(self.assignments, key, record)

    def remove(self, key: Any):
        """Remove a key (dropped if an existing deletion wins).

        Removing a key that was never set still leaves a tombstone, which
        hides any older assignment merged in later.
        """
        record = Deletion(timestamp=self.clock(), peer_id=self.peer_id)
        self._offer(self.deletions, key, record)

    @property
    def entries(self) -> Dict[Any, Any]:
        """The visible contents of the dictionary (recomputed on every call)."""
        return {
            key: assignment.value
            for key, assignment in self.assignments.items()
            if self._is_active(key, assignment)
        }

    def merge(self, other: "LWWElementDict"):
        """Merge another dictionary's state into this one (other is unchanged)."""
        for key, record in other.assignments.items():
            self._offer(self.assignments, key, record)
        for key, record in other.deletions.items():
            self._offer(self.deletions, key, record)

    def clone(self) -> "LWWElementDict":
        """Create an independent copy sharing the same peer id and clock."""
        # Records are frozen so copying the tables is enough.
        return LWWElementDict(
            peer_id=self.peer_id,
            clock=self.clock,
            assignments=self.assignments.copy(),
            deletions=self.deletions.copy(),
        )

    def content_equals(self, other: "LWWElementDict") -> bool:
        """Do both dictionaries hold the same records, whatever their peer ids?"""
        return (
            self.assignments == other.assignments
            and self.deletions == other.deletions
        )

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Optional[Any]:
        # Same as get(): missing keys read as None rather than raising
        return self.get(key)

    def __setitem__(self, key: Any, value: Any):
        self.set(key, value)

    def __delitem__(self, key: Any):
        self.remove(key)

    def _is_active(self, key: Any, assignment: Assignment) -> bool:
        deletion = self.deletions.get(key)
        return deletion is None or not supersedes(deletion, assignment)

    @staticmethod
    def _offer(table: Dict[Any, Record], key: Any, record: Record):
        existing = table.get(key)
        if existing is None or supersedes(record, existing):
            table[key] = record

    def __str__(self):
        return f"LWWElementDict(id={self.peer_id}, entries={self.entries})"
