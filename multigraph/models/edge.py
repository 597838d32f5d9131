"""
    Edge model - outgoing edge sets and the edge table.

    An edge is (source, destination, optional weight). Edges are stored per
    source as an ordered set of (destination handle, weight) pairs, so the
    same two nodes may be joined by several edges with different weights.
"""
from bisect import bisect_left
from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from ..types import weight_key

# (destination handle, weight)
EdgeEntry = Tuple[int, Optional[Hashable]]


@dataclass(frozen=True)
class Edge:
    """Read-only view of one directed edge"""
    source: Hashable
    destination: Hashable
    weight: Optional[Hashable] = None

    def is_weighted(self) -> bool:
        return self.weight is not None

    def is_self_loop(self) -> bool:
        return self.source == self.destination

    def __repr__(self) -> str:
        if self.weight is None:
            return f"Edge({self.source!r} -> {self.destination!r})"
        return f"Edge({self.source!r} -> {self.destination!r}, weight={self.weight!r})"


class OutgoingEdgeSet:
    """
    Set of (destination, weight) pairs leaving one node.

    Entries iterate in (destination value, weight) order, with an
    unweighted entry before any weighted entry to the same destination.
    """

    def __init__(self):
        self._members: set = set()
        self._keys: List[tuple] = []
        self._entries: List[EdgeEntry] = []

    def __contains__(self, entry: EdgeEntry) -> bool:
        try:
            return entry in self._members
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EdgeEntry]:
        return iter(self._entries)

    def add(self, dst: int, dst_value: Hashable, weight: Optional[Hashable]) -> bool:
        """Insert an entry. Returns False if it was already present."""
        entry = (dst, weight)
        if entry in self._members:
            return False

        key = (dst_value, weight_key(weight))
        index = bisect_left(self._keys, key)
        self._keys.insert(index, key)
        self._entries.insert(index, entry)
        self._members.add(entry)
        return True

    def discard(self, dst: int, dst_value: Hashable, weight: Optional[Hashable]) -> bool:
        """Remove an entry. Returns False if it was not present."""
        entry = (dst, weight)
        if entry not in self._members:
            return False

        index = bisect_left(self._keys, (dst_value, weight_key(weight)))
        del self._keys[index]
        del self._entries[index]
        self._members.discard(entry)
        return True

    def discard_destination(self, dst: int) -> int:
        """Remove every entry pointing at dst. Returns how many were removed."""
        kept = [i for i, (d, _) in enumerate(self._entries) if d != dst]
        removed = len(self._entries) - len(kept)
        if removed:
            self._keys = [self._keys[i] for i in kept]
            self._entries = [self._entries[i] for i in kept]
            self._members = set(self._entries)
        return removed

    def targets(self, dst: int) -> bool:
        """Check if any entry points at dst, whatever its weight"""
        return any(d == dst for d, _ in self._entries)

    def count_destination(self, dst: int) -> int:
        return sum(1 for d, _ in self._entries if d == dst)

    def __repr__(self) -> str:
        return f"OutgoingEdgeSet({self._entries!r})"


class EdgeTable:
    """
    Maps each node handle to its outgoing edge set.

    Every registered node owns an entry here, possibly empty.
    """

    def __init__(self):
        self._sets: Dict[int, OutgoingEdgeSet] = {}

    def __contains__(self, handle: int) -> bool:
        return handle in self._sets

    def __len__(self) -> int:
        return len(self._sets)

    def create(self, handle: int) -> None:
        """Start an empty outgoing set for a new node"""
        self._sets[handle] = OutgoingEdgeSet()

    def get(self, handle: Optional[int]) -> Optional[OutgoingEdgeSet]:
        if handle is None:
            return None
        return self._sets.get(handle)

    def drop(self, handle: int) -> int:
        """
        Delete a node's outgoing set and every entry pointing at it.

        Returns:
            Number of edges removed.
        """
        removed = len(self._sets.pop(handle, ()))
        for edge_set in self._sets.values():
            removed += edge_set.discard_destination(handle)
        return removed

    def count(self) -> int:
        """Total number of edges in the table"""
        return sum(len(edge_set) for edge_set in self._sets.values())

    def count_incoming(self, handle: int) -> int:
        """Linear scan over every outgoing set, counting entries to handle"""
        return sum(edge_set.count_destination(handle) for edge_set in self._sets.values())

    def items(self) -> Iterator[Tuple[int, OutgoingEdgeSet]]:
        return iter(self._sets.items())

    def __repr__(self) -> str:
        return f"EdgeTable(sources={len(self._sets)}, edges={self.count()})"
