"""
    Node registry - canonical, deduplicated store of node values.

    Every distinct node value is stored once and given an integer handle.
    Other structures (the edge table, algorithm results) refer to nodes
    through these handles, so removing a node is a single explicit step:
    the slot is freed here and later reused by a new insertion.
"""
from bisect import bisect_left, bisect_right
from typing import Any, Dict, Hashable, Iterator, List, Optional

from ..types import Capability, CapabilityValidator


class NodeRegistry:
    """
    Arena of node values indexed by stable integer handles.

    Keeps value -> handle and handle -> value maps, plus the values in
    ascending order so iteration is deterministic.
    """

    def __init__(self):
        self._handles: Dict[Hashable, int] = {}  # value -> handle
        self._values: Dict[int, Hashable] = {}  # handle -> value
        self._ordered: List[Hashable] = []
        self._free: List[int] = []
        self._next_handle: int = 0

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._handles
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ordered)

    def handle_of(self, value: Any) -> Optional[int]:
        """Handle of a registered value, or None"""
        try:
            return self._handles.get(value)
        except TypeError:
            return None

    def value_of(self, handle: int) -> Hashable:
        """Canonical value stored under a handle"""
        return self._values[handle]

    def lookup(self, handle: int) -> Optional[Hashable]:
        """Value stored under a handle, or None if the slot is free"""
        return self._values.get(handle)

    def values(self) -> List[Hashable]:
        """Registered values in ascending order"""
        return list(self._ordered)

    def handles(self) -> Iterator[int]:
        """Handles in ascending order of their values"""
        for value in self._ordered:
            yield self._handles[value]

    def register(self, value: Hashable) -> Optional[int]:
        """
        Insert a value and return its new handle.

        Returns:
            None if the value is already registered.

        Raises:
            TypeError: If the value is unhashable or cannot be ordered
                       against the values already registered.
        """
        CapabilityValidator.require(value, Capability.HASHABLE, Capability.ORDERED)
        if value in self._handles:
            return None
        if self._ordered:
            CapabilityValidator.require_comparable(value, self._ordered[0])
        try:
            position = bisect_right(self._ordered, value)
        except TypeError as e:
            raise TypeError(
                f"Cannot order {value!r} against registered nodes: {str(e)}"
            ) from e

        if self._free:
            handle = self._free.pop()
        else:
            handle = self._next_handle
            self._next_handle += 1

        self._handles[value] = handle
        self._values[handle] = value
        self._ordered.insert(position, value)
        return handle

    def unregister(self, value: Any) -> Optional[int]:
        """
        Remove a value and free its slot.

        Returns:
            The freed handle, or None if the value was not registered.
        """
        handle = self.handle_of(value)
        if handle is None:
            return None

        del self._handles[value]
        del self._values[handle]
        del self._ordered[bisect_left(self._ordered, value)]
        self._free.append(handle)
        return handle

    def __repr__(self) -> str:
        return f"NodeRegistry({self._ordered!r})"
