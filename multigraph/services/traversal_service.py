# multigraph/services/traversal_service.py
"""
    Reachability search from a single source node.

    BreadthFirstSearch  → predecessor map (node → node it was discovered from)
    DepthFirstSearch    → set of nodes reachable from the source

    Both extend ``GraphAlgorithm[node, result]``.
"""
from collections import deque
from typing import Dict, Hashable, Set

from ..models.graph import Graph
from .base_service import GraphAlgorithm


class BreadthFirstSearch(GraphAlgorithm[Hashable, Dict[Hashable, Hashable]]):
    """
    Queue-based level-order traversal.

    A node gets its predecessor the first time it is discovered, so each
    node appears once and its predecessor chain back to the source has the
    fewest possible hops. The source maps to itself.
    """

    def search(self, graph: Graph, source: Hashable) -> Dict[Hashable, Hashable]:
        """
        Convenience wrapper around the generic ``execute()``.

        :raises NodeNotFound: If the source is not registered
        """
        return self.execute(graph, source)

    def _validate_query(self, graph: Graph, source: Hashable) -> None:
        """The source is resolved, or rejected, when the run starts."""
        pass

    def _run(self, graph: Graph, source: Hashable) -> Dict[Hashable, Hashable]:
        registry = graph.registry
        start = self._source_handle(graph, source)

        pred: Dict[int, int] = {start: start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for dst, _ in self._outgoing(graph, current):
                if dst not in pred:
                    pred[dst] = current
                    queue.append(dst)

        return {registry.value_of(n): registry.value_of(p) for n, p in pred.items()}


class DepthFirstSearch(GraphAlgorithm[Hashable, Set[Hashable]]):
    """
    Explicit-stack traversal (no recursion).

    A node is marked visited when popped; only unvisited neighbours are
    pushed. Visit order is not part of the result.
    """

    def search(self, graph: Graph, source: Hashable) -> Set[Hashable]:
        """
        Convenience wrapper around the generic ``execute()``.

        :raises NodeNotFound: If the source is not registered
        """
        return self.execute(graph, source)

    def _validate_query(self, graph: Graph, source: Hashable) -> None:
        """The source is resolved, or rejected, when the run starts."""
        pass

    def _run(self, graph: Graph, source: Hashable) -> Set[Hashable]:
        registry = graph.registry
        stack = [self._source_handle(graph, source)]
        visited: Set[int] = set()

        while stack:
            current = stack.pop()
            if current in visited:
                continue  # pushed twice before its first visit
            edge_set = self._outgoing(graph, current)
            visited.add(current)

            for dst, _ in edge_set:
                if dst not in visited:
                    stack.append(dst)

        return {registry.value_of(n) for n in visited}
