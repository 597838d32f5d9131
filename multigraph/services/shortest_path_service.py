# multigraph/services/shortest_path_service.py
"""
    DijkstraShortestPath — single-source shortest paths.

    Extends ``GraphAlgorithm[DijkstraQuery, ShortestPaths]``.

    Weights must be ordered and support ``+``. Unweighted edges count as
    ``default_weight``; ``zero`` is the distance of the source to itself.
    Non-negative weights are a precondition: with negative weights the
    distances are undefined unless ``ShortestPathConfig.check_non_negative``
    is enabled, in which case a ValueError is raised.
"""
import heapq
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, NamedTuple, Optional

from ..config import ShortestPathConfig
from ..models.graph import Graph
from ..types import Capability, CapabilityValidator
from .base_service import GraphAlgorithm


@dataclass(frozen=True)
class DijkstraQuery:
    source: Hashable
    default_weight: Any = 1
    zero: Any = 0


class _Descending:
    """Heap key that inverts the order of a node value"""
    __slots__ = ('value',)

    def __init__(self, value: Hashable):
        self.value = value

    def __eq__(self, other) -> bool:
        return self.value == other.value

    def __lt__(self, other) -> bool:
        return other.value < self.value


class ShortestPaths(NamedTuple):
    """
    Distance and predecessor maps, covering exactly the reachable nodes.

    Unpacks like a pair: ``dist, pred = graph.dijkstra(source)``.
    The predecessor of the source is None.
    """
    distances: Dict[Hashable, Any]
    predecessors: Dict[Hashable, Optional[Hashable]]

    def path_to(self, target: Hashable) -> Optional[List[Hashable]]:
        """
        Nodes on the shortest path from the source to target, inclusive.

        Returns:
            None if the target was not reached.
        """
        if target not in self.predecessors:
            return None

        path = [target]
        node = self.predecessors[target]
        while node is not None:
            path.append(node)
            node = self.predecessors[node]
        path.reverse()
        return path


class DijkstraShortestPath(GraphAlgorithm[DijkstraQuery, ShortestPaths]):
    """
    Binary-heap Dijkstra with lazy deletion.

    The heap is keyed by (distance, node) with the node order reversed,
    so among equal distances the largest node pops first. Stale heap
    entries are skipped instead of being decreased in place.
    O((V + E) log V).
    """

    def __init__(self, config: Optional[ShortestPathConfig] = None):
        self._config = config or ShortestPathConfig()

    @property
    def config(self) -> ShortestPathConfig:
        return self._config

    def shortest_paths(self, graph: Graph, source: Hashable,
                       default_weight: Any = 1, zero: Any = 0) -> ShortestPaths:
        """
        Convenience wrapper around the generic ``execute()``.

        :raises NodeNotFound: If the source is not registered
        :raises TypeError: If the weights are not ordered and additive
        """
        return self.execute(graph, DijkstraQuery(source, default_weight, zero))

    def _validate_query(self, graph: Graph, query: DijkstraQuery) -> None:
        for value in (query.default_weight, query.zero):
            CapabilityValidator.require(value, Capability.ORDERED, Capability.ADDITIVE)
        CapabilityValidator.require_comparable(query.default_weight, query.zero)

        if self._config.check_non_negative and query.default_weight < query.zero:
            raise ValueError(f"Default weight {query.default_weight!r} is negative")

    def _run(self, graph: Graph, query: DijkstraQuery) -> ShortestPaths:
        registry = graph.registry
        check = self._config.check_non_negative
        start = self._source_handle(graph, query.source)

        dist: Dict[int, Any] = {start: query.zero}
        pred: Dict[int, Optional[int]] = {start: None}
        heap = [(query.zero, _Descending(registry.value_of(start)), start)]

        while heap:
            current_dist, _, u = heapq.heappop(heap)
            if dist[u] < current_dist:
                continue

            for v, weight in self._outgoing(graph, u):
                if weight is None:
                    weight = query.default_weight
                elif check and weight < query.zero:
                    raise ValueError(
                        f"Edge {registry.value_of(u)!r} -> {registry.lookup(v)!r} "
                        f"has negative weight {weight!r}"
                    )

                new_dist = current_dist + weight
                if v not in dist or new_dist < dist[v]:
                    dist[v] = new_dist
                    pred[v] = u
                    heapq.heappush(heap, (new_dist, _Descending(registry.lookup(v)), v))

        return ShortestPaths(
            {registry.value_of(n): d for n, d in dist.items()},
            {
                registry.value_of(n): None if p is None else registry.value_of(p)
                for n, p in pred.items()
            },
        )
