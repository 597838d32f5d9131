"""
    Graph model - directed, weighted multigraph.

    Composes the node registry and the edge table. All mutation goes
    through this class; algorithms read it and never change it.
    Mixed graphs are supported: any edge may be weighted or unweighted.
"""
import logging
from copy import deepcopy
from typing import Any, Dict, Hashable, Iterator, List, Optional, Set, Tuple

from ..config import GraphConfig
from ..types import Capability, CapabilityValidator
from .edge import Edge, EdgeTable
from .registry import NodeRegistry

logger = logging.getLogger(__name__)


class Graph:
    """
        Class for graph representation.

        Node values must be hashable and ordered. Edge weights are optional;
        two edges between the same nodes are distinct if their weights
        differ. Every method either fully succeeds or leaves the graph as
        it was.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.
        Args:
            config: Graph configuration (algorithm options, diagnostics)
        """
        self.config: GraphConfig = config or GraphConfig()
        self._registry = NodeRegistry()
        self._edges = EdgeTable()

    # ── Storage access for algorithms ────────────────────────────

    @property
    def registry(self) -> NodeRegistry:
        return self._registry

    @property
    def edge_table(self) -> EdgeTable:
        return self._edges

    # ── Nodes ────────────────────────────────────────────────────

    def is_node(self, node: Any) -> bool:
        return node in self._registry

    def add_node(self, node: Hashable) -> bool:
        """
        Add a node to the graph.

        Returns:
            False if the node is already present.

        Raises:
            TypeError: If the node is unhashable or cannot be ordered
                       against the nodes already in the graph.
        """
        handle = self._registry.register(node)
        if handle is None:
            return False

        self._edges.create(handle)
        self._log_mutation("add_node %r", node)
        return True

    def remove_node(self, node: Any) -> bool:
        """
        Remove a node, its outgoing edges and every edge pointing at it.
        """
        handle = self._registry.handle_of(node)
        if handle is None:
            return False

        removed = self._edges.drop(handle)
        self._registry.unregister(node)
        self._log_mutation("remove_node %r (%d edges removed)", node, removed)
        return True

    def nodes(self) -> List[Hashable]:
        """All nodes in ascending order"""
        return self._registry.values()

    def num_nodes(self) -> int:
        return len(self._registry)

    def is_empty(self) -> bool:
        return len(self._registry) == 0

    # ── Edges ────────────────────────────────────────────────────

    def is_edge(self, src: Any, dst: Any, weight: Optional[Hashable] = None) -> bool:
        """Check if the exact (src, dst, weight) edge exists"""
        dst_handle = self._registry.handle_of(dst)
        if dst_handle is None:
            return False

        src_edges = self._edges.get(self._registry.handle_of(src))
        if src_edges is None:
            return False

        return (dst_handle, weight) in src_edges

    def add_edge(self, src: Any, dst: Any, weight: Optional[Hashable] = None) -> bool:
        """
        Add a directed edge.

        Returns:
            False if the edge exists or either endpoint is not a node.
        """
        if self.is_edge(src, dst, weight):
            return False

        src_edges = self._edges.get(self._registry.handle_of(src))
        dst_handle = self._registry.handle_of(dst)
        if src_edges is None or dst_handle is None:
            return False

        CapabilityValidator.require(weight, Capability.HASHABLE)
        src_edges.add(dst_handle, self._registry.value_of(dst_handle), weight)
        self._log_mutation("add_edge %r -> %r (weight=%r)", src, dst, weight)
        return True

    def remove_edge(self, src: Any, dst: Any, weight: Optional[Hashable] = None) -> bool:
        """Remove a directed edge. Returns False if it does not exist."""
        if not self.is_edge(src, dst, weight):
            return False

        dst_handle = self._registry.handle_of(dst)
        src_edges = self._edges.get(self._registry.handle_of(src))
        src_edges.discard(dst_handle, self._registry.value_of(dst_handle), weight)
        self._log_mutation("remove_edge %r -> %r (weight=%r)", src, dst, weight)
        return True

    def add_undirected_edge(self, a: Any, b: Any, weight: Optional[Hashable] = None) -> bool:
        """
        Add the edge in both directions with the same weight.

        The weight is shared by both edges, so it must be hashable
        (immutable in practice).

        Returns:
            False if a == b, if either endpoint is not a node, or if the
            edge already exists in either direction. Nothing is added then.
        """
        if a == b:
            return False
        if self.is_edge(a, b, weight) or self.is_edge(b, a, weight):
            return False
        if not (self.is_node(a) and self.is_node(b)):
            return False

        CapabilityValidator.require(weight, Capability.HASHABLE)
        self.add_edge(a, b, weight)
        try:
            self.add_edge(b, a, weight)
        except TypeError:
            # weight not orderable against b's existing edges to a
            self.remove_edge(a, b, weight)
            raise
        return True

    def is_connected(self, src: Any, dst: Any) -> bool:
        """Check if any edge goes from src to dst, whatever its weight"""
        src_edges = self._edges.get(self._registry.handle_of(src))
        dst_handle = self._registry.handle_of(dst)
        if src_edges is None or dst_handle is None:
            return False
        return src_edges.targets(dst_handle)

    def edges(self, node: Any) -> Optional[List[Tuple[Hashable, Optional[Hashable]]]]:
        """
        Outgoing (destination, weight) pairs of a node.

        Returns:
            None if the node has no outgoing edges.

        Raises:
            NodeNotFound: If the node is not in the graph.
        """
        node_edges = self._outgoing_or_raise(node)
        if not node_edges:
            return None
        return [(self._registry.value_of(dst), weight) for dst, weight in node_edges]

    def connections(self, node: Any) -> Optional[List[Hashable]]:
        """
        Destinations of a node's outgoing edges, one per edge.

        Returns:
            None if the node has no outgoing edges.

        Raises:
            NodeNotFound: If the node is not in the graph.
        """
        node_edges = self._outgoing_or_raise(node)
        if not node_edges:
            return None
        return [self._registry.value_of(dst) for dst, _ in node_edges]

    def iter_edges(self) -> Iterator[Edge]:
        """Every edge, ordered by source, then destination, then weight"""
        for handle in self._registry.handles():
            source = self._registry.value_of(handle)
            for dst, weight in self._edges.get(handle) or ():
                yield Edge(source, self._registry.value_of(dst), weight)

    def num_edges(self) -> int:
        return self._edges.count()

    # ── Degree ───────────────────────────────────────────────────

    def out_degree(self, node: Any) -> int:
        node_edges = self._edges.get(self._registry.handle_of(node))
        if node_edges is None:
            return 0
        return len(node_edges)

    def in_degree(self, node: Any) -> int:
        handle = self._registry.handle_of(node)
        if handle is None:
            return 0
        return self._edges.count_incoming(handle)

    def degree(self, node: Any) -> int:
        return self.in_degree(node) + self.out_degree(node)

    # ── Algorithms ───────────────────────────────────────────────

    def bfs(self, source: Any) -> Dict[Hashable, Hashable]:
        """
        Breadth-first predecessor map from source.

        Raises:
            NodeNotFound: If the source is not in the graph.
        """
        # Imported here to avoid circular imports
        from ..services.traversal_service import BreadthFirstSearch
        return BreadthFirstSearch().search(self, source)

    def dfs(self, source: Any) -> Set[Hashable]:
        """
        Set of nodes reachable from source, source included.

        Raises:
            NodeNotFound: If the source is not in the graph.
        """
        from ..services.traversal_service import DepthFirstSearch
        return DepthFirstSearch().search(self, source)

    def has_cycle(self) -> bool:
        """Check if the graph has a directed cycle (self-loops included)."""
        from ..services.cycle_service import CycleDetector
        return CycleDetector().detect(self)

    def dijkstra(self, source: Any, default_weight: Any = 1, zero: Any = 0):
        """
        Shortest distances and predecessors from source.

        Requires ordered, additive weights; unweighted edges cost
        ``default_weight``. Weights are assumed non-negative.

        Returns:
            ShortestPaths(distances, predecessors)

        Raises:
            NodeNotFound: If the source is not in the graph.
            TypeError: If the weights are not ordered and additive.
        """
        from ..services.shortest_path_service import DijkstraShortestPath
        service = DijkstraShortestPath(self.config.shortest_path)
        return service.shortest_paths(self, source, default_weight, zero)

    # ── Copying and comparison ───────────────────────────────────

    def clone(self) -> 'Graph':
        """
        Independent deep copy; mutating either graph never affects the other.

        Raises:
            TypeError: If a node or weight cannot be deep-copied.
        """
        for node in self._registry:
            CapabilityValidator.require(node, Capability.COPYABLE)
        for edge in self.iter_edges():
            CapabilityValidator.require(edge.weight, Capability.COPYABLE)
        return deepcopy(self)

    def __copy__(self) -> 'Graph':
        return self.clone()

    def _snapshot(self) -> Dict[Hashable, List[Tuple[Hashable, Optional[Hashable]]]]:
        return {
            self._registry.value_of(handle): [
                (self._registry.value_of(dst), weight) for dst, weight in edge_set
            ]
            for handle, edge_set in self._edges.items()
        }

    def __eq__(self, other) -> bool:
        """Two graphs are equal if they hold the same nodes and edges"""
        if not isinstance(other, Graph):
            return False
        return self._snapshot() == other._snapshot()

    __hash__ = None

    # ── Dunder ───────────────────────────────────────────────────

    def __contains__(self, node: Any) -> bool:
        return self.is_node(node)

    def __len__(self) -> int:
        return self.num_nodes()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.num_nodes()}, edges={self.num_edges()})"

    # ── Internal helpers ─────────────────────────────────────────

    def _outgoing_or_raise(self, node: Any):
        from ..services.exceptions import NodeNotFound

        node_edges = self._edges.get(self._registry.handle_of(node))
        if node_edges is None:
            raise NodeNotFound(node)
        return node_edges

    def _log_mutation(self, msg: str, *args: Any) -> None:
        if self.config.log_mutations:
            logger.debug(msg, *args)
