"""
    Generic base service for read-only graph algorithms.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of an algorithm run (validate → run), letting
    concrete subclasses (BreadthFirstSearch, DepthFirstSearch,
    CycleDetector, DijkstraShortestPath) override the specific steps.

    Genericity:
    ─────────────────────────
    Uses Generic[TQuery, TResult] so each service declares what it takes
    (a source node, a Dijkstra query, nothing) and what it returns.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..models.edge import OutgoingEdgeSet
from ..models.graph import Graph
from .exceptions import NodeNotFound

logger = logging.getLogger(__name__)

TQuery = TypeVar('TQuery')
TResult = TypeVar('TResult')


class GraphAlgorithm(ABC, Generic[TQuery, TResult]):
    """
    Abstract generic base for every algorithm that reads a graph
    and produces a derived result.

    Concrete subclasses must implement:
        - _validate_query(graph, query)  → raise on invalid input
        - _run(graph, query)             → the result value
    """

    def execute(self, graph: Graph, query: TQuery) -> TResult:
        """
        Template Method: validate → run.

        The graph must not be mutated while this runs.
        """
        self._validate_query(graph, query)
        logger.debug("%s started on %r", type(self).__name__, graph)
        result = self._run(graph, query)
        logger.debug("%s finished on %r", type(self).__name__, graph)
        return result

    @abstractmethod
    def _validate_query(self, graph: Graph, query: TQuery) -> None:
        """
        Validate the query against the graph; raise on failure.
        """
        ...

    @abstractmethod
    def _run(self, graph: Graph, query: TQuery) -> TResult:
        ...

    # ── Shared helpers ───────────────────────────────────────────

    @staticmethod
    def _outgoing(graph: Graph, handle: int) -> OutgoingEdgeSet:
        """
        Outgoing set of a node reached during a run.

        Raises:
            NodeNotFound: If the node has no outgoing-set entry. This only
                          happens when the edge table and the registry
                          have drifted apart.
        """
        edge_set = graph.edge_table.get(handle)
        if edge_set is None:
            node = graph.registry.lookup(handle)
            logger.error("Edge table has no entry for node %r (handle %d)",
                         node, handle)
            raise NodeNotFound(handle if node is None else node)
        return edge_set

    @staticmethod
    def _source_handle(graph: Graph, source) -> int:
        """Handle of a source node; NodeNotFound if it is not registered."""
        handle: Optional[int] = graph.registry.handle_of(source)
        if handle is None:
            raise NodeNotFound(source)
        return handle
