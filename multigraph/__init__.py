"""
Weighted multigraph — in-memory graph container and algorithms.
"""
from .types import Capability, CapabilityValidator
from .config import GraphConfig, ShortestPathConfig
from .models.registry import NodeRegistry
from .models.edge import Edge, EdgeTable
from .models.graph import Graph
from .services.exceptions import GraphError, NodeNotFound
from .services.traversal_service import BreadthFirstSearch, DepthFirstSearch
from .services.cycle_service import CycleDetector
from .services.shortest_path_service import (
    DijkstraQuery,
    DijkstraShortestPath,
    ShortestPaths,
)

__all__ = [
    'Capability',
    'CapabilityValidator',
    'GraphConfig',
    'ShortestPathConfig',
    'NodeRegistry',
    'Edge',
    'EdgeTable',
    'Graph',
    'GraphError',
    'NodeNotFound',
    'BreadthFirstSearch',
    'DepthFirstSearch',
    'CycleDetector',
    'DijkstraQuery',
    'DijkstraShortestPath',
    'ShortestPaths',
]
