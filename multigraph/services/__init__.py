"""
Graph algorithms — traversal, cycle detection, shortest paths, and base abstractions.
"""
from .base_service import GraphAlgorithm
from .traversal_service import BreadthFirstSearch, DepthFirstSearch
from .cycle_service import CycleDetector
from .shortest_path_service import DijkstraQuery, DijkstraShortestPath, ShortestPaths
from .exceptions import GraphError, NodeNotFound

__all__ = [
    'GraphAlgorithm',
    'BreadthFirstSearch',
    'DepthFirstSearch',
    'CycleDetector',
    'DijkstraQuery',
    'DijkstraShortestPath',
    'ShortestPaths',
    'GraphError',
    'NodeNotFound',
]
