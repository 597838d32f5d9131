"""
Storage model — node registry, edge table and the Graph that composes them.
"""
from .registry import NodeRegistry
from .edge import Edge, EdgeTable, OutgoingEdgeSet
from .graph import Graph

__all__ = [
    'NodeRegistry',
    'Edge',
    'EdgeTable',
    'OutgoingEdgeSet',
    'Graph',
]
