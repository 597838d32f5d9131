# multigraph/services/exceptions.py
from typing import Any


class GraphError(Exception):
    """Base class for errors raised by graph operations."""
    pass


class NodeNotFound(GraphError):
    """Raised when an operation needs a registered node and it is absent."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Node {node!r} does not exist.")
