# multigraph/services/cycle_service.py
"""
    CycleDetector — does the directed graph contain a cycle?

    Classic three-colour depth-first search (unvisited / on stack / done)
    run from every node, so disconnected graphs are covered. The search
    keeps an explicit stack of (node, child iterator) frames instead of
    recursing, which keeps deep graphs within Python's recursion limit.
"""
from typing import Iterator, List, Set, Tuple

from ..models.edge import EdgeEntry
from ..models.graph import Graph
from .base_service import GraphAlgorithm


class CycleDetector(GraphAlgorithm[None, bool]):
    """
    Returns True on the first back edge found; self-loops count.
    """

    def detect(self, graph: Graph) -> bool:
        """Convenience wrapper around the generic ``execute()``."""
        return self.execute(graph, None)

    def _validate_query(self, graph: Graph, query: None) -> None:
        """Nothing to validate; the whole graph is scanned."""
        pass

    def _run(self, graph: Graph, query: None) -> bool:
        done: Set[int] = set()
        on_stack: Set[int] = set()

        for root in graph.registry.handles():
            if root in done:
                continue

            frames: List[Tuple[int, Iterator[EdgeEntry]]] = [
                (root, iter(self._outgoing(graph, root)))
            ]
            on_stack.add(root)

            while frames:
                node, children = frames[-1]
                for dst, _ in children:
                    if dst in on_stack:
                        return True
                    if dst not in done:
                        on_stack.add(dst)
                        frames.append((dst, iter(self._outgoing(graph, dst))))
                        break
                else:
                    frames.pop()
                    on_stack.discard(node)
                    done.add(node)

        return False
