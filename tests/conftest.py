# tests/conftest.py
"""
Shared test fixtures.
Classic graph: 6 nodes, 9 undirected weighted edges (18 directed entries),
the textbook Dijkstra example.
"""
import pytest

from multigraph import Graph


# ── Classic weighted graph (all UNDIRECTED) ──────────────────────
_CLASSIC_EDGES = [
    (0, 1, 14),
    (0, 2, 9),
    (0, 3, 7),
    (1, 4, 5),
    (2, 1, 4),
    (2, 5, 3),
    (2, 3, 10),
    (3, 5, 15),
    (4, 5, 8),
]


def build_graph(nodes, edges) -> Graph:
    """Graph with the given nodes and directed (src, dst, weight) edges."""
    g = Graph()
    for node in nodes:
        g.add_node(node)
    for src, dst, weight in edges:
        g.add_edge(src, dst, weight)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    """An empty graph with no nodes or edges."""
    return Graph()


@pytest.fixture
def classic_graph() -> Graph:
    """6 nodes, 9 undirected weighted edges."""
    g = Graph()
    for node in range(6):
        g.add_node(node)
    for a, b, weight in _CLASSIC_EDGES:
        g.add_undirected_edge(a, b, weight)
    return g


@pytest.fixture
def bfs_graph() -> Graph:
    """
        1 → 2 → 5 ⟲
        1 → 3
        4 (isolated)
    """
    return build_graph(
        [1, 2, 3, 4, 5],
        [(1, 2, None), (1, 3, None), (2, 5, None), (5, 5, None)],
    )


@pytest.fixture
def triangle_graph() -> Graph:
    """1 → 2 → 3 → 1, unweighted."""
    return build_graph([1, 2, 3], [(1, 2, None), (2, 3, None), (3, 1, None)])


@pytest.fixture
def dag() -> Graph:
    """0 → 1, 0 → 2, 1 → 2 — acyclic."""
    return build_graph([0, 1, 2], [(0, 1, None), (0, 2, None), (1, 2, None)])


@pytest.fixture
def cities() -> Graph:
    """Mixed weighted / unweighted string graph."""
    g = Graph()
    for city in ["Beijing", "Shanghai", "Guangzhou", "London", "Glasgow"]:
        g.add_node(city)
    g.add_edge("Beijing", "Shanghai", 100)
    g.add_edge("Beijing", "Guangzhou", 200)
    g.add_edge("London", "Glasgow")
    return g
