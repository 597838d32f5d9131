# tests/services_test/test_traversal_service.py
import pytest

from multigraph import BreadthFirstSearch, DepthFirstSearch, NodeNotFound

from tests.conftest import build_graph


# ── Breadth-first search ────────────────────────────────────────

def test_bfs_predecessor_map(bfs_graph):
    """1→2, 1→3, 2→5, 5⟲ : four reached nodes, 4 stays unreached."""
    pred = bfs_graph.bfs(1)
    assert len(pred) == 4
    assert pred == {1: 1, 2: 1, 3: 1, 5: 2}


def test_bfs_source_maps_to_itself(bfs_graph):
    assert bfs_graph.bfs(4) == {4: 4}


def test_bfs_keeps_first_discovery():
    """5 is reachable from both 2 and 3; 2 is discovered first."""
    g = build_graph(
        [1, 2, 3, 5],
        [(1, 2, None), (1, 3, None), (2, 5, None), (3, 5, None)],
    )
    assert g.bfs(1)[5] == 2


def test_bfs_shortest_hop_predecessor():
    """1→2→3→4 and 1→4: 4 is one hop away."""
    g = build_graph(
        [1, 2, 3, 4],
        [(1, 2, None), (2, 3, None), (3, 4, None), (1, 4, None)],
    )
    assert g.bfs(1)[4] == 1


def test_bfs_parallel_edges_do_not_duplicate(empty_graph):
    empty_graph.add_node("a")
    empty_graph.add_node("b")
    empty_graph.add_edge("a", "b", 1)
    empty_graph.add_edge("a", "b", 2)
    assert empty_graph.bfs("a") == {"a": "a", "b": "a"}


def test_bfs_missing_source_raises(bfs_graph):
    with pytest.raises(NodeNotFound) as exc_info:
        bfs_graph.bfs(42)
    assert exc_info.value.node == 42


def test_bfs_missing_edge_set_raises(bfs_graph, caplog):
    """A reached node without an outgoing set is reported, not skipped."""
    bfs_graph.edge_table._sets.pop(bfs_graph.registry.handle_of(2))
    with pytest.raises(NodeNotFound) as exc_info:
        bfs_graph.bfs(1)
    assert exc_info.value.node == 2
    assert "Edge table has no entry for node 2" in caplog.text


def test_bfs_service_directly(bfs_graph):
    assert BreadthFirstSearch().search(bfs_graph, 2) == {2: 2, 5: 2}


# ── Depth-first search ──────────────────────────────────────────

def test_dfs_cycle(triangle_graph):
    assert triangle_graph.dfs(1) == {1, 2, 3}


def test_dfs_reachable_only(bfs_graph):
    assert bfs_graph.dfs(1) == {1, 2, 3, 5}
    assert bfs_graph.dfs(2) == {2, 5}
    assert bfs_graph.dfs(4) == {4}


def test_dfs_diamond_visits_each_node_once():
    g = build_graph(
        ["a", "b", "c", "d"],
        [("a", "b", None), ("a", "c", None), ("b", "d", None), ("c", "d", None)],
    )
    assert g.dfs("a") == {"a", "b", "c", "d"}


def test_dfs_missing_source_raises(triangle_graph):
    with pytest.raises(NodeNotFound) as exc_info:
        triangle_graph.dfs(99)
    assert exc_info.value.node == 99


def test_dfs_missing_edge_set_raises(triangle_graph):
    triangle_graph.edge_table._sets.pop(triangle_graph.registry.handle_of(3))
    with pytest.raises(NodeNotFound):
        triangle_graph.dfs(1)


def test_dfs_long_chain():
    """An explicit stack handles chains far deeper than the recursion limit."""
    n = 5000
    g = build_graph(range(n), [(i, i + 1, None) for i in range(n - 1)])
    assert len(g.dfs(0)) == n


def test_dfs_service_directly(triangle_graph):
    assert DepthFirstSearch().search(triangle_graph, 2) == {1, 2, 3}
