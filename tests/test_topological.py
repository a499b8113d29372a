"""
Unit tests for DFS-based topological sort.
"""

from graphcore import Graph


def _dag() -> Graph:
    g = Graph(6)
    for u, v in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
        g.add_edge(u, v, False)
    return g


def test_known_order():
    assert _dag().topological_sort() == [5, 4, 2, 3, 1, 0]


def test_every_edge_points_forward():
    g = _dag()
    order = g.topological_sort()
    position = {v: i for i, v in enumerate(order)}

    assert sorted(order) == list(range(g.vertex_count))
    for u, v, _ in g.edge_records():
        assert position[u] < position[v]


def test_isolated_vertices_included():
    g = Graph(3)
    g.add_edge(0, 1, False)
    assert g.topological_sort() == [2, 0, 1]


def test_empty_graph():
    assert Graph(0).topological_sort() == []


def test_cyclic_graph_still_lists_each_vertex_once():
    g = Graph(3)
    g.add_edge(0, 1, False)
    g.add_edge(1, 2, False)
    g.add_edge(2, 0, False)

    order = g.topological_sort()
    assert order == [0, 1, 2]
    assert order == g.topological_sort()
