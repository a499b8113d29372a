"""
Unit tests for the algorithm registry.
"""

from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, list_algorithms


def test_every_operation_is_registered():
    assert set(REGISTRY) == {
        "bfs", "dfs", "dijkstra", "topological", "cycle", "prim", "kruskal",
        "components", "binary_tree", "inorder", "preorder", "postorder",
    }


def test_lookup():
    assert get_algorithm("dijkstra").needs_target
    assert get_algorithm("nope") is None


def test_list_keeps_insertion_order():
    assert [a.key for a in list_algorithms()][:3] == ["bfs", "dfs", "dijkstra"]


def test_by_tag():
    assert [a.key for a in algorithms_by_tag("spanning-tree")] == ["prim", "kruskal"]


def test_to_dict_is_json_ready():
    card = get_algorithm("prim").to_dict()
    assert card["undirected_only"] is True
    assert "fn" not in card
