"""
Unit tests for binary-tree validation and traversals.
"""

import pytest

from graphcore import Graph


@pytest.fixture
def tree() -> Graph:
    #        0
    #      /   \
    #     1     2
    #    / \   /
    #   3   4 5
    g = Graph(6)
    # children inserted out of index order on purpose
    for u, v in [(0, 2), (0, 1), (1, 4), (1, 3), (2, 5)]:
        g.add_edge(u, v, False)
    return g


def test_valid_tree(tree):
    check = tree.is_binary_tree()
    assert check.is_valid
    assert check.message == "Valid binary tree"


def test_inorder(tree):
    traversal = tree.inorder_traversal()
    assert traversal.result == [3, 1, 4, 0, 5, 2]
    assert traversal.message == "Inorder traversal completed"


def test_preorder(tree):
    traversal = tree.preorder_traversal()
    assert traversal.result == [0, 1, 3, 4, 2, 5]
    assert traversal.message == "Preorder traversal completed"


def test_postorder(tree):
    traversal = tree.postorder_traversal()
    assert traversal.result == [3, 4, 1, 5, 2, 0]
    assert traversal.message == "Postorder traversal completed"


def test_traversals_leave_adjacency_untouched(tree):
    tree.inorder_traversal()
    tree.preorder_traversal()
    tree.postorder_traversal()
    assert tree.successors(0) == [2, 1]
    assert tree.successors(1) == [4, 3]


def test_root_need_not_be_vertex_zero():
    g = Graph(3)
    g.add_edge(2, 0, False)
    g.add_edge(2, 1, False)

    assert g.preorder_traversal().result == [2, 0, 1]
    assert g.inorder_traversal().result == [0, 2, 1]


def test_single_vertex_tree():
    g = Graph(1)
    assert g.is_binary_tree().is_valid
    assert g.inorder_traversal().result == [0]


def test_three_children_rejected():
    g = Graph(4)
    for v in (1, 2, 3):
        g.add_edge(0, v, False)

    check = g.is_binary_tree()
    assert not check.is_valid
    assert check.message == "Node 0 has 3 children - not a binary tree"


def test_two_roots_rejected():
    g = Graph(4)
    g.add_edge(0, 1, False)
    g.add_edge(2, 3, False)

    check = g.is_binary_tree()
    assert not check.is_valid
    assert check.message == "Found 2 root nodes - binary tree must have exactly one root"


def test_empty_graph_has_no_root():
    check = Graph(0).is_binary_tree()
    assert not check.is_valid
    assert check.message == "Found 0 root nodes - binary tree must have exactly one root"


def test_cycle_rejected_and_traversals_report_it():
    g = Graph(2)
    g.add_edge(0, 1, False)
    g.add_edge(1, 0, False)

    assert g.is_binary_tree().message == "Graph contains cycles - not a tree"
    for traversal in (g.inorder_traversal(), g.preorder_traversal(), g.postorder_traversal()):
        assert traversal.result == []
        assert traversal.message == "Graph contains cycles - not a tree"


def test_undirected_edges_are_never_a_tree():
    g = Graph(2)
    g.add_edge(0, 1)
    assert not g.is_binary_tree().is_valid
