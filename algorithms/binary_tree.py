"""
binary_tree.py — Binary-Tree Validation & Traversals
=====================================================
The graph is read as a directed tree.  It is a valid binary tree when

  1. it has no directed cycle,
  2. no vertex has more than two outgoing edges,
  3. exactly one vertex has no incoming edge (the root).

Failures come back as data (TreeCheck / TreeTraversal with a message),
never as exceptions, so the caller can show the reason as-is.

Left / right: edges carry no side, so a vertex's successors are sorted
by index and the first is taken as the left child, the second as the
right.  A lone child is therefore always a left child.  The adjacency
itself is never reordered.
"""

from typing import List

from graphcore.graph import Graph
from algorithms.cycles import find_cycle
from algorithms.results import TreeCheck, TreeTraversal


def validate_binary_tree(graph: Graph) -> TreeCheck:
    if find_cycle(graph, undirected=False).has_cycle:
        return TreeCheck(False, "Graph contains cycles - not a tree")

    for vertex in range(graph.vertex_count):
        children = graph.out_degree(vertex)
        if children > 2:
            return TreeCheck(False, f"Node {vertex} has {children} children - not a binary tree")

    roots = graph.in_degrees().count(0)
    if roots != 1:
        return TreeCheck(False, f"Found {roots} root nodes - binary tree must have exactly one root")

    return TreeCheck(True, "Valid binary tree")


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def inorder_traversal(graph: Graph) -> TreeTraversal:
    check = validate_binary_tree(graph)
    if not check.is_valid:
        return TreeTraversal([], check.message)

    order: List[int] = []
    stack: List[int] = []
    cur = _root(graph)
    while stack or cur is not None:
        while cur is not None:
            stack.append(cur)
            cur = _child(graph, cur, 0)
        cur = stack.pop()
        order.append(cur)
        cur = _child(graph, cur, 1)

    return TreeTraversal(order, "Inorder traversal completed")


def preorder_traversal(graph: Graph) -> TreeTraversal:
    check = validate_binary_tree(graph)
    if not check.is_valid:
        return TreeTraversal([], check.message)

    order: List[int] = []
    stack = [_root(graph)]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        # right pushed first so left is popped first
        stack.extend(reversed(_children(graph, vertex)))

    return TreeTraversal(order, "Preorder traversal completed")


def postorder_traversal(graph: Graph) -> TreeTraversal:
    check = validate_binary_tree(graph)
    if not check.is_valid:
        return TreeTraversal([], check.message)

    # root-right-left, reversed, is left-right-root
    order: List[int] = []
    stack = [_root(graph)]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        stack.extend(_children(graph, vertex))
    order.reverse()

    return TreeTraversal(order, "Postorder traversal completed")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _root(graph: Graph) -> int:
    return graph.in_degrees().index(0)


def _children(graph: Graph, vertex: int) -> List[int]:
    return sorted(graph.successors(vertex))[:2]


def _child(graph: Graph, vertex: int, side: int):
    children = _children(graph, vertex)
    return children[side] if side < len(children) else None
