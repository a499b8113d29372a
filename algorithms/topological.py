"""
topological.py — DFS-Based Topological Sort
============================================
Roots are tried in index order 0..N-1.  Each vertex is pushed once all of
its descendants have finished; the reversed push order is the result.

Only meaningful on a DAG.  Acyclicity is NOT checked here: on a cyclic
graph the output is deterministic but not a topological order.  Run
cycle detection first when that matters.
"""

from typing import List

from graphcore.graph import Graph
from algorithms.traversal import walk_depth_first


def topological_sort(graph: Graph) -> List[int]:
    visited = [False] * graph.vertex_count
    finished_order: List[int] = []

    for root in range(graph.vertex_count):
        if visited[root]:
            continue
        for vertex, finished in walk_depth_first(graph.successors, root, visited):
            if finished:
                finished_order.append(vertex)

    finished_order.reverse()
    return finished_order
