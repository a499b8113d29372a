"""
components.py — Connected Components
=====================================
Direction is ignored: every record u→v also links v→u in a symmetric
view built up front.  Components are reported in order of their lowest
root index, members in discovery order.
"""

from typing import Dict, List

from graphcore.graph import Graph
from algorithms.traversal import walk_depth_first


def connected_components(graph: Graph) -> List[List[int]]:
    # dict keys act as an insertion-ordered set
    symmetric: List[Dict[int, None]] = [{} for _ in range(graph.vertex_count)]
    for u, v, _ in graph.edge_records():
        symmetric[u][v] = None
        symmetric[v][u] = None

    visited = [False] * graph.vertex_count
    components: List[List[int]] = []

    for root in range(graph.vertex_count):
        if visited[root]:
            continue
        components.append([
            vertex
            for vertex, finished in walk_depth_first(lambda v: symmetric[v], root, visited)
            if not finished
        ])

    return components
