"""
graph.py — Graph Container
===========================
Single source of truth for the graph.  Every algorithm reads this object;
none of them mutate it.

Responsibilities:
  1. Construction over a fixed vertex count   (vertices 0..N-1)
  2. Edge insertion                           (directed or undirected)
  3. Adjacency queries                        (neighbours, successors, degrees)
  4. Algorithm entry points                   (thin wrappers over algorithms/)

Design decisions:
  - `adjacency[v]` is a list of EdgeRecord in insertion order.  The order
    is significant: it drives BFS/DFS visiting order.
  - Every key 0..N-1 exists from construction on.  Vertices are never
    added or removed afterwards.
  - An undirected edge is stored as two records.  Self-loops and parallel
    edges are kept as given.
  - Bad vertex indices raise OutOfRange instead of being ignored.
"""

from typing import Dict, List, Tuple

from graphcore.edge import EdgeRecord, Weight
from graphcore.errors import InvalidArgument, OutOfRange


class Graph:
    """
    Attributes:
        vertex_count : Number of vertices, fixed for the graph's lifetime.
        adjacency    : {vertex: [EdgeRecord, …]}
    """

    def __init__(self, vertex_count: int):
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgument(f"Vertex count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise InvalidArgument(f"Vertex count must be non-negative, got {vertex_count}")
        self.vertex_count: int                         = vertex_count
        self.adjacency:    Dict[int, List[EdgeRecord]] = {v: [] for v in range(vertex_count)}

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, u: int, v: int, undirected: bool = True, weight: Weight = 1) -> None:
        self.check_vertex(u)
        self.check_vertex(v)
        self.adjacency[u].append(EdgeRecord(v, weight))
        if undirected:
            self.adjacency[v].append(EdgeRecord(u, weight))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def check_vertex(self, vertex: int) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise OutOfRange(vertex, self.vertex_count)
        if not 0 <= vertex < self.vertex_count:
            raise OutOfRange(vertex, self.vertex_count)

    def neighbours(self, vertex: int) -> List[EdgeRecord]:
        """Outgoing records of `vertex` in insertion order."""
        self.check_vertex(vertex)
        return list(self.adjacency[vertex])

    def successors(self, vertex: int) -> List[int]:
        self.check_vertex(vertex)
        return [e.to for e in self.adjacency[vertex]]

    def out_degree(self, vertex: int) -> int:
        self.check_vertex(vertex)
        return len(self.adjacency[vertex])

    def in_degrees(self) -> List[int]:
        degrees = [0] * self.vertex_count
        for records in self.adjacency.values():
            for e in records:
                degrees[e.to] += 1
        return degrees

    def edge_records(self) -> List[Tuple[int, int, Weight]]:
        """Every stored record as (from, to, weight), vertex by vertex."""
        return [
            (u, e.to, e.weight)
            for u in range(self.vertex_count)
            for e in self.adjacency[u]
        ]

    def edge_count(self) -> int:
        """Number of stored records (an undirected edge counts twice)."""
        return sum(len(records) for records in self.adjacency.values())

    def has_negative_edges(self) -> bool:
        return any(w < 0 for _, _, w in self.edge_records())

    # ==================================================================
    # ALGORITHMS
    # ==================================================================
    # Imported lazily: algorithms/ depends on this module.

    def bfs(self, start: int) -> List[int]:
        from algorithms.traversal import bfs
        return bfs(self, start)

    def dfs(self, start: int) -> List[int]:
        from algorithms.traversal import dfs
        return dfs(self, start)

    def dijkstra(self, start: int, target: int):
        from algorithms.dijkstra import dijkstra
        return dijkstra(self, start, target)

    def topological_sort(self) -> List[int]:
        from algorithms.topological import topological_sort
        return topological_sort(self)

    def has_cycle(self, undirected: bool = True):
        from algorithms.cycles import find_cycle
        return find_cycle(self, undirected=undirected)

    def prim(self):
        from algorithms.mst import prim
        return prim(self)

    def kruskal(self):
        from algorithms.mst import kruskal
        return kruskal(self)

    def connected_components(self) -> List[List[int]]:
        from algorithms.components import connected_components
        return connected_components(self)

    def is_binary_tree(self):
        from algorithms.binary_tree import validate_binary_tree
        return validate_binary_tree(self)

    def inorder_traversal(self):
        from algorithms.binary_tree import inorder_traversal
        return inorder_traversal(self)

    def preorder_traversal(self):
        from algorithms.binary_tree import preorder_traversal
        return preorder_traversal(self)

    def postorder_traversal(self):
        from algorithms.binary_tree import postorder_traversal
        return postorder_traversal(self)

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, records={self.edge_count()})"
