"""
mst.py — Minimum Spanning Trees (Prim & Kruskal)
=================================================
Both expect an undirected, connected graph.  Anything else is not an
error: the result is simply a partial tree (fewer than N-1 edges).
Callers wanting strictness check `SpanningTree.spans(vertex_count)`.

Prim grows one tree from vertex 0 with a priority queue of candidate
edges, skipping candidates whose far end is already in the tree.

Kruskal sorts every edge once (u < v, so each undirected edge is taken
from one side only) and accepts an edge iff its endpoints sit in
different DisjointSet components.
"""

from typing import List, Tuple

from graphcore.graph import Graph
from graphcore.priority_queue import PriorityQueue
from algorithms.results import SpanningTree


def prim(graph: Graph) -> SpanningTree:
    n = graph.vertex_count
    if n == 0:
        return SpanningTree()

    tree:    List[Tuple[int, int]] = []
    total                          = 0
    visited                        = [False] * n
    pq: PriorityQueue[Tuple[int, int]] = PriorityQueue()

    visited[0] = True
    for edge in graph.neighbours(0):
        pq.enqueue((0, edge.to), edge.weight)

    while pq and len(tree) < n - 1:
        (u, v), weight = pq.dequeue()
        if visited[v]:
            continue

        visited[v] = True
        tree.append((u, v))
        total += weight

        for edge in graph.neighbours(v):
            if not visited[edge.to]:
                pq.enqueue((v, edge.to), edge.weight)

    return SpanningTree(edges=tree, total_weight=total)


def kruskal(graph: Graph) -> SpanningTree:
    n = graph.vertex_count
    tree:  List[Tuple[int, int]] = []
    total                        = 0
    pq: PriorityQueue[Tuple[int, int]] = PriorityQueue()

    for u, v, weight in graph.edge_records():
        if u < v:
            pq.enqueue((u, v), weight)

    components = DisjointSet(n)
    while pq and len(tree) < n - 1:
        (u, v), weight = pq.dequeue()
        if components.union(u, v):
            tree.append((u, v))
            total += weight

    return SpanningTree(edges=tree, total_weight=total)


# ---------------------------------------------------------------------------
# Union-Find
# ---------------------------------------------------------------------------
class DisjointSet:
    """
    Union-Find over 0..size-1 with path compression.

    `union(a, b)` hangs b's root under a's root (no rank), which keeps the
    accepted-edge order of Kruskal independent of tree shapes.
    """

    def __init__(self, size: int):
        self.parent: List[int] = list(range(size))

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b.  False if they were already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_b] = root_a
        return True
