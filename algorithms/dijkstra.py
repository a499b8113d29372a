"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest path with a min-priority queue keyed by tentative
distance.

Lazy deletion: a vertex may sit in the queue several times.  Entries
whose distance is worse than the current best are stale and skipped when
popped.

Correctness note: Dijkstra requires non-negative weights.  A graph with
any negative edge is rejected with InvalidArgument rather than producing
a wrong answer.
"""

import math
from typing import List, Optional

from graphcore.errors import InvalidArgument
from graphcore.graph import Graph
from graphcore.priority_queue import PriorityQueue
from algorithms.results import ShortestPath


def dijkstra(graph: Graph, start: int, target: int) -> ShortestPath:
    graph.check_vertex(start)
    graph.check_vertex(target)
    if graph.has_negative_edges():
        raise InvalidArgument("Dijkstra requires non-negative edge weights")

    dist:     List[float]         = [math.inf] * graph.vertex_count
    previous: List[Optional[int]] = [None] * graph.vertex_count
    dist[start] = 0
    pq: PriorityQueue[int] = PriorityQueue()
    pq.enqueue(start, 0)

    while pq:
        vertex, d = pq.dequeue()

        # stale entry
        if d > dist[vertex]:
            continue

        for edge in graph.neighbours(vertex):
            new_dist = dist[vertex] + edge.weight
            if new_dist < dist[edge.to]:
                dist[edge.to]     = new_dist
                previous[edge.to] = vertex
                pq.enqueue(edge.to, new_dist)

    path = _reconstruct(previous, target)
    if not path or path[0] != start:
        path = []
    return ShortestPath(path=path, distance=dist[target])


# ---------------------------------------------------------------------------
def _reconstruct(previous: List[Optional[int]], target: int) -> List[int]:
    path: List[int] = []
    cur: Optional[int] = target
    while cur is not None:
        path.append(cur)
        cur = previous[cur]
    path.reverse()
    return path
