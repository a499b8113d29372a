"""
traversal.py — Breadth-First & Depth-First Search
==================================================
Both return the vertices reachable from `start` in the order they were
first visited.  Unreachable vertices are simply absent.

DFS uses an explicit stack of neighbour iterators (no Python recursion
limit issues).  Keeping one iterator per open vertex means a vertex is
resumed exactly where it left off, so the visiting order is identical to
the textbook recursive version:

    def dfs(v):
        visited[v] = True
        for nbr in adj(v):
            if not visited[nbr]:
                dfs(nbr)
"""

from collections import deque
from typing import Callable, Iterable, Iterator, List, Tuple

from graphcore.graph import Graph


def bfs(graph: Graph, start: int) -> List[int]:
    graph.check_vertex(start)

    visited = [False] * graph.vertex_count
    visited[start] = True
    queue   = deque([start])
    order: List[int] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nbr in graph.successors(vertex):
            if not visited[nbr]:
                visited[nbr] = True
                queue.append(nbr)

    return order


def dfs(graph: Graph, start: int) -> List[int]:
    graph.check_vertex(start)

    visited = [False] * graph.vertex_count
    return [
        vertex
        for vertex, finished in walk_depth_first(graph.successors, start, visited)
        if not finished
    ]


# ---------------------------------------------------------------------------
# Shared walker
# ---------------------------------------------------------------------------
def walk_depth_first(
    adjacent: Callable[[int], Iterable[int]],
    root: int,
    visited: List[bool],
) -> Iterator[Tuple[int, bool]]:
    """
    Yield (vertex, finished) events of a depth-first walk from `root`.

    (v, False) fires when v is first entered (pre-order), (v, True) once
    all of its descendants are done (post-order).  `visited` is updated in
    place so callers can chain walks over several roots.
    """
    visited[root] = True
    yield root, False
    stack = [(root, iter(adjacent(root)))]

    while stack:
        vertex, pending = stack[-1]
        for nbr in pending:
            if not visited[nbr]:
                visited[nbr] = True
                yield nbr, False
                stack.append((nbr, iter(adjacent(nbr))))
                break
        else:
            stack.pop()
            yield vertex, True
