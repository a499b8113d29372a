"""
cycles.py — Cycle Detection
============================
Two detectors, picked by the `undirected` flag:

  undirected=True (default)
      DFS remembering each vertex's parent.  A visited neighbour that is
      not the parent but is still on the current DFS path closes a cycle.
      The cycle is read off the parent chain.  The edge straight back to
      the parent is the mirror record of the edge we arrived on and is
      not a cycle.

  undirected=False
      White / gray / black colouring.  Gray = on the current DFS path.
      An edge into a gray vertex is a back edge, i.e. a cycle.  The cycle
      is the slice of the DFS path starting at that vertex, closed by
      repeating it.  Mirror records of undirected edges show up here as
      two-vertex cycles.

Roots are tried in index order and only the first cycle found is
reported; the graph may contain others.  A reported cycle always starts
and ends with the same vertex.
"""

from typing import List, Optional

from graphcore.graph import Graph
from algorithms.results import CycleReport

WHITE, GRAY, BLACK = 0, 1, 2


def find_cycle(graph: Graph, undirected: bool = True) -> CycleReport:
    if undirected:
        cycle = _undirected_cycle(graph)
    else:
        cycle = _directed_cycle(graph)
    return CycleReport(has_cycle=bool(cycle), cycle=cycle)


# ---------------------------------------------------------------------------
# Directed
# ---------------------------------------------------------------------------
def _directed_cycle(graph: Graph) -> List[int]:
    colour = [WHITE] * graph.vertex_count

    for root in range(graph.vertex_count):
        if colour[root] != WHITE:
            continue

        colour[root] = GRAY
        path  = [root]
        stack = [iter(graph.successors(root))]

        while stack:
            for nbr in stack[-1]:
                if colour[nbr] == GRAY:
                    return path[path.index(nbr):] + [nbr]
                if colour[nbr] == WHITE:
                    colour[nbr] = GRAY
                    path.append(nbr)
                    stack.append(iter(graph.successors(nbr)))
                    break
            else:
                stack.pop()
                colour[path.pop()] = BLACK

    return []


# ---------------------------------------------------------------------------
# Undirected
# ---------------------------------------------------------------------------
def _undirected_cycle(graph: Graph) -> List[int]:
    visited = [False] * graph.vertex_count
    on_path = [False] * graph.vertex_count
    parent: List[Optional[int]] = [None] * graph.vertex_count

    for root in range(graph.vertex_count):
        if visited[root]:
            continue

        visited[root] = on_path[root] = True
        stack = [(root, iter(graph.successors(root)))]

        while stack:
            vertex, pending = stack[-1]
            for nbr in pending:
                if not visited[nbr]:
                    visited[nbr] = on_path[nbr] = True
                    parent[nbr] = vertex
                    stack.append((nbr, iter(graph.successors(nbr))))
                    break
                if nbr != parent[vertex] and on_path[nbr]:
                    return _close_cycle(parent, vertex, nbr)
            else:
                stack.pop()
                on_path[vertex] = False

    return []


def _close_cycle(parent: List[Optional[int]], vertex: int, ancestor: int) -> List[int]:
    cycle = [vertex]
    cur = vertex
    while cur != ancestor:
        cur = parent[cur]
        cycle.append(cur)
    cycle.reverse()
    cycle.append(cycle[0])
    return cycle
