"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the library exposes by name.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, needs_source, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The runner and the web layer both
consume it, so adding a new algorithm is: write the function, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.traversal   import bfs, dfs
from algorithms.dijkstra    import dijkstra
from algorithms.topological import topological_sort
from algorithms.cycles      import find_cycle
from algorithms.mst         import prim, kruskal
from algorithms.components  import connected_components
from algorithms.binary_tree import (
    validate_binary_tree,
    inorder_traversal,
    preorder_traversal,
    postorder_traversal,
)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # fn(graph, …)
    needs_source:     bool     = False       # fn takes a start vertex
    needs_target:     bool     = False       # fn takes a target vertex
    takes_direction:  bool     = False       # fn takes undirected=<graph is undirected>
    undirected_only:  bool     = False       # refuse on directed graphs
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str      = ""
    complexity_space: str      = ""
    description:      str      = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "needs_source":     self.needs_source,
            "needs_target":     self.needs_target,
            "undirected_only":  self.undirected_only,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs, needs_source=True,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Visits vertices layer by layer from the start vertex.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs, needs_source=True,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Follows each branch as deep as possible before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=dijkstra,
        needs_source=True, needs_target=True,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Cheapest path between two vertices. Non-negative weights only.",
    ),

    "topological": AlgoInfo(
        key="topological", label="Topological Sort", fn=topological_sort,
        tags=["ordering", "dag"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Orders vertices so every edge points forward. Meaningful on DAGs only.",
    ),

    "cycle": AlgoInfo(
        key="cycle", label="Cycle Detection", fn=find_cycle, takes_direction=True,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Reports the first cycle found, closed on its starting vertex.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", fn=prim, undirected_only=True,
        tags=["weighted", "spanning-tree"],
        complexity_time="O(E log E)", complexity_space="O(E)",
        description="Grows a minimum spanning tree outward from vertex 0.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", fn=kruskal, undirected_only=True,
        tags=["weighted", "spanning-tree"],
        complexity_time="O(E log E)", complexity_space="O(V + E)",
        description="Adds the cheapest edges that join separate components.",
    ),

    "components": AlgoInfo(
        key="components", label="Connected Components", fn=connected_components,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V + E)",
        description="Groups vertices that are linked, ignoring edge direction.",
    ),

    "binary_tree": AlgoInfo(
        key="binary_tree", label="Binary Tree Check", fn=validate_binary_tree,
        tags=["tree", "structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Acyclic, at most two children per vertex, exactly one root.",
    ),

    "inorder": AlgoInfo(
        key="inorder", label="Inorder Traversal", fn=inorder_traversal,
        tags=["tree", "traversal"],
        complexity_time="O(V log V)", complexity_space="O(V)",
        description="Left subtree, vertex, right subtree.",
    ),

    "preorder": AlgoInfo(
        key="preorder", label="Preorder Traversal", fn=preorder_traversal,
        tags=["tree", "traversal"],
        complexity_time="O(V log V)", complexity_space="O(V)",
        description="Vertex, left subtree, right subtree.",
    ),

    "postorder": AlgoInfo(
        key="postorder", label="Postorder Traversal", fn=postorder_traversal,
        tags=["tree", "traversal"],
        complexity_time="O(V log V)", complexity_space="O(V)",
        description="Left subtree, right subtree, vertex.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
