"""
session.py — Labelled Graph
============================
The core only knows vertex indices 0..N-1.  Users think in labels
("A", "B", "Kitchen").  LabeledGraph is the bridge:

  - keeps the label list, the labelled edge list and the directedness flag
    exactly as the user entered them,
  - maps label → index by FIRST occurrence (duplicates map to the first),
  - builds a fresh core Graph on demand,
  - translates index results back into labels.

It is the value stored in the web session and the value the text codec
reads and writes.
"""

from typing import Iterable, List, Sequence, Tuple, Union

from graphcore.edge import Weight
from graphcore.errors import InvalidArgument
from graphcore.graph import Graph

LabeledEdge = Tuple[str, str, Weight]


class LabeledGraph:
    """
    Attributes:
        labels     : Vertex labels; position = vertex index.
        edges      : [(source_label, target_label, weight), …]
        undirected : Graph-level directedness flag.
    """

    def __init__(
        self,
        labels: Sequence[str],
        edges: Iterable[Union[Sequence, LabeledEdge]] = (),
        undirected: bool = True,
    ):
        if not isinstance(undirected, bool):
            raise InvalidArgument(f"undirected must be true or false, got {undirected!r}")

        self.labels:     List[str]         = [str(label).strip() for label in labels]
        self.undirected: bool              = undirected
        self.edges:      List[LabeledEdge] = []

        if any(not label for label in self.labels):
            raise InvalidArgument("Every node needs a non-empty name")

        for raw in edges:
            if len(raw) not in (2, 3):
                raise InvalidArgument(f"Edge must be [source, target] or [source, target, weight], got {raw!r}")
            self.add_edge(*raw)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add_edge(self, source: str, target: str, weight: Weight = 1) -> None:
        unknown = [label for label in (source, target) if label not in self.labels]
        if unknown:
            raise InvalidArgument(f"Edge {source}-{target} references unknown node(s): {', '.join(unknown)}")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise InvalidArgument(f"Edge {source}-{target} has a non-numeric weight: {weight!r}")
        self.edges.append((source, target, weight))

    def build(self) -> Graph:
        """A fresh core Graph reflecting the current labels and edges."""
        g = Graph(len(self.labels))
        for source, target, weight in self.edges:
            g.add_edge(self.index_of(source), self.index_of(target), self.undirected, weight)
        return g

    # ------------------------------------------------------------------
    # Label ↔ index
    # ------------------------------------------------------------------
    def index_of(self, label: str) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise InvalidArgument(f"Unknown node: {label}") from None

    def label_of(self, index: int) -> str:
        return self.labels[index]

    def labels_for(self, indices: Iterable[int]) -> List[str]:
        return [self.labels[i] for i in indices]

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "nodes":      list(self.labels),
            "edges":      [[s, t, w] for s, t, w in self.edges],
            "undirected": self.undirected,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LabeledGraph":
        return cls(
            labels=data.get("nodes", []),
            edges=data.get("edges", []),
            undirected=data.get("undirected", True),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        return (
            isinstance(other, LabeledGraph)
            and self.labels == other.labels
            and self.edges == other.edges
            and self.undirected == other.undirected
        )

    def __repr__(self) -> str:
        kind = "undirected" if self.undirected else "directed"
        return f"LabeledGraph(nodes={len(self.labels)}, edges={len(self.edges)}, {kind})"
