"""
edge.py — Adjacency Record
==========================
One outgoing entry in a vertex's adjacency list: where it leads and
what it costs.

Design decisions:
  - `to` is a plain vertex index, NOT a reference to another object.
    Vertices are integers 0..N-1, so records stay hashable.
  - An undirected edge is two records (u→v and v→u) with the same weight;
    the record itself carries no direction flag.
  - Weight defaults to 1 so unweighted algorithms can ignore it.
"""

from typing import Union

Weight = Union[int, float]


class EdgeRecord:
    """
    Attributes:
        to     : Index of the head vertex.
        weight : Numeric cost (default 1).
    """

    __slots__ = ("to", "weight")

    def __init__(self, to: int, weight: Weight = 1):
        self.to:     int    = to
        self.weight: Weight = weight

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"EdgeRecord(to={self.to}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, EdgeRecord)
            and self.to == other.to
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.to, self.weight))
