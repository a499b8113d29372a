"""
results.py — Algorithm Result Records
======================================
Plain frozen dataclasses returned by the algorithms.  Like Step in the
playback engine, they are SNAPSHOTS: the algorithm is the only writer,
callers only read.

Each record has `to_dict()`; the runner relabels its vertex fields for JSON output.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class ShortestPath:
    """
    Attributes:
        path     : Vertices from start to target inclusive, or [] if unreachable.
        distance : Total weight of `path`; math.inf when unreachable.
    """

    path:     List[int] = field(default_factory=list)
    distance: Number    = math.inf

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict:
        # JSON has no infinity literal
        return {
            "path":     list(self.path),
            "distance": None if math.isinf(self.distance) else self.distance,
        }


@dataclass(frozen=True)
class CycleReport:
    """`cycle` is closed (first == last) when `has_cycle` is True, else []."""

    has_cycle: bool      = False
    cycle:     List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"has_cycle": self.has_cycle, "cycle": list(self.cycle)}


@dataclass(frozen=True)
class SpanningTree:
    """
    Attributes:
        edges        : (u, v) pairs in the order they were accepted.
        total_weight : Sum of the accepted edge weights.
    """

    edges:        List[Tuple[int, int]] = field(default_factory=list)
    total_weight: Number                = 0

    def spans(self, vertex_count: int) -> bool:
        """True when the tree reaches every vertex (graph was connected)."""
        return len(self.edges) == max(vertex_count - 1, 0)

    def to_dict(self) -> dict:
        return {
            "edges":        [list(e) for e in self.edges],
            "total_weight": self.total_weight,
        }


@dataclass(frozen=True)
class TreeCheck:
    is_valid: bool
    message:  str

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "message": self.message}


@dataclass(frozen=True)
class TreeTraversal:
    result:  List[int]
    message: str

    def to_dict(self) -> dict:
        return {"result": list(self.result), "message": self.message}
