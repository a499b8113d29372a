"""
runner.py — Labelled Algorithm Runs
====================================
Runs one registry algorithm against a LabeledGraph and hands back a
RunReport that speaks labels, not indices.

Usage:
    report = run_algorithm("dijkstra", labeled, source="A", target="D")
    report.ok           # False when the algorithm refused or found nothing
    report.message      # one-line human summary, e.g. "Shortest Path: A -> D (Distance: 7)"
    report.output       # JSON-ready dict, labels already substituted

Rules carried over from the graph editor:
  - spanning-tree algorithms are refused on directed graphs,
  - cycle detection uses the detector matching the graph's directedness.
"""

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple

from algorithms import AlgoInfo, get_algorithm
from algorithms.results import (
    CycleReport,
    ShortestPath,
    SpanningTree,
    TreeCheck,
    TreeTraversal,
)
from graphcore.errors import InvalidArgument
from engine.session import LabeledGraph

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RunReport — what the caller displays
# ---------------------------------------------------------------------------
@dataclass
class RunReport:
    algo_key:     str            = ""
    algo_label:   str            = ""
    ok:           bool           = False
    message:      str            = ""
    output:       Dict[str, Any] = field(default_factory=dict)
    wall_time_ms: float          = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def run_algorithm(
    algo_key: str,
    labeled: LabeledGraph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> RunReport:
    info = get_algorithm(algo_key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algo_key}")

    if info.undirected_only and not labeled.undirected:
        return RunReport(
            algo_key=info.key,
            algo_label=info.label,
            message=f"{info.label} requires an undirected graph",
        )

    # build kwargs based on what the algo accepts
    kwargs: Dict[str, Any] = {}
    if info.needs_source:
        if not source:
            raise InvalidArgument(f"{info.label} needs a source node")
        kwargs["start"] = labeled.index_of(source)
    if info.needs_target:
        if not target:
            raise InvalidArgument(f"{info.label} needs a target node")
        kwargs["target"] = labeled.index_of(target)
    if info.takes_direction:
        kwargs["undirected"] = labeled.undirected

    graph = labeled.build()
    start_time = time.monotonic()
    raw = info.fn(graph, **kwargs)
    wall_ms = (time.monotonic() - start_time) * 1000

    ok, message, output = _describe(info, raw, labeled)
    logger.info("ran %s on %r in %.2f ms: %s", info.key, labeled, wall_ms, message)

    return RunReport(
        algo_key=info.key,
        algo_label=info.label,
        ok=ok,
        message=message,
        output=output,
        wall_time_ms=round(wall_ms, 2),
    )


# ---------------------------------------------------------------------------
# Result → (ok, message, labelled output)
# ---------------------------------------------------------------------------
def _describe(info: AlgoInfo, raw: Any, labeled: LabeledGraph) -> Tuple[bool, str, Dict[str, Any]]:
    names = labeled.labels_for

    if isinstance(raw, ShortestPath):
        output = raw.to_dict()
        output["path"] = names(raw.path)
        if not raw.reachable:
            return False, "No path exists", output
        return True, f"Shortest Path: {_chain(output['path'])} (Distance: {output['distance']})", output

    if isinstance(raw, CycleReport):
        output = raw.to_dict()
        output["cycle"] = names(raw.cycle)
        if not raw.has_cycle:
            return True, "Graph is acyclic", output
        return True, f"Cycle Detected: {_chain(output['cycle'])}", output

    if isinstance(raw, SpanningTree):
        output = raw.to_dict()
        output["edges"] = [names(e) for e in raw.edges]
        output["spans"] = raw.spans(len(labeled.labels))
        listed = ", ".join(f"{u} -> {v}" for u, v in output["edges"])
        return True, f"{info.label}: {listed} (Total Weight: {raw.total_weight})", output

    if isinstance(raw, TreeCheck):
        return raw.is_valid, raw.message, raw.to_dict()

    if isinstance(raw, TreeTraversal):
        output = raw.to_dict()
        output["result"] = names(raw.result)
        # a valid tree always has a root, so empty means validation failed
        if not raw.result:
            return False, f"Cannot perform {info.label.lower()}: {raw.message}", output
        return True, f"{info.label}: {_chain(output['result'])}", output

    if info.key == "components":
        groups: List[List[str]] = [names(c) for c in raw]
        listed = "; ".join(f"Component {i + 1}: {', '.join(g)}" for i, g in enumerate(groups))
        return True, f"{info.label}: {listed}", {"components": groups}

    order = names(raw)
    return True, f"{info.label}: {_chain(order)}", {"order": order}


def _chain(labels: List[str]) -> str:
    return " -> ".join(labels)
