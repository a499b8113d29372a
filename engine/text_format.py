"""
text_format.py — Line-Oriented Graph Text Encoding
===================================================
The one exchange format for graphs:

    4           ← vertex count N (positive)
    A           ┐
    B           │ N vertex labels, one per line
    C           │
    D           ┘
    3           ← edge count E (zero or more)
    A B         ┐
    B C         │ E edges, "<source> <target>"
    C A         ┘
    UD          ← UD = undirected, D = directed

Parsing is strict: a wrong count, an edge naming an unknown label, a
bad final token or anything after it raises ImportFormatError with the
offending line number.  Weights are not part of the format.
"""

import logging
from typing import List

from graphcore.errors import ImportFormatError, InvalidArgument
from engine.session import LabeledGraph

logger = logging.getLogger(__name__)

UNDIRECTED_TOKEN = "UD"
DIRECTED_TOKEN   = "D"


def parse_graph_text(text: str) -> LabeledGraph:
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) < 3:
        raise ImportFormatError("File format is incorrect. Must have at least 3 lines.")

    # --- vertex labels ---
    vertex_count = _parse_count(lines[0], line_no=1, what="node count")
    if vertex_count <= 0:
        raise ImportFormatError("First line must be a positive number representing node count.", line=1)

    labels: List[str] = []
    for i in range(1, vertex_count + 1):
        if i >= len(lines) or not lines[i]:
            raise ImportFormatError(f"Missing node name at line {i + 1}", line=i + 1)
        labels.append(lines[i])

    # --- edges ---
    edge_line = vertex_count + 1
    if edge_line >= len(lines):
        raise ImportFormatError("Missing edge count line", line=edge_line + 1)
    edge_count = _parse_count(lines[edge_line], line_no=edge_line + 1, what="edge count")
    if edge_count < 0:
        raise ImportFormatError("Edge count must be a non-negative number.", line=edge_line + 1)

    edges = []
    for i in range(edge_line + 1, edge_line + edge_count + 1):
        if i >= len(lines):
            raise ImportFormatError(f"Missing edge at line {i + 1}", line=i + 1)
        parts = lines[i].split()
        if len(parts) != 2:
            raise ImportFormatError(
                f"Edge at line {i + 1} must have exactly 2 nodes separated by space.", line=i + 1
            )
        source, target = parts
        if source not in labels or target not in labels:
            raise ImportFormatError(
                f"Edge at line {i + 1} contains unknown node(s): {source}, {target}", line=i + 1
            )
        edges.append((source, target))

    # --- directedness ---
    type_line = edge_line + edge_count + 1
    if type_line >= len(lines):
        raise ImportFormatError(
            "Missing graph type line (UD for undirected or D for directed)", line=type_line + 1
        )
    token = lines[type_line].upper()
    if token not in (UNDIRECTED_TOKEN, DIRECTED_TOKEN):
        raise ImportFormatError("Graph type must be 'UD' (undirected) or 'D' (directed)", line=type_line + 1)

    if any(lines[type_line + 1:]):
        raise ImportFormatError(f"Unexpected content after the graph type at line {type_line + 2}",
                                line=type_line + 2)

    labeled = LabeledGraph(labels, edges, undirected=token == UNDIRECTED_TOKEN)
    logger.debug("parsed graph text: %r", labeled)
    return labeled


def format_graph_text(labeled: LabeledGraph) -> str:
    """Encode `labeled` in the text format.  The result ends with a newline."""
    if not labeled.labels:
        raise InvalidArgument("A graph with no nodes cannot be exported")
    for label in labeled.labels:
        if len(label.split()) != 1:
            raise InvalidArgument(f"Node name {label!r} contains whitespace and cannot be exported")

    lines = [str(len(labeled.labels))]
    lines.extend(labeled.labels)
    lines.append(str(len(labeled.edges)))
    lines.extend(f"{source} {target}" for source, target, _ in labeled.edges)
    lines.append(UNDIRECTED_TOKEN if labeled.undirected else DIRECTED_TOKEN)
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
def _parse_count(raw: str, line_no: int, what: str) -> int:
    # plain ASCII digits with an optional minus; int() alone also takes "+3" and "1_0"
    digits = raw[1:] if raw.startswith("-") else raw
    if not (raw.isascii() and digits.isdigit()):
        raise ImportFormatError(f"Line {line_no} must be the {what}, got {raw!r}", line=line_no)
    return int(raw)
