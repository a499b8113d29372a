"""
engine/
-------
Label & run layer.

    from engine import LabeledGraph, parse_graph_text, format_graph_text
    from engine import run_algorithm, RunReport
"""

from engine.session     import LabeledGraph
from engine.text_format import parse_graph_text, format_graph_text
from engine.runner      import run_algorithm, RunReport

__all__ = [
    "LabeledGraph",
    "parse_graph_text",
    "format_graph_text",
    "run_algorithm",
    "RunReport",
]
