"""
Unit tests for the line-oriented graph text encoding.
"""

import pytest

from engine import LabeledGraph, format_graph_text, parse_graph_text
from graphcore import ImportFormatError, InvalidArgument

EXAMPLE = """4
A
B
C
D
3
A B
B C
C A
UD
"""


def test_parse_example():
    lg = parse_graph_text(EXAMPLE)

    assert lg.labels == ["A", "B", "C", "D"]
    assert [(s, t) for s, t, _ in lg.edges] == [("A", "B"), ("B", "C"), ("C", "A")]
    assert lg.undirected


def test_parse_directed_lowercase_and_padding():
    lg = parse_graph_text("\n  2\n A \nB\n1\n  A   B \nd\n\n")

    assert lg.labels == ["A", "B"]
    assert lg.edges == [("A", "B", 1)]
    assert not lg.undirected


def test_zero_edges():
    lg = parse_graph_text("1\nSolo\n0\nD")
    assert lg.labels == ["Solo"]
    assert lg.edges == []


@pytest.mark.parametrize("text, line", [
    ("2\nA", None),                              # fewer than 3 lines
    ("x\nA\nB", 1),                              # count not a number
    ("0\nA\nUD", 1),                             # count not positive
    ("3\nA\nB", 4),                              # missing label
    ("2\nA\n\nB\n0\nUD", 3),                     # blank label
    ("2\nA\nB", 4),                              # missing edge count
    ("2\nA\nB\n-1\nUD", 4),                      # negative edge count
    ("2\nA\nB\n2\nA B", 6),                      # missing edge
    ("2\nA\nB\n1\nA B C\nUD", 5),                # three tokens
    ("2\nA\nB\n1\nA C\nUD", 5),                  # unknown label
    ("2\nA\nB\n1\nA B", 6),                      # missing type line
    ("2\nA\nB\n1\nA B\nX", 6),                   # bad type token
    ("2\nA\nB\n1\nA B\nD\nextra", 7),            # trailing content
])
def test_malformed_text_rejected(text, line):
    with pytest.raises(ImportFormatError) as exc:
        parse_graph_text(text)
    assert exc.value.line == line


def test_import_error_is_an_invalid_argument():
    with pytest.raises(InvalidArgument):
        parse_graph_text("")


def test_format_example():
    assert format_graph_text(parse_graph_text(EXAMPLE)) == EXAMPLE


def test_round_trip_preserves_graph():
    lg = LabeledGraph(["n1", "n2", "n3"], [("n1", "n3"), ("n3", "n2"), ("n1", "n1")], undirected=False)

    again = parse_graph_text(format_graph_text(lg))
    assert again == lg
    assert again.build().adjacency == lg.build().adjacency


def test_whitespace_labels_cannot_be_exported():
    with pytest.raises(InvalidArgument):
        format_graph_text(LabeledGraph(["New York", "Boston"]))


@pytest.mark.parametrize("count", ["+2", "2_0", "٢", "2.0", "- 2"])
def test_counts_must_be_plain_digits(count):
    with pytest.raises(ImportFormatError) as exc:
        parse_graph_text(f"{count}\nA\nB\n0\nUD")
    assert exc.value.line == 1


def test_empty_graph_cannot_be_exported():
    with pytest.raises(InvalidArgument):
        format_graph_text(LabeledGraph([]))
