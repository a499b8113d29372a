"""
errors.py — Library Error Types
================================
Everything the core raises derives from GraphError, so callers can catch
one type.  The concrete classes also inherit the matching builtin so
`except ValueError` / `except IndexError` keep working.

Unreachable targets and invalid binary trees are NOT errors: they come
back as data (empty path / `is_valid=False`).
"""

from typing import Optional


class GraphError(Exception):
    """Base class for every error raised by the graph core."""


class InvalidArgument(GraphError, ValueError):
    """A construction parameter or input value is not acceptable."""


class OutOfRange(GraphError, IndexError):
    """A vertex index lies outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex       = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} is out of range for a graph with {vertex_count} vertices"
        )


class ImportFormatError(InvalidArgument):
    """Graph text could not be parsed.  `line` is 1-based when known."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        super().__init__(message)
