"""
graphcore/
----------
Core data layer.  Public API:

    from graphcore import Graph, EdgeRecord, PriorityQueue
    from graphcore import GraphError, InvalidArgument, OutOfRange
"""

from graphcore.edge           import EdgeRecord
from graphcore.errors         import GraphError, InvalidArgument, OutOfRange, ImportFormatError
from graphcore.graph          import Graph
from graphcore.priority_queue import PriorityQueue, QueueItem

__all__ = [
    "Graph",
    "EdgeRecord",
    "PriorityQueue",     "QueueItem",
    "GraphError",        "InvalidArgument",
    "OutOfRange",        "ImportFormatError",
]
