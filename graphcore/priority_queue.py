"""
priority_queue.py — Stable Min-Priority Queue
==============================================
Shared by Dijkstra, Prim and Kruskal.

A binary heap (heapq) of (priority, sequence, element) triples.  The
monotonically increasing sequence number breaks ties, so equal priorities
come out in the order they went in, and elements never need to be
comparable themselves.
"""

import heapq
import itertools
from typing import Any, Generic, List, NamedTuple, Tuple, TypeVar

T = TypeVar("T")


class QueueItem(NamedTuple):
    element:  Any
    priority: float


class PriorityQueue(Generic[T]):

    def __init__(self):
        self._heap: List[Tuple[float, int, T]] = []
        self._seq = itertools.count()

    def enqueue(self, element: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._seq), element))

    def dequeue(self) -> QueueItem:
        """Pop the lowest-priority item.  Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("dequeue from an empty PriorityQueue")
        priority, _, element = heapq.heappop(self._heap)
        return QueueItem(element, priority)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"
