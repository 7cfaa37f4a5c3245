"""Comparator-driven priority queue."""

from __future__ import annotations

from heapgraph.queue.comparators import (
    AscendingRelationalComparator,
    Comparator,
    DescendingRelationalComparator,
    NaturalComparator,
    as_comparator,
)
from heapgraph.queue.priority_queue import PriorityQueue

__all__ = [
    "AscendingRelationalComparator",
    "Comparator",
    "DescendingRelationalComparator",
    "NaturalComparator",
    "PriorityQueue",
    "as_comparator",
]
