"""heapgraph: comparator-driven priority queue and directed weighted graphs.

Primary API:
    PriorityQueue - Binary heap ordered by an injected Comparator
    AscendingRelationalComparator, DescendingRelationalComparator - Built-in orders
    Node, Edge - Graph vertex and weighted directed connection
    DirectedGraph - Reachable node set with Dijkstra shortest-path search
    to_networkx(), from_networkx() - NetworkX interoperability

Example:
    from heapgraph import DirectedGraph, Node

    a, b, c = Node("A"), Node("B"), Node("C")
    a.connect_to(b, 2)
    b.connect_to(c, 3)
    a.connect_to(c, 10)

    path = DirectedGraph([a]).shortest_path("A", "C")
    assert path.data == ("A", "B", "C") and path.cost == 5
"""

from __future__ import annotations

from heapgraph import logging
from heapgraph.config import GRAPH_CONFIG, GraphConfig
from heapgraph.errors import (
    NULL_ITEM_MESSAGE,
    ComparatorError,
    InvalidElementError,
    NoPathError,
)
from heapgraph.graph import (
    DirectedGraph,
    Edge,
    Node,
    Path,
    from_networkx,
    to_networkx,
)
from heapgraph.queue import (
    AscendingRelationalComparator,
    Comparator,
    DescendingRelationalComparator,
    NaturalComparator,
    PriorityQueue,
)
from heapgraph.types.base import Cost, DuplicateEdgePolicy

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Queue
    "PriorityQueue",
    "Comparator",
    "AscendingRelationalComparator",
    "DescendingRelationalComparator",
    "NaturalComparator",
    # Graph
    "Node",
    "Edge",
    "DirectedGraph",
    "Path",
    # Errors
    "InvalidElementError",
    "ComparatorError",
    "NoPathError",
    "NULL_ITEM_MESSAGE",
    # Types and configuration
    "Cost",
    "DuplicateEdgePolicy",
    "GraphConfig",
    "GRAPH_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
