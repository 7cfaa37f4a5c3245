"""Directed weighted graphs and shortest-path search."""

from __future__ import annotations

from heapgraph.graph.convert import from_networkx, to_networkx
from heapgraph.graph.directed import DirectedGraph
from heapgraph.graph.node import Edge, Node
from heapgraph.graph.path import Path

__all__ = [
    "DirectedGraph",
    "Edge",
    "Node",
    "Path",
    "from_networkx",
    "to_networkx",
]
