"""Path result returned by shortest-path searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from heapgraph.graph.node import Edge, Node
from heapgraph.types.base import Cost


@dataclass(frozen=True)
class Path:
    """A route through a directed graph.

    A path from a node to itself has one node, no edges and zero cost, which
    keeps it distinct from the absence of a path (``None``).

    Attributes:
        nodes: Nodes visited, source first.
        edges: Edges traversed; always ``len(nodes) - 1`` long.
        cost: Sum of the edge weights.
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    cost: Cost

    @classmethod
    def from_edges(cls, source: Node, edges: Tuple[Edge, ...]) -> Path:
        """Build a path starting at ``source`` along ``edges``."""
        nodes = (source,) + tuple(edge.successor for edge in edges)
        return cls(nodes=nodes, edges=edges, cost=sum(edge.weight for edge in edges))

    @property
    def src_node(self) -> Node:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> Node:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def data(self) -> Tuple[Any, ...]:
        """Labels of the visited nodes in order."""
        return tuple(node.data for node in self.nodes)

    def __len__(self) -> int:
        return len(self.edges)

    def __bool__(self) -> bool:
        # A zero-edge path is still a path
        return True

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"Path({list(self.data)!r}, cost={self.cost})"
