"""Graph vertices and weighted directed edges.

A ``Node`` owns its outgoing ``Edge`` list; an ``Edge`` only references its
endpoint nodes. Nodes compare and hash by identity, so two nodes may carry
equal labels while remaining distinct vertices.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Iterable, List, Optional, Tuple, Union

from heapgraph.config import GRAPH_CONFIG
from heapgraph.types.base import Cost, DuplicateEdgePolicy


@dataclass(frozen=True)
class Edge:
    """Immutable weighted connection from ``predecessor`` to ``successor``.

    Attributes:
        predecessor (Node): Node the edge leaves.
        successor (Node): Node the edge enters.
        weight (Cost): Non-negative finite weight.
    """

    predecessor: Node
    successor: Node
    weight: Cost

    def __post_init__(self) -> None:
        """Validate the weight.

        Raises:
            ValueError: If the weight is negative, NaN, or infinite.
            TypeError: If the weight is not a real number.
        """
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise TypeError(
                f"Edge weight must be a number, got {type(self.weight).__name__}."
            )
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValueError(
                f"Edge weight must be a non-negative finite number, got {self.weight}."
            )

    def has_successor_for_data(self, data: Any) -> bool:
        """Return True if the successor's label equals ``data``."""
        return self.successor.data == data

    def __repr__(self) -> str:
        return (
            f"Edge({self.predecessor.data!r} -> {self.successor.data!r}, "
            f"weight={self.weight})"
        )


@dataclass(eq=False)
class Node:
    """Graph vertex identified by an opaque label.

    Attributes:
        data (Any): Label of the node.
    """

    data: Any
    _edges: List[Edge] = field(default_factory=list, init=False, repr=False)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Outgoing edges in the order they were created."""
        return tuple(self._edges)

    def connect_to(
        self,
        successors: Union[Node, Iterable[Node]],
        weight: Optional[Cost] = None,
        on_duplicate: Optional[DuplicateEdgePolicy] = None,
    ) -> List[Edge]:
        """Create an edge from this node to each successor.

        Args:
            successors: A single Node or an iterable of Nodes.
            weight: Weight for every new edge. Defaults to
                ``GRAPH_CONFIG.default_edge_weight``.
            on_duplicate: Handling of an existing edge to a successor with the
                same label. Defaults to ``GRAPH_CONFIG.duplicate_edge_policy``.

        Returns:
            The newly created edges, one per successor.

        Raises:
            TypeError: If a successor is not a Node.
            ValueError: If the weight is invalid, or a duplicate edge is found
                under ``DuplicateEdgePolicy.REJECT``. Nothing is connected in
                either case.
        """
        targets = [successors] if isinstance(successors, Node) else list(successors)
        if weight is None:
            weight = GRAPH_CONFIG.default_edge_weight
        policy = (
            GRAPH_CONFIG.duplicate_edge_policy if on_duplicate is None else on_duplicate
        )

        created: List[Edge] = []
        for target in targets:
            if not isinstance(target, Node):
                raise TypeError(
                    f"Can only connect to Node instances, got {type(target).__name__}."
                )
            if policy == DuplicateEdgePolicy.REJECT and (
                self.find_edge_to(target.data) is not None
                or any(e.has_successor_for_data(target.data) for e in created)
            ):
                raise ValueError(
                    f"Edge from '{self.data}' to '{target.data}' already exists."
                )
            created.append(Edge(self, target, weight))

        for edge in created:
            if policy == DuplicateEdgePolicy.REPLACE:
                self._replace(edge)
            else:
                self._edges.append(edge)
        return created

    def find_edge_to(self, successor_data: Any) -> Optional[Edge]:
        """Return the first outgoing edge whose successor label equals ``successor_data``."""
        for edge in self._edges:
            if edge.has_successor_for_data(successor_data):
                return edge
        return None

    def successors(self) -> List[Node]:
        """Return successor nodes in edge order (repeated for parallel edges)."""
        return [edge.successor for edge in self._edges]

    def disconnect_from(self, successor_data: Any) -> int:
        """Remove every outgoing edge to ``successor_data``; return how many were removed."""
        kept = [e for e in self._edges if not e.has_successor_for_data(successor_data)]
        removed = len(self._edges) - len(kept)
        self._edges = kept
        return removed

    def _replace(self, edge: Edge) -> None:
        data = edge.successor.data
        for idx, existing in enumerate(self._edges):
            if existing.has_successor_for_data(data):
                self._edges[idx] = edge
                self._edges[idx + 1 :] = [
                    e for e in self._edges[idx + 1 :] if not e.has_successor_for_data(data)
                ]
                return
        self._edges.append(edge)
