"""Directed weighted graph with Dijkstra shortest-path search.

The search frontier is a :class:`~heapgraph.queue.PriorityQueue` of
``(distance, node)`` entries ordered by distance. Nodes are relaxed only on a
strict improvement and stale frontier entries are skipped when polled, so each
node is expanded at most once. Correct results require non-negative weights,
which :class:`~heapgraph.graph.node.Edge` enforces.
"""

from __future__ import annotations

from collections import deque
from operator import itemgetter
from typing import Any, Deque, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from heapgraph.errors import NoPathError
from heapgraph.graph.node import Edge, Node
from heapgraph.graph.path import Path
from heapgraph.logging import get_logger
from heapgraph.queue import AscendingRelationalComparator, PriorityQueue
from heapgraph.types.base import Cost

LOGGER = get_logger(__name__)

NodeRef = Union[Node, Any]


class DirectedGraph:
    """The set of nodes reachable from a given collection of nodes.

    Membership is fixed at construction: nodes connected afterwards are not
    part of the graph and are ignored by searches. Node labels must be hashable
    and unique within the graph.

    Args:
        nodes: Starting nodes; everything reachable from them through
            outgoing edges is included.

    Raises:
        TypeError: If an element of ``nodes`` is not a Node.
        ValueError: If two distinct nodes share a label.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._by_data: Dict[Any, Node] = {}
        self._members: Set[Node] = set()

        pending: Deque[Node] = deque()
        for node in nodes:
            if not isinstance(node, Node):
                raise TypeError(
                    f"DirectedGraph expects Node instances, got {type(node).__name__}."
                )
            pending.append(node)

        while pending:
            node = pending.popleft()
            if node in self._members:
                continue
            if node.data in self._by_data:
                raise ValueError(f"Node '{node.data}' already exists in this graph.")
            self._by_data[node.data] = node
            self._members.add(node)
            pending.extend(node.successors())

        LOGGER.debug(
            "Built DirectedGraph with %d nodes and %d edges",
            len(self._members),
            len(self.edges()),
        )

    @property
    def nodes(self) -> List[Node]:
        """Member nodes in discovery order."""
        return list(self._by_data.values())

    def edges(self) -> List[Edge]:
        """Return every outgoing edge of every member node."""
        return [edge for node in self._by_data.values() for edge in node.edges]

    def node(self, data: Any) -> Node:
        """Return the member node labelled ``data``.

        Raises:
            KeyError: If no member node carries that label.
        """
        try:
            return self._by_data[data]
        except KeyError:
            raise KeyError(f"Node '{data}' is not in the graph.") from None

    def __contains__(self, item: NodeRef) -> bool:
        if isinstance(item, Node):
            return item in self._members
        return item in self._by_data

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def shortest_path(self, source: NodeRef, target: NodeRef) -> Optional[Path]:
        """Find a minimum-weight path from ``source`` to ``target``.

        Args:
            source: Source node, or its label.
            target: Target node, or its label.

        Returns:
            The path, or None when ``target`` is unreachable. A search from a
            node to itself returns a zero-cost path with no edges.

        Raises:
            KeyError: If either endpoint is not in the graph.
        """
        src = self._resolve(source)
        dst = self._resolve(target)

        costs, pred = self._dijkstra(src, dst)
        if dst not in costs:
            LOGGER.debug("No path found from '%s' to '%s'", src.data, dst.data)
            return None

        edges: List[Edge] = []
        node = dst
        while node is not src:
            edge = pred[node]
            edges.append(edge)
            node = edge.predecessor
        edges.reverse()

        path = Path.from_edges(src, tuple(edges))
        LOGGER.debug("Shortest path %s", path)
        return path

    def shortest_paths(
        self, source: NodeRef
    ) -> Tuple[Dict[Any, Cost], Dict[Any, Edge]]:
        """Compute shortest distances from ``source`` to every reachable node.

        Args:
            source: Source node, or its label.

        Returns:
            A tuple of (costs, pred), both keyed by node label:
              - costs: Minimal distance from the source; the source maps to 0.
              - pred: The last edge on a shortest path into each reachable node
                other than the source.

        Raises:
            KeyError: If ``source`` is not in the graph.
        """
        src = self._resolve(source)
        costs, pred = self._dijkstra(src)
        return (
            {node.data: cost for node, cost in costs.items()},
            {node.data: edge for node, edge in pred.items()},
        )

    def distance(self, source: NodeRef, target: NodeRef) -> Cost:
        """Return the total weight of a shortest path.

        Raises:
            KeyError: If either endpoint is not in the graph.
            NoPathError: If ``target`` is unreachable from ``source``.
        """
        src = self._resolve(source)
        dst = self._resolve(target)
        path = self.shortest_path(src, dst)
        if path is None:
            raise NoPathError(src.data, dst.data)
        return path.cost

    def _resolve(self, ref: NodeRef) -> Node:
        if isinstance(ref, Node):
            if ref not in self._members:
                raise KeyError(f"Node '{ref.data}' is not in the graph.")
            return ref
        return self.node(ref)

    def _dijkstra(
        self, src: Node, dst: Optional[Node] = None
    ) -> Tuple[Dict[Node, Cost], Dict[Node, Edge]]:
        # A node missing from costs is at infinite distance
        costs: Dict[Node, Cost] = {src: 0}
        pred: Dict[Node, Edge] = {}
        frontier: PriorityQueue[Tuple[Cost, Node]] = PriorityQueue(
            [(0, src)], AscendingRelationalComparator(key=itemgetter(0))
        )

        while not frontier.is_empty():
            current_cost, node = frontier.poll()
            if current_cost > costs[node]:
                continue
            if node is dst:
                break

            for edge in node.edges:
                neighbor = edge.successor
                if neighbor not in self._members:
                    continue
                new_cost = current_cost + edge.weight
                if neighbor not in costs or new_cost < costs[neighbor]:
                    costs[neighbor] = new_cost
                    pred[neighbor] = edge
                    frontier.add((new_cost, neighbor))

        return costs, pred
