"""Graph conversion utilities between DirectedGraph and NetworkX graphs.

Each ``Edge`` maps to exactly one NetworkX edge, so parallel edges survive a
round trip through ``nx.MultiDiGraph``. NetworkX node keys are node labels.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import networkx as nx

from heapgraph.graph.directed import DirectedGraph
from heapgraph.graph.node import Node
from heapgraph.types.base import Cost, DuplicateEdgePolicy


def to_networkx(graph: DirectedGraph, weight_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a DirectedGraph to a NetworkX MultiDiGraph.

    Args:
        graph: The DirectedGraph to convert.
        weight_attr: Edge attribute that receives each edge's weight.

    Returns:
        A MultiDiGraph with one node per label and one edge per Edge.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(node.data for node in graph.nodes)
    for edge in graph.edges():
        if edge.successor not in graph:
            continue
        nx_graph.add_edge(
            edge.predecessor.data, edge.successor.data, **{weight_attr: edge.weight}
        )
    return nx_graph


def from_networkx(
    nx_graph: Any,
    weight_attr: str = "weight",
    default_weight: Optional[Cost] = None,
) -> DirectedGraph:
    """Build a DirectedGraph from a directed NetworkX graph.

    Args:
        nx_graph: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges without ``weight_attr``. None uses
            ``GRAPH_CONFIG.default_edge_weight``.

    Returns:
        DirectedGraph containing every NetworkX node, isolated ones included.

    Raises:
        TypeError: If ``nx_graph`` is not a directed NetworkX graph.
    """
    if not isinstance(nx_graph, nx.Graph) or not nx_graph.is_directed():
        raise TypeError(
            f"Expected a directed NetworkX graph, got {type(nx_graph).__name__}."
        )

    nodes: Dict[Any, Node] = {label: Node(label) for label in nx_graph.nodes}
    for u, v, data in nx_graph.edges(data=True):
        nodes[u].connect_to(
            nodes[v],
            data.get(weight_attr, default_weight),
            on_duplicate=DuplicateEdgePolicy.ALLOW,
        )
    return DirectedGraph(nodes.values())
