"""Sample graphs shared by graph tests."""

import pytest

from heapgraph.graph import Node


def build(edges):
    """Create nodes for ``(src, dst, weight)`` triples; return them by label."""
    nodes = {}
    for src, dst, weight in edges:
        nodes.setdefault(src, Node(src))
        nodes.setdefault(dst, Node(dst))
        nodes[src].connect_to(nodes[dst], weight)
    return nodes


@pytest.fixture
def two_nodes():
    """predecessor -> successor with weight 45."""
    return build([("predecessor", "successor", 45)])


@pytest.fixture
def square_1():
    return build([("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)])


@pytest.fixture
def graph_1():
    return build(
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("C", "D", 2),
            ("A", "E", 1),
            ("E", "C", 1),
            ("A", "D", 4),
            ("C", "F", 1),
            ("F", "D", 1),
        ]
    )


@pytest.fixture
def graph_with_cycle():
    return build(
        [
            ("A", "B", 2),
            ("B", "A", 2),
            ("B", "C", 7),
            ("A", "C", 10),
            ("C", "A", 1),
            ("C", "D", 0),
        ]
    )


@pytest.fixture
def disconnected():
    """Two components: A -> B and C -> D."""
    return build([("A", "B", 1), ("C", "D", 1)])
