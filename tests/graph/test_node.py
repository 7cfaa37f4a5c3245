import pytest

from heapgraph.graph import Edge, Node
from heapgraph.types.base import DuplicateEdgePolicy


@pytest.fixture
def predecessor():
    return Node("predecessor")


@pytest.fixture
def successor():
    return Node("successor")


class TestNode:
    def test_weighted_connection(self, predecessor, successor):
        predecessor.connect_to(successor, 45)

        edge = predecessor.find_edge_to("successor")
        assert edge.predecessor is predecessor
        assert edge.successor is successor
        assert edge.weight == 45

    def test_no_connection_to_disconnected_node(self, predecessor):
        assert predecessor.find_edge_to("successor") is None

    def test_connect_to_list(self, predecessor):
        b, c = Node("b"), Node("c")
        created = predecessor.connect_to([b, c], 3)
        assert [e.successor for e in created] == [b, c]
        assert predecessor.successors() == [b, c]
        assert all(e.weight == 3 for e in predecessor.edges)

    def test_default_weight_is_one(self, predecessor, successor):
        (edge,) = predecessor.connect_to(successor)
        assert edge.weight == 1

    def test_default_weight_from_config(self, graph_config, predecessor, successor):
        graph_config.default_edge_weight = 0
        (edge,) = predecessor.connect_to(successor)
        assert edge.weight == 0

    def test_find_edge_by_value_equality(self):
        node = Node(("x", 1))
        target = Node(("y", 2))
        node.connect_to(target)
        assert node.find_edge_to(("y", 2)).successor is target

    def test_duplicate_edges_allowed_by_default(self, predecessor, successor):
        predecessor.connect_to(successor, 5)
        predecessor.connect_to(successor, 2)
        assert len(predecessor.edges) == 2
        assert predecessor.find_edge_to("successor").weight == 5

    def test_duplicate_edge_replace(self, predecessor, successor):
        other = Node("other")
        predecessor.connect_to([successor, other], 5)
        predecessor.connect_to(successor, 2, on_duplicate=DuplicateEdgePolicy.REPLACE)
        assert [(e.successor.data, e.weight) for e in predecessor.edges] == [
            ("successor", 2),
            ("other", 5),
        ]

    def test_duplicate_edge_reject(self, predecessor, successor):
        other = Node("other")
        predecessor.connect_to(successor, 5)
        with pytest.raises(ValueError, match="already exists"):
            predecessor.connect_to(
                [other, successor], 2, on_duplicate=DuplicateEdgePolicy.REJECT
            )
        # Nothing from the rejected call was connected
        assert predecessor.successors() == [successor]

    def test_duplicate_policy_from_config(self, graph_config, predecessor, successor):
        graph_config.duplicate_edge_policy = DuplicateEdgePolicy.REJECT
        predecessor.connect_to(successor)
        with pytest.raises(ValueError):
            predecessor.connect_to(successor)

    def test_connect_to_non_node(self, predecessor):
        with pytest.raises(TypeError):
            predecessor.connect_to(["successor"])
        assert predecessor.edges == ()

    def test_invalid_weight_connects_nothing(self, predecessor, successor):
        with pytest.raises(ValueError):
            predecessor.connect_to(successor, -1)
        assert predecessor.edges == ()

    def test_disconnect_from(self, predecessor, successor):
        predecessor.connect_to(successor, 1)
        predecessor.connect_to(successor, 2)
        predecessor.connect_to(Node("other"), 3)
        assert predecessor.disconnect_from("successor") == 2
        assert predecessor.find_edge_to("successor") is None
        assert predecessor.disconnect_from("missing") == 0

    def test_nodes_compare_by_identity(self):
        assert Node("a") != Node("a")
        assert len({Node("a"), Node("a")}) == 2

    def test_edges_view_is_read_only(self, predecessor, successor):
        predecessor.connect_to(successor)
        assert isinstance(predecessor.edges, tuple)


class TestEdge:
    def test_has_successor_for_matching_data(self, predecessor, successor):
        edge = Edge(predecessor, successor, 33)
        assert edge.has_successor_for_data("successor") is True

    def test_has_no_successor_for_other_data(self, predecessor, successor):
        edge = Edge(predecessor, successor, 33)
        assert edge.has_successor_for_data("alternate") is False

    def test_edge_is_immutable(self, predecessor, successor):
        edge = Edge(predecessor, successor, 33)
        with pytest.raises(AttributeError):
            edge.weight = 1  # type: ignore[misc]

    def test_zero_weight_allowed(self, predecessor, successor):
        assert Edge(predecessor, successor, 0).weight == 0

    @pytest.mark.parametrize("weight", [-1, -0.5, float("inf"), float("nan")])
    def test_invalid_weights(self, predecessor, successor, weight):
        with pytest.raises(ValueError):
            Edge(predecessor, successor, weight)

    @pytest.mark.parametrize("weight", ["3", None, True])
    def test_non_numeric_weights(self, predecessor, successor, weight):
        with pytest.raises(TypeError):
            Edge(predecessor, successor, weight)

    def test_repr_uses_labels(self, predecessor, successor):
        assert repr(Edge(predecessor, successor, 2)) == (
            "Edge('predecessor' -> 'successor', weight=2)"
        )
