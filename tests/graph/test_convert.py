import networkx as nx
import pytest

from heapgraph.graph import DirectedGraph, Node, from_networkx, to_networkx


def build_sample_graph() -> DirectedGraph:
    a, b, c = Node("A"), Node("B"), Node("C")
    a.connect_to(b, 1)
    a.connect_to(b, 3)
    b.connect_to(c, 2)
    return DirectedGraph([a])


def test_to_networkx_keeps_parallel_edges():
    nxg = to_networkx(build_sample_graph())

    assert isinstance(nxg, nx.MultiDiGraph)
    assert set(nxg.nodes) == {"A", "B", "C"}
    assert nxg.number_of_edges("A", "B") == 2
    assert sorted(d["weight"] for _, _, d in nxg.edges("A", data=True)) == [1, 3]


def test_to_networkx_custom_attr():
    nxg = to_networkx(build_sample_graph(), weight_attr="cost")
    assert nxg.edges["B", "C", 0]["cost"] == 2


def test_roundtrip():
    roundtrip = from_networkx(to_networkx(build_sample_graph()))
    assert {n.data for n in roundtrip.nodes} == {"A", "B", "C"}
    assert len(roundtrip.edges()) == 3
    assert roundtrip.distance("A", "C") == 3


def test_from_digraph_with_isolated_node_and_default_weight():
    g = nx.DiGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C", weight=4)
    g.add_node("Z")

    graph = from_networkx(g)
    assert "Z" in graph
    assert graph.node("A").find_edge_to("B").weight == 1
    assert graph.distance("A", "C") == 5
    assert graph.shortest_path("A", "Z") is None


def test_from_networkx_explicit_default_weight():
    g = nx.DiGraph()
    g.add_edge("A", "B")
    graph = from_networkx(g, default_weight=7)
    assert graph.distance("A", "B") == 7


def test_from_networkx_custom_attr():
    g = nx.DiGraph()
    g.add_edge("A", "B", cost=2.5)
    assert from_networkx(g, weight_attr="cost").distance("A", "B") == 2.5


@pytest.mark.parametrize("bad", [nx.Graph(), nx.MultiGraph(), {"A": ["B"]}])
def test_from_networkx_rejects_undirected(bad):
    with pytest.raises(TypeError):
        from_networkx(bad)
