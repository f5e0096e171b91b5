import pytest

from algokit.mgraph import GraphError, GraphKind, MGraph, VertexNotFoundError, read_mgraph
from algokit.mst import Edge, kruskal, prim, prim_order

NETWORK = "3 6 10 0\nABCDEF\nAB6 AC1 AD5 BC5 CD5 BE3 CE6 CF4 DF2 EF6"


@pytest.fixture
def network():
    return read_mgraph(NETWORK)


def pairs(edges):
    return {frozenset((e.tail, e.head)) for e in edges}


@pytest.mark.parametrize("algorithm", [lambda g: prim_order(g, "A"), lambda g: prim(g, "A"), kruskal])
def test_tree_has_n_minus_one_real_edges(network, algorithm):
    edges = algorithm(network)
    assert len(edges) == len(network) - 1
    for edge in edges:
        assert network.weight(edge.tail, edge.head) == edge.weight


def test_algorithms_agree(network):
    first = prim_order(network, "A")
    second = prim(network, "A")
    third = kruskal(network)
    assert pairs(first) == pairs(second) == pairs(third)
    assert sum(e.weight for e in first) == sum(e.weight for e in third)


def test_total_weight(network):
    assert sum(e.weight for e in kruskal(network)) == 15


def test_prim_order_first_edge(network):
    assert prim_order(network, "A")[0] == Edge("A", "C", 1)


def test_prim_order_grows_a_tree(network):
    tree = {"A"}
    for edge in prim_order(network, "A"):
        assert edge.tail in tree
        assert edge.head not in tree
        tree.add(edge.head)
    assert tree == set(network.vertices)


def test_prim_grows_a_tree_from_other_start(network):
    tree = {"D"}
    for edge in prim(network, "D"):
        assert edge.tail in tree
        assert edge.head not in tree
        tree.add(edge.head)
    assert tree == set(network.vertices)


def test_kruskal_sorted_by_weight(network):
    weights = [e.weight for e in kruskal(network)]
    assert weights == sorted(weights)


def test_single_vertex_gives_no_edges():
    graph = MGraph(GraphKind.UDN, "A")
    assert prim(graph, "A") == []
    assert prim_order(graph, "A") == []
    assert kruskal(graph) == []


def test_disconnected_network():
    graph = MGraph(GraphKind.UDN, "ABCD")
    graph.insert_arc("A", "B", 3)
    graph.insert_arc("C", "D", 4)
    with pytest.raises(GraphError):
        prim(graph, "A")
    with pytest.raises(GraphError):
        prim_order(graph, "A")
    assert pairs(kruskal(graph)) == {frozenset("AB"), frozenset("CD")}


def test_unknown_start(network):
    with pytest.raises(VertexNotFoundError):
        prim(network, "Z")
    with pytest.raises(VertexNotFoundError):
        prim_order(network, "Z")


def test_plain_graph_rejected():
    graph = MGraph(GraphKind.UDG, "AB")
    graph.insert_arc("A", "B", 1)
    with pytest.raises(GraphError):
        kruskal(graph)