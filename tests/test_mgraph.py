import pytest

from algokit.mgraph import (
    INFINITY,
    MAX_VERTEX_NUM,
    GraphError,
    GraphFullError,
    GraphKind,
    MGraph,
    VertexNotFoundError,
    read_mgraph,
)


def small_dg():
    return read_mgraph("0\n4 3 0\nABCD\nABACBD\n")


def small_udn():
    return read_mgraph("3\n3 2 0\nXYZ\nXY 5\nYZ 7\n")


def test_read_directed_graph():
    g = small_dg()
    assert g.kind is GraphKind.DG
    assert g.vertices == ("A", "B", "C", "D")
    assert g.arc_count == 3
    assert g.weight("A", "B") == 1
    assert g.weight("B", "A") == 0


def test_read_undirected_network_is_symmetric():
    g = small_udn()
    assert g.weight("X", "Y") == g.weight("Y", "X") == 5
    assert g.weight("X", "Z") == INFINITY


def test_read_rejects_unknown_kind_and_vertex():
    with pytest.raises(GraphError):
        read_mgraph("9\n1 0 0\nA\n")
    with pytest.raises(VertexNotFoundError):
        read_mgraph("0\n2 1 0\nAB\nAQ\n")


def test_locate_and_get_vertex_round_trip():
    g = small_dg()
    for v in g.vertices:
        assert g.get_vertex(g.locate(v)) == v
    with pytest.raises(IndexError):
        g.get_vertex(len(g) + 1)
    with pytest.raises(VertexNotFoundError):
        g.locate("Q")


def test_adjacency_iteration():
    g = small_dg()
    assert g.first_adjacent("A") == g.locate("B")
    assert g.next_adjacent("A", "B") == g.locate("C")
    assert g.next_adjacent("A", "C") is None
    assert g.first_adjacent("D") is None


def test_put_vertex_renames():
    g = small_dg()
    g.put_vertex("A", "X")
    assert g.locate("X") == 1
    with pytest.raises(VertexNotFoundError):
        g.locate("A")


def test_insert_vertex_and_arcs():
    g = small_udn()
    g.insert_vertex("W")
    assert g.weight("W", "X") == INFINITY
    g.insert_arc("W", "X", 3)
    assert g.weight("X", "W") == 3
    assert g.arc_count == 3
    g.delete_arc("W", "X")
    assert g.weight("X", "W") == INFINITY
    assert g.arc_count == 2


def test_insert_vertex_full():
    g = MGraph(GraphKind.DG, [chr(ord("a") + i) for i in range(MAX_VERTEX_NUM)])
    with pytest.raises(GraphFullError):
        g.insert_vertex("z")


def test_delete_vertex_updates_counts():
    g = small_dg()
    g.delete_vertex("B")
    assert g.vertices == ("A", "C", "D")
    assert g.arc_count == 1
    assert g.weight("A", "C") == 1
    with pytest.raises(VertexNotFoundError):
        g.delete_vertex("B")


def test_traversals():
    g = small_dg()
    assert list(g.dfs()) == ["A", "B", "D", "C"]
    assert list(g.bfs()) == ["A", "B", "C", "D"]


def test_traversals_visit_every_vertex_once():
    g = small_udn()
    g.insert_vertex("Q")
    assert sorted(g.dfs()) == sorted(g.vertices)
    assert sorted(g.bfs()) == sorted(g.vertices)


def test_render_and_clear():
    g = MGraph(GraphKind.DG, "AB")
    g.insert_arc("A", "B", 1)
    assert g.render().splitlines()[1] == "A  0  1 "
    assert "∞" in small_udn().render()
    g.clear()
    assert len(g) == 0
    assert g.render() == "empty graph\n"