# pylint: disable=protected-access,invalid-name
import pytest

from ksproute.graph.strict_multidigraph import StrictMultiDiGraph


def test_graph_add_node_duplicate():
    g = StrictMultiDiGraph()
    g.add_node(1)
    with pytest.raises(ValueError):
        g.add_node(1)


def test_graph_add_edge_requires_nodes():
    g = StrictMultiDiGraph()
    g.add_node(1)
    with pytest.raises(ValueError):
        g.add_edge(1, 2, cost=1)
    with pytest.raises(ValueError):
        g.add_edge(2, 1, cost=1)


def test_graph_add_edge_auto_keys():
    g = StrictMultiDiGraph()
    g.add_node(1)
    g.add_node(2)
    assert g.add_edge(1, 2, cost=1) == 0
    assert g.add_edge(1, 2, cost=2) == 1
    assert g._edges[0] == (1, 2, 0, {"cost": 1})
    assert g._succ[1][2] == {0: {"cost": 1}, 1: {"cost": 2}}


def test_graph_add_edge_explicit_key_advances_counter():
    g = StrictMultiDiGraph()
    g.add_node(1)
    g.add_node(2)
    g.add_edge(1, 2, key=10, cost=1)
    assert g.add_edge(2, 1, cost=1) == 11
    with pytest.raises(ValueError):
        g.add_edge(2, 1, key=10, cost=1)


def test_graph_get_nodes():
    g = StrictMultiDiGraph()
    g.add_node(1, name="a")
    assert g.get_nodes() == {1: {"name": "a"}}


def test_graph_adjacency_snapshot(square1):
    before = square1.adjacency_snapshot()
    assert before == {1: {2: (0,), 3: (2,)}, 2: {4: (1,)}, 3: {4: (3,)}, 4: {}}
    square1.add_edge(1, 4, cost=5)
    assert square1.adjacency_snapshot() != before


def test_graph_edge_index(line1):
    assert line1.get_edges()[2] == (2, 3, 2, {"cost": 1})
    assert line1.edges_between(2, 3) == [1, 2, 3]
    assert line1.edges_between(3, 2) == []
    assert line1.edges_between(1, 99) == []
