"""Smoke tests for the top-level package API."""

import ksproute
from ksproute import (
    Path,
    StrictMultiDiGraph,
    find_k_shortest,
    find_k_shortest_batch,
    from_edge_list,
)


def test_readme_example():
    g = from_edge_list([(1, 1, 2, 1), (2, 2, 4, 1), (3, 1, 3, 2), (4, 3, 4, 1)])

    paths = find_k_shortest(g, 1, 4, k=2)
    assert [(p.nodes, p.cost) for p in paths] == [((1, 2, 4), 2), ((1, 3, 4), 3)]
    assert [p.edges for p in paths] == [(1, 2), (3, 4)]

    batch = find_k_shortest_batch(g, {1: {4, 3}}, k=1)
    assert [p.nodes for p in batch] == [(1, 3), (1, 2, 4)]


def test_undirected_graph():
    g = from_edge_list([(1, 1, 2, 1), (2, 2, 3, 1), (3, 1, 3, 5)], directed=False)
    paths = find_k_shortest(g, 3, 1, k=5)
    assert [p.nodes for p in paths] == [(3, 2, 1), (3, 1)]


def test_public_names():
    for name in ksproute.__all__:
        assert hasattr(ksproute, name)
    assert isinstance(StrictMultiDiGraph(), StrictMultiDiGraph)
    assert not Path()
