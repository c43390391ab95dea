"""Shared graph fixtures for the ksproute test suite."""

from __future__ import annotations

import pytest

from ksproute.graph.strict_multidigraph import StrictMultiDiGraph


@pytest.fixture
def square1():
    # Cost:
    #        [1]        [1]
    #   ┌────────►2─────────┐
    #   │                   ▼
    #   1                   4
    #   │                   ▲
    #   └────────►3─────────┘
    #        [2]        [1]
    g = StrictMultiDiGraph()
    for node in (1, 2, 3, 4):
        g.add_node(node)

    g.add_edge(1, 2, key=0, cost=1)
    g.add_edge(2, 4, key=1, cost=1)
    g.add_edge(1, 3, key=2, cost=2)
    g.add_edge(3, 4, key=3, cost=1)
    return g


@pytest.fixture
def yen_classic():
    # Textbook Yen example, K=3 from C to H:
    #   C-E-F-H (5), C-E-G-H (7), C-D-F-H (8)
    #
    # Edges (cost):
    #   C->D (3)  C->E (2)  D->F (4)  E->D (1)  E->F (2)
    #   E->G (3)  F->G (2)  F->H (1)  G->H (2)
    g = StrictMultiDiGraph()
    for node in ("C", "D", "E", "F", "G", "H"):
        g.add_node(node)

    g.add_edge("C", "D", key=0, cost=3)
    g.add_edge("C", "E", key=1, cost=2)
    g.add_edge("D", "F", key=2, cost=4)
    g.add_edge("E", "D", key=3, cost=1)
    g.add_edge("E", "F", key=4, cost=2)
    g.add_edge("E", "G", key=5, cost=3)
    g.add_edge("F", "G", key=6, cost=2)
    g.add_edge("F", "H", key=7, cost=1)
    g.add_edge("G", "H", key=8, cost=2)
    return g


@pytest.fixture
def line1():
    # Cost:
    #      [1]      [1,1,2]
    #  1 ───────► 2 ───────► 3
    g = StrictMultiDiGraph()
    for node in (1, 2, 3):
        g.add_node(node)

    g.add_edge(1, 2, key=0, cost=1)
    g.add_edge(2, 3, key=1, cost=1)
    g.add_edge(2, 3, key=2, cost=1)
    g.add_edge(2, 3, key=3, cost=2)
    return g


@pytest.fixture
def disconnected1():
    # 1 ──► 2     3 ──► 4
    g = StrictMultiDiGraph()
    for node in (1, 2, 3, 4):
        g.add_node(node)

    g.add_edge(1, 2, key=0, cost=1)
    g.add_edge(3, 4, key=1, cost=1)
    return g


@pytest.fixture
def mesh1():
    """Fully connected 5-node digraph with distinct-ish costs."""
    g = StrictMultiDiGraph()
    nodes = ["A", "B", "C", "D", "E"]
    for node in nodes:
        g.add_node(node)

    key = 0
    for i, u in enumerate(nodes):
        for j, v in enumerate(nodes):
            if u == v:
                continue
            g.add_edge(u, v, key=key, cost=1 + (3 * i + 5 * j) % 7)
            key += 1
    return g
