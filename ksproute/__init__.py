"""ksproute: K loopless shortest paths for routing graphs.

Primary API:
    find_k_shortest() - Yen's K shortest loopless paths between two vertices
    find_k_shortest_batch() - the same over many (source, destinations) pairs
    YenKSP - reusable engine with optional instrumentation hooks
    GraphAdapter - masked, restorable view of a graph store
    StrictMultiDiGraph - the graph store

Example:
    from ksproute import StrictMultiDiGraph, find_k_shortest

    g = StrictMultiDiGraph()
    for n in (1, 2, 3, 4):
        g.add_node(n)
    g.add_edge(1, 2, cost=1)
    g.add_edge(2, 4, cost=1)
    g.add_edge(1, 3, cost=2)
    g.add_edge(3, 4, cost=1)

    paths = find_k_shortest(g, 1, 4, k=2)
    # [Path(1->2->4, cost=2), Path(1->3->4, cost=3)]
"""

from __future__ import annotations

from ksproute import logging
from ksproute.algorithms.batch import find_k_shortest_batch, iter_k_shortest_batch
from ksproute.algorithms.visitor import LoggingVisitor, Visitor
from ksproute.algorithms.yen import YenKSP, find_k_shortest
from ksproute.config import KSP_CONFIG, KspConfig
from ksproute.graph.adapter import GraphAdapter
from ksproute.graph.convert import from_edge_list
from ksproute.graph.strict_multidigraph import StrictMultiDiGraph
from ksproute.paths.collection import PathCollection
from ksproute.paths.path import Hop, Path, PathRow

__version__ = "0.1.0"


__all__ = [
    "logging",
    "find_k_shortest",
    "find_k_shortest_batch",
    "iter_k_shortest_batch",
    "YenKSP",
    "Visitor",
    "LoggingVisitor",
    "KspConfig",
    "KSP_CONFIG",
    "GraphAdapter",
    "StrictMultiDiGraph",
    "from_edge_list",
    "PathCollection",
    "Path",
    "Hop",
    "PathRow",
]
