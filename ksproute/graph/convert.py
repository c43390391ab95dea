"""Graph conversion utilities.

`from_edge_list` builds a StrictMultiDiGraph from edge rows as they come out of
the routing service's edge table. `to_digraph` collapses parallel edges into a
plain NetworkX DiGraph keeping the cheapest cost per vertex pair.
"""

from typing import Iterable, Optional, Sequence

import networkx as nx

from ksproute.graph.strict_multidigraph import StrictMultiDiGraph


def from_edge_list(
    rows: Iterable[Sequence],
    directed: bool = True,
    cost_attr: str = "cost",
) -> StrictMultiDiGraph:
    """Build a graph from ``(id, source, target, cost[, reverse_cost])`` rows.

    Vertices are created on first reference. A negative cost (or
    reverse_cost) omits that direction. The forward edge is keyed by the row
    id; the reverse edge gets an auto-assigned key and stores the row id in
    its ``edge_id`` attribute, as does the forward edge.

    Args:
        rows: Edge rows with 4 or 5 items.
        directed: When False, a row without reverse_cost is traversable in both
            directions at ``cost``.
        cost_attr: Name of the cost attribute to set.

    Returns:
        StrictMultiDiGraph: The loaded graph.

    Raises:
        ValueError: If a row has the wrong number of items, or the store
            rejects it (e.g. a duplicate edge id).
    """
    graph = StrictMultiDiGraph()
    reverse_rows = []

    for row in rows:
        if len(row) not in (4, 5):
            raise ValueError(
                "Edge row must be (id, source, target, cost[, reverse_cost]), "
                f"got {row!r}"
            )
        edge_id, source, target, cost = row[:4]
        reverse_cost: Optional[float] = row[4] if len(row) == 5 else None
        if reverse_cost is None and not directed:
            reverse_cost = cost

        for node in (source, target):
            if node not in graph:
                graph.add_node(node)

        if cost >= 0:
            graph.add_edge(
                source, target, key=edge_id, edge_id=edge_id, **{cost_attr: cost}
            )
        if reverse_cost is not None and reverse_cost >= 0:
            reverse_rows.append((target, source, edge_id, reverse_cost))

    # Reverse edges go last so their auto keys can't collide with row ids
    for source, target, edge_id, reverse_cost in reverse_rows:
        graph.add_edge(source, target, edge_id=edge_id, **{cost_attr: reverse_cost})

    return graph


def to_digraph(graph: StrictMultiDiGraph, cost_attr: str = "cost") -> nx.DiGraph:
    """Convert to a NetworkX DiGraph keeping the minimal parallel-edge cost.

    Args:
        graph: The StrictMultiDiGraph to convert.
        cost_attr: Edge attribute carrying the cost.

    Returns:
        A DiGraph whose edges carry ``cost_attr`` and the ``key`` of the
        cheapest parallel edge.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.get_nodes())

    for u, neighbors in graph.adjacency():
        for v, edges in neighbors.items():
            # min() keeps the earliest-added edge among equal costs
            key, attr = min(edges.items(), key=lambda item: item[1][cost_attr])
            nx_graph.add_edge(u, v, key=key, **{cost_attr: attr[cost_attr]})
    return nx_graph
