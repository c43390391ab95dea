"""Shortest-path-first (SPF) primitive.

Dijkstra over a StrictMultiDiGraph with optional edge/node exclusions. The
exclusion sets are how callers run a query against a temporarily reduced
topology without touching the graph itself.

Notes:
    When a destination node is given, SPF stops as soon as the destination's
    distance is settled and never expands from the destination.

    Among parallel edges the cheapest non-excluded one is taken; on equal cost
    the earliest-added edge wins. Between equal-cost routes the first one
    relaxed is kept, so results are deterministic for a given graph.
"""

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from ksproute.algorithms.base import Cost
from ksproute.graph.strict_multidigraph import EdgeID, NodeID, StrictMultiDiGraph
from ksproute.paths.path import Hop, Path


def spf(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    excluded_edges: Optional[Set[EdgeID]] = None,
    excluded_nodes: Optional[Set[NodeID]] = None,
    dst_node: Optional[NodeID] = None,
    cost_attr: str = "cost",
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, Dict[NodeID, List[EdgeID]]]]:
    """Compute single-predecessor shortest paths from a source node.

    Args:
        graph: The directed graph (StrictMultiDiGraph).
        src_node: The source node.
        excluded_edges: Edge keys to ignore.
        excluded_nodes: Node IDs to ignore. An excluded source reaches nothing.
        dst_node: Optional destination for early termination.
        cost_attr: Edge attribute holding the cost.

    Returns:
        tuple[dict[NodeID, Cost], dict[NodeID, dict[NodeID, list[EdgeID]]]]:
            Costs and predecessor mapping. Each reached node other than the
            source has exactly one predecessor with exactly one edge.

    Raises:
        KeyError: If src_node does not exist in graph.
    """
    if excluded_edges is None:
        excluded_edges = set()
    if excluded_nodes is None:
        excluded_nodes = set()

    outgoing_adjacencies = graph._adj  # type: ignore[attr-defined]
    if src_node not in outgoing_adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: Dict[NodeID, Dict[NodeID, List[EdgeID]]] = {src_node: {}}
    if src_node in excluded_nodes:
        return costs, pred

    min_pq: List[Tuple[Cost, int, NodeID]] = [(0, 0, src_node)]
    # Push counter breaks cost ties without comparing node IDs
    push_seq = 1
    settled: Set[NodeID] = set()

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if node_id in settled:
            continue
        settled.add(node_id)

        if dst_node is not None and node_id == dst_node:
            break

        for neighbor_id, edges_map in outgoing_adjacencies[node_id].items():
            if neighbor_id in excluded_nodes or neighbor_id in settled:
                continue

            min_edge_cost: Optional[Cost] = None
            selected_edge: Optional[EdgeID] = None
            for e_id, e_attr in edges_map.items():
                if e_id in excluded_edges:
                    continue
                edge_cost = e_attr[cost_attr]
                if min_edge_cost is None or edge_cost < min_edge_cost:
                    min_edge_cost = edge_cost
                    selected_edge = e_id

            if min_edge_cost is None:
                continue

            new_cost = current_cost + min_edge_cost
            if (neighbor_id not in costs) or (new_cost < costs[neighbor_id]):
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = {node_id: [selected_edge]}
                heappush(min_pq, (new_cost, push_seq, neighbor_id))
                push_seq += 1

    return costs, pred


def resolve_to_path(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    pred: Dict[NodeID, Dict[NodeID, List[EdgeID]]],
    cost_attr: str = "cost",
) -> Path:
    """Walk a single-predecessor map back from ``dst_node`` into a Path.

    Returns:
        The path ``src_node -> ... -> dst_node``, or an empty path when
        ``dst_node`` was not reached.
    """
    if dst_node not in pred:
        return Path()

    edges_map = graph.get_edges()
    hops: List[Hop] = [Hop(dst_node)]
    node = dst_node
    while node != src_node:
        ((prev_node, (edge_id,)),) = pred[node].items()
        hops.append(Hop(prev_node, edge_id, edges_map[edge_id][3][cost_attr]))
        node = prev_node
    hops.reverse()
    return Path(hops)


def shortest_path(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    excluded_edges: Optional[Set[EdgeID]] = None,
    excluded_nodes: Optional[Set[NodeID]] = None,
    cost_attr: str = "cost",
) -> Path:
    """Return one shortest ``src_node -> dst_node`` path, empty if unreachable.

    A node is never a path to itself: ``src_node == dst_node`` gives an empty
    path.
    """
    if src_node == dst_node:
        return Path()
    _costs, pred = spf(
        graph,
        src_node,
        excluded_edges=excluded_edges,
        excluded_nodes=excluded_nodes,
        dst_node=dst_node,
        cost_attr=cost_attr,
    )
    return resolve_to_path(graph, src_node, dst_node, pred, cost_attr)
