"""Strict multi-directed graph used as the routing graph store.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` so that topology errors
surface when the graph is built, not in the middle of a path search: nodes are
never created implicitly and edge keys are unique across the whole graph. The
path search never edits the store; it masks topology through `GraphAdapter`.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """Directed multigraph with explicit nodes and graph-wide unique edge keys.

    Rules:
      - Adding an edge between unknown nodes raises ValueError.
      - Adding a node or edge key twice raises ValueError.
      - Edge keys default to a monotonically increasing integer.

    Besides the NetworkX adjacency, an index ``edge key -> (u, v, key, attr)``
    is maintained so that an edge recorded in a path hop can be resolved
    without knowing its endpoints.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        # Only advances, so auto keys never collide with explicit ones
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next unused integer edge key (NetworkX hook)."""
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a vertex.

        Raises:
            ValueError: If the vertex already exists.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge ``u_for_edge -> v_for_edge``.

        Both endpoints must already exist. An explicit integer key pushes the
        auto-key counter past it so later auto keys cannot collide.

        Args:
            u_for_edge: Tail vertex.
            v_for_edge: Head vertex.
            key: Unique edge key; generated when omitted.
            **attr: Edge attributes (``cost`` is what the path search reads).

        Returns:
            EdgeID: The key of the new edge.

        Raises:
            ValueError: If an endpoint is missing or the key is taken.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        assert key is not None
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # pyright: ignore[reportArgumentType]
        )
        return key

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Return ``{node: attributes}`` for every vertex."""
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return the ``edge key -> (u, v, key, attributes)`` index."""
        return self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List the keys of all parallel edges ``u -> v`` (empty if none)."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())

    def adjacency_snapshot(self) -> Dict[NodeID, Dict[NodeID, Tuple[EdgeID, ...]]]:
        """Return a plain ``{u: {v: (keys...)}}`` copy of the adjacency.

        Two snapshots compare equal iff the topology is unchanged.
        """
        return {
            u: {v: tuple(sorted(edges, key=repr)) for v, edges in nbrs.items()}
            for u, nbrs in self._adj.items()  # type: ignore[attr-defined]
        }
