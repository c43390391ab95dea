"""Reversible view of a StrictMultiDiGraph for spur-path searches.

``GraphAdapter`` keeps a mask of disconnected edges and vertices on top of an
unmodified graph store. The shortest-path primitive consults the mask, and
``restore()`` clears it, so the store's topology is identical before and after
any sequence of disconnects.

An adapter is exclusively owned by one search at a time: the mask is plain
mutable state with no locking.
"""

from __future__ import annotations

from typing import AbstractSet, Optional, Set, Union

from ksproute.algorithms.spf import shortest_path
from ksproute.config import KSP_CONFIG
from ksproute.graph.strict_multidigraph import EdgeID, NodeID, StrictMultiDiGraph
from ksproute.logging import get_logger
from ksproute.paths.path import Path

logger = get_logger(__name__)


class GraphAdapter:
    """Vertex lookup, masked disconnect/restore and single-pair shortest path.

    Attributes:
        graph: The wrapped graph store. Never mutated by the adapter.
        cost_attr: Edge attribute used as cost.
    """

    def __init__(
        self, graph: StrictMultiDiGraph, cost_attr: Optional[str] = None
    ) -> None:
        self.graph = graph
        self.cost_attr = cost_attr if cost_attr is not None else KSP_CONFIG.cost_attr
        self._disabled_edges: Set[EdgeID] = set()
        self._disabled_vertices: Set[NodeID] = set()

    def has_vertex(self, vertex: NodeID) -> bool:
        return vertex in self.graph

    def get_descriptor(self, vertex: NodeID) -> int:
        """Return the vertex's current position in the store's node order.

        Read from the store on every call, so it follows vertices added or
        removed after the adapter was built.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        for idx, node in enumerate(self.graph):
            if node == vertex:
                return idx
        raise KeyError(vertex)

    def disconnect_edge(self, from_vertex: NodeID, to_vertex: NodeID) -> None:
        """Mask every parallel edge ``from_vertex -> to_vertex``.

        Unknown vertices or missing edges are ignored.
        """
        self._disabled_edges.update(self.graph.edges_between(from_vertex, to_vertex))

    def disconnect_vertex(self, vertex: NodeID) -> None:
        """Mask a vertex, which hides all of its incident edges."""
        if vertex in self.graph:
            self._disabled_vertices.add(vertex)

    def restore(self) -> None:
        """Undo every disconnect since the last restore."""
        self._disabled_edges.clear()
        self._disabled_vertices.clear()

    @property
    def disabled_edges(self) -> AbstractSet[EdgeID]:
        return frozenset(self._disabled_edges)

    @property
    def disabled_vertices(self) -> AbstractSet[NodeID]:
        return frozenset(self._disabled_vertices)

    def shortest_path(self, from_vertex: NodeID, to_vertex: NodeID) -> Path:
        """Shortest path on the masked graph; empty if unreachable or absent."""
        if from_vertex not in self.graph or to_vertex not in self.graph:
            return Path()
        path = shortest_path(
            self.graph,
            from_vertex,
            to_vertex,
            excluded_edges=self._disabled_edges,
            excluded_nodes=self._disabled_vertices,
            cost_attr=self.cost_attr,
        )
        logger.debug(
            "SPF %s -> %s: %s (masked %d edges, %d vertices)",
            from_vertex,
            to_vertex,
            path if path else "unreachable",
            len(self._disabled_edges),
            len(self._disabled_vertices),
        )
        return path


def as_adapter(
    graph: Union[StrictMultiDiGraph, GraphAdapter], cost_attr: Optional[str] = None
) -> GraphAdapter:
    """Return ``graph`` if it already is an adapter, else wrap it in a new one."""
    if isinstance(graph, GraphAdapter):
        return graph
    return GraphAdapter(graph, cost_attr=cost_attr)
