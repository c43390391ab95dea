"""Yen's K loopless shortest paths.

``YenKSP`` confirms paths one at a time. Each outer iteration walks the
deviation points of the most recently confirmed path; at every point it masks
the edges that would reproduce an already confirmed path plus the vertices of
the root prefix, asks the single-pair primitive for a spur path on the reduced
graph, and offers ``root + spur`` to a candidate pool. The cheapest candidate
becomes the next confirmed path.

Both the confirmed set and the candidate pool are ``PathCollection`` values, so
a path reached through different deviation points is kept once.

Notes:
    Graph edits go through ``GraphAdapter``'s mask and are cleared after every
    spur query, including when the query raises.
"""

from __future__ import annotations

from typing import List, Optional, Union

from ksproute.algorithms.visitor import NOOP_VISITOR, Visitor
from ksproute.config import KSP_CONFIG, KspConfig
from ksproute.graph.adapter import GraphAdapter, as_adapter
from ksproute.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from ksproute.logging import get_logger
from ksproute.paths.collection import PathCollection
from ksproute.paths.path import Path

logger = get_logger(__name__)


class YenKSP:
    """K-shortest loopless path engine.

    One instance may serve many queries, one at a time; all per-query state is
    reset on entry to ``find_k_shortest``.

    Args:
        visitor: Optional instrumentation hooks. Borrowed, never owned.
        config: Defaults for cost attribute, ``include_pending`` and K bound.
    """

    def __init__(
        self,
        visitor: Optional[Visitor] = None,
        config: Optional[KspConfig] = None,
    ) -> None:
        self._visitor = visitor if visitor is not None else NOOP_VISITOR
        self._config = config if config is not None else KSP_CONFIG

        self._result_set = PathCollection()
        self._heap = PathCollection()
        self._current = Path()
        self._first_found = False

        self._source: Optional[NodeID] = None
        self._target: Optional[NodeID] = None
        self._k = 0
        self._include_pending = False

    def clear(self) -> None:
        """Drop confirmed paths, candidates and the current path."""
        self._result_set.clear()
        self._heap.clear()
        self._current = Path()
        self._first_found = False

    def find_k_shortest(
        self,
        graph: Union[StrictMultiDiGraph, GraphAdapter],
        source: NodeID,
        target: NodeID,
        k: int,
        include_pending: Optional[bool] = None,
    ) -> List[Path]:
        """Return up to ``k`` loopless shortest paths from source to target.

        Args:
            graph: Graph store or an adapter over it. The adapter's mask is
                empty again when this returns.
            source: Source vertex ID.
            target: Target vertex ID.
            k: Number of paths wanted.
            include_pending: Also return the candidates that were discovered but
                not confirmed. Defaults to the config value.

        Returns:
            Paths in ascending (cost, hop count, node sequence) order. Empty if
            source equals target, ``k`` is 0, either vertex is absent, or the
            target is unreachable.

        Raises:
            ValueError: If ``k`` is negative.
        """
        k = self._config.clamp_k(k)
        if include_pending is None:
            include_pending = self._config.include_pending
        adapter = as_adapter(graph, cost_attr=self._config.cost_attr)

        self.clear()
        if source == target or k == 0:
            logger.debug("KSP %s -> %s k=%d: nothing to search", source, target, k)
            return []
        if not adapter.has_vertex(source) or not adapter.has_vertex(target):
            logger.debug("KSP %s -> %s: vertex not in graph", source, target)
            return []

        self._source = source
        self._target = target
        self._k = k
        self._include_pending = include_pending

        self._execute(adapter)
        paths = self._get_results()
        logger.debug(
            "KSP %s -> %s k=%d: %d paths (%d confirmed, %d pending)",
            source,
            target,
            k,
            len(paths),
            len(self._result_set),
            len(self._heap),
        )
        return paths

    def _execute(self, adapter: GraphAdapter) -> None:
        self._current = self._first_solution(adapter)
        if not self._current:
            return
        self._visitor.on_insert_first_solution(self._current)

        while len(self._result_set) < self._k:
            self._next_cycle(adapter)
            if not self._heap:
                break
            self._current = self._heap.pop_min()
            self._current.recalculate_agg_cost()
            self._result_set.insert(self._current)

    def _first_solution(self, adapter: GraphAdapter) -> Path:
        path = adapter.shortest_path(self._source, self._target)
        if not path:
            return path
        path.recalculate_agg_cost()
        self._result_set.insert(path)
        self._first_found = True
        return path

    def _next_cycle(self, adapter: GraphAdapter) -> None:
        """Generate spur candidates from every deviation point of the current path."""
        current = self._current
        # The terminal hop is the target itself and has nothing to deviate to
        for i in range(len(current) - 1):
            spur_node = current[i].node
            root_path = current.sub_path(i)

            try:
                for path in self._result_set:
                    if (
                        len(path) > i + 1
                        and path[i].node == spur_node
                        and path.shares_prefix(root_path, i)
                    ):
                        adapter.disconnect_edge(path[i].node, path[i + 1].node)

                for hop in root_path:
                    adapter.disconnect_vertex(hop.node)

                spur_path = adapter.shortest_path(spur_node, self._target)
            finally:
                adapter.restore()

            if spur_path:
                root_path.append(spur_path)
                self._heap.insert(root_path)
                self._visitor.on_insert_to_heap(root_path)

    def _get_results(self) -> List[Path]:
        if not self._result_set:
            # An empty result set is only legitimate when nothing was found at all
            if self._first_found:
                logger.error(
                    "KSP %s -> %s: confirmed paths lost after the first solution",
                    self._source,
                    self._target,
                )
            assert not self._first_found, "confirmed paths lost after first solution"
            return []

        paths = self._result_set.sorted()
        if self._include_pending:
            paths.extend(self._heap)
            paths.sort()
        elif len(paths) > self._k:
            del paths[self._k :]
        return paths


def find_k_shortest(
    graph: Union[StrictMultiDiGraph, GraphAdapter],
    source: NodeID,
    target: NodeID,
    k: int,
    include_pending: Optional[bool] = None,
    visitor: Optional[Visitor] = None,
) -> List[Path]:
    """One-shot wrapper around ``YenKSP.find_k_shortest``."""
    return YenKSP(visitor=visitor).find_k_shortest(
        graph, source, target, k, include_pending=include_pending
    )
