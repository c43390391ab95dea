"""Batch K-shortest-path queries over many (source, destination) pairs."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ksproute.algorithms.visitor import Visitor
from ksproute.algorithms.yen import YenKSP
from ksproute.graph.adapter import GraphAdapter, as_adapter
from ksproute.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from ksproute.logging import get_logger
from ksproute.paths.path import Path

logger = get_logger(__name__)


def iter_k_shortest_batch(
    graph: Union[StrictMultiDiGraph, GraphAdapter],
    pairs: Mapping[NodeID, Iterable[NodeID]],
    k: int,
    include_pending: Optional[bool] = None,
    visitor: Optional[Visitor] = None,
) -> Iterator[Tuple[NodeID, NodeID, List[Path]]]:
    """Yield ``(source, target, paths)`` for every pair present in the graph.

    Sources are visited in ascending order and destinations of one source in
    ascending order. Pairs with a vertex missing from the graph are skipped.
    All pairs share one adapter and one engine, used strictly one query at a
    time.
    """
    adapter = as_adapter(graph)
    engine = YenKSP(visitor=visitor)

    for source in sorted(pairs):
        if not adapter.has_vertex(source):
            logger.debug("Batch KSP: skipping absent source %s", source)
            continue
        for target in sorted(set(pairs[source])):
            if not adapter.has_vertex(target):
                logger.debug("Batch KSP: skipping absent target %s", target)
                continue
            engine.clear()
            yield source, target, engine.find_k_shortest(
                adapter, source, target, k, include_pending=include_pending
            )


def find_k_shortest_batch(
    graph: Union[StrictMultiDiGraph, GraphAdapter],
    pairs: Mapping[NodeID, Iterable[NodeID]],
    k: int,
    include_pending: Optional[bool] = None,
    visitor: Optional[Visitor] = None,
) -> List[Path]:
    """Run Yen's KSP per pair and concatenate the results in pair order.

    Args:
        graph: Graph store or adapter shared by all pairs.
        pairs: Mapping of source vertex to its destination vertices.
        k: Paths wanted per pair.
        include_pending: Passed through to every per-pair query.
        visitor: Optional hooks, shared across pairs.

    Returns:
        Concatenated per-pair path lists.
    """
    paths: List[Path] = []
    for _source, _target, pair_paths in iter_k_shortest_batch(
        graph, pairs, k, include_pending=include_pending, visitor=visitor
    ):
        paths.extend(pair_paths)
    return paths
