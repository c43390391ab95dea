"""Single routing path as an ordered hop sequence.

A ``Path`` is a list of ``Hop(node, edge, cost)`` entries where ``edge`` and
``cost`` describe the step to the next hop; the terminal hop has ``edge=None``
and ``cost=0``. The aggregate cost is derived from the hops and cached until the
path is mutated.

Paths are totally ordered by ``(aggregate cost, hop count, node sequence)``.
Two paths are equal iff cost and node sequence match, which is what
``PathCollection`` uses to suppress duplicates.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from ksproute.algorithms.base import Cost
from ksproute.graph.strict_multidigraph import EdgeID, NodeID


class Hop(NamedTuple):
    """One step of a path: the node, the edge leaving it and that edge's cost."""

    node: NodeID
    edge: Optional[EdgeID] = None
    cost: Cost = 0


class PathRow(NamedTuple):
    """Flat per-hop row, one per hop of a numbered path."""

    path_id: int
    path_seq: int
    node: NodeID
    edge: Optional[EdgeID]
    cost: Cost
    agg_cost: Cost


HopLike = Union[Hop, Tuple[Any, ...]]


def _as_hop(hop: HopLike) -> Hop:
    """Accept a Hop, a (node, edge, cost) triple or a (node, cost) pair."""
    if isinstance(hop, Hop):
        return hop
    if len(hop) == 2:
        return Hop(hop[0], None, hop[1])
    return Hop(*hop)


@total_ordering
class Path:
    """Ordered hop sequence with a derived aggregate cost.

    Attributes:
        hops: The hop list. Owned by this path; ``sub_path`` and ``copy`` never
            share it.
    """

    def __init__(self, hops: Iterable[HopLike] = ()) -> None:
        self.hops: List[Hop] = [_as_hop(hop) for hop in hops]
        self._agg_cost: Optional[Cost] = None

    #
    # Cost
    #
    def aggregate_cost(self) -> Cost:
        """Return the sum of hop costs, computing it if not cached."""
        if self._agg_cost is None:
            self._agg_cost = sum(hop.cost for hop in self.hops)
        return self._agg_cost

    def recalculate_agg_cost(self) -> Cost:
        """Drop the cached aggregate cost and compute it again."""
        self._agg_cost = None
        return self.aggregate_cost()

    @property
    def cost(self) -> Cost:
        return self.aggregate_cost()

    #
    # Structure
    #
    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        """Node sequence from source to destination."""
        return tuple(hop.node for hop in self.hops)

    @property
    def edges(self) -> Tuple[EdgeID, ...]:
        """Edge sequence; excludes the terminal hop's empty edge."""
        return tuple(hop.edge for hop in self.hops if hop.edge is not None)

    @property
    def src_node(self) -> NodeID:
        return self.hops[0].node

    @property
    def dst_node(self) -> NodeID:
        return self.hops[-1].node

    def sub_path(self, length: int) -> Path:
        """Return an independent path made of the first ``length`` hops."""
        return Path(self.hops[:length])

    def copy(self) -> Path:
        return Path(self.hops)

    def append(self, other: Path) -> Path:
        """Concatenate ``other`` to the end of this path in place.

        The last hop of this path is expected to carry the edge into
        ``other``'s first node, as a root path cut with ``sub_path`` does.

        Returns:
            This path, for chaining.
        """
        self.hops.extend(other.hops)
        self._agg_cost = None
        return self

    def shares_prefix(self, other: Path, length: int) -> bool:
        """True iff both paths visit the same nodes over their first ``length`` hops."""
        if len(self.hops) < length or len(other.hops) < length:
            return False
        return all(
            mine.node == theirs.node
            for mine, theirs in zip(self.hops[:length], other.hops[:length])
        )

    def to_rows(self, path_id: int = 1) -> List[PathRow]:
        """Flatten to per-hop rows with a running aggregate cost.

        ``path_seq`` starts at 1; ``agg_cost`` is the cost accumulated before
        the hop, so the first row has 0 and the last one the path cost.
        """
        rows: List[PathRow] = []
        running: Cost = 0
        for seq, hop in enumerate(self.hops, start=1):
            rows.append(PathRow(path_id, seq, hop.node, hop.edge, hop.cost, running))
            running += hop.cost
        return rows

    #
    # Container protocol
    #
    def __len__(self) -> int:
        return len(self.hops)

    def __bool__(self) -> bool:
        return bool(self.hops)

    def __iter__(self) -> Iterator[Hop]:
        return iter(self.hops)

    def __getitem__(self, idx: int) -> Hop:
        return self.hops[idx]

    #
    # Ordering
    #
    def sort_key(self) -> Tuple[Cost, int, Tuple[NodeID, ...]]:
        return (self.aggregate_cost(), len(self.hops), self.nodes)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self.aggregate_cost() == other.aggregate_cost()
            and self.nodes == other.nodes
        )

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((self.aggregate_cost(), self.nodes))

    def __repr__(self) -> str:
        return f"Path({'->'.join(map(str, self.nodes))}, cost={self.aggregate_cost()})"
