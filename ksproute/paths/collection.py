"""Ordered, duplicate-suppressing container of paths.

``PathCollection`` pairs a ``heapq`` min-heap with a membership set. Both use
the ordering and hashing defined on ``Path``, so two structurally identical
paths occupy one slot no matter how they were assembled. Paths must not be
mutated while they are members.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Iterable, Iterator, List, Set

from ksproute.paths.path import Path


class PathCollection:
    """Min-heap of paths with set semantics.

    Insert and pop-min are O(log n); membership is O(1). Iteration yields the
    members in ascending order without consuming them.
    """

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._heap: List[Path] = []
        self._members: Set[Path] = set()
        for path in paths:
            self.insert(path)

    def insert(self, path: Path) -> bool:
        """Add ``path`` unless an equal path is already present.

        Returns:
            True if the path was added, False if it was a duplicate.
        """
        if path in self._members:
            return False
        self._members.add(path)
        heappush(self._heap, path)
        return True

    def peek_min(self) -> Path:
        """Return the smallest path without removing it.

        Raises:
            IndexError: If the collection is empty.
        """
        if not self._heap:
            raise IndexError("peek_min from an empty PathCollection")
        return self._heap[0]

    def pop_min(self) -> Path:
        """Remove and return the smallest path.

        Raises:
            IndexError: If the collection is empty.
        """
        if not self._heap:
            raise IndexError("pop_min from an empty PathCollection")
        path = heappop(self._heap)
        self._members.discard(path)
        return path

    def clear(self) -> None:
        self._heap.clear()
        self._members.clear()

    def sorted(self) -> List[Path]:
        """Return the members as a new ascending list."""
        return sorted(self._heap)

    def __contains__(self, path: object) -> bool:
        return path in self._members

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.sorted())
