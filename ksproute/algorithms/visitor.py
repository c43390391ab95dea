"""Instrumentation hooks for the K-shortest-path engine.

A visitor observes the search without influencing it: the engine hands over
paths it has just recorded and ignores anything the hooks return. Hooks must
not mutate the paths they receive.
"""

from __future__ import annotations

from ksproute.logging import get_logger
from ksproute.paths.path import Path

logger = get_logger(__name__)


class Visitor:
    """No-op visitor; subclass and override the hooks you need."""

    def on_insert_first_solution(self, path: Path) -> None:
        """Called once per run with the initial shortest path."""

    def on_insert_to_heap(self, path: Path) -> None:
        """Called for every spur-derived candidate offered to the candidate pool."""


class LoggingVisitor(Visitor):
    """Emit a DEBUG record for every engine event."""

    def on_insert_first_solution(self, path: Path) -> None:
        logger.debug("First solution: %s", path)

    def on_insert_to_heap(self, path: Path) -> None:
        logger.debug("Candidate: %s", path)


#: Shared stateless default used when the engine is given no visitor.
NOOP_VISITOR = Visitor()
