import logging

from ksproute.algorithms.visitor import NOOP_VISITOR, LoggingVisitor, Visitor
from ksproute.algorithms.yen import find_k_shortest
from ksproute.paths.path import Path


def test_default_visitor_is_noop():
    path = Path([(1, 0, 1), (2, None, 0)])
    assert NOOP_VISITOR.on_insert_first_solution(path) is None
    assert NOOP_VISITOR.on_insert_to_heap(path) is None
    assert path.nodes == (1, 2)


def test_partial_override():
    seen = []

    class CandidatesOnly(Visitor):
        def on_insert_to_heap(self, path):
            seen.append(path.cost)

    v = CandidatesOnly()
    v.on_insert_first_solution(Path([(1, 1), (2, 0)]))
    v.on_insert_to_heap(Path([(1, 3), (2, 0)]))
    assert seen == [3]


def test_logging_visitor_emits_debug(square1, caplog):
    caplog.set_level(logging.DEBUG, logger="ksproute")
    find_k_shortest(square1, 1, 4, 2, visitor=LoggingVisitor())

    messages = [r.getMessage() for r in caplog.records if r.name == "ksproute.algorithms.visitor"]
    assert messages == [
        "First solution: Path(1->2->4, cost=2)",
        "Candidate: Path(1->3->4, cost=3)",
    ]


def test_visitor_does_not_change_results(yen_classic):
    plain = find_k_shortest(yen_classic, "C", "H", 4)
    logged = find_k_shortest(yen_classic, "C", "H", 4, visitor=LoggingVisitor())
    assert plain == logged
