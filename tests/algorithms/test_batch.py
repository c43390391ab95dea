from ksproute.algorithms.batch import find_k_shortest_batch, iter_k_shortest_batch
from ksproute.algorithms.visitor import Visitor
from ksproute.algorithms.yen import find_k_shortest
from ksproute.graph.adapter import GraphAdapter


class TestBatch:
    def test_batch_k1_in_destination_order(self, square1):
        paths = find_k_shortest_batch(square1, {1: {4, 3}}, 1)
        assert [p.nodes for p in paths] == [(1, 3), (1, 2, 4)]

    def test_batch_sources_ascending(self, square1):
        paths = find_k_shortest_batch(square1, {3: {4}, 1: {2}}, 1)
        assert [p.nodes for p in paths] == [(1, 2), (3, 4)]

    def test_batch_matches_single_runs(self, yen_classic):
        pairs = {"C": ["H", "F"], "E": ["H"]}
        expected = (
            find_k_shortest(yen_classic, "C", "F", 3)
            + find_k_shortest(yen_classic, "C", "H", 3)
            + find_k_shortest(yen_classic, "E", "H", 3)
        )
        assert find_k_shortest_batch(yen_classic, pairs, 3) == expected

    def test_batch_skips_absent_vertices(self, square1):
        paths = find_k_shortest_batch(square1, {99: {4}, 1: {98, 4}}, 2)
        assert [p.nodes for p in paths] == [(1, 2, 4), (1, 3, 4)]

    def test_batch_unreachable_and_same_vertex_pairs(self, disconnected1):
        paths = find_k_shortest_batch(disconnected1, {1: {1, 2, 4}, 3: {4}}, 2)
        assert [p.nodes for p in paths] == [(1, 2), (3, 4)]

    def test_batch_empty_pairs(self, square1):
        assert find_k_shortest_batch(square1, {}, 3) == []

    def test_batch_include_pending(self, yen_classic):
        paths = find_k_shortest_batch(yen_classic, {"C": {"H"}}, 3, include_pending=True)
        assert len(paths) == 5

    def test_iter_batch_yields_pairs(self, square1):
        result = [
            (s, t, [p.nodes for p in paths])
            for s, t, paths in iter_k_shortest_batch(square1, {1: [4, 2]}, 2)
        ]
        assert result == [(1, 2, [(1, 2)]), (1, 4, [(1, 2, 4), (1, 3, 4)])]

    def test_batch_restores_shared_adapter(self, yen_classic):
        before = yen_classic.adjacency_snapshot()
        adapter = GraphAdapter(yen_classic)
        find_k_shortest_batch(adapter, {"C": {"H", "G"}, "D": {"H"}}, 4)
        assert not adapter.disabled_edges
        assert not adapter.disabled_vertices
        assert yen_classic.adjacency_snapshot() == before

    def test_batch_visitor_sees_each_pair(self, square1):
        firsts = []

        class FirstVisitor(Visitor):
            def on_insert_first_solution(self, path):
                firsts.append((path.src_node, path.dst_node))

        find_k_shortest_batch(square1, {1: {2, 3, 4}, 2: {4}}, 1, visitor=FirstVisitor())
        assert firsts == [(1, 2), (1, 3), (1, 4), (2, 4)]
