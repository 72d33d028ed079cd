"""Tests for cohesion_lens.math.graph module."""

from cohesion_lens.math.graph import GraphMetrics


class TestUndirected:
    """Building symmetric adjacency maps."""

    def test_isolated_nodes_kept(self):
        graph = GraphMetrics.undirected(["a", "b", "c"], [("a", "b")])
        assert graph == {"a": {"b"}, "b": {"a"}, "c": set()}

    def test_self_loops_dropped(self):
        graph = GraphMetrics.undirected(["a"], [("a", "a")])
        assert graph == {"a": set()}


class TestReachable:
    """BFS reachability."""

    def test_chain(self):
        chain = {"a": {"b"}, "b": {"c"}, "c": set()}
        assert GraphMetrics.reachable(chain, "a") == {"b", "c"}

    def test_start_excluded_without_cycle(self):
        assert "a" not in GraphMetrics.reachable({"a": {"b"}, "b": set()}, "a")

    def test_start_included_on_cycle(self):
        assert "a" in GraphMetrics.reachable({"a": {"b"}, "b": {"a"}}, "a")

    def test_unknown_start(self):
        assert GraphMetrics.reachable({"a": set()}, "z") == set()


class TestConnectedComponents:
    """Components of undirected graphs."""

    def test_two_components(self):
        graph = GraphMetrics.undirected(["a", "b", "c", "d"], [("a", "b"), ("c", "d")])
        assert GraphMetrics.connected_components(graph) == [{"a", "b"}, {"c", "d"}]

    def test_isolated_nodes_are_components(self):
        graph = GraphMetrics.undirected(["a", "b", "c"], [])
        assert len(GraphMetrics.connected_components(graph)) == 3

    def test_empty_graph(self):
        assert GraphMetrics.connected_components({}) == []


class TestCounts:
    """Edge and pair counting."""

    def test_edge_count(self):
        graph = GraphMetrics.undirected(["a", "b", "c"], [("a", "b"), ("b", "c"), ("a", "b")])
        assert GraphMetrics.edge_count(graph) == 2

    def test_pair_count(self):
        assert GraphMetrics.pair_count(4) == 6
        assert GraphMetrics.pair_count(1) == 0
        assert GraphMetrics.pair_count(0) == 0
