"""Tests for graph traversal algorithms."""

import pytest

from wgraph.graphs import Graph, Partition, VisitState, bfs, dfs


def _graph(names, edges):
    G = Graph()
    G.add_vertices(names)
    for a, b in edges:
        G.add_edge(a, b, 1)
    return G


@pytest.fixture
def branching():
    """A with two branches: A-B-D (dead end) and A-C-E."""
    return _graph(["A", "B", "C", "D", "E"], [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E")])


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_order(self, branching):
        """Test BFS visits level by level in insertion order."""
        result = bfs(branching, "A")
        assert result.order == ["A", "B", "C", "D", "E"]
        assert result.found is False

    def test_bfs_clears_markers(self, branching, assert_clean):
        """Test that markers are cleared by default."""
        bfs(branching, "A", two_color=True)
        assert_clean(branching)

    def test_bfs_retain(self, branching):
        """Test that retain keeps states for reached vertices only."""
        G = branching
        G.add_vertex("Z")
        bfs(G, "A", retain=True)

        assert all(G.vertex(n).state is VisitState.DONE for n in "ABCDE")
        assert G.vertex("Z").state is VisitState.UNVISITED

    def test_bfs_target_stops_early(self, branching):
        """Test that reaching the target stops the search."""
        result = bfs(branching, "A", "C")
        assert result.found is True
        # B was queued but never dequeued
        assert result.order == ["A", "C"]

    def test_bfs_target_is_start(self, branching):
        """Test a target equal to the start."""
        result = bfs(branching, "A", "A")
        assert result.found is True
        assert result.order == ["A"]

    def test_bfs_unreachable_target(self, branching):
        """Test a target in another component."""
        branching.add_vertex("Z")
        result = bfs(branching, "A", "Z")
        assert result.found is False
        assert "Z" not in result.order

    def test_bfs_two_color(self, branching):
        """Test alternating partitions along BFS edges."""
        G = branching
        bfs(G, "A", two_color=True, retain=True)
        assert G.vertex("A").partition is Partition.LEFT
        assert G.vertex("B").partition is Partition.RIGHT
        assert G.vertex("C").partition is Partition.RIGHT
        assert G.vertex("D").partition is Partition.LEFT
        assert G.vertex("E").partition is Partition.LEFT

    def test_bfs_fresh_false_continues(self):
        """Test that fresh=False respects earlier marks."""
        G = _graph(["A", "B", "C"], [("A", "B"), ("B", "C")])
        G.vertex("B").state = VisitState.DONE

        result = bfs(G, "A", fresh=False)
        assert result.order == ["A"]

    def test_bfs_unknown_vertices(self, branching):
        """Test unknown start and target."""
        with pytest.raises(ValueError, match="Start"):
            bfs(branching, "Q")
        with pytest.raises(ValueError, match="Target"):
            bfs(branching, "A", "Q")


class TestDFS:
    """Tests for depth-first search."""

    def test_narrow_dfs_follows_first_branch(self, branching):
        """Test that the default DFS walks a single path."""
        result = dfs(branching, "A")
        assert result.order == ["A", "B", "D"]

    def test_narrow_dfs_misses_sibling_branch(self, branching):
        """Test that narrow DFS does not backtrack to find the target."""
        result = dfs(branching, "A", "E")
        assert result.found is False
        assert "E" not in result.order

    def test_backtracking_dfs_finds_target(self, branching):
        """Test that full DFS backtracks into the sibling branch."""
        result = dfs(branching, "A", "E", backtrack=True)
        assert result.found is True
        assert result.order == ["A", "B", "D", "C", "E"]

    def test_backtracking_dfs_preorder(self, branching):
        """Test full DFS pre-order without a target."""
        result = dfs(branching, "A", backtrack=True)
        assert result.order == ["A", "B", "D", "C", "E"]
        assert result.found is False

    def test_dfs_target_on_first_path(self, branching):
        """Test narrow DFS reaching a target on its path."""
        result = dfs(branching, "A", "D")
        assert result.found is True
        assert result.order == ["A", "B", "D"]

    def test_dfs_two_color_path(self):
        """Test alternating partitions along the DFS path."""
        G = _graph(["A", "B", "C"], [("A", "B"), ("B", "C")])
        dfs(G, "A", two_color=True, retain=True)
        assert [G.vertex(n).partition for n in "ABC"] == [
            Partition.LEFT,
            Partition.RIGHT,
            Partition.LEFT,
        ]

    def test_dfs_clears_markers(self, branching, assert_clean):
        """Test that DFS clears markers in both modes."""
        dfs(branching, "A")
        assert_clean(branching)
        dfs(branching, "A", backtrack=True, two_color=True)
        assert_clean(branching)

    def test_dfs_unknown_start(self, branching):
        """Test DFS with unknown start vertex."""
        with pytest.raises(ValueError):
            dfs(branching, "Q")
