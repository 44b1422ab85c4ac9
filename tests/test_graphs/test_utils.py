"""Tests for graph utility functions."""

import numpy as np

from wgraph.graphs import (
    Graph,
    Partition,
    VisitState,
    adjacency_matrix,
    is_bipartite,
    reconstruct_path,
    snapshot,
)


class TestSnapshot:
    """Tests for snapshot."""

    def test_snapshot_contents(self, road_network):
        """Test names, default markers and adjacency in insertion order."""
        views = snapshot(road_network)

        assert [v.name for v in views] == ["A", "B", "C", "D", "E", "F"]
        assert views[0].edges == (("B", 7.0), ("C", 8.0))
        assert views[3].edges == (("B", 5.0), ("C", 6.0), ("E", 2.0), ("F", 4.0))
        assert all(v.state is VisitState.UNVISITED for v in views)
        assert all(v.partition is None for v in views)

    def test_snapshot_shows_coloring(self, make_cycle):
        G = make_cycle(4)
        is_bipartite(G, keep_coloring=True)
        views = snapshot(G)
        assert views[0].partition is Partition.LEFT
        assert views[0].state is VisitState.DONE

    def test_snapshot_is_a_copy(self, road_network):
        views = snapshot(road_network)
        road_network.add_vertex("Z")
        road_network.add_edge("A", "Z", 1)
        assert len(views) == 6
        assert views[0].edges == (("B", 7.0), ("C", 8.0))

    def test_empty(self):
        assert snapshot(Graph()) == []


class TestAdjacencyMatrix:
    """Tests for adjacency_matrix."""

    def test_symmetric_weights(self, road_network):
        matrix = adjacency_matrix(road_network)

        assert matrix.shape == (6, 6)
        assert np.allclose(matrix, matrix.T)
        assert matrix[0, 1] == 7.0
        assert matrix[3, 5] == 4.0
        assert matrix[0, 5] == 0.0
        assert np.trace(matrix) == 0.0
        assert matrix.sum() / 2 == 40.0

    def test_empty(self):
        assert adjacency_matrix(Graph()).shape == (0, 0)


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_simple(self):
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]

    def test_source(self):
        assert reconstruct_path({"A": None}, "A") == ["A"]

    def test_missing_target(self):
        assert reconstruct_path({"A": None}, "D") is None

    def test_cycle(self):
        assert reconstruct_path({"A": "B", "B": "A"}, "A") is None
