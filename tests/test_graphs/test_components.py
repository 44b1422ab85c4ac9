"""Tests for connected components."""

from wgraph.graphs import Graph, connected_components, is_connected


class TestConnectedComponents:
    """Tests for connected_components."""

    def test_two_components(self, two_component_graph):
        """Test the nine-vertex forest splits into sizes 4 and 5."""
        components = connected_components(two_component_graph)

        assert len(components) == 2
        assert set(components[0].vertex_names()) == {"1", "2", "3", "9"}
        assert set(components[1].vertex_names()) == {"4", "5", "6", "7", "8"}

    def test_components_partition_vertices(self, two_component_graph):
        """Test that components cover every vertex exactly once."""
        components = connected_components(two_component_graph)
        names = [name for c in components for name in c.vertex_names()]

        assert sorted(names) == sorted(two_component_graph.vertex_names())
        assert len(names) == len(set(names))

    def test_component_edges(self, two_component_graph):
        """Test that each component keeps exactly its internal edges."""
        components = connected_components(two_component_graph)
        original = {frozenset((a, b)) for a, b, _ in two_component_graph.edges()}
        copied = [{frozenset((a, b)) for a, b, _ in c.edges()} for c in components]

        assert copied[0] | copied[1] == original
        assert not copied[0] & copied[1]
        assert copied[0] == {frozenset(p) for p in [("1", "3"), ("1", "9"), ("2", "3")]}

    def test_components_bfs_order(self, two_component_graph):
        """Test that component vertices follow BFS order from the first vertex."""
        components = connected_components(two_component_graph)
        assert components[0].vertex_names() == ["1", "3", "9", "2"]

    def test_isolated_vertices(self):
        """Test that isolated vertices form singleton components."""
        G = Graph()
        G.add_vertices(["A", "B", "C"])
        components = connected_components(G)
        assert [c.vertex_names() for c in components] == [["A"], ["B"], ["C"]]

    def test_empty_graph(self):
        """Test that an empty graph has no components."""
        assert connected_components(Graph()) == []

    def test_markers_cleared(self, two_component_graph, assert_clean):
        """Test that the input graph is left unmarked."""
        connected_components(two_component_graph)
        assert_clean(two_component_graph)

    def test_components_are_independent(self, two_component_graph):
        """Test that components do not alias input vertices."""
        components = connected_components(two_component_graph)
        assert components[0].vertex("1") is not two_component_graph.vertex("1")

    def test_repeatable(self, two_component_graph):
        """Test that repeated calls give the same result."""
        first = [c.vertex_names() for c in connected_components(two_component_graph)]
        second = [c.vertex_names() for c in connected_components(two_component_graph)]
        assert first == second


class TestIsConnected:
    """Tests for is_connected."""

    def test_connected(self, road_network):
        assert is_connected(road_network)

    def test_disconnected(self, two_component_graph):
        assert not is_connected(two_component_graph)

    def test_empty_and_single(self):
        G = Graph()
        assert is_connected(G)
        G.add_vertex("A")
        assert is_connected(G)
