"""
Example: Minimum spanning trees in wgraph

Builds the six-vertex road network used throughout the test-suite, grows a
spanning tree with both builders and prints the trees with their weights.
"""

from wgraph import Graph, kruskal_mst, prim_mst, print_graph, total_weight


def build_network() -> Graph:
    """Six towns A-F joined by weighted roads."""
    g = Graph()
    g.add_vertices(["A", "B", "C", "D", "E", "F"])
    g.add_edge("A", "B", 7)
    g.add_edge("A", "C", 8)
    g.add_edge("B", "C", 3)
    g.add_edge("B", "D", 5)
    g.add_edge("C", "D", 6)
    g.add_edge("C", "E", 3)
    g.add_edge("D", "E", 2)
    g.add_edge("D", "F", 4)
    g.add_edge("E", "F", 2)
    return g


def example_prim(g: Graph) -> float:
    print("=" * 60)
    print("Frontier growth (Prim)")
    print("=" * 60)
    tree = prim_mst(g)
    print_graph(tree)
    weight = total_weight(tree)
    print(f"Total weight: {weight:g}")
    print()
    return weight


def example_kruskal(g: Graph) -> float:
    print("=" * 60)
    print("Global edge sort (Kruskal)")
    print("=" * 60)
    tree = kruskal_mst(g)
    print_graph(tree)
    weight = total_weight(tree)
    print(f"Total weight: {weight:g}")
    print()
    return weight


if __name__ == "__main__":
    network = build_network()
    prim_weight = example_prim(network)
    kruskal_weight = example_kruskal(network)
    print(f"Spanning tree weights agree: {prim_weight == kruskal_weight}")
