"""
Example: A tour of the wgraph algorithms

Shows degree statistics, connected components, bipartite colouring and
shortest paths on small hand-built graphs.
"""

import sys

from wgraph import (
    Graph,
    connected_components,
    degree,
    degree_sequence,
    is_bipartite,
    print_graph,
    shortest_path,
)


def cycle(n: int) -> Graph:
    """Cycle graph on vertices named 1..n with unit weights."""
    g = Graph()
    names = [str(i) for i in range(1, n + 1)]
    g.add_vertices(names)
    for a, b in zip(names, names[1:] + names[:1]):
        g.add_edge(a, b, 1)
    return g


def example_components() -> None:
    print("=" * 60)
    print("Connected components")
    print("=" * 60)
    g = Graph()
    g.add_vertices([str(i) for i in range(1, 10)])
    for a, b in [("1", "3"), ("1", "9"), ("2", "3"), ("4", "6"), ("4", "8"), ("5", "6"), ("7", "8")]:
        g.add_edge(a, b, 1)

    print(f"Edges: {degree(g)}, degree sequence: {degree_sequence(g)}")
    for index, component in enumerate(connected_components(g), start=1):
        print(f"Component {index}: {component.vertex_names()}")
    print()


def example_bipartite() -> None:
    print("=" * 60)
    print("Bipartite colouring")
    print("=" * 60)
    for n in (4, 5):
        g = cycle(n)
        bipartite = is_bipartite(g, keep_coloring=True)
        print(f"{n}-cycle bipartite: {bipartite}")
        print_graph(g, color=sys.stdout.isatty())
    print()


def example_shortest_path() -> None:
    print("=" * 60)
    print("Shortest paths")
    print("=" * 60)
    g = Graph()
    g.add_vertices(["S", "A", "B", "T"])
    g.add_edge("S", "A", 1)
    g.add_edge("S", "B", 4)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "T", 1)

    for frontier in ("priority", "fifo"):
        path = shortest_path(g, "S", "T", frontier=frontier)
        if path is None:
            print(f"{frontier}: no path")
        else:
            print(f"{frontier}: {' -> '.join(path.vertices)} (cost {path.cost:g})")
    print()


if __name__ == "__main__":
    example_components()
    example_bipartite()
    example_shortest_path()
    print("All examples completed successfully!")
