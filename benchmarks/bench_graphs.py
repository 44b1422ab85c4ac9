"""Benchmark spanning-tree and shortest-path construction."""

import time
from typing import Callable, Dict

import numpy as np

from wgraph import Graph, kruskal_mst, prim_mst, shortest_paths


def random_connected_graph(n_vertices: int, extra_edges: int, seed: int = 0) -> Graph:
    """Build a random connected graph.

    A random spanning path guarantees connectivity; ``extra_edges`` further
    random pairs are then attempted (duplicates are rejected by the graph).

    Args:
        n_vertices: Number of vertices.
        extra_edges: Number of additional random edges to try.
        seed: Seed for the numpy generator.

    Returns:
        Graph with integer-valued weights in [1, 100).
    """
    rng = np.random.default_rng(seed)
    names = [f"v{i}" for i in range(n_vertices)]
    graph = Graph()
    graph.add_vertices(names)

    order = rng.permutation(n_vertices)
    for a, b in zip(order[:-1], order[1:]):
        graph.add_edge(names[a], names[b], float(rng.integers(1, 100)))

    for _ in range(extra_edges):
        a, b = rng.integers(0, n_vertices, size=2)
        graph.add_edge(names[a], names[b], float(rng.integers(1, 100)))
    return graph


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # Warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_algorithms(
    n_vertices: int = 500,
    extra_edges: int = 2000,
    repeats: int = 5,
) -> Dict[str, float]:
    """Benchmark the spanning-tree builders and both shortest-path frontiers.

    Returns:
        Dictionary of mean seconds per call.
    """
    graph = random_connected_graph(n_vertices, extra_edges)
    source = graph.vertices[0].name

    return {
        "prim_mst_sec": _time(lambda: prim_mst(graph), repeats),
        "kruskal_mst_sec": _time(lambda: kruskal_mst(graph), repeats),
        "shortest_priority_sec": _time(lambda: shortest_paths(graph, source), repeats),
        "shortest_fifo_sec": _time(
            lambda: shortest_paths(graph, source, frontier="fifo"), repeats
        ),
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    results = benchmark_algorithms()
    print("Random graph (500 vertices, ~2500 edges):")
    for name, seconds in results.items():
        print(f"  {name}: {seconds * 1e3:.2f} ms")
