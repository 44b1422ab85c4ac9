"""Pytest configuration and shared fixtures for wgraph tests.

This module provides:
- The graphs used throughout the suite (road network, nine-vertex forest, cycles)
- A checker that every scratch field of a graph is back at its default
"""

import math
from typing import Callable, List

import pytest

from wgraph import Graph, VisitState


def _build(names: List[str], edges: List[tuple]) -> Graph:
    graph = Graph()
    graph.add_vertices(names)
    for a, b, weight in edges:
        assert graph.add_edge(a, b, weight)
    return graph


@pytest.fixture
def road_network() -> Graph:
    """Six vertices A-F whose minimum spanning tree weighs 17."""
    return _build(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 7),
            ("A", "C", 8),
            ("B", "C", 3),
            ("B", "D", 5),
            ("C", "D", 6),
            ("C", "E", 3),
            ("D", "E", 2),
            ("D", "F", 4),
            ("E", "F", 2),
        ],
    )


@pytest.fixture
def two_component_graph() -> Graph:
    """Vertices 1..9 split into {1, 2, 3, 9} and {4, 5, 6, 7, 8}."""
    return _build(
        [str(i) for i in range(1, 10)],
        [
            ("1", "3", 1),
            ("1", "9", 1),
            ("2", "3", 1),
            ("4", "6", 1),
            ("4", "8", 1),
            ("5", "6", 1),
            ("7", "8", 1),
        ],
    )


@pytest.fixture
def make_cycle() -> Callable[[int], Graph]:
    """Factory for unit-weight cycles on vertices A, B, C, ..."""

    def factory(n: int) -> Graph:
        names = [chr(ord("A") + i) for i in range(n)]
        edges = [(a, b, 1) for a, b in zip(names, names[1:] + names[:1])]
        return _build(names, edges)

    return factory


@pytest.fixture
def assert_clean() -> Callable[[Graph], None]:
    """Return a checker asserting that no scratch field is left set."""

    def check(graph: Graph) -> None:
        for vertex in graph:
            assert vertex.state is VisitState.UNVISITED, vertex.name
            assert vertex.partition is None, vertex.name
            assert vertex.claimed is False, vertex.name
            assert math.isinf(vertex.distance), vertex.name
            assert vertex.predecessor is None, vertex.name
            assert not any(edge.consumed for edge in vertex.edges), vertex.name

    return check
