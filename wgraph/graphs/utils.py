"""
Utility functions for graph algorithms.

Provides read-only views of a graph for presentation layers (snapshots and
a dense adjacency matrix) and predecessor-chain path reconstruction.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .core import Graph, Partition, VisitState


@dataclass(frozen=True)
class VertexSnapshot:
    """
    Copy of one vertex as seen by an output layer.

    Attributes:
        name: Vertex name.
        state: Visitation state at snapshot time.
        partition: Partition tag at snapshot time (None if uncoloured).
        edges: (neighbor name, weight) pairs in insertion order.
    """

    name: str
    state: VisitState
    partition: Optional[Partition]
    edges: Tuple[Tuple[str, float], ...]


def snapshot(graph: Graph) -> List[VertexSnapshot]:
    """Return a snapshot of every vertex, in insertion order."""
    vertices = graph.vertices
    return [
        VertexSnapshot(
            name=vertex.name,
            state=vertex.state,
            partition=vertex.partition,
            edges=tuple((vertices[edge.target].name, edge.weight) for edge in vertex.edges),
        )
        for vertex in vertices
    ]


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Return the symmetric weight matrix of a graph.

    Rows and columns follow vertex insertion order; entries with no edge
    are 0.

    Returns:
        (n, n) float array.

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B"])
        2
        >>> G.add_edge("A", "B", 2.5)
        True
        >>> adjacency_matrix(G).tolist()
        [[0.0, 2.5], [2.5, 0.0]]
    """
    n = len(graph)
    matrix = np.zeros((n, n), dtype=float)
    for handle, vertex in enumerate(graph.vertices):
        for edge in vertex.edges:
            matrix[handle, edge.target] = edge.weight
    return matrix


def reconstruct_path(parent: Dict[str, Optional[str]], target: str) -> Optional[List[str]]:
    """
    Reconstruct the path ending at target from a predecessor map.

    Walks parent links back from target until a vertex with no parent (the
    source), then reverses the chain.

    Args:
        parent: Vertex name -> previous vertex name (or None).
        target: Last vertex of the path.

    Returns:
        Vertex names from source to target inclusive, or None if target is
        not in the map or the chain loops.

    Example:
        >>> reconstruct_path({"A": None, "B": "A", "C": "B"}, "C")
        ['A', 'B', 'C']
    """
    if target not in parent:
        return None

    path = []
    seen = set()
    current: Optional[str] = target
    while current is not None:
        if current in seen:
            return None
        seen.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path
