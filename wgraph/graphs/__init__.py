"""
Graph algorithms package for wgraph.

This package provides an in-memory undirected weighted graph and the
algorithms that run on it:
- Graph store (Graph, Vertex, Edge, degree helpers)
- Traversal (BFS, DFS with optional two-colouring)
- Connected components
- Bipartiteness testing
- Minimum spanning trees (Prim, Kruskal)
- Single-source shortest paths with path reconstruction

Every algorithm resets the scratch fields it used before returning.
"""

from .bipartite import bipartition, is_bipartite
from .components import connected_components, is_connected
from .core import (
    DisconnectedGraphError,
    Edge,
    Graph,
    GraphError,
    GraphIntegrityError,
    Partition,
    Vertex,
    VisitState,
    degree,
    degree_sequence,
)
from .mst import UnionFind, kruskal_mst, prim_mst, total_weight
from .shortest import PathResult, ShortestPaths, shortest_path, shortest_paths
from .traversal import TraversalResult, bfs, dfs
from .utils import VertexSnapshot, adjacency_matrix, reconstruct_path, snapshot

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "VisitState",
    "Partition",
    "GraphError",
    "DisconnectedGraphError",
    "GraphIntegrityError",
    "degree",
    "degree_sequence",
    "bfs",
    "dfs",
    "TraversalResult",
    "connected_components",
    "is_connected",
    "is_bipartite",
    "bipartition",
    "prim_mst",
    "kruskal_mst",
    "total_weight",
    "UnionFind",
    "shortest_paths",
    "shortest_path",
    "ShortestPaths",
    "PathResult",
    "snapshot",
    "VertexSnapshot",
    "adjacency_matrix",
    "reconstruct_path",
]

# Example usage:
# from wgraph.graphs import Graph, prim_mst, shortest_path, total_weight
#
# G = Graph()
# G.add_vertices(["A", "B", "C"])
# G.add_edge("A", "B", 1.0)
# G.add_edge("B", "C", 2.0)
# total_weight(prim_mst(G))          # 3.0
# shortest_path(G, "A", "C")         # PathResult(vertices=['A', 'B', 'C'], cost=3.0)
