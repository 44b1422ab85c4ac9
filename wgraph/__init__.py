"""wgraph - an in-memory engine for undirected weighted graphs."""

__version__ = "0.1.0"

from .graphs import (
    DisconnectedGraphError,
    Edge,
    Graph,
    GraphError,
    GraphIntegrityError,
    Partition,
    PathResult,
    ShortestPaths,
    TraversalResult,
    UnionFind,
    Vertex,
    VertexSnapshot,
    VisitState,
    adjacency_matrix,
    bfs,
    bipartition,
    connected_components,
    degree,
    degree_sequence,
    dfs,
    is_bipartite,
    is_connected,
    kruskal_mst,
    prim_mst,
    reconstruct_path,
    shortest_path,
    shortest_paths,
    snapshot,
    total_weight,
)
from .logging import configure_logging, get_logger, set_log_level
from .viz import print_graph, to_text

__all__ = [
    "__version__",
    # Graph store
    "Graph",
    "Vertex",
    "Edge",
    "VisitState",
    "Partition",
    "degree",
    "degree_sequence",
    # Errors
    "GraphError",
    "DisconnectedGraphError",
    "GraphIntegrityError",
    # Algorithms
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
    # Output surface
    "snapshot",
    "VertexSnapshot",
    "adjacency_matrix",
    "reconstruct_path",
    "to_text",
    "print_graph",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
