"""
Bipartiteness testing by breadth-first two-colouring.
"""

from typing import List, Optional, Tuple

from ..logging import get_logger
from .core import Graph, Partition, VisitState
from .traversal import bfs

logger = get_logger(__name__)


def _color_all(graph: Graph) -> None:
    graph.clear_markers()
    for vertex in graph:
        if vertex.state is VisitState.UNVISITED:
            bfs(graph, vertex.name, two_color=True, fresh=False, retain=True)


def _has_conflict(graph: Graph) -> bool:
    vertices = graph.vertices
    return any(
        vertices[edge.target].partition is vertex.partition
        for vertex in vertices
        for edge in vertex.edges
    )


def is_bipartite(graph: Graph, *, keep_coloring: bool = False) -> bool:
    """
    Test whether the vertices split into two groups with no edge inside a group.

    Every still-unvisited vertex starts a new two-colouring BFS, so
    disconnected graphs are handled component by component. The graph is
    bipartite iff no edge joins two vertices with the same partition.

    The colouring is cleared by default even though a two-colouring pass is
    usually expected to leave its tags behind: a finished call must leave
    every scratch field reset, and the colour classes are available as
    values from bipartition(). Pass keep_coloring=True to retain them.

    Args:
        graph: Graph to test.
        keep_coloring: If True, leave the partition tags (and visitation
            states) on the vertices so the colour classes can be read from a
            snapshot. Otherwise every marker is cleared before returning.

    Returns:
        True if the graph is bipartite. The empty graph is bipartite.

    Complexity: O(V + E).
    """
    try:
        _color_all(graph)
        bipartite = not _has_conflict(graph)
    except Exception:
        graph.clear_markers()
        raise
    if not keep_coloring:
        graph.clear_markers()

    logger.debug("bipartite check on %d vertices: %s", len(graph), bipartite)
    return bipartite


def bipartition(graph: Graph) -> Optional[Tuple[List[str], List[str]]]:
    """
    Return the two colour classes of a bipartite graph.

    Returns:
        (left, right) lists of vertex names in graph order, or None if the
        graph is not bipartite.
    """
    try:
        _color_all(graph)
        if _has_conflict(graph):
            return None
        left = [v.name for v in graph if v.partition is Partition.LEFT]
        right = [v.name for v in graph if v.partition is Partition.RIGHT]
        return left, right
    finally:
        graph.clear_markers()
