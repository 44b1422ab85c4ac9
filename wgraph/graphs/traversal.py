"""
Graph traversal algorithms: BFS and DFS.

Both traversals mark vertices through their ``state`` field and, in
two-colouring mode, alternate the ``partition`` tag along every edge they
follow. Neighbours are visited in adjacency insertion order.

Markers are cleared when a traversal finishes unless ``retain=True``, and are
always cleared if the traversal raises. With ``fresh=False`` a traversal
continues from the markers a previous retaining call left behind, which is how
the component and bipartiteness analyzers sweep a whole graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..logging import get_logger
from .core import Graph, Partition, Vertex, VisitState

logger = get_logger(__name__)


@dataclass
class TraversalResult:
    """
    Outcome of a traversal.

    Attributes:
        order: Vertex names in the order they were reached.
        found: True if the search target was reached (always False when no
            target was given).
    """

    order: List[str] = field(default_factory=list)
    found: bool = False


def _resolve(graph: Graph, name: Optional[str], role: str) -> Optional[int]:
    if name is None:
        return None
    if name not in graph:
        raise ValueError(f"{role} vertex {name!r} not in graph")
    return graph.handle(name)


def _color_from(vertex: Vertex, parent: Vertex) -> None:
    vertex.partition = (parent.partition or Partition.LEFT).opposite()


def _run(graph: Graph, walk: Callable[[], TraversalResult], retain: bool) -> TraversalResult:
    try:
        result = walk()
    except Exception:
        graph.clear_markers()
        raise
    if not retain:
        graph.clear_markers()
    return result


def bfs(
    graph: Graph,
    start: str,
    target: Optional[str] = None,
    *,
    two_color: bool = False,
    fresh: bool = True,
    retain: bool = False,
) -> TraversalResult:
    """
    Breadth-first search from a start vertex.

    Discovered vertices are marked ACTIVE and queued; a dequeued vertex is
    marked DONE. When a discovered neighbour is the target, the search
    records it and stops without queuing further work.

    Args:
        graph: Graph to traverse.
        start: Name of the start vertex.
        target: Optional name of a vertex to search for.
        two_color: If True, assign alternating partitions along each edge.
        fresh: If True, clear all markers before starting.
        retain: If True, keep markers after a successful traversal.

    Returns:
        TraversalResult with the visitation order and whether target was found.

    Raises:
        ValueError: If start or target is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B", "C"])
        3
        >>> G.add_edge("A", "B", 1.0)
        True
        >>> G.add_edge("A", "C", 1.0)
        True
        >>> bfs(G, "A").order
        ['A', 'B', 'C']
    """
    start_handle = _resolve(graph, start, "Start")
    target_handle = _resolve(graph, target, "Target")
    if fresh:
        graph.clear_markers()

    def walk() -> TraversalResult:
        vertices = graph.vertices
        result = TraversalResult()
        root = vertices[start_handle]
        if two_color and root.partition is None:
            root.partition = Partition.LEFT
        root.state = VisitState.ACTIVE

        if start_handle == target_handle:
            root.state = VisitState.DONE
            result.order.append(root.name)
            result.found = True
            return result

        queue = deque([start_handle])
        while queue:
            vertex = vertices[queue.popleft()]
            vertex.state = VisitState.DONE
            result.order.append(vertex.name)

            for edge in vertex.edges:
                neighbor = vertices[edge.target]
                if neighbor.state is not VisitState.UNVISITED:
                    continue
                neighbor.state = VisitState.ACTIVE
                if two_color:
                    _color_from(neighbor, vertex)
                if edge.target == target_handle:
                    neighbor.state = VisitState.DONE
                    result.order.append(neighbor.name)
                    result.found = True
                    return result
                queue.append(edge.target)

        return result

    result = _run(graph, walk, retain)
    logger.debug("bfs from %r reached %d vertices", start, len(result.order))
    return result


def dfs(
    graph: Graph,
    start: str,
    target: Optional[str] = None,
    *,
    two_color: bool = False,
    fresh: bool = True,
    retain: bool = False,
    backtrack: bool = False,
) -> TraversalResult:
    """
    Depth-first search from a start vertex.

    By default the search is narrow: from each vertex it follows only the
    first unvisited neighbour and never backtracks, so it walks a single
    path until the target is reached or the path gets stuck. With
    ``backtrack=True`` it performs a full depth-first search that returns to
    earlier vertices to try their remaining neighbours.

    Args:
        graph: Graph to traverse.
        start: Name of the start vertex.
        target: Optional name of a vertex to search for.
        two_color: If True, assign alternating partitions along each edge.
        fresh: If True, clear all markers before starting.
        retain: If True, keep markers after a successful traversal.
        backtrack: If True, explore sibling branches (full DFS).

    Returns:
        TraversalResult with the pre-order visitation and whether target
        was found.

    Raises:
        ValueError: If start or target is not in the graph.

    Complexity: O(V + E).
    """
    start_handle = _resolve(graph, start, "Start")
    target_handle = _resolve(graph, target, "Target")
    if fresh:
        graph.clear_markers()

    def walk_path() -> TraversalResult:
        vertices = graph.vertices
        result = TraversalResult()
        current = start_handle
        if two_color and vertices[current].partition is None:
            vertices[current].partition = Partition.LEFT

        while True:
            vertex = vertices[current]
            vertex.state = VisitState.DONE
            result.order.append(vertex.name)
            if current == target_handle:
                result.found = True
                return result

            following = None
            for edge in vertex.edges:
                if vertices[edge.target].state is VisitState.UNVISITED:
                    following = edge.target
                    break
            if following is None:
                return result
            if two_color:
                _color_from(vertices[following], vertex)
            current = following

    def walk_tree() -> TraversalResult:
        vertices = graph.vertices
        result = TraversalResult()
        root = vertices[start_handle]
        if two_color and root.partition is None:
            root.partition = Partition.LEFT
        root.state = VisitState.ACTIVE
        result.order.append(root.name)
        if start_handle == target_handle:
            root.state = VisitState.DONE
            result.found = True
            return result

        stack = [(start_handle, iter(root.edges))]
        while stack:
            handle, pending = stack[-1]
            vertex = vertices[handle]
            for edge in pending:
                neighbor = vertices[edge.target]
                if neighbor.state is not VisitState.UNVISITED:
                    continue
                neighbor.state = VisitState.ACTIVE
                if two_color:
                    _color_from(neighbor, vertex)
                result.order.append(neighbor.name)
                if edge.target == target_handle:
                    neighbor.state = VisitState.DONE
                    result.found = True
                    return result
                stack.append((edge.target, iter(neighbor.edges)))
                break
            else:
                vertex.state = VisitState.DONE
                stack.pop()

        return result

    result = _run(graph, walk_tree if backtrack else walk_path, retain)
    logger.debug(
        "dfs from %r (backtrack=%s) reached %d vertices", start, backtrack, len(result.order)
    )
    return result
