"""
Single-source shortest paths with predecessor tracking.

The default frontier is a binary-heap priority queue keyed by the current
best distance (Dijkstra). A FIFO frontier is also available; it processes
vertices in discovery order and finalises each one when it is dequeued, so it
can miss a cheaper path found after the vertex was finalised.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
import math
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..logging import get_logger
from .core import Graph, VisitState
from .utils import reconstruct_path

logger = get_logger(__name__)

FRONTIERS = ("priority", "fifo")


@dataclass(frozen=True)
class PathResult:
    """An ordered vertex path from source to target and its total cost."""

    vertices: List[str]
    cost: float


@dataclass
class ShortestPaths:
    """
    Distances and predecessors computed from one source.

    Attributes:
        source: Name of the source vertex.
        distance: Vertex name -> best distance found (inf if unreachable).
        parent: Vertex name -> previous vertex on the best path (None for the
            source and unreachable vertices).
    """

    source: str
    distance: Dict[str, float]
    parent: Dict[str, Optional[str]]

    def path_to(self, target: str) -> Optional[PathResult]:
        """
        Reconstruct the path to target.

        Returns:
            PathResult, or None if target is unreachable or is the source.

        Raises:
            KeyError: If target was not in the graph.
        """
        if target not in self.distance:
            raise KeyError(f"Vertex {target!r} not in graph")
        if self.parent[target] is None:
            return None
        vertices = reconstruct_path(self.parent, target)
        if vertices is None:
            return None
        return PathResult(vertices=vertices, cost=self.distance[target])


def _initialise(graph: Graph, source_handle: int) -> None:
    graph.reset_scratch()
    graph.vertices[source_handle].distance = 0.0


def _relax_fifo(graph: Graph, source_handle: int) -> None:
    vertices = graph.vertices
    vertices[source_handle].state = VisitState.ACTIVE
    queue = deque([source_handle])

    while queue:
        handle = queue.popleft()
        vertex = vertices[handle]
        vertex.state = VisitState.DONE

        for edge in vertex.edges:
            neighbor = vertices[edge.target]
            if neighbor.state is VisitState.DONE:
                continue
            candidate = vertex.distance + edge.weight
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.predecessor = handle
            if neighbor.state is VisitState.UNVISITED:
                neighbor.state = VisitState.ACTIVE
                queue.append(edge.target)


def _relax_priority(graph: Graph, source_handle: int) -> None:
    vertices = graph.vertices
    vertices[source_handle].state = VisitState.ACTIVE
    # (distance, insertion counter, handle); the counter keeps ties in push order
    counter = itertools.count()
    heap: List[Tuple[float, int, int]] = [(0.0, next(counter), source_handle)]

    while heap:
        distance, _, handle = heapq.heappop(heap)
        vertex = vertices[handle]
        if vertex.state is VisitState.DONE or distance > vertex.distance:
            continue
        vertex.state = VisitState.DONE

        for edge in vertex.edges:
            neighbor = vertices[edge.target]
            if neighbor.state is VisitState.DONE:
                continue
            candidate = vertex.distance + edge.weight
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.predecessor = handle
                neighbor.state = VisitState.ACTIVE
                heapq.heappush(heap, (candidate, next(counter), edge.target))


def shortest_paths(graph: Graph, source: str, *, frontier: str = "priority") -> ShortestPaths:
    """
    Compute shortest distances and predecessors from a source vertex.

    Every vertex starts at distance inf with no predecessor; the source
    starts at 0. Relaxation updates a vertex's distance and predecessor when
    ``d(u) + w < d(v)``. Results are copied out and the graph's scratch
    fields are reset before returning.

    Args:
        graph: Graph with non-negative weights.
        source: Source vertex name.
        frontier: "priority" (Dijkstra, default) or "fifo" (discovery order).

    Returns:
        ShortestPaths for every vertex in the graph.

    Raises:
        ValueError: If source is not in the graph or frontier is unknown.

    Complexity: O((V + E) log V) with the priority frontier, O(V + E) with FIFO.

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B", "C"])
        3
        >>> G.add_edge("A", "B", 1.0)
        True
        >>> G.add_edge("B", "C", 2.0)
        True
        >>> shortest_paths(G, "A").distance["C"]
        3.0
    """
    if source not in graph:
        raise ValueError(f"Source vertex {source!r} not in graph")
    if frontier not in FRONTIERS:
        raise ValueError(f"Unknown frontier {frontier!r}. Supported frontiers: {list(FRONTIERS)}")

    source_handle = graph.handle(source)
    vertices = graph.vertices
    try:
        _initialise(graph, source_handle)
        if frontier == "fifo":
            _relax_fifo(graph, source_handle)
        else:
            _relax_priority(graph, source_handle)

        distance = {vertex.name: vertex.distance for vertex in vertices}
        parent = {
            vertex.name: None if vertex.predecessor is None else vertices[vertex.predecessor].name
            for vertex in vertices
        }
    finally:
        graph.reset_scratch()

    reached = sum(1 for d in distance.values() if not math.isinf(d))
    logger.debug("shortest_paths from %r (%s): reached %d vertices", source, frontier, reached)
    return ShortestPaths(source=source, distance=distance, parent=parent)


def shortest_path(
    graph: Graph, source: str, target: str, *, frontier: str = "priority"
) -> Optional[PathResult]:
    """
    Return the shortest path from source to target, or None if there is none.

    A target equal to the source has no path.

    Raises:
        ValueError: If source or target is not in the graph.
    """
    if target not in graph:
        raise ValueError(f"Target vertex {target!r} not in graph")
    return shortest_paths(graph, source, frontier=frontier).path_to(target)
