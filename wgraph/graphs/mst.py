"""
Minimum spanning tree algorithms: frontier growth (Prim) and global edge
sort (Kruskal).

Both builders require a connected graph, check connectivity before touching
any scratch field, and return a new Graph whose vertices appear in the order
they were first selected. Scratch flags on the input graph are reset on every
exit path.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..logging import get_logger
from .components import is_connected
from .core import DisconnectedGraphError, Graph

logger = get_logger(__name__)

# (near endpoint handle, far endpoint handle, weight)
Candidate = Tuple[int, int, float]


class UnionFind:
    """
    Disjoint-set forest over vertex handles.

    Each set is identified by its representative (root). Uses path
    compression in ``find`` and union by rank in ``union``.
    """

    def __init__(self, items: Iterable[int]):
        self.parent: Dict[int, int] = {}
        self.rank: Dict[int, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets holding a and b.

        Returns:
            False if a and b already shared a representative, True otherwise.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True


def _require_connected(graph: Graph, algorithm: str) -> None:
    if not is_connected(graph):
        logger.warning("%s: input graph is not connected", algorithm)
        raise DisconnectedGraphError(
            f"{algorithm} requires a connected graph; "
            f"{len(graph)} vertices are not all reachable from each other"
        )


def _place(tree: Graph, graph: Graph, a: int, b: int, weight: float) -> None:
    names = (graph.vertices[a].name, graph.vertices[b].name)
    tree.add_vertex(names[0])
    tree.add_vertex(names[1])
    tree.add_edge(names[0], names[1], weight)


def prim_mst(graph: Graph, start: Optional[str] = None) -> Graph:
    """
    Build a minimum spanning tree by growing a frontier from one vertex.

    After each vertex is claimed, its unconsumed edges join the candidate
    list (each edge and its mirror are marked consumed) and the list is
    stably sorted by weight, so equal weights keep discovery order. The
    cheapest candidate whose far endpoint is still unclaimed is placed in
    the tree and growth continues from that endpoint.

    Args:
        graph: Connected undirected graph.
        start: Name of the first vertex (defaults to the first vertex added).

    Returns:
        New Graph with len(graph) - 1 edges of minimum total weight.

    Raises:
        ValueError: If start is not in the graph.
        DisconnectedGraphError: If the graph is not connected, or the
            candidates run out before the tree spans every vertex.

    Complexity: O(V * E log E) from re-sorting the candidate list.

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B", "C"])
        3
        >>> G.add_edge("A", "B", 1.0)
        True
        >>> G.add_edge("B", "C", 2.0)
        True
        >>> G.add_edge("A", "C", 3.0)
        True
        >>> total_weight(prim_mst(G))
        3.0
    """
    tree = Graph()
    if len(graph) == 0:
        return tree
    if start is not None and start not in graph:
        raise ValueError(f"Start vertex {start!r} not in graph")
    _require_connected(graph, "prim_mst")

    vertices = graph.vertices
    newest = 0 if start is None else graph.handle(start)
    try:
        vertices[newest].claimed = True
        tree.add_vertex(vertices[newest].name)
        candidates: List[Candidate] = []

        for _ in range(len(graph) - 1):
            for edge in vertices[newest].edges:
                if edge.consumed:
                    continue
                candidates.append((newest, edge.target, edge.weight))
                edge.consumed = True
                graph.mirror(newest, edge).consumed = True
            candidates.sort(key=lambda candidate: candidate[2])

            chosen: Optional[Candidate] = None
            for index, candidate in enumerate(candidates):
                if not vertices[candidate[1]].claimed:
                    chosen = candidate
                    del candidates[: index + 1]
                    break
            # unreachable after _require_connected; kept as a second guard
            if chosen is None:
                raise DisconnectedGraphError("prim_mst: exhausted candidates before spanning")

            near, far, weight = chosen
            vertices[far].claimed = True
            _place(tree, graph, near, far, weight)
            logger.debug(
                "prim_mst: placed %s-%s (%s)", vertices[near].name, vertices[far].name, weight
            )
            newest = far
    finally:
        graph.reset_scratch()

    return tree


def kruskal_mst(graph: Graph) -> Graph:
    """
    Build a minimum spanning tree by scanning all edges in weight order.

    Each undirected edge is collected once (its mirror is marked consumed),
    the list is stably sorted by weight, and an edge is accepted when its
    endpoints belong to different components of a union-find forest.

    Args:
        graph: Connected undirected graph.

    Returns:
        New Graph with len(graph) - 1 edges of minimum total weight.

    Raises:
        DisconnectedGraphError: If the graph is not connected, or the edge
            list runs out before the tree spans every vertex.

    Complexity: O(E log E) for sorting, near-linear union-find work.
    """
    tree = Graph()
    if len(graph) == 0:
        return tree
    _require_connected(graph, "kruskal_mst")

    vertices = graph.vertices
    needed = len(graph) - 1
    try:
        edges: List[Candidate] = []
        for handle, vertex in enumerate(vertices):
            for edge in vertex.edges:
                if edge.consumed:
                    continue
                edge.consumed = True
                graph.mirror(handle, edge).consumed = True
                edges.append((handle, edge.target, edge.weight))
        edges.sort(key=lambda candidate: candidate[2])

        if needed == 0:
            tree.add_vertex(vertices[0].name)

        components = UnionFind(range(len(graph)))
        accepted = 0
        for a, b, weight in edges:
            if accepted == needed:
                break
            if components.union(a, b):
                _place(tree, graph, a, b, weight)
                accepted += 1

        # unreachable after _require_connected; kept as a second guard
        if accepted < needed:
            raise DisconnectedGraphError(
                f"kruskal_mst: edge list exhausted after {accepted} of {needed} edges"
            )
    finally:
        graph.reset_scratch()

    return tree


def total_weight(graph: Graph) -> float:
    """Return the sum of edge weights, counting each undirected edge once."""
    return sum(edge.weight for vertex in graph for edge in vertex.edges) / 2
