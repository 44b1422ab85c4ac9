"""
Core graph data structures.

Provides the undirected weighted Graph with an arena of Vertex records
addressed by integer handles. Each undirected edge is stored as two mirrored
Edge records, one in each endpoint's adjacency list. Vertices and edges carry
scratch fields that algorithms use during a single call and reset afterwards.
"""

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple


class VisitState(Enum):
    """Visitation state of a vertex during a traversal."""

    UNVISITED = "unvisited"
    ACTIVE = "active"
    DONE = "done"


class Partition(Enum):
    """Two-colouring tag assigned by bipartite traversals."""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Partition":
        return Partition.RIGHT if self is Partition.LEFT else Partition.LEFT


class GraphError(Exception):
    """Base class for algorithm failures caused by a violated precondition."""


class DisconnectedGraphError(GraphError, ValueError):
    """Raised when an algorithm that needs a connected graph receives one that is not."""


class GraphIntegrityError(GraphError, RuntimeError):
    """Raised when the mirrored adjacency structure is found to be inconsistent."""


@dataclass
class Edge:
    """
    One direction of an undirected edge.

    Attributes:
        target: Handle of the target vertex in the owning graph.
        weight: Non-negative edge weight.
        consumed: Scratch flag used by spanning-tree construction.
    """

    target: int
    weight: float
    consumed: bool = False


@dataclass
class Vertex:
    """
    A named vertex with its adjacency list and per-call scratch fields.

    Attributes:
        name: Identity key of the vertex within its graph.
        edges: Outgoing edge records in insertion order.
        state: Visitation state (traversals, shortest paths).
        partition: Two-colouring tag (bipartite traversals).
        claimed: Whether the vertex belongs to a growing spanning tree.
        distance: Best known distance from a shortest-path source.
        predecessor: Handle of the previous vertex on the best known path.
    """

    name: str
    edges: List[Edge] = field(default_factory=list)
    state: VisitState = VisitState.UNVISITED
    partition: Optional[Partition] = None
    claimed: bool = False
    distance: float = math.inf
    predecessor: Optional[int] = None

    def clear_markers(self) -> None:
        self.state = VisitState.UNVISITED
        self.partition = None

    def reset(self) -> None:
        """Restore every scratch field of the vertex and its edges to its default."""
        self.clear_markers()
        self.claimed = False
        self.distance = math.inf
        self.predecessor = None
        for edge in self.edges:
            edge.consumed = False


def _check_weight(weight: float) -> float:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise TypeError(f"Edge weight must be a real number, got {type(weight).__name__}")
    weight = float(weight)
    if math.isnan(weight) or math.isinf(weight) or weight < 0:
        raise ValueError(f"Edge weight must be a non-negative finite number, got {weight}")
    return weight


class Graph:
    """
    Undirected weighted graph with adjacency-list representation.

    Vertices are kept in insertion order and addressed by a stable integer
    handle (their position in the arena). Edges store the handle of their
    target, never the Vertex object itself.

    Invariants:
        - vertex names are unique;
        - no self-loops and at most one edge per unordered pair;
        - every edge a -> b with weight w is mirrored by b -> a with weight w.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(deg(a) + deg(b))
        - neighbors: O(deg(v))
        - edges: O(V + E)
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._index: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={degree(self)})"

    @property
    def vertices(self) -> List[Vertex]:
        """Vertex records in insertion (handle) order."""
        return self._vertices

    def handle(self, name: str) -> int:
        """
        Return the integer handle of a vertex.

        Raises:
            KeyError: If no vertex has this name.
        """
        if name not in self._index:
            raise KeyError(f"Vertex {name!r} not in graph")
        return self._index[name]

    def vertex(self, name: str) -> Vertex:
        return self._vertices[self.handle(name)]

    def vertex_names(self) -> List[str]:
        return [vertex.name for vertex in self._vertices]

    def add_vertex(self, name: str) -> bool:
        """
        Add a vertex with an empty adjacency list.

        Args:
            name: Unique vertex name.

        Returns:
            True if the vertex was inserted, False if the name already exists
            (the graph is left unchanged).
        """
        if name in self._index:
            return False
        self._index[name] = len(self._vertices)
        self._vertices.append(Vertex(name=name))
        return True

    def add_vertices(self, names: Iterable[str]) -> int:
        """
        Add several vertices in order.

        Duplicates are skipped silently.

        Returns:
            Number of vertices actually inserted.
        """
        return sum(1 for name in names if self.add_vertex(name))

    def add_edge(self, a: str, b: str, weight: float) -> bool:
        """
        Add an undirected edge between two existing vertices.

        Stores mirrored records in both adjacency lists.

        Args:
            a: First endpoint name.
            b: Second endpoint name.
            weight: Non-negative finite weight.

        Returns:
            True if the edge was inserted. False (no mutation) for a self-loop,
            a missing endpoint, or an edge that already exists between a and b.

        Raises:
            TypeError: If weight is not a real number.
            ValueError: If weight is negative, NaN or infinite.
        """
        if a == b or a not in self._index or b not in self._index:
            return False

        ha, hb = self._index[a], self._index[b]
        if self.find_edge(ha, hb) is not None or self.find_edge(hb, ha) is not None:
            return False

        weight = _check_weight(weight)
        self._vertices[ha].edges.append(Edge(target=hb, weight=weight))
        self._vertices[hb].edges.append(Edge(target=ha, weight=weight))
        return True

    def find_edge(self, source: int, target: int) -> Optional[Edge]:
        """Return the edge record source -> target, or None."""
        for edge in self._vertices[source].edges:
            if edge.target == target:
                return edge
        return None

    def mirror(self, source: int, edge: Edge) -> Edge:
        """
        Return the reverse record of an edge held by vertex ``source``.

        Raises:
            GraphIntegrityError: If the target holds no edge back to source.
        """
        reverse = self.find_edge(edge.target, source)
        if reverse is None:
            raise GraphIntegrityError(
                f"Edge {self._vertices[source].name!r} -> "
                f"{self._vertices[edge.target].name!r} has no mirror"
            )
        return reverse

    def has_edge(self, a: str, b: str) -> bool:
        if a not in self._index or b not in self._index:
            return False
        return self.find_edge(self._index[a], self._index[b]) is not None

    def neighbors(self, name: str) -> List[Tuple[str, float]]:
        """
        Return (neighbor name, weight) pairs of a vertex in insertion order.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        vertex = self.vertex(name)
        return [(self._vertices[edge.target].name, edge.weight) for edge in vertex.edges]

    def edges(self) -> List[Tuple[str, str, float]]:
        """
        Return every undirected edge once as (a, b, weight).

        Edges are listed in the order they are first met walking vertices and
        their adjacency lists in insertion order.
        """
        edges_list = []
        seen: Set[Tuple[int, int]] = set()
        for handle, vertex in enumerate(self._vertices):
            for edge in vertex.edges:
                key = (min(handle, edge.target), max(handle, edge.target))
                if key in seen:
                    continue
                seen.add(key)
                edges_list.append((vertex.name, self._vertices[edge.target].name, edge.weight))
        return edges_list

    def subgraph(self, names: Iterable[str]) -> "Graph":
        """
        Build an independent graph induced by the given vertex names.

        Vertices keep the given order; edges are copied when both endpoints
        are included.

        Raises:
            KeyError: If a name is not in the graph.
        """
        names = list(names)
        sub = Graph()
        for name in names:
            self.handle(name)
            sub.add_vertex(name)
        for name in names:
            for other, weight in self.neighbors(name):
                if other in sub:
                    sub.add_edge(name, other, weight)
        return sub

    def clear_markers(self) -> None:
        """Reset visitation states and partition tags of every vertex."""
        for vertex in self._vertices:
            vertex.clear_markers()

    def reset_scratch(self) -> None:
        """Reset every scratch field of every vertex and edge."""
        for vertex in self._vertices:
            vertex.reset()


def degree(graph: Graph) -> int:
    """Return the number of undirected edges (half the total adjacency length)."""
    return sum(len(vertex.edges) for vertex in graph) // 2


def degree_sequence(graph: Graph) -> List[int]:
    """
    Return the per-vertex adjacency lengths sorted in ascending numeric order.

    Example:
        >>> G = Graph()
        >>> G.add_vertices(["A", "B", "C"])
        3
        >>> G.add_edge("A", "B", 1.0)
        True
        >>> degree_sequence(G)
        [0, 1, 1]
    """
    return sorted(len(vertex.edges) for vertex in graph)
