"""Text drawer for graph snapshots.

Renders each vertex as a block listing its neighbours and edge weights:

    A => [
       B(7), C(8)
    ]

With ``color=True`` vertex names are wrapped in ANSI colour codes according to
their partition tag, so a graph coloured by ``is_bipartite(..., keep_coloring=True)``
shows its two classes.
"""

from __future__ import annotations

import sys
from typing import IO, Dict, List, Optional

from wgraph.graphs import Graph, Partition, VertexSnapshot, snapshot

RESET = "\x1b[0m"

PARTITION_COLORS: Dict[Partition, str] = {
    Partition.LEFT: "\x1b[36m",
    Partition.RIGHT: "\x1b[31m",
}


def _format_weight(weight: float) -> str:
    """
    Format an edge weight compactly.

    Integral weights are shown without a fractional part (7.0 -> "7").
    """
    if float(weight).is_integer():
        return str(int(weight))
    return f"{weight:g}"


def _paint(name: str, partition: Optional[Partition], color: bool) -> str:
    if not color or partition is None:
        return name
    return f"{PARTITION_COLORS[partition]}{name}{RESET}"


def _render_vertex(
    vertex: VertexSnapshot,
    partitions: Dict[str, Optional[Partition]],
    color: bool,
) -> List[str]:
    neighbours = ", ".join(
        f"{_paint(name, partitions[name], color)}({_format_weight(weight)})"
        for name, weight in vertex.edges
    )
    lines = [f"{_paint(vertex.name, vertex.partition, color)} => ["]
    if neighbours:
        lines.append(f"   {neighbours}")
    lines.append("]")
    return lines


def to_text(graph: Graph, color: bool = False) -> str:
    """
    Convert a graph to a multi-line text listing.

    Parameters
    ----------
    graph:
        Graph to render.
    color:
        If True, colour vertex names by partition using ANSI escape codes.

    Returns
    -------
    str
        One block per vertex in insertion order; empty string for an empty
        graph.
    """
    vertices = snapshot(graph)
    partitions = {vertex.name: vertex.partition for vertex in vertices}
    lines: List[str] = []
    for vertex in vertices:
        lines.extend(_render_vertex(vertex, partitions, color))
    return "\n".join(lines)


def print_graph(
    graph: Graph,
    file: Optional[IO[str]] = None,
    color: bool = False,
) -> None:
    """
    Print a graph listing to stdout or a file.

    Parameters
    ----------
    graph:
        Graph to render.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    color:
        If True, colour vertex names by partition.
    """
    if file is None:
        file = sys.stdout
    print(to_text(graph, color=color), file=file)
