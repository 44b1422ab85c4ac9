"""Text rendering of graphs.

This module provides:
- Plain or ANSI-coloured adjacency listings of a graph
"""

from .drawer import print_graph, to_text

__all__ = [
    "to_text",
    "print_graph",
]
