"""Performance benchmarks for wgraph.

This package contains microbenchmarks for the graph algorithms on random
connected graphs.
"""
