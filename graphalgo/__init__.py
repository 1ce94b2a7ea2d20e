"""Weighted undirected graphs, queue and stack containers, and BFS, DFS, Dijkstra and Prim algorithms."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "containers", "graph", "priority", "vertex"]