"""Command that demonstrates the graph algorithms on small sample graphs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from graphalgo.algorithms import bfs, dijkstra, prim
from graphalgo.graph import Graph

# (number of vertices, edges as (source, dest, weight))
_TRAVERSAL_SAMPLE = (5, ((1, 0, 1), (2, 4, 1), (4, 3, 5), (2, 3, 1), (3, 1, 2)))
_WEIGHTED_SAMPLE = (6, ((0, 4, 1), (0, 3, 2), (4, 1, 3), (3, 1, 1), (2, 5, 5), (2, 3, 2)))


def _build(size: int, edges: Iterable[tuple[int, int, int]]) -> Graph:
    graph = Graph(size)
    for source, dest, weight in edges:
        graph.add_edge(source, dest, weight)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Build the sample graphs, run the algorithms and print the results."""
    parser = argparse.ArgumentParser(
        prog="graphalgo",
        description="Run BFS, Dijkstra and Prim on built-in sample graphs.",
    )
    parser.parse_args(argv)

    g = _build(*_TRAVERSAL_SAMPLE)
    g.print_graph()
    bfs(g, 1).print_graph()
    print("end of main")

    d = _build(*_WEIGHTED_SAMPLE)
    dijkstra(d, 0).print_graph()
    prim(d, 0).print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())