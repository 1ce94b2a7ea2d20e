"""Traversal, shortest-path and spanning-tree algorithms on :class:`Graph`."""

from __future__ import annotations

from typing import TextIO

from graphalgo.containers import Queue, Stack
from graphalgo.graph import Graph
from graphalgo.priority import Edge, PrimQ, PrioQ

INF = 10**9


def _check_source(graph: Graph, source: int) -> None:
    if source < 0 or source >= graph.num_vertices():
        raise IndexError("source vertex is not in the graph.")


def bfs(graph: Graph, source: int, out: TextIO | None = None) -> Graph:
    """Return the breadth-first tree of ``graph`` rooted at ``source``.

    Progress and the resulting tree are written to ``out`` (standard output
    by default).
    """
    _check_source(graph, source)
    print("start build a bfs tree", file=out)
    tree = Graph(graph.num_vertices())
    seen = {source}
    queue: Queue[int] = Queue([source])
    while not queue.is_empty():
        current = queue.dequeue()
        for edge in graph.get(current):
            if edge.vertex not in seen:
                tree.add_edge(current, edge.vertex, edge.weight)
                queue.enqueue(edge.vertex)
                seen.add(edge.vertex)
    tree.print_graph(out)
    return tree


def dfs(graph: Graph, source: int, out: TextIO | None = None) -> Graph:
    """Return the depth-first forest of ``graph`` starting from ``source``.

    When the stack runs empty, every vertex not yet reached is pushed at once
    so that disconnected parts are visited too. The resulting forest is
    written to ``out`` (standard output by default).
    """
    _check_source(graph, source)
    n = graph.num_vertices()
    forest = Graph(n)
    seen = {source}
    stack: Stack[int] = Stack([source])
    while True:
        if stack.is_empty():
            for vertex in range(n):
                if vertex not in seen:
                    stack.push(vertex)
                    seen.add(vertex)
        if stack.is_empty():
            break
        current = stack.peek()
        step = next((e for e in graph.get(current) if e.vertex not in seen), None)
        if step is None:
            stack.pop()
        else:
            stack.push(step.vertex)
            seen.add(step.vertex)
            forest.add_edge(current, step.vertex, step.weight)
    forest.print_graph(out)
    return forest


def dijkstra(graph: Graph, source: int) -> Graph:
    """Return the shortest-path tree of ``graph`` from ``source``."""
    _check_source(graph, source)
    n = graph.num_vertices()
    dist = [INF] * n
    prev = [-1] * n
    prev_weight = [0] * n
    visited = [False] * n
    dist[source] = 0

    queue: PrioQ[int] = PrioQ()
    for vertex, key in enumerate(dist):
        queue.enqueue(vertex, key)

    while not queue.is_empty():
        current = queue.dequeue()
        visited[current] = True
        for edge in graph.get(current):
            neighbor = edge.vertex
            if visited[neighbor]:
                continue
            candidate = dist[current] + edge.weight
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                prev[neighbor] = current
                prev_weight[neighbor] = edge.weight
                queue.decrease_key(neighbor, candidate)

    tree = Graph(n)
    for vertex, parent in enumerate(prev):
        if parent != -1:
            tree.add_edge(vertex, parent, prev_weight[vertex])
    return tree


def prim(graph: Graph, source: int, out: TextIO | None = None) -> Graph:
    """Return a minimum spanning tree of the component holding ``source``."""
    print("prim", file=out)
    _check_source(graph, source)
    tree = Graph(graph.num_vertices())
    in_tree = {source}
    queue = PrimQ()
    for edge in graph.get(source):
        queue.enqueue(Edge(source, edge.vertex, edge.weight), edge.weight)

    while not queue.is_empty():
        best = queue.dequeue()
        if best.d in in_tree:
            continue
        tree.add_edge(best.s, best.d, best.w)
        in_tree.add(best.d)
        for edge in graph.get(best.d):
            queue.enqueue(Edge(best.d, edge.vertex, edge.weight), edge.weight)
    return tree