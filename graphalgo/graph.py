"""Undirected weighted graph over vertices numbered from zero."""

from __future__ import annotations

import copy as _copy
import sys
from typing import TextIO

from graphalgo.vertex import Vertex


class Graph:
    """An undirected graph with a fixed number of vertices."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices can't be negative.")
        self._vertices = [Vertex() for _ in range(num_vertices)]

    def _check(self, *indices: int, action: str) -> None:
        n = len(self._vertices)
        if any(i < 0 or i >= n for i in indices):
            raise IndexError(f"{action}: vertex numbers are between 0-{n - 1}")

    def add_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Connect ``source`` and ``dest`` with an edge of ``weight``."""
        self._check(source, dest, action="Can't add edge")
        self._vertices[source].add_neighbor(dest, weight)
        self._vertices[dest].add_neighbor(source, weight)

    def remove_edge(self, source: int, dest: int) -> None:
        """Remove the edge between ``source`` and ``dest``."""
        self._check(source, dest, action="Can't remove edge")
        self._vertices[source].del_neighbor(dest)
        self._vertices[dest].del_neighbor(source)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def get(self, index: int) -> Vertex:
        """Return the vertex numbered ``index``."""
        if index < 0 or index >= len(self._vertices):
            raise IndexError("there's no vertex in that index.")
        return self._vertices[index]

    def format(self) -> str:
        """Describe the graph: a header, then one line per vertex with neighbours."""
        lines = [
            f"print graph with {len(self._vertices)} vertices:",
            "vertex number: v-neighbor number, w-weight of edge; etc.",
        ]
        lines.extend(f"{i}: {v}" for i, v in enumerate(self._vertices) if len(v) > 0)
        return "\n".join(lines) + "\n"

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write :meth:`format` to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format())

    def copy(self) -> Graph:
        """Return an independent copy of the graph."""
        return _copy.deepcopy(self)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph({len(self._vertices)})"