"""A graph vertex holding its weighted neighbour list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class EdgeTo:
    """An edge to neighbour ``vertex`` with ``weight``."""

    vertex: int = -1
    weight: int = 0


class Vertex:
    """A vertex's neighbours, kept in insertion order."""

    def __init__(self) -> None:
        self._neighbors: list[EdgeTo] = []

    def _index_of(self, ver: int) -> int | None:
        return next(
            (i for i, edge in enumerate(self._neighbors) if edge.vertex == ver), None
        )

    def add_neighbor(self, num: int, weight: int | None = None) -> None:
        """Add ``num`` as a neighbour.

        A new neighbour gets ``weight`` (1 if omitted). For an existing one the
        weight is updated only when ``weight`` is given.
        """
        if num < 0:
            raise ValueError("neighbor's number must be positive.")
        if self._index_of(num) is None:
            self._neighbors.append(EdgeTo(num, 1))
        if weight is not None:
            self.set_weight(num, weight)

    def del_neighbor(self, num: int) -> None:
        """Remove neighbour ``num``; the last neighbour takes its place."""
        index = self._index_of(num)
        if index is None:
            raise ValueError("can't delete unexist neighbor.")
        last = self._neighbors.pop()
        if index < len(self._neighbors):
            self._neighbors[index] = last

    def set_weight(self, ver: int, weight: int) -> None:
        index = self._index_of(ver)
        if index is None:
            raise ValueError(f"can't set weight because there's no neighbor {ver}")
        self._neighbors[index] = replace(self._neighbors[index], weight=weight)

    def is_neighbor(self, ver: int) -> bool:
        return self._index_of(ver) is not None

    def weight_of(self, ver: int) -> int:
        index = self._index_of(ver)
        if index is None:
            raise ValueError(f"can't get weight because there's no neighbor {ver}")
        return self._neighbors[index].weight

    def neighbors(self) -> tuple[EdgeTo, ...]:
        """The neighbour edges in their stored order."""
        return tuple(self._neighbors)

    def __len__(self) -> int:
        return len(self._neighbors)

    def __iter__(self) -> Iterator[EdgeTo]:
        return iter(tuple(self._neighbors))

    def __str__(self) -> str:
        return ";".join(f"v-{e.vertex},w-{e.weight}" for e in self._neighbors)

    def __repr__(self) -> str:
        return f"Vertex({self._neighbors!r})"