"""Ordered priority queues keyed by integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``s`` to ``d``."""

    s: int
    d: int
    w: int


class PrioQ(Generic[T]):
    """Priority queue kept in ascending key order; the smallest key comes out first."""

    def __init__(self) -> None:
        self._entries: list[tuple[T, int]] = []

    def enqueue(self, item: T, key: int) -> None:
        """Insert ``item`` with priority ``key``."""
        entries = self._entries
        if entries and entries[0][1] > key:
            index = 0
        else:
            index = next(
                (i for i, (_, k) in enumerate(entries[1:], start=1) if k >= key),
                len(entries),
            )
        entries.insert(index, (item, key))

    def dequeue(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._entries:
            raise IndexError("Can't dequeue empty priority queue.")
        return self._entries.pop(0)[0]

    def is_empty(self) -> bool:
        return not self._entries

    def peek(self) -> T:
        """Return the item with the smallest key without removing it."""
        if not self._entries:
            raise IndexError("Can't peek empty priority queue.")
        return self._entries[0][0]

    def decrease_key(self, item: T, new_key: int) -> None:
        """Give the first entry equal to ``item`` the key ``new_key``."""
        if not self._entries:
            raise IndexError("priority queue is empty.")
        index = next(
            (i for i, (existing, _) in enumerate(self._entries) if existing == item),
            None,
        )
        if index is None:
            raise KeyError(f"no such item in the priority queue: {item!r}")
        del self._entries[index]
        self.enqueue(item, new_key)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class PrimQ(PrioQ[Edge]):
    """Priority queue of edges, used to grow a minimum spanning tree."""