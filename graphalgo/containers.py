"""Simple FIFO queue and LIFO stack used by the graph traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Add an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise IndexError("Can't dequeue empty queue.")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def peek(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("Can't peek empty queue.")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the item on top of the stack."""
        if not self._items:
            raise IndexError("this stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("Can't peek empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"