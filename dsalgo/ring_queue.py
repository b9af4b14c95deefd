"""Bounded first-in first-out queue and double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise IndexError("enqueue onto a full queue")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self._items)!r})"


class Deque(Queue):
    """A bounded queue that can also grow and shrink at the other end."""

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items[-1]

    def enqueue_front(self, value: Any) -> None:
        """Add ``value`` at the front of the queue."""
        if self.is_full():
            raise IndexError("enqueue onto a full queue")
        self._items.appendleft(value)

    def dequeue_back(self) -> Any:
        """Remove and return the value at the back of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()