"""Fixed-capacity FIFO queue and double-ended queue on a ring buffer."""

from __future__ import annotations

from typing import Any


class Queue:
    """A FIFO queue storing at most ``capacity`` elements in a ring buffer.

    New elements are written at the current position, which then moves
    one slot backwards; the front lies ``size`` slots after the position.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._storage: list[Any] = [None] * capacity
        self._position = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _head(self) -> int:
        if self._size < 1:
            raise IndexError("queue is empty")
        return (self._position + self._size) % len(self._storage)

    def front(self) -> Any:
        """Return the oldest element."""
        return self._storage[self._head()]

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self.is_full():
            raise OverflowError("enqueue onto a full queue")
        self._storage[self._position] = value
        self._size += 1
        self._position = (self._position - 1) % len(self._storage)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        value = self.front()
        self._size -= 1
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._storage)


class Deque(Queue):
    """A queue that also allows access and updates at both ends."""

    def _tail(self) -> int:
        if self._size < 1:
            raise IndexError("queue is empty")
        return (self._position + 1) % len(self._storage)

    def back(self) -> Any:
        """Return the newest element."""
        return self._storage[self._tail()]

    def enqueue_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        if self.is_full():
            raise OverflowError("enqueue onto a full queue")
        index = (self._position + self._size + 1) % len(self._storage)
        self._storage[index] = value
        self._size += 1

    def dequeue_back(self) -> Any:
        """Remove and return the element at the back."""
        tail = self._tail()
        value = self._storage[tail]
        self._position = tail
        self._size -= 1
        return value

    def clear(self) -> None:
        """Remove every element."""
        self._position = 0
        self._size = 0