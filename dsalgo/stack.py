"""Fixed-capacity stack with chained pushes and RPN operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Stack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._storage: list[Any] = []

    def __len__(self) -> int:
        return len(self._storage)

    def top(self) -> Any:
        """Return the value at the top of the stack."""
        if not self._storage:
            raise IndexError("top of an empty stack")
        return self._storage[-1]

    def pop(self) -> Any:
        """Remove and return the value at the top of the stack."""
        if not self._storage:
            raise IndexError("pop from an empty stack")
        return self._storage.pop()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise OverflowError("push onto a full stack")
        self._storage.append(value)

    def is_empty(self) -> bool:
        return not self._storage

    def is_full(self) -> bool:
        return len(self._storage) == self._capacity

    def clear(self) -> None:
        """Remove every element."""
        self._storage.clear()

    def __lshift__(self, item: Any) -> Stack:
        """Push a value, or apply an operation if ``item`` is callable."""
        if callable(item):
            item(self)
        else:
            self.push(item)
        return self


def _binary(stack: Stack, op: Callable[[Any, Any], Any]) -> None:
    a = stack.pop()
    b = stack.pop()
    stack.push(op(a, b))


def plus(stack: Stack) -> None:
    """Replace the two top values with their sum."""
    _binary(stack, lambda a, b: a + b)


def multiplies(stack: Stack) -> None:
    """Replace the two top values with their product."""
    _binary(stack, lambda a, b: a * b)