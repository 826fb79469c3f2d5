"""Singly linked list built from nodes, with a dummy head node."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class Node:
    """A list node; a node used as a list head holds an ignored value."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Node | None = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"

    def insert_after(self, value: Any) -> Node:
        """Insert a new node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate: Callable[[Any], bool]) -> Node | None:
        """Return the node whose successor's value satisfies ``predicate``."""
        node: Node | None = self
        while node is not None and node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def delete_after(self) -> None:
        """Unlink the node after this one, if any."""
        if self.next is not None:
            self.next = self.next.next

    def to_list(self) -> list[Any]:
        """Values of the nodes following this one."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        node = self.next
        while node is not None:
            yield node.value
            node = node.next