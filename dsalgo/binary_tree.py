"""Linked binary trees with parent links, and complete binary trees over a list."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


class BinaryTree:
    """A linked binary tree node.

    Assigning a subtree to ``left`` or ``right`` makes this node its parent.
    """

    __slots__ = ("value", "parent", "_left", "_right")

    def __init__(
        self,
        value: Any,
        left: BinaryTree | None = None,
        right: BinaryTree | None = None,
    ) -> None:
        self.value = value
        self.parent: BinaryTree | None = None
        self._left: BinaryTree | None = None
        self._right: BinaryTree | None = None
        self.left = left
        self.right = right

    @property
    def left(self) -> BinaryTree | None:
        return self._left

    @left.setter
    def left(self, tree: BinaryTree | None) -> None:
        if tree is not None:
            tree.parent = self
        self._left = tree

    @property
    def right(self) -> BinaryTree | None:
        return self._right

    @right.setter
    def right(self, tree: BinaryTree | None) -> None:
        if tree is not None:
            tree.parent = self
        self._right = tree

    def __repr__(self) -> str:
        return f"BinaryTree(value={self.value!r})"


def make_binary_tree(
    value: Any,
    left: BinaryTree | None = None,
    right: BinaryTree | None = None,
) -> BinaryTree:
    """Build a tree node from a value and two optional subtrees."""
    return BinaryTree(value, left, right)


class CompleteBinaryTree:
    """A view of a list as a complete binary tree.

    The subtree rooted at index ``i`` has children at ``2i+1`` and ``2i+2``;
    only indices below ``size`` belong to the tree. An out-of-range root
    denotes an empty subtree and is falsy.
    """

    __slots__ = ("storage", "root", "size")

    def __init__(
        self,
        storage: MutableSequence[Any],
        root: int = 0,
        size: int | None = None,
    ) -> None:
        self.storage = storage
        self.root = root
        self.size = len(storage) if size is None else size

    def subtree(self, root: int) -> CompleteBinaryTree:
        """The subtree rooted at index ``root`` of the same storage."""
        return CompleteBinaryTree(self.storage, root, self.size)

    def __bool__(self) -> bool:
        return 0 <= self.root < self.size

    def __repr__(self) -> str:
        return f"CompleteBinaryTree(root={self.root}, size={self.size})"

    @property
    def value(self) -> Any:
        if not self:
            raise IndexError("value of an empty subtree")
        return self.storage[self.root]

    @value.setter
    def value(self, new_value: Any) -> None:
        if not self:
            raise IndexError("value of an empty subtree")
        self.storage[self.root] = new_value

    @property
    def parent(self) -> CompleteBinaryTree:
        if self.root <= 0:
            return self.subtree(-1)
        return self.subtree((self.root - 1) // 2)

    @property
    def left(self) -> CompleteBinaryTree:
        if self.root < 0:
            return self.subtree(-1)
        return self.subtree(2 * self.root + 1)

    @property
    def right(self) -> CompleteBinaryTree:
        if self.root < 0:
            return self.subtree(-1)
        return self.subtree(2 * self.root + 2)