"""Binary heaps over lists, heap sort and priority queues."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from .binary_tree import CompleteBinaryTree

Compare = Callable[[Any, Any], bool]


def heap_sift_up(tree: CompleteBinaryTree, compare: Compare = operator.gt) -> None:
    """Move the root value of ``tree`` up while it beats its parent."""
    while True:
        p = tree.parent
        if not p:
            return
        if compare(tree.value, p.value):
            tree.value, p.value = p.value, tree.value
        tree = p


def heap_sift_down(tree: CompleteBinaryTree, compare: Compare = operator.gt) -> None:
    """Move the root value of ``tree`` down while a child beats it."""
    while True:
        child = tree.left
        other = tree.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, tree.value):
            child.value, tree.value = tree.value, child.value
        tree = child


def build_heap(storage: MutableSequence[Any], compare: Compare = operator.gt) -> None:
    """Rearrange ``storage`` into a heap; ``compare`` ranks the root first."""
    size = len(storage)
    for i in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteBinaryTree(storage, i, size), compare)


def heap_sort(storage: MutableSequence[Any], compare: Compare = operator.gt) -> None:
    """Sort ``storage`` in place; the default comparison sorts ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteBinaryTree(storage, 0, back), compare)


def priority_enqueue(
    storage: MutableSequence[Any], value: Any, compare: Compare = operator.gt
) -> None:
    """Add ``value`` to the heap held in ``storage``."""
    storage.append(value)
    size = len(storage)
    heap_sift_up(CompleteBinaryTree(storage, size - 1, size), compare)


def priority_dequeue(storage: MutableSequence[Any], compare: Compare = operator.gt) -> Any:
    """Remove and return the top of the heap held in ``storage``."""
    if not storage:
        raise IndexError("dequeue from an empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteBinaryTree(storage, 0, len(storage)), compare)
    return top