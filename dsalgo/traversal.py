"""Height and traversals of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


def _present(tree: Any) -> bool:
    return tree is not None and bool(tree)


def height(tree: Any) -> int:
    """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
    if not _present(tree):
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def depth_first(tree: Any) -> Iterator[Any]:
    """Yield the subtrees of ``tree`` in order: left, root, right."""
    if not _present(tree):
        return
    yield from depth_first(tree.left)
    yield tree
    yield from depth_first(tree.right)


def breadth_first(tree: Any) -> Iterator[Any]:
    """Yield the subtrees of ``tree`` level by level, left to right."""
    queue = deque([tree])
    while queue:
        current = queue.popleft()
        if _present(current):
            yield current
            queue.append(current.left)
            queue.append(current.right)