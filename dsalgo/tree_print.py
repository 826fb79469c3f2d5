"""Text rendering of binary trees."""

from __future__ import annotations

from typing import Any

from .formatting import format_value


def _present(tree: Any) -> bool:
    return tree is not None and bool(tree)


def _render(tree: Any) -> list[str]:
    if not _present(tree):
        return []
    text = format_value(tree.value)
    llines = _render(tree.left)
    rlines = _render(tree.right)

    lwidth = len(llines[0]) if llines else 0
    rwidth = len(rlines[0]) if rlines else 0

    n = max(len(llines), len(rlines))
    llines += [" " * lwidth] * (n - len(llines))
    rlines += [" " * rwidth] * (n - len(rlines))

    lwidthp = max(len(text) + 2, lwidth)
    pad = " " * (lwidthp - lwidth)
    text += " " + ("-" if rwidth else " ") * (lwidthp - len(text) - 1)
    if rwidth:
        text += "v" + " " * (rwidth - 1)

    return [text] + [a + pad + b for a, b in zip(llines, rlines)]


def format_binary_tree(tree: Any) -> str:
    """Render a tree with right children drawn to the right of an arrow.

    Each node's left subtree sits below it; every line has the same width.
    An empty tree renders as an empty string.
    """
    return "\n".join(_render(tree))


def print_binary_tree(tree: Any) -> None:
    """Print ``tree`` as rendered by :func:`format_binary_tree`."""
    for line in _render(tree):
        print(line)