"""Insertion into and deletion from dynamic arrays by position."""

from __future__ import annotations

from typing import Any, MutableSequence


def array_insert(items: MutableSequence[Any], index: int, value: Any) -> None:
    """Insert ``value`` at ``index``, shifting later elements right.

    ``index`` may equal ``len(items)`` to append.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insertion index {index} out of range 0..{len(items)}")
    items.insert(index, value)


def array_delete(items: MutableSequence[Any], index: int) -> None:
    """Remove the element at ``index``, shifting later elements left."""
    if not 0 <= index < len(items):
        raise IndexError(f"deletion index {index} out of range 0..{len(items) - 1}")
    del items[index]