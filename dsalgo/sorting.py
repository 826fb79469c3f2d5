"""Comparison and counting sorts operating in place."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, MutableSequence

_END = object()


def insert(items: MutableSequence[Any], i: int) -> None:
    """Move ``items[i]`` left into the sorted prefix ``items[:i]``."""
    if not 0 <= i < len(items):
        raise IndexError(f"index {i} out of range for length {len(items)}")
    j = i
    while j >= 1 and not items[j - 1] <= items[j]:
        items[j - 1], items[j] = items[j], items[j - 1]
        j -= 1


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeated insertion."""
    for i in range(1, len(items)):
        insert(items, i)


def merge(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted iterables into a new sorted list.

    Ties are resolved in favour of ``first``, so the merge is stable.
    """
    left, right = iter(first), iter(second)
    merged: list[Any] = []
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if a <= b:
            merged.append(a)
            a = next(left, _END)
        else:
            merged.append(b)
            b = next(right, _END)
    if a is not _END:
        merged.append(a)
        merged.extend(left)
    if b is not _END:
        merged.append(b)
        merged.extend(right)
    return merged


def merge_sort(items: MutableSequence[Any], start: int = 0, stop: int | None = None) -> None:
    """Sort ``items[start:stop]`` in place with a stable merge sort."""
    if stop is None:
        stop = len(items)
    if stop - start <= 1:
        return
    middle = start + (stop - start) // 2
    merge_sort(items, start, middle)
    merge_sort(items, middle, stop)
    items[start:stop] = merge(items[start:middle], items[middle:stop])


def counting_sort(items: MutableSequence[int], k: int) -> None:
    """Sort integers in ``range(k)`` in place by counting occurrences."""
    counts = [0] * k
    for x in items:
        if not 0 <= x < k:
            raise ValueError(f"value {x} outside range 0..{k - 1}")
        counts[x] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]