"""Hash table with separate chaining, and a division-method string hash."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from .formatting import format_value
from .linked_list import Node

_UINT32 = 0xFFFFFFFF


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """A hash table of ``num_chains`` linked chains.

    Keys are placed in slot ``hash_function(key) % num_chains``; new keys go
    to the front of their chain.
    """

    def __init__(
        self,
        num_chains: int,
        hash_function: Callable[[Any], int] = hash,
    ) -> None:
        if num_chains <= 0:
            raise ValueError("number of chains must be positive")
        self._table = [Node() for _ in range(num_chains)]
        self._hash = hash_function

    def _slot(self, key: Hashable) -> int:
        return self._hash(key) % len(self._table)

    def _find(self, key: Any) -> Node | None:
        head = self._table[self._slot(key)]
        return head.find_predecessor(lambda entry: entry.key == key)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        node = self._find(key)
        if node is None:
            self._table[self._slot(key)].insert_after(_Entry(key, value))
        else:
            node.next.value.value = value

    def get(self, key: Any) -> Any:
        """The value stored under ``key``, or ``None`` if there is none."""
        node = self._find(key)
        return None if node is None else node.next.value.value

    def __getitem__(self, key: Any) -> Any:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.next.value.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def format_stats(self, details: bool = False) -> str:
        """Describe chain lengths; with ``details``, list each slot's keys."""
        lines = []
        counts = []
        for slot, head in enumerate(self._table):
            keys = [entry.key for entry in head]
            counts.append(len(keys))
            if details:
                listed = "".join(f" '{format_value(key)}'" for key in keys)
                lines.append(f"Slot {slot} contains{listed} ({len(keys)})")
        average = float(sum(counts)) / len(counts)
        lines.append(
            f"Slot sizes: min: {min(counts)}, max: {max(counts)}, "
            f"average: {format_value(average)}"
        )
        return "\n".join(lines)


def division_hash(text: str, m: int) -> int:
    """Hash ``text`` as a base-256 number modulo ``m``, using 32-bit arithmetic.

    Bytes are taken from the UTF-8 encoding; bytes of 128 and above count
    as negative characters widened to 32 bits.
    """
    if not 0 < m <= _UINT32:
        raise ValueError("modulus must be in 1..2**32-1")
    result = 0
    factor = 1
    for byte in text.encode("utf-8"):
        c = byte if byte < 128 else (byte - 256) & _UINT32
        term = (((c % m) * factor) & _UINT32) % m
        result = (term + result) % m
        factor = ((factor * 256) & _UINT32) % m
    return result