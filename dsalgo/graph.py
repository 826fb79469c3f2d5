"""Weighted directed graphs as adjacency matrices or adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .formatting import format_value

INF = math.inf


@dataclass(frozen=True)
class Hop:
    """An edge weight paired with a vertex.

    Hops are ordered by weight alone.
    """

    weight: float
    vertex: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hop):
            return NotImplemented
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({format_value(self.weight)},{self.vertex})"


DenseGraph = Sequence[Sequence[float]]
SparseGraph = Sequence[Sequence[Hop]]

TEST_GRAPH: tuple[tuple[float, ...], ...] = (
    (INF, 4, INF, INF, INF, INF, INF, 8, INF),
    (INF, INF, INF, INF, INF, INF, INF, 11, INF),
    (INF, INF, INF, INF, INF, 4, INF, INF, 2),
    (INF, INF, INF, INF, 9, 14, INF, INF, INF),
    (INF, INF, INF, INF, INF, 10, INF, INF, INF),
    (INF, INF, INF, INF, INF, INF, 2, INF, INF),
    (INF, INF, INF, 3, INF, INF, INF, 1, 6),
    (INF, INF, INF, INF, INF, INF, INF, INF, 7),
    (INF, INF, INF, INF, INF, INF, INF, INF, INF),
)

SPARSE_TEST_GRAPH: tuple[tuple[Hop, ...], ...] = (
    (Hop(4, 1), Hop(8, 7)),
    (Hop(11, 7),),
    (Hop(4, 5), Hop(2, 8)),
    (Hop(9, 4), Hop(14, 5)),
    (Hop(10, 5),),
    (Hop(2, 6),),
    (Hop(3, 3), Hop(1, 7), Hop(6, 8)),
    (Hop(7, 8),),
    (),
)


def dense_to_sparse(graph: DenseGraph) -> list[list[Hop]]:
    """Adjacency lists holding the finite entries of an adjacency matrix."""
    return [
        [Hop(weight, v) for v, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def _is_sparse(graph: Sequence[Sequence[object]]) -> bool:
    return all(isinstance(item, Hop) for row in graph for item in row)


def graph_to_dot(graph: SparseGraph) -> str:
    """Describe an adjacency-list graph in the DOT language."""
    lines = ["digraph G {"]
    for v, hops in enumerate(graph):
        lines.extend(
            f"    {v} -> {hop.vertex} [label= {format_value(hop.weight)}];"
            for hop in hops
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_graph(
    graph: DenseGraph | SparseGraph, as_url: bool = False, prefix: str = ""
) -> str:
    """Render a dense or sparse graph as DOT text.

    With ``as_url``, every byte of the DOT text is percent-encoded and the
    result is appended to ``prefix``.
    """
    sparse = graph if _is_sparse(graph) else dense_to_sparse(graph)  # type: ignore[arg-type]
    dot = graph_to_dot(sparse)  # type: ignore[arg-type]
    if as_url:
        return prefix + "".join(f"%{byte:02x}" for byte in dot.encode("utf-8"))
    return dot


def print_graph(graph: DenseGraph | SparseGraph, as_url: bool = False) -> None:
    """Print the graph as rendered by :func:`format_graph`."""
    print(format_graph(graph, as_url))