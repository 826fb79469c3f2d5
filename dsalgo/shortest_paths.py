"""Single-source and all-pairs shortest paths on weighted directed graphs."""

from __future__ import annotations

import math
import operator
from collections.abc import MutableSequence, Sequence
from typing import NamedTuple

from .graph import INF, DenseGraph, Hop, SparseGraph
from .heap import priority_dequeue, priority_enqueue


class BellmanFordResult(NamedTuple):
    """Distances with predecessors, and whether the final pass still relaxed an edge."""

    distances: list[Hop]
    has_negative_cycle: bool


def _initial(num_vertices: int, source: int) -> list[Hop]:
    if not 0 <= source < num_vertices:
        raise IndexError(f"source vertex {source} out of range 0..{num_vertices - 1}")
    dp = [Hop(INF, -1)] * num_vertices
    dp[source] = Hop(0.0, -1)
    return dp


def relax(graph: DenseGraph, dp: MutableSequence[Hop], r: int, v: int) -> bool:
    """Improve the path to ``v`` by going through ``r``; report whether it changed."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def relax_sparse(graph: SparseGraph, dp: MutableSequence[Hop], r: int, v: int) -> bool:
    """As :func:`relax`, for a graph given as adjacency lists."""
    for hop in graph[r]:
        if hop.vertex == v:
            via_r = dp[r].weight + hop.weight
            if via_r < dp[v].weight:
                dp[v] = Hop(via_r, r)
                return True
            break
    return False


def bellman_ford(graph: DenseGraph, source: int) -> BellmanFordResult:
    """Bellman-Ford shortest paths from ``source`` on an adjacency matrix."""
    num_vertices = len(graph)
    dp = _initial(num_vertices, source)
    has_negative_cycle = False
    for _ in range(num_vertices - 1):
        has_negative_cycle = False
        for r in range(num_vertices):
            for v in range(num_vertices):
                has_negative_cycle |= relax(graph, dp, r, v)
    return BellmanFordResult(dp, has_negative_cycle)


def bellman_ford_sparse(graph: SparseGraph, source: int) -> BellmanFordResult:
    """Bellman-Ford shortest paths from ``source`` on adjacency lists."""
    num_vertices = len(graph)
    dp = _initial(num_vertices, source)
    has_negative_cycle = False
    for _ in range(num_vertices - 1):
        has_negative_cycle = False
        for r in range(num_vertices):
            for v in range(num_vertices):
                has_negative_cycle |= relax_sparse(graph, dp, r, v)
    return BellmanFordResult(dp, has_negative_cycle)


def dijkstra(graph: DenseGraph, source: int) -> list[Hop]:
    """Dijkstra's shortest paths from ``source``, scanning for the nearest open vertex."""
    dp = _initial(len(graph), source)
    is_open = [True] * len(graph)
    while True:
        candidates = [
            v for v, hop in enumerate(dp) if is_open[v] and hop.weight < INF
        ]
        if not candidates:
            break
        v_star = min(candidates, key=lambda v: dp[v].weight)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, dp, v_star, v)
    return dp


def dijkstra_priority(graph: DenseGraph, source: int) -> list[Hop]:
    """Dijkstra's shortest paths from ``source`` using a min-priority queue."""
    dp = _initial(len(graph), source)
    queue: list[Hop] = []
    priority_enqueue(queue, Hop(0.0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), operator.lt)
    return dp


def dijkstra_sparse(graph: SparseGraph, source: int) -> list[Hop]:
    """Dijkstra's shortest paths from ``source`` on adjacency lists."""
    dp = _initial(len(graph), source)
    queue: list[Hop] = []
    priority_enqueue(queue, Hop(0.0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for hop in graph[v_star]:
            v = hop.vertex
            if relax_sparse(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), operator.lt)
    return dp


def floyd_warshall(graph: DenseGraph) -> list[list[Hop]]:
    """All-pairs shortest paths; entry ``[u][v]`` holds the distance and the predecessor of ``v``."""
    dp = [
        [
            Hop(0.0, -1) if u == v else Hop(weight, u) if math.isfinite(weight) else Hop(INF, -1)
            for v, weight in enumerate(row)
        ]
        for u, row in enumerate(graph)
    ]
    vertices = range(len(graph))
    for r in vertices:
        for u in vertices:
            for v in vertices:
                via_r = dp[u][r].weight + dp[r][v].weight
                if via_r < dp[u][v].weight:
                    dp[u][v] = Hop(via_r, dp[r][v].vertex)
    return dp


def decode(dp_u: Sequence[Hop], v: int) -> list[int]:
    """The vertices on the shortest path ending at ``v``.

    Empty when ``v`` is unreachable or is the source itself.
    """
    if dp_u[v].weight == INF or dp_u[v].vertex == -1:
        return []
    path = []
    while v != -1:
        path.append(v)
        v = dp_u[v].vertex
    path.reverse()
    return path