"""Single-source and all-pairs shortest paths on weighted directed graphs.

Each result row holds, for every vertex, a :class:`Hop` with the length of
the best path found and the vertex preceding it on that path (``-1`` for the
source and for unreachable vertices).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .graph import INF, Graph, Hop, SparseGraph
from .heap import priority_dequeue, priority_enqueue


def _check_source(num_vertices: int, source: int) -> None:
    if not 0 <= source < num_vertices:
        raise IndexError(f"source {source} out of range for {num_vertices} vertices")


def _initial_table(num_vertices: int, source: int) -> list[Hop]:
    table = [Hop(INF, -1) for _ in range(num_vertices)]
    table[source].weight = 0
    return table


def relax(graph: Graph, dp: list[Hop], r: int, v: int) -> bool:
    """Improve the path to ``v`` by going through ``r``; report whether it did."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def bellman_ford(graph: Graph, source: int) -> list[Hop]:
    """Shortest paths from ``source`` by repeated relaxation of every edge.

    Runs one pass fewer than there are vertices and raises ValueError when
    the final pass still improved a path, taken as a sign of a negative cycle.
    """
    num_vertices = len(graph)
    _check_source(num_vertices, source)
    dp = _initial_table(num_vertices, source)
    changed = False
    for _ in range(num_vertices - 1):
        changed = False
        for r in range(num_vertices):
            for v in range(num_vertices):
                changed |= relax(graph, dp, r, v)
    if changed:
        raise ValueError("the graph has a negative cycle")
    return dp


def dijkstra(graph: Graph, source: int) -> list[Hop]:
    """Shortest paths from ``source``, closing the nearest open vertex each step."""
    num_vertices = len(graph)
    _check_source(num_vertices, source)
    dp = _initial_table(num_vertices, source)
    is_open = [True] * num_vertices

    while True:
        candidates = [
            (hop.weight, vertex)
            for vertex, hop in enumerate(dp)
            if is_open[vertex] and hop.weight < INF
        ]
        if not candidates:
            break
        _, v_star = min(candidates)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, dp, v_star, v)

    return dp


def dijkstra_priority(graph: Graph, source: int) -> list[Hop]:
    """Shortest paths from ``source`` using a min-priority queue of vertices."""
    num_vertices = len(graph)
    _check_source(num_vertices, source)
    dp = _initial_table(num_vertices, source)

    def nearer(a: Hop, b: Hop) -> bool:
        return a < b

    queue: list[Hop] = []
    priority_enqueue(queue, Hop(0, source), nearer)
    while queue:
        v_star = priority_dequeue(queue, nearer).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), nearer)

    return dp


def floyd_warshall(graph: Graph) -> list[list[Hop]]:
    """Shortest paths between all pairs; row ``u`` holds the paths from ``u``."""
    num_vertices = len(graph)
    dp = [[Hop(INF, -1) for _ in range(num_vertices)] for _ in range(num_vertices)]

    for u, row in enumerate(graph):
        for v, weight in enumerate(row):
            if u == v:
                dp[u][v] = Hop(0, -1)
            elif math.isfinite(weight):
                dp[u][v] = Hop(weight, u)

    for r in range(num_vertices):
        for u in range(num_vertices):
            for v in range(num_vertices):
                through_r = dp[u][r].weight + dp[r][v].weight
                if through_r < dp[u][v].weight:
                    dp[u][v] = Hop(through_r, dp[r][v].vertex)

    return dp


def decode(dp: Sequence[Hop], v: int) -> list[int]:
    """Follow predecessors back from ``v`` and return the path in forward order."""
    path: list[int] = []
    while v != -1:
        if len(path) > len(dp):
            raise ValueError("predecessor chain does not end")
        path.append(v)
        v = dp[v].vertex
    path.reverse()
    return path


def sparse_bellman_ford(graph: SparseGraph, source: int) -> list[Hop]:
    """Bellman-Ford on adjacency lists, stopping early once nothing changes.

    Raises ValueError when an edge can still be relaxed afterwards, which
    means a negative cycle is reachable from ``source``.
    """
    num_vertices = len(graph)
    _check_source(num_vertices, source)
    dp = _initial_table(num_vertices, source)

    for _ in range(num_vertices - 1):
        changed = False
        for u, edges in enumerate(graph):
            if not math.isfinite(dp[u].weight):
                continue
            for edge in edges:
                new_distance = dp[u].weight + edge.weight
                if new_distance < dp[edge.vertex].weight:
                    dp[edge.vertex] = Hop(new_distance, u)
                    changed = True
        if not changed:
            break

    for u, edges in enumerate(graph):
        if not math.isfinite(dp[u].weight):
            continue
        if any(dp[u].weight + edge.weight < dp[edge.vertex].weight for edge in edges):
            raise ValueError("the graph has a negative cycle")

    return dp


def sparse_dijkstra(graph: SparseGraph, source: int) -> list[Hop]:
    """Dijkstra on adjacency lists with a priority queue of tentative paths."""
    num_vertices = len(graph)
    _check_source(num_vertices, source)
    dp = _initial_table(num_vertices, source)

    def nearer(a: tuple[float, int, int], b: tuple[float, int, int]) -> bool:
        return a[0] < b[0]

    queue: list[tuple[float, int, int]] = []
    priority_enqueue(queue, (0, -1, source), nearer)
    while queue:
        distance, _, u = priority_dequeue(queue, nearer)
        if distance > dp[u].weight:
            continue
        for edge in graph[u]:
            new_distance = dp[u].weight + edge.weight
            if new_distance < dp[edge.vertex].weight:
                dp[edge.vertex] = Hop(new_distance, u)
                priority_enqueue(queue, (new_distance, u, edge.vertex), nearer)

    return dp