"""Weighted directed graphs as adjacency matrices or adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

INF = math.inf

Graph = list[list[float]]


@dataclass
class Hop:
    """An edge weight together with a vertex; ordered by weight alone."""

    weight: float
    vertex: int

    def __lt__(self, other: "Hop") -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({_format_weight(self.weight)},{self.vertex})"


SparseGraph = list[list[Hop]]


def _format_weight(weight: float) -> str:
    if isinstance(weight, float):
        return f"{weight:g}"
    return str(weight)


TEST_GRAPH: Graph = [
    [INF, 4, INF, INF, INF, INF, INF, 8, INF],
    [INF, INF, INF, INF, INF, INF, INF, 11, INF],
    [INF, INF, INF, INF, INF, 4, INF, INF, 2],
    [INF, INF, INF, INF, 9, 14, INF, INF, INF],
    [INF, INF, INF, INF, INF, 10, INF, INF, INF],
    [INF, INF, INF, INF, INF, INF, 2, INF, INF],
    [INF, INF, INF, 3, INF, INF, INF, 1, 6],
    [INF, INF, INF, INF, INF, INF, INF, INF, 7],
    [INF, INF, INF, INF, INF, INF, INF, INF, INF],
]

SPARSE_TEST_GRAPH: SparseGraph = [
    [Hop(4, 1), Hop(8, 7)],
    [Hop(11, 7)],
    [Hop(4, 5), Hop(2, 8)],
    [Hop(9, 4), Hop(14, 5)],
    [Hop(10, 5)],
    [Hop(2, 6)],
    [Hop(3, 3), Hop(1, 7), Hop(6, 8)],
    [Hop(7, 8)],
    [],
]


def graph_to_sparse(graph: Sequence[Sequence[float]]) -> SparseGraph:
    """Turn an adjacency matrix into adjacency lists of finite-weight edges."""
    return [
        [Hop(weight, vertex) for vertex, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def _as_sparse(graph: Sequence[Sequence[Any]]) -> SparseGraph:
    if all(isinstance(hop, Hop) for row in graph for hop in row):
        return [list(row) for row in graph]
    return graph_to_sparse(graph)


def graph_to_dot(graph: Union[Graph, SparseGraph]) -> str:
    """Render the graph in the DOT language, one edge per line."""
    lines = ["digraph G {"]
    for source, hops in enumerate(_as_sparse(graph)):
        for hop in hops:
            lines.append(
                f"    {source} -> {hop.vertex} [label= {_format_weight(hop.weight)}];"
            )
    lines.append("}")
    return "\n".join(lines) + "\n"


def percent_encode(text: str) -> str:
    """Encode every byte of ``text`` as ``%xx`` with two lower-case hex digits."""
    return "".join(f"%{byte:02x}" for byte in text.encode("utf-8"))


def print_graph(graph: Union[Graph, SparseGraph], as_url: bool = False) -> None:
    """Print the graph as DOT text, or percent-encoded as a URL fragment."""
    dot = graph_to_dot(graph)
    if as_url:
        print("#" + percent_encode(dot))
    else:
        print(dot)