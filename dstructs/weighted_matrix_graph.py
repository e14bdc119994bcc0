"""Weighted undirected graph kept as an adjacency matrix, with spanning trees and shortest paths."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterable, Sequence

from dstructs.graph import _breadth_first, _depth_first, _spaced
from dstructs.weighted_list_graph import (
    INF,
    Edge,
    _end_of,
    _exchange_sort,
    _format_dijkstra,
    _format_kruskal,
    _format_prim,
)

EXAMPLE_VERTICES = ("A", "B", "C", "D", "E", "F", "G")
EXAMPLE_MATRIX = (
    (0, 12, INF, INF, INF, 16, 14),
    (12, 0, 10, INF, INF, 7, INF),
    (INF, 10, 0, 3, 5, 6, INF),
    (INF, INF, 3, 0, 4, INF, INF),
    (INF, INF, 5, 4, 0, 2, 8),
    (16, 7, 6, INF, 2, 0, 9),
    (14, INF, INF, INF, 8, 9, 0),
)


class WeightedMatrixGraph:
    """An undirected weighted graph; absent edges hold INF, the diagonal holds 0."""

    def __init__(
        self, vertices: Iterable[Hashable], matrix: Iterable[Iterable[int]]
    ) -> None:
        self.vertices = list(vertices)
        self.matrix: list[list[int]] = [list(row) for row in matrix]
        n = len(self.vertices)
        if len(self.matrix) != n or any(len(row) != n for row in self.matrix):
            raise ValueError(f"matrix must be {n} x {n}")
        present = sum(
            1
            for i, row in enumerate(self.matrix)
            for j, w in enumerate(row)
            if i != j and w != INF
        )
        self.edge_count = present // 2

    @classmethod
    def from_edges(
        cls, vertices: Iterable[Hashable], edges: Iterable[tuple]
    ) -> WeightedMatrixGraph:
        """Build a graph from (start, end, weight) triples of vertex labels."""
        labels = list(vertices)
        edge_list = [tuple(edge) for edge in edges]
        n = len(labels)
        if n < 1 or not edge_list or len(edge_list) > n * (n - 1):
            raise ValueError(
                f"invalid parameters: {n} vertices, {len(edge_list)} edges"
            )
        matrix = [[0 if i == j else INF for j in range(n)] for i in range(n)]
        for start, end, weight in edge_list:
            if start not in labels or end not in labels:
                raise ValueError(f"invalid edge: ({start!r}, {end!r})")
            p1 = labels.index(start)
            p2 = labels.index(end)
            matrix[p1][p2] = weight
            matrix[p2][p1] = weight
        return cls(labels, matrix)

    def position(self, vertex: Hashable) -> int:
        """Index of ``vertex``; raises ValueError if it is not in the graph."""
        try:
            return self.vertices.index(vertex)
        except ValueError:
            raise ValueError(f"unknown vertex {vertex!r}") from None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")

    def weight(self, start: int, end: int) -> int:
        """Weight stored between two vertex indices (INF if there is no edge)."""
        return self.matrix[start][end]

    def _neighbors(self, index: int) -> list[int]:
        return [i for i, w in enumerate(self.matrix[index]) if w != 0 and w != INF]

    def edges(self) -> list[Edge]:
        """Every edge once, from its lower-indexed end, in index order."""
        return [
            Edge(self.vertices[i], self.vertices[j], self.matrix[i][j])
            for i in range(len(self.vertices))
            for j in range(i + 1, len(self.vertices))
            if self.matrix[i][j] != INF
        ]

    def dfs(self) -> list:
        """Vertex labels in depth-first order."""
        return [self.vertices[i] for i in _depth_first(len(self.vertices), self._neighbors)]

    def bfs(self) -> list:
        """Vertex labels in breadth-first order."""
        return [self.vertices[i] for i in _breadth_first(len(self.vertices), self._neighbors)]

    def render(self) -> str:
        lines = ["Martix Graph:"]
        lines.extend("".join(f"{w:10d} " for w in row) for row in self.matrix)
        return "\n".join(lines) + "\n"

    def kruskal(self) -> tuple[int, list[Edge]]:
        """Minimum spanning tree by Kruskal: (total weight, chosen edges in order)."""
        ends = [0] * len(self.vertices)
        chosen: list[Edge] = []
        for edge in _exchange_sort(self.edges()):
            m = _end_of(ends, self.position(edge.start))
            n = _end_of(ends, self.position(edge.end))
            if m != n:
                ends[m] = n
                chosen.append(edge)
        return sum(edge.weight for edge in chosen), chosen

    def prim(self, start: int = 0) -> tuple[int, list]:
        """Minimum spanning tree by Prim from index ``start``: (total weight, vertex labels)."""
        self._check_index(start)
        n = len(self.vertices)
        order = [start]
        weights = list(self.matrix[start])
        weights[start] = 0
        for _ in range(n - 1):
            k = 0
            lowest = INF
            for j, w in enumerate(weights):
                if w != 0 and w < lowest:
                    lowest = w
                    k = j
            order.append(k)
            weights[k] = 0
            for j in range(n):
                if weights[j] != 0 and self.matrix[k][j] < weights[j]:
                    weights[j] = self.matrix[k][j]
        total = sum(
            min(self.matrix[earlier][vertex] for earlier in order[:i])
            for i, vertex in enumerate(order[1:], 1)
        )
        return total, [self.vertices[i] for i in order]

    def dijkstra(self, vs: int) -> tuple[list[int], list[int]]:
        """Shortest paths from index ``vs``: (predecessor indices, distances; INF if unreachable)."""
        self._check_index(vs)
        n = len(self.vertices)
        dist = list(self.matrix[vs])
        prev = [0] * n
        done = [False] * n
        done[vs] = True
        dist[vs] = 0
        k = vs
        for _ in range(n - 1):
            lowest = INF
            for j in range(n):
                if not done[j] and dist[j] < lowest:
                    lowest = dist[j]
                    k = j
            done[k] = True
            for j in range(n):
                w = self.matrix[k][j]
                candidate = INF if w == INF or lowest == INF else lowest + w
                if not done[j] and candidate < dist[j]:
                    dist[j] = candidate
                    prev[j] = k
        return prev, dist


def example_weighted_matrix_graph() -> WeightedMatrixGraph:
    return WeightedMatrixGraph(EXAMPLE_VERTICES, EXAMPLE_MATRIX)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dstructs-weighted-matrix-graph",
        description="Run an algorithm on the example weighted matrix graph.",
    )
    parser.add_argument(
        "action",
        nargs="?",
        choices=("prim", "kruskal", "dijkstra", "print", "dfs", "bfs"),
        default="prim",
        help="what to compute (default: prim)",
    )
    parser.add_argument("--start", type=int, default=0, help="start index for prim")
    parser.add_argument("--source", type=int, default=3, help="source index for dijkstra")
    args = parser.parse_args(argv)

    graph = example_weighted_matrix_graph()
    out = sys.stdout
    if args.action == "prim":
        out.write(_format_prim(graph, args.start))
    elif args.action == "kruskal":
        out.write(_format_kruskal(graph))
    elif args.action == "dijkstra":
        out.write(_format_dijkstra(graph, args.source))
    elif args.action == "print":
        out.write(graph.render())
    elif args.action == "dfs":
        out.write("DFS: " + _spaced(graph.dfs()) + "\n")
    else:
        out.write("BFS: " + _spaced(graph.bfs()) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())