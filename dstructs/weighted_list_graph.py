"""Weighted undirected graph kept as adjacency lists, with spanning trees and shortest paths."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass

from dstructs.graph import _breadth_first, _depth_first, _spaced

INF = 0x7FFFFFFF
"""Weight reported between two vertices that share no edge."""

EXAMPLE_VERTICES = ("A", "B", "C", "D", "E", "F", "G")
EXAMPLE_EDGES = (
    ("A", "B", 12),
    ("A", "F", 16),
    ("A", "G", 14),
    ("B", "C", 10),
    ("B", "F", 7),
    ("C", "D", 3),
    ("C", "E", 5),
    ("C", "F", 6),
    ("D", "E", 4),
    ("E", "F", 2),
    ("E", "G", 8),
    ("F", "G", 9),
)


@dataclass(frozen=True)
class Edge:
    """An undirected edge between two vertex labels."""

    start: Hashable
    end: Hashable
    weight: int


def _exchange_sort(edges: Iterable[Edge]) -> list[Edge]:
    """Sort by weight with a plain exchange sort.

    The order this leaves equal-weight edges in decides which of them a
    spanning tree takes, so it is kept rather than using a stable sort.
    """
    items = list(edges)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i].weight > items[j].weight:
                items[i], items[j] = items[j], items[i]
    return items


def _end_of(ends: list[int], index: int) -> int:
    while ends[index] != 0:
        index = ends[index]
    return index


class WeightedListGraph:
    """An undirected weighted graph kept as one (neighbour, weight) list per vertex."""

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[tuple]) -> None:
        self.vertices = list(vertices)
        edge_list = [tuple(edge) for edge in edges]
        n = len(self.vertices)
        if n < 1 or not edge_list or len(edge_list) > n * (n - 1):
            raise ValueError(
                f"invalid parameters: {n} vertices, {len(edge_list)} edges"
            )
        self.edge_count = len(edge_list)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in self.vertices]
        for start, end, weight in edge_list:
            p1 = self.position(start)
            p2 = self.position(end)
            self._adjacency[p1].append((p2, weight))
            self._adjacency[p2].append((p1, weight))

    def position(self, vertex: Hashable) -> int:
        """Index of ``vertex``; raises ValueError if it is not in the graph."""
        try:
            return self.vertices.index(vertex)
        except ValueError:
            raise ValueError(f"invalid edge: unknown vertex {vertex!r}") from None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")

    def _neighbors(self, index: int) -> list[int]:
        return [k for k, _ in self._adjacency[index]]

    def weight(self, start: int, end: int) -> int:
        """Weight of the edge between two vertex indices; 0 for a vertex to itself, INF if none."""
        if start == end:
            return 0
        return next((w for k, w in self._adjacency[start] if k == end), INF)

    def edges(self) -> list[Edge]:
        """Every edge once, from its lower-indexed end, in adjacency order."""
        return [
            Edge(self.vertices[i], self.vertices[k], w)
            for i, adjacent in enumerate(self._adjacency)
            for k, w in adjacent
            if k > i
        ]

    def dfs(self) -> list:
        """Vertex labels in depth-first order."""
        return [self.vertices[i] for i in _depth_first(len(self.vertices), self._neighbors)]

    def bfs(self) -> list:
        """Vertex labels in breadth-first order."""
        return [self.vertices[i] for i in _breadth_first(len(self.vertices), self._neighbors)]

    def render(self) -> str:
        lines = ["List Graph:"]
        for i, (vertex, adjacent) in enumerate(zip(self.vertices, self._adjacency)):
            entries = "".join(f"{k}({self.vertices[k]}) " for k, _ in adjacent)
            lines.append(f"{i}({vertex}): {entries}")
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
        weights = [self.weight(start, i) for i in range(n)]
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
                candidate = self.weight(k, j)
                if weights[j] != 0 and candidate < weights[j]:
                    weights[j] = candidate
        total = sum(
            min(self.weight(earlier, vertex) for earlier in order[:i])
            for i, vertex in enumerate(order[1:], 1)
        )
        return total, [self.vertices[i] for i in order]

    def dijkstra(self, vs: int) -> tuple[list[int], list[int]]:
        """Shortest paths from index ``vs``: (predecessor indices, distances; INF if unreachable)."""
        self._check_index(vs)
        n = len(self.vertices)
        dist = [self.weight(vs, i) for i in range(n)]
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
                w = self.weight(k, j)
                candidate = INF if w == INF or lowest == INF else lowest + w
                if not done[j] and candidate < dist[j]:
                    dist[j] = candidate
                    prev[j] = k
        return prev, dist


def example_weighted_list_graph() -> WeightedListGraph:
    return WeightedListGraph(EXAMPLE_VERTICES, EXAMPLE_EDGES)


def _format_prim(graph: WeightedListGraph, start: int) -> str:
    total, order = graph.prim(start)
    return f"PRIM({graph.vertices[start]})={total}: {_spaced(order)}\n"


def _format_kruskal(graph: WeightedListGraph) -> str:
    total, chosen = graph.kruskal()
    pairs = "".join(f"({e.start},{e.end}) " for e in chosen)
    return f"Kruskal={total}: {pairs}\n"


def _format_dijkstra(graph: WeightedListGraph, vs: int) -> str:
    _, dist = graph.dijkstra(vs)
    source = graph.vertices[vs]
    lines = [f"dijkstra({source}): "]
    lines.extend(
        f"  shortest({source}, {vertex})={d}" for vertex, d in zip(graph.vertices, dist)
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dstructs-weighted-list-graph",
        description="Run an algorithm on the example weighted graph.",
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

    graph = example_weighted_list_graph()
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