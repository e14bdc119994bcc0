"""Undirected graphs stored as adjacency lists or adjacency matrices."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence

EXAMPLE_VERTICES = ("A", "B", "C", "D", "E", "F", "G")
EXAMPLE_EDGES = (
    ("A", "C"),
    ("A", "D"),
    ("A", "F"),
    ("B", "C"),
    ("C", "D"),
    ("E", "G"),
    ("F", "G"),
)


def _check_counts(vertex_count: int, edge_count: int) -> None:
    if (
        vertex_count < 1
        or edge_count < 1
        or edge_count > vertex_count * (vertex_count - 1)
    ):
        raise ValueError(
            f"invalid parameters: {vertex_count} vertices, {edge_count} edges"
        )


def _position(vertices: list, vertex: Hashable) -> int:
    try:
        return vertices.index(vertex)
    except ValueError:
        raise ValueError(f"invalid edge: unknown vertex {vertex!r}") from None


def _depth_first(count: int, neighbors: Callable[[int], Iterable[int]]) -> list[int]:
    """Depth-first order over every component, roots taken in index order."""
    visited = [False] * count
    order: list[int] = []
    for root in range(count):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        stack: list[Iterator[int]] = [iter(neighbors(root))]
        while stack:
            for w in stack[-1]:
                if not visited[w]:
                    visited[w] = True
                    order.append(w)
                    stack.append(iter(neighbors(w)))
                    break
            else:
                stack.pop()
    return order


def _breadth_first(count: int, neighbors: Callable[[int], Iterable[int]]) -> list[int]:
    """Breadth-first order over every component, roots taken in index order."""
    visited = [False] * count
    order: list[int] = []
    queue: deque[int] = deque()
    for root in range(count):
        if not visited[root]:
            visited[root] = True
            order.append(root)
            queue.append(root)
        while queue:
            j = queue.popleft()
            for k in neighbors(j):
                if not visited[k]:
                    visited[k] = True
                    order.append(k)
                    queue.append(k)
    return order


def _spaced(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


class ListGraph:
    """An undirected graph kept as one neighbour list per vertex."""

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[tuple]) -> None:
        self.vertices = list(vertices)
        edge_list = list(edges)
        _check_counts(len(self.vertices), len(edge_list))
        self.edge_count = len(edge_list)
        self._adjacency: list[list[int]] = [[] for _ in self.vertices]
        for start, end in edge_list:
            p1 = self.position(start)
            p2 = self.position(end)
            self._adjacency[p1].append(p2)
            self._adjacency[p2].append(p1)

    def position(self, vertex: Hashable) -> int:
        """Index of ``vertex``; raises ValueError if it is not in the graph."""
        return _position(self.vertices, vertex)

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Neighbour indices of the vertex at ``index``, in insertion order."""
        return tuple(self._adjacency[index])

    def dfs(self) -> list:
        """Vertex labels in depth-first order."""
        return [self.vertices[i] for i in _depth_first(len(self.vertices), self.neighbors)]

    def bfs(self) -> list:
        """Vertex labels in breadth-first order."""
        return [self.vertices[i] for i in _breadth_first(len(self.vertices), self.neighbors)]

    def render(self) -> str:
        lines = ["List Graph:"]
        for i, (vertex, adjacent) in enumerate(zip(self.vertices, self._adjacency)):
            entries = "".join(f"{k}({self.vertices[k]}) " for k in adjacent)
            lines.append(f"{i}({vertex}): {entries}")
        return "\n".join(lines) + "\n"


class MatrixGraph:
    """An undirected graph kept as a 0/1 adjacency matrix."""

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[tuple]) -> None:
        self.vertices = list(vertices)
        edge_list = list(edges)
        _check_counts(len(self.vertices), len(edge_list))
        self.edge_count = len(edge_list)
        n = len(self.vertices)
        self.matrix: list[list[int]] = [[0] * n for _ in range(n)]
        for start, end in edge_list:
            p1 = self.position(start)
            p2 = self.position(end)
            self.matrix[p1][p2] = 1
            self.matrix[p2][p1] = 1

    def position(self, vertex: Hashable) -> int:
        """Index of ``vertex``; raises ValueError if it is not in the graph."""
        return _position(self.vertices, vertex)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.vertices)

    def first_vertex(self, v: int) -> int | None:
        """First neighbour of vertex ``v``, or None."""
        if not self._in_range(v):
            return None
        return next((i for i, cell in enumerate(self.matrix[v]) if cell == 1), None)

    def next_vertex(self, v: int, w: int) -> int | None:
        """Neighbour of ``v`` following ``w``, or None."""
        if not (self._in_range(v) and self._in_range(w)):
            return None
        row = self.matrix[v]
        return next((i for i in range(w + 1, len(row)) if row[i] == 1), None)

    def _neighbors(self, v: int) -> Iterator[int]:
        w = self.first_vertex(v)
        while w is not None:
            yield w
            w = self.next_vertex(v, w)

    def dfs(self) -> list:
        """Vertex labels in depth-first order."""
        return [self.vertices[i] for i in _depth_first(len(self.vertices), self._neighbors)]

    def bfs(self) -> list:
        """Vertex labels in breadth-first order."""
        return [self.vertices[i] for i in _breadth_first(len(self.vertices), self._neighbors)]

    def render(self) -> str:
        lines = ["Martix Graph:"]
        lines.extend(_spaced(row) for row in self.matrix)
        return "\n".join(lines) + "\n"


def example_list_graph() -> ListGraph:
    return ListGraph(EXAMPLE_VERTICES, EXAMPLE_EDGES)


def example_matrix_graph() -> MatrixGraph:
    return MatrixGraph(EXAMPLE_VERTICES, EXAMPLE_EDGES)


def matrix_from_edges(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Symmetric weight matrix of ``n`` vertices from (source, target, weight) triples."""
    matrix = [[0] * n for _ in range(n)]
    for s, t, v in edges:
        if not (0 <= s < n and 0 <= t < n):
            raise ValueError(f"vertex out of range in edge ({s}, {t})")
        matrix[s][t] = v
        matrix[t][s] = v
    return matrix


def dfs_recursive(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start``, by recursion."""
    visited = [False] * len(matrix)
    order: list[int] = []

    def visit(v: int) -> None:
        order.append(v)
        visited[v] = True
        for i, weight in enumerate(matrix[v]):
            if weight != 0 and not visited[i]:
                visit(i)

    visit(start)
    return order


def dfs_iterative(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start``, with an explicit stack."""
    visited = [False] * len(matrix)
    order = [start]
    visited[start] = True
    stack = [start]
    while stack:
        row = matrix[stack[-1]]
        nxt = next(
            (j for j, weight in enumerate(row) if weight != 0 and not visited[j]),
            None,
        )
        if nxt is None:
            stack.pop()
        else:
            order.append(nxt)
            visited[nxt] = True
            stack.append(nxt)
    return order


def bfs_from(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order from ``start``."""
    visited = [False] * len(matrix)
    order = [start]
    visited[start] = True
    queue = deque([start])
    while queue:
        i = queue.popleft()
        for j, weight in enumerate(matrix[i]):
            if weight != 0 and not visited[j]:
                order.append(j)
                visited[j] = True
                queue.append(j)
    return order


def read_simple_graphs(text: str) -> Iterator[tuple[int, list[list[int]]]]:
    """Yield (vertex count, matrix) for each graph in ``text``.

    Each graph is "n e" followed by e lines "s t v"; reading stops at the end
    of input, at input that is not a number, or at n <= 0.
    """
    tokens = iter(text.split())
    while True:
        try:
            n = int(next(tokens))
            e = int(next(tokens))
        except (StopIteration, ValueError):
            return
        if n <= 0:
            return
        triples = []
        for _ in range(max(e, 0)):
            try:
                triples.append(tuple(int(next(tokens)) for _ in range(3)))
            except (StopIteration, RuntimeError, ValueError):
                raise ValueError("incomplete or malformed edge line") from None
        yield n, matrix_from_edges(n, triples)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dstructs-graph",
        description="Print traversals of the example graphs, or of graphs read from stdin.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("list", "matrix", "simple"),
        default="list",
        help="which graph to traverse (default: list)",
    )
    args = parser.parse_args(argv)
    out = sys.stdout

    if args.mode == "simple":
        for _, matrix in read_simple_graphs(sys.stdin.read()):
            out.write("深度优先遍历序列：\n")
            out.write(_spaced(dfs_recursive(matrix, 0)) + "\n")
            out.write("深度优先遍历序列：\n")
            out.write(_spaced(dfs_iterative(matrix, 0)) + "\n")
            out.write("广度优先遍历序列：\n")
            out.write(_spaced(bfs_from(matrix, 0)) + "\n")
        return 0

    graph = example_list_graph() if args.mode == "list" else example_matrix_graph()
    out.write(graph.render())
    out.write("DFS: " + _spaced(graph.dfs()) + "\n")
    out.write("BFS: " + _spaced(graph.bfs()) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())