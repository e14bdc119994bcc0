import io

import pytest

from dstructs.graph import (
    EXAMPLE_EDGES,
    EXAMPLE_VERTICES,
    ListGraph,
    MatrixGraph,
    bfs_from,
    dfs_iterative,
    dfs_recursive,
    example_list_graph,
    example_matrix_graph,
    main,
    matrix_from_edges,
    read_simple_graphs,
)

EXPECTED_DFS = ["A", "C", "B", "D", "F", "G", "E"]
EXPECTED_BFS = ["A", "C", "D", "F", "B", "G", "E"]


def test_example_list_graph_traversals():
    graph = example_list_graph()
    assert graph.dfs() == EXPECTED_DFS
    assert graph.bfs() == EXPECTED_BFS


def test_example_matrix_graph_traversals():
    graph = example_matrix_graph()
    assert graph.dfs() == EXPECTED_DFS
    assert graph.bfs() == EXPECTED_BFS


def test_list_neighbors_follow_edge_order_and_are_symmetric():
    graph = example_list_graph()
    a = graph.position("A")
    assert [graph.vertices[i] for i in graph.neighbors(a)] == ["C", "D", "F"]
    for i in range(len(graph.vertices)):
        for j in graph.neighbors(i):
            assert i in graph.neighbors(j)


def test_matrix_is_symmetric_and_counts_edges():
    graph = example_matrix_graph()
    n = len(graph.vertices)
    for i in range(n):
        for j in range(n):
            assert graph.matrix[i][j] == graph.matrix[j][i]
    assert sum(map(sum, graph.matrix)) == 2 * len(EXAMPLE_EDGES)


def test_first_and_next_vertex():
    graph = example_matrix_graph()
    a = graph.position("A")
    first = graph.first_vertex(a)
    assert graph.vertices[first] == "C"
    second = graph.next_vertex(a, first)
    assert graph.vertices[second] == "D"
    assert graph.first_vertex(-1) is None
    assert graph.first_vertex(len(graph.vertices)) is None
    assert graph.next_vertex(a, graph.position("F")) is None


def test_traversals_visit_each_vertex_once_on_disconnected_graph():
    vertices = ["P", "Q", "R", "S"]
    edges = [("P", "Q"), ("R", "S")]
    for cls in (ListGraph, MatrixGraph):
        graph = cls(vertices, edges)
        assert sorted(graph.dfs()) == vertices
        assert sorted(graph.bfs()) == vertices
        assert graph.dfs()[0] == "P"


def test_unknown_vertex_in_edge_raises():
    with pytest.raises(ValueError):
        ListGraph("AB", [("A", "Z")])
    with pytest.raises(ValueError):
        MatrixGraph("AB", [("Z", "A")])


@pytest.mark.parametrize("cls", [ListGraph, MatrixGraph])
def test_invalid_counts_raise(cls):
    with pytest.raises(ValueError):
        cls("AB", [])
    with pytest.raises(ValueError):
        cls([], [("A", "B")])
    with pytest.raises(ValueError):
        cls("AB", [("A", "B"), ("B", "A"), ("A", "B")])


def test_list_render_format():
    graph = example_list_graph()
    lines = graph.render().splitlines()
    assert lines[0] == "List Graph:"
    assert len(lines) == len(EXAMPLE_VERTICES) + 1
    for i, vertex in enumerate(EXAMPLE_VERTICES):
        assert lines[i + 1].startswith(f"{i}({vertex}): ")


def test_matrix_render_format():
    graph = example_matrix_graph()
    lines = graph.render().splitlines()
    assert lines[0] == "Martix Graph:"
    rows = [[int(x) for x in line.split()] for line in lines[1:]]
    assert rows == graph.matrix


def test_matrix_from_edges_is_symmetric():
    matrix = matrix_from_edges(4, [(0, 1, 5), (2, 3, 9)])
    assert matrix[0][1] == 5 and matrix[1][0] == 5
    assert matrix[2][3] == 9 and matrix[3][2] == 9
    assert matrix[0][0] == 0


def test_matrix_from_edges_rejects_out_of_range():
    with pytest.raises(ValueError):
        matrix_from_edges(2, [(0, 2, 1)])


def test_recursive_and_iterative_dfs_agree():
    matrix = matrix_from_edges(
        6, [(0, 3, 1), (0, 1, 2), (1, 4, 3), (3, 5, 4), (2, 5, 5)]
    )
    assert dfs_recursive(matrix, 0) == dfs_iterative(matrix, 0)
    assert sorted(dfs_recursive(matrix, 0)) == list(range(6))


def test_bfs_from_starts_at_start_and_covers_component():
    matrix = matrix_from_edges(5, [(2, 0, 1), (0, 1, 1), (3, 4, 1)])
    order = bfs_from(matrix, 2)
    assert order[0] == 2
    assert sorted(order) == [0, 1, 2]
    assert 3 not in dfs_recursive(matrix, 2)


def test_read_simple_graphs_stops_at_zero():
    graphs = list(read_simple_graphs("3 2\n0 1 4\n1 2 7\n0 0\n3 1\n0 1 1\n"))
    assert len(graphs) == 1
    n, matrix = graphs[0]
    assert n == 3
    assert matrix[0][1] == 4 and matrix[2][1] == 7


def test_read_simple_graphs_incomplete_edge_raises():
    with pytest.raises(ValueError):
        list(read_simple_graphs("3 2\n0 1 4\n1 2\n"))


def test_main_list_prints_render_and_traversals(capsys):
    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    graph = example_list_graph()
    assert lines[0] == "List Graph:"
    assert "DFS: " + " ".join(graph.dfs()) + " " in lines
    assert "BFS: " + " ".join(graph.bfs()) + " " in lines


def test_main_simple_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1 4\n1 2 7\n0 0\n"))
    assert main(["simple"]) == 0
    lines = capsys.readouterr().out.splitlines()
    matrix = matrix_from_edges(3, [(0, 1, 4), (1, 2, 7)])
    assert lines[4] == "广度优先遍历序列："
    assert lines[5] == " ".join(map(str, bfs_from(matrix, 0))) + " "
    assert lines[1] == " ".join(map(str, dfs_recursive(matrix, 0))) + " "