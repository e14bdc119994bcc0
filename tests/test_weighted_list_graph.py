import pytest

from dstructs.weighted_list_graph import (
    EXAMPLE_EDGES,
    EXAMPLE_VERTICES,
    INF,
    Edge,
    WeightedListGraph,
    example_weighted_list_graph,
    main,
)


@pytest.fixture
def graph():
    return example_weighted_list_graph()


def test_prim_from_first_vertex(graph):
    total, order = graph.prim(0)
    assert total == 36
    assert order == ["A", "B", "F", "E", "D", "C", "G"]


def test_kruskal_matches_prim_total(graph):
    total, chosen = graph.kruskal()
    prim_total, _ = graph.prim(0)
    assert total == prim_total
    assert total == sum(e.weight for e in chosen)
    assert len(chosen) == len(EXAMPLE_VERTICES) - 1


def test_kruskal_edges_ascending(graph):
    _, chosen = graph.kruskal()
    weights = [e.weight for e in chosen]
    assert weights == sorted(weights)


def test_kruskal_spans_every_vertex(graph):
    _, chosen = graph.kruskal()
    touched = {e.start for e in chosen} | {e.end for e in chosen}
    assert touched == set(EXAMPLE_VERTICES)


def test_dijkstra_from_d(graph):
    _, dist = graph.dijkstra(3)
    assert dist == [22, 13, 3, 0, 4, 6, 12]


def test_dijkstra_invariants(graph):
    for vs in range(len(EXAMPLE_VERTICES)):
        _, dist = graph.dijkstra(vs)
        assert dist[vs] == 0
        for start, end, w in EXAMPLE_EDGES:
            u, v = graph.position(start), graph.position(end)
            assert dist[v] <= dist[u] + w
            assert dist[u] <= dist[v] + w


def test_dijkstra_unreachable():
    g = WeightedListGraph(["A", "B", "C"], [("A", "B", 5)])
    _, dist = g.dijkstra(0)
    assert dist[1] == 5
    assert dist[2] == INF


def test_weight_lookup(graph):
    assert graph.weight(0, 0) == 0
    assert graph.weight(0, 1) == 12
    assert graph.weight(1, 0) == 12
    assert graph.weight(0, 2) == INF


def test_edges_cover_input(graph):
    edges = graph.edges()
    assert len(edges) == len(EXAMPLE_EDGES)
    assert {(e.start, e.end, e.weight) for e in edges} == set(EXAMPLE_EDGES)
    assert all(graph.position(e.start) < graph.position(e.end) for e in edges)
    assert Edge("A", "B", 12) in edges


def test_traversals_visit_each_vertex_once(graph):
    for order in (graph.dfs(), graph.bfs()):
        assert sorted(order) == list(EXAMPLE_VERTICES)
        assert order[0] == "A"


def test_render_lists_every_vertex(graph):
    lines = graph.render().splitlines()
    assert lines[0] == "List Graph:"
    assert len(lines) == len(EXAMPLE_VERTICES) + 1
    for i, vertex in enumerate(EXAMPLE_VERTICES):
        assert lines[i + 1].startswith(f"{i}({vertex}): ")


def test_unknown_vertex_rejected():
    with pytest.raises(ValueError):
        WeightedListGraph(["A", "B"], [("A", "Z", 1)])


def test_no_edges_rejected():
    with pytest.raises(ValueError):
        WeightedListGraph(["A", "B"], [])


def test_prim_start_out_of_range(graph):
    with pytest.raises(IndexError):
        graph.prim(len(EXAMPLE_VERTICES))


def test_main_prim(graph, capsys):
    assert main([]) == 0
    total, order = graph.prim(0)
    out = capsys.readouterr().out
    assert out == f"PRIM(A)={total}: " + "".join(f"{v} " for v in order) + "\n"


def test_main_kruskal(graph, capsys):
    assert main(["kruskal"]) == 0
    total, _ = graph.kruskal()
    assert capsys.readouterr().out.startswith(f"Kruskal={total}: ")


def test_main_dijkstra(graph, capsys):
    assert main(["dijkstra", "--source", "3"]) == 0
    _, dist = graph.dijkstra(3)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "dijkstra(D): "
    assert lines[1] == f"  shortest(D, A)={dist[0]}"
    assert len(lines) == len(EXAMPLE_VERTICES) + 1