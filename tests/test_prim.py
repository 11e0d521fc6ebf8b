import pytest

from grafoalg.graph import WeightedGraph, parse_weighted_graph
from grafoalg.kruskal import Edge, minimum_spanning_tree, total_weight
from grafoalg.prim import SpanningTree, format_tree, main, prim

TRIANGLE = "3 3\n1 2 1\n2 3 2\n1 3 3\n"
SQUARE = "4 5\n1 2 4\n2 3 1\n3 4 2\n4 1 3\n1 3 9\n"


def _kruskal_cost(graph):
    edges = [Edge(*triple) for triple in graph.edges()]
    return total_weight(minimum_spanning_tree(graph.vertex_count, edges))


def test_triangle_cost_and_edges():
    tree = prim(parse_weighted_graph(TRIANGLE), 0)
    assert tree.cost == 3
    assert sorted((min(u, v), max(u, v)) for u, v, _ in tree.edges) == [(0, 1), (1, 2)]


@pytest.mark.parametrize("start", [0, 1, 2, 3])
def test_cost_independent_of_start(start):
    graph = parse_weighted_graph(SQUARE)
    tree = prim(graph, start)
    assert tree.cost == _kruskal_cost(graph)
    assert len(tree.edges) == graph.vertex_count - 1


def test_tree_edges_come_from_graph():
    graph = parse_weighted_graph(SQUARE)
    original = {(min(u, v), max(u, v), w) for u, v, w in graph.edges()}
    tree = prim(graph, 0)
    assert all((min(u, v), max(u, v), w) in original for u, v, w in tree.edges)
    assert tree.cost == sum(w for _, _, w in tree.edges)


def test_disconnected_graph_covers_start_component_only():
    graph = WeightedGraph(4)
    graph.add_edge(0, 1, 5)
    graph.add_edge(2, 3, 1)
    tree = prim(graph, 2)
    assert tree.edges == [(2, 3, 1)]
    assert tree.cost == 1


def test_single_vertex_tree_is_empty():
    tree = prim(WeightedGraph(1), 0)
    assert tree.edges == []
    assert tree.cost == 0


def test_start_out_of_range():
    with pytest.raises(IndexError):
        prim(WeightedGraph(2), 2)


def test_format_tree_on_path():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 5)
    graph.add_edge(1, 2, 6)
    tree = prim(graph, 2)
    assert format_tree(tree) == "(1,2) (2,3) "


def test_format_empty_tree():
    assert format_tree(SpanningTree(WeightedGraph(2))) == ""


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("Uso: ./prim")


def test_main_requires_input(capsys):
    assert main([]) == 1
    assert "Parâmetros obrigatórios ausentes" in capsys.readouterr().err


def test_main_prints_cost(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    assert main(["-f", str(path), "-i", "2"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_writes_tree(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    out = tmp_path / "out.txt"
    assert main(["-f", str(path), "-s", "-o", str(out)]) == 0
    assert out.read_text() == "(1,2) (2,3) \n"


def test_main_rejects_start_outside_graph(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    assert main(["-f", str(path), "-i", "7"]) == 1
    assert "fora do grafo" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "absent.txt")]) == 1
    assert "Erro ao abrir arquivo" in capsys.readouterr().err