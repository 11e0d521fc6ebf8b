import random

import pytest

from grafoalg.graph import GraphFormatError, WeightedGraph
from grafoalg.kruskal import (
    DisjointSet,
    Edge,
    format_tree,
    load_edges,
    main,
    minimum_spanning_tree,
    parse_edges,
    total_weight,
)
from grafoalg.prim import prim

TRIANGLE = "3 3\n1 2 1\n2 3 2\n1 3 3\n"


def _connected_components(vertex_count, edges):
    sets = DisjointSet(vertex_count)
    for edge in edges:
        sets.union(edge.source, edge.destination)
    return len({sets.find(vertex) for vertex in range(vertex_count)})


def test_disjoint_set_starts_with_singletons():
    sets = DisjointSet(4)
    assert [sets.find(item) for item in range(4)] == [0, 1, 2, 3]


def test_disjoint_set_union_joins_and_reports():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(0, 2) is False
    assert sets.find(0) == sets.find(2)
    assert sets.find(3) != sets.find(0)


def test_disjoint_set_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_parse_edges_round_trip():
    vertex_count, edges = parse_edges(TRIANGLE)
    assert vertex_count == 3
    assert edges == [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3)]


def test_parse_edges_truncated_raises():
    with pytest.raises(GraphFormatError):
        parse_edges("3 2\n1 2 1\n")


def test_load_edges_reads_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    assert load_edges(path) == parse_edges(TRIANGLE)


def test_triangle_tree_drops_heaviest_edge():
    _, edges = parse_edges(TRIANGLE)
    tree = minimum_spanning_tree(3, edges)
    assert tree == [edges[0], edges[1]]
    assert total_weight(tree) == 3


def test_format_tree_uses_one_based_pairs():
    assert format_tree([Edge(0, 1, 5), Edge(2, 3, 1)]) == "(1,2) (3,4) "


def test_empty_graph_has_empty_tree():
    assert minimum_spanning_tree(0, []) == []
    assert total_weight([]) == 0


def test_forest_on_disconnected_graph():
    edges = [Edge(0, 1, 4), Edge(2, 3, 7), Edge(3, 4, 1)]
    tree = minimum_spanning_tree(6, edges)
    assert len(tree) == 6 - _connected_components(6, edges)
    assert _connected_components(6, tree) == _connected_components(6, edges)


def test_random_graphs_match_prim_cost():
    rng = random.Random(7)
    for _ in range(20):
        count = rng.randint(2, 12)
        graph = WeightedGraph(count)
        for vertex in range(1, count):
            graph.add_edge(rng.randrange(vertex), vertex, rng.randint(1, 20))
        for _ in range(rng.randint(0, 15)):
            graph.add_edge(rng.randrange(count), rng.randrange(count), rng.randint(1, 20))
        edges = [Edge(*triple) for triple in graph.edges()]
        tree = minimum_spanning_tree(count, edges)
        assert len(tree) == count - 1
        assert _connected_components(count, tree) == 1
        assert total_weight(tree) == prim(graph, 0).cost


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("Usage: ./kruskal [options]")


def test_main_requires_input(capsys):
    assert main([]) == 1
    assert "Required parameters missing" in capsys.readouterr().err


def test_main_invalid_option(capsys):
    assert main(["-x"]) == 1
    assert "Invalid option: -x" in capsys.readouterr().err


def test_main_missing_option_value(capsys):
    assert main(["-f"]) == 1
    assert "-f requires a filename" in capsys.readouterr().err


def test_main_prints_weight(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    assert main(["-f", str(path)]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_writes_tree_to_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    out = tmp_path / "out.txt"
    assert main(["-f", str(path), "-s", "-o", str(out)]) == 0
    assert out.read_text() == "(1,2) (2,3) \n"


def test_main_warns_on_bad_start(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text(TRIANGLE)
    assert main(["-f", str(path), "-i", "9"]) == 0
    assert "Start vertex (9) out of range" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err