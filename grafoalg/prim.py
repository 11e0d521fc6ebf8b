"""Minimum spanning trees by Prim's algorithm."""

from __future__ import annotations

import contextlib
import heapq
import re
import sys
from dataclasses import dataclass
from typing import Sequence

from grafoalg.graph import GraphFormatError, WeightedGraph, load_weighted_graph

__all__ = ["SpanningTree", "prim", "format_tree", "main"]

_HELP = """\
Uso: ./prim [opções]
  -h           : exibe ajuda
  -f <arquivo> : arquivo do grafo
  -i <vértice> : vértice inicial
  -s           : exibe a árvore geradora mínima
  -o <arquivo> : arquivo para saída
"""


@dataclass
class SpanningTree:
    """A spanning tree stored as a weighted graph, with its total cost."""

    graph: WeightedGraph
    cost: int = 0

    @property
    def edges(self) -> list[tuple[int, int, int]]:
        """The tree's (parent, child, weight) triples in the order they were added."""
        return self.graph.edges()


def prim(graph: WeightedGraph, start: int) -> SpanningTree:
    """Grow a minimum spanning tree of start's component."""
    count = graph.vertex_count
    if not 0 <= start < count:
        raise IndexError(f"vertex {start} out of range for {count} vertices")
    keys: list[int | None] = [None] * count
    parents: list[int | None] = [None] * count
    done = [False] * count
    keys[start] = 0
    tree = SpanningTree(WeightedGraph(count))
    queue = [(0, start)]
    while queue:
        key, vertex = heapq.heappop(queue)
        if done[vertex]:
            continue
        done[vertex] = True
        parent = parents[vertex]
        if parent is not None:
            tree.graph.add_edge(parent, vertex, key)
            tree.cost += key
        for neighbor, weight in graph.neighbors(vertex):
            current = keys[neighbor]
            if not done[neighbor] and (current is None or weight < current):
                keys[neighbor] = weight
                parents[neighbor] = vertex
                heapq.heappush(queue, (weight, neighbor))
    return tree


def format_tree(tree: SpanningTree) -> str:
    """Render the tree as "(u,v) " pairs, u < v, grouped by the lower vertex."""
    graph = tree.graph
    return "".join(
        f"({vertex + 1},{neighbor + 1}) "
        for vertex in range(graph.vertex_count)
        for neighbor, _ in graph.neighbors(vertex)
        if vertex < neighbor
    )


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = iter(sys.argv[1:] if argv is None else argv)
    input_path = output_path = None
    start = 0
    show_tree = False
    for arg in args:
        if arg == "-h":
            sys.stdout.write(_HELP)
            return 0
        if arg in ("-f", "-o", "-i"):
            value = next(args, None)
            if value is None:
                break
            if arg == "-f":
                input_path = value
            elif arg == "-o":
                output_path = value
            else:
                start = _atoi(value) - 1
        elif arg == "-s":
            show_tree = True

    if input_path is None:
        print("Parâmetros obrigatórios ausentes. Use -h para ajuda.", file=sys.stderr)
        return 1
    start = max(start, 0)

    with contextlib.ExitStack() as stack:
        if output_path is None:
            out = sys.stdout
        else:
            try:
                out = stack.enter_context(open(output_path, "w"))
            except OSError as exc:
                print(f"Erro ao abrir arquivo de saída: {exc.strerror}", file=sys.stderr)
                return 1
        try:
            graph = load_weighted_graph(input_path)
        except OSError as exc:
            print(f"Erro ao abrir arquivo: {exc.strerror}", file=sys.stderr)
            return 1
        except GraphFormatError as exc:
            print(f"Erro: {exc}", file=sys.stderr)
            return 1
        if start >= graph.vertex_count:
            print(f"Erro: vértice inicial {start + 1} fora do grafo.", file=sys.stderr)
            return 1
        tree = prim(graph, start)
        if show_tree:
            out.write(format_tree(tree) + "\n")
        else:
            out.write(f"{tree.cost}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())