"""Single-source shortest paths on an undirected weighted graph."""

from __future__ import annotations

import contextlib
import heapq
import re
import sys
from typing import Sequence

from grafoalg.graph import GraphFormatError, WeightedGraph, load_weighted_graph

__all__ = ["shortest_distances", "format_distances", "main"]

_HELP = """\
Uso: ./djikstra [opções]
  -h           : mostra o help
  -o <arquivo> : redireciona a saída para o arquivo
  -f <arquivo> : arquivo com o grafo de entrada
  -i <vértice> : vértice inicial para o algoritmo de Dijkstra (começa em 1)
"""


def shortest_distances(graph: WeightedGraph, source: int) -> list[int | None]:
    """Return the distance from source to each vertex, None where unreachable."""
    if not 0 <= source < graph.vertex_count:
        raise IndexError(f"vertex {source} out of range for {graph.vertex_count} vertices")
    distances: list[int | None] = [None] * graph.vertex_count
    distances[source] = 0
    settled = [False] * graph.vertex_count
    queue = [(0, source)]
    while queue:
        distance, vertex = heapq.heappop(queue)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for neighbor, weight in graph.neighbors(vertex):
            if settled[neighbor]:
                continue
            candidate = distance + weight
            current = distances[neighbor]
            if current is None or candidate < current:
                distances[neighbor] = candidate
                heapq.heappush(queue, (candidate, neighbor))
    return distances


def format_distances(distances: Sequence[int | None]) -> str:
    """Render distances as "vertex:distance " pairs, -1 for unreachable."""
    return "".join(
        f"{vertex}:{-1 if distance is None else distance} "
        for vertex, distance in enumerate(distances, start=1)
    )


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = iter(sys.argv[1:] if argv is None else argv)
    input_path = output_path = None
    start = -1
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

    if input_path is None:
        print(
            "Erro: Arquivo de entrada não especificado. Use -f <arquivo>.",
            file=sys.stderr,
        )
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
        out.write(format_distances(shortest_distances(graph, start)))
    return 0


if __name__ == "__main__":
    sys.exit(main())