"""Check that a list of vertex pairs are all edges of a graph."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from grafoalg.graph import GraphFormatError, WeightedGraph, load_weighted_graph

__all__ = ["find_missing_edge", "parse_pairs", "main"]

_PROMPT = "As arestas pertencem ao grafo? "


def find_missing_edge(
    graph: WeightedGraph, pairs: Iterable[tuple[int, int]]
) -> tuple[int, int] | None:
    """Return the first 1-based pair that is not an edge of graph, or None."""
    for first, second in pairs:
        if not 1 <= first <= graph.vertex_count:
            return first, second
        if not any(neighbor == second - 1 for neighbor, _ in graph.neighbors(first - 1)):
            return first, second
    return None


def parse_pairs(text: str) -> list[tuple[int, int]]:
    """Read whitespace-separated integers as (u, v) pairs."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise GraphFormatError(f"expected integers: {exc}") from None
    if len(numbers) % 2:
        raise GraphFormatError("pair list ends with an unmatched vertex")
    values = iter(numbers)
    return list(zip(values, values))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph file named on the command line and pairs from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Uso: agm <arquivo>", file=sys.stderr)
        return 1
    sys.stdout.write(_PROMPT)
    try:
        graph = load_weighted_graph(args[0])
        pairs = parse_pairs(sys.stdin.read())
    except OSError as exc:
        print(f"\nErro ao abrir arquivo: {exc.strerror}", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"\nErro: {exc}", file=sys.stderr)
        return 1
    missing = find_missing_edge(graph, pairs[: len(graph.edges())])
    if missing is not None:
        sys.stdout.write(f"\nNão é aresta {missing[0]} {missing[1]}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())