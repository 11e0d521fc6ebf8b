"""Minimum spanning trees by Kruskal's algorithm."""

from __future__ import annotations

import contextlib
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from grafoalg.graph import GraphFormatError, parse_weighted_graph

__all__ = [
    "Edge",
    "DisjointSet",
    "parse_edges",
    "load_edges",
    "minimum_spanning_tree",
    "total_weight",
    "format_tree",
    "main",
]

_HELP = """\
Usage: ./kruskal [options]
  -h           : show this help message
  -f <file>    : input graph file
  -s           : show minimum spanning tree (MST)
  -o <file>    : redirect output to file
"""


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between 0-based vertices."""

    source: int
    destination: int
    weight: int


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of both items; return False if they were already joined."""
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return False
        if self._rank[root_first] < self._rank[root_second]:
            root_first, root_second = root_second, root_first
        self._parent[root_second] = root_first
        if self._rank[root_first] == self._rank[root_second]:
            self._rank[root_first] += 1
        return True


def parse_edges(text: str) -> tuple[int, list[Edge]]:
    """Read "n m" and m lines "u v w"; return the vertex count and 0-based edges."""
    graph = parse_weighted_graph(text)
    edges = [Edge(source, destination, weight) for source, destination, weight in graph.edges()]
    return graph.vertex_count, edges


def load_edges(path: str | Path) -> tuple[int, list[Edge]]:
    """Read a vertex count and edge list from a file."""
    return parse_edges(Path(path).read_text())


def minimum_spanning_tree(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    sets = DisjointSet(vertex_count)
    limit = max(vertex_count - 1, 0)
    tree: list[Edge] = []
    for edge in sorted(edges, key=lambda item: item.weight):
        if len(tree) >= limit:
            break
        if sets.union(edge.source, edge.destination):
            tree.append(edge)
    return tree


def total_weight(edges: Iterable[Edge]) -> int:
    """Sum the weights of the given edges."""
    return sum(edge.weight for edge in edges)


def format_tree(edges: Iterable[Edge]) -> str:
    """Render edges as "(u,v) " pairs with 1-based vertices."""
    return "".join(f"({edge.source + 1},{edge.destination + 1}) " for edge in edges)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = iter(sys.argv[1:] if argv is None else argv)
    input_path = output_path = None
    show_solution = False
    start = -1
    for arg in args:
        if arg == "-h":
            sys.stdout.write(_HELP)
            return 0
        if arg in ("-f", "-o", "-i"):
            value = next(args, None)
            if value is None:
                what = "a vertex number" if arg == "-i" else "a filename"
                print(f"Error: {arg} requires {what}", file=sys.stderr)
                return 1
            if arg == "-f":
                input_path = value
            elif arg == "-o":
                output_path = value
            else:
                start = _atoi(value) - 1
        elif arg == "-s":
            show_solution = True
        else:
            print(f"Invalid option: {arg}. Use -h for help", file=sys.stderr)
            return 1

    if input_path is None:
        print("Required parameters missing. Use -h for help", file=sys.stderr)
        return 1

    try:
        vertex_count, edges = load_edges(input_path)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"Error reading file {input_path}: {exc}", file=sys.stderr)
        return 1

    if start != -1 and vertex_count > 0 and not 0 <= start < vertex_count:
        print(
            f"Warning: Start vertex ({start + 1}) out of range for graph with "
            f"{vertex_count} vertices. Ignoring for Kruskal.",
            file=sys.stderr,
        )

    tree = minimum_spanning_tree(vertex_count, edges)

    with contextlib.ExitStack() as stack:
        if output_path is None:
            out = sys.stdout
        else:
            try:
                out = stack.enter_context(open(output_path, "w"))
            except OSError as exc:
                print(f"Error opening output file: {exc.strerror}", file=sys.stderr)
                return 1
        if show_solution:
            out.write(format_tree(tree) + "\n")
        else:
            out.write(f"{total_weight(tree)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())