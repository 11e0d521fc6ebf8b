"""Adjacency-list graphs and the plain-text graph file format.

A graph file starts with the vertex count and the edge count, followed by
one line per edge.  Vertices in files are numbered from 1; in memory they
are numbered from 0.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

__all__ = [
    "GraphFormatError",
    "WeightedGraph",
    "DirectedGraph",
    "parse_weighted_graph",
    "parse_directed_graph",
    "load_weighted_graph",
    "load_directed_graph",
]


class GraphFormatError(ValueError):
    """Raised when graph text does not follow the expected layout."""


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative: {vertex_count}")


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range for {vertex_count} vertices")


class WeightedGraph:
    """Undirected graph with integer edge weights."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
        self._edges: list[tuple[int, int, int]] = []

    def __len__(self) -> int:
        return self.vertex_count

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Connect two vertices in both directions."""
        _check_vertex(source, self.vertex_count)
        _check_vertex(destination, self.vertex_count)
        self._adjacency[source].append((destination, weight))
        self._adjacency[destination].append((source, weight))
        self._edges.append((source, destination, weight))

    def neighbors(self, vertex: int) -> Iterator[tuple[int, int]]:
        """Yield (neighbor, weight) pairs, most recently added first."""
        _check_vertex(vertex, self.vertex_count)
        return reversed(self._adjacency[vertex])

    def edges(self) -> list[tuple[int, int, int]]:
        """Return (source, destination, weight) triples in insertion order."""
        return list(self._edges)


class DirectedGraph:
    """Directed graph without weights."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return self.vertex_count

    def add_edge(self, source: int, destination: int) -> None:
        """Add an arc from source to destination."""
        _check_vertex(source, self.vertex_count)
        _check_vertex(destination, self.vertex_count)
        self._adjacency[source].append(destination)

    def successors(self, vertex: int) -> Iterator[int]:
        """Yield the heads of the arcs leaving vertex, most recently added first."""
        _check_vertex(vertex, self.vertex_count)
        return reversed(self._adjacency[vertex])

    def reversed(self) -> DirectedGraph:
        """Return a new graph with every arc turned around."""
        result = DirectedGraph(self.vertex_count)
        for vertex in range(self.vertex_count):
            for successor in self.successors(vertex):
                result.add_edge(successor, vertex)
        return result


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise GraphFormatError(f"expected an integer, found {token!r}") from None


def _take(numbers: Iterator[int], what: str) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise GraphFormatError(f"unexpected end of input while reading {what}") from None


def _read_header(numbers: Iterator[int]) -> tuple[int, int]:
    vertex_count = _take(numbers, "the vertex count")
    edge_count = _take(numbers, "the edge count")
    if vertex_count < 0 or edge_count < 0:
        raise GraphFormatError("vertex and edge counts must not be negative")
    return vertex_count, edge_count


def parse_weighted_graph(text: str) -> WeightedGraph:
    """Build an undirected weighted graph from "n m" and m lines "u v w"."""
    numbers = _integers(text)
    vertex_count, edge_count = _read_header(numbers)
    graph = WeightedGraph(vertex_count)
    for index in range(1, edge_count + 1):
        source = _take(numbers, f"edge {index}")
        destination = _take(numbers, f"edge {index}")
        weight = _take(numbers, f"edge {index}")
        try:
            graph.add_edge(source - 1, destination - 1, weight)
        except IndexError as exc:
            raise GraphFormatError(f"edge {index}: {exc}") from exc
    return graph


def parse_directed_graph(text: str) -> DirectedGraph:
    """Build a directed graph from "n m" and m lines "u v"."""
    numbers = _integers(text)
    vertex_count, edge_count = _read_header(numbers)
    graph = DirectedGraph(vertex_count)
    for index in range(1, edge_count + 1):
        source = _take(numbers, f"edge {index}")
        destination = _take(numbers, f"edge {index}")
        try:
            graph.add_edge(source - 1, destination - 1)
        except IndexError as exc:
            raise GraphFormatError(f"edge {index}: {exc}") from exc
    return graph


def load_weighted_graph(path: str | Path) -> WeightedGraph:
    """Read an undirected weighted graph from a file."""
    return parse_weighted_graph(Path(path).read_text())


def load_directed_graph(path: str | Path) -> DirectedGraph:
    """Read a directed graph from a file."""
    return parse_directed_graph(Path(path).read_text())