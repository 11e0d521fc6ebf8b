"""Strongly connected components of a directed graph."""

from __future__ import annotations

import contextlib
import sys
from typing import Iterable, Sequence

from grafoalg.graph import DirectedGraph, GraphFormatError, load_directed_graph

__all__ = [
    "strongly_connected_components",
    "sort_components",
    "format_components",
    "main",
]

_HELP = """\
Uso: ./kosaraju [opcoes]
  -h           : mostra o help
  -o <arquivo> : redireciona a saida para o arquivo
  -f <arquivo> : arquivo com o grafo de entrada
"""


def _finish_order(graph: DirectedGraph) -> list[int]:
    visited = [False] * graph.vertex_count
    finished: list[int] = []
    for root in range(graph.vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, graph.successors(root))]
        while stack:
            vertex, pending = stack[-1]
            for successor in pending:
                if not visited[successor]:
                    visited[successor] = True
                    stack.append((successor, graph.successors(successor)))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    return finished


def strongly_connected_components(graph: DirectedGraph) -> list[list[int]]:
    """Return the components, each sorted, in the order they are discovered."""
    reverse = graph.reversed()
    assigned = [False] * graph.vertex_count
    components: list[list[int]] = []
    for root in reversed(_finish_order(graph)):
        if assigned[root]:
            continue
        assigned[root] = True
        members = [root]
        stack = [root]
        while stack:
            vertex = stack.pop()
            for predecessor in reverse.successors(vertex):
                if not assigned[predecessor]:
                    assigned[predecessor] = True
                    members.append(predecessor)
                    stack.append(predecessor)
        components.append(sorted(members))
    return components


def _component_key(component: Sequence[int]) -> tuple[int, int, int]:
    if list(component) == [0]:
        return (0, 0, 0)
    return (1, -len(component), min(component))


def sort_components(components: Iterable[Sequence[int]]) -> list[list[int]]:
    """Order components: the lone first vertex first, then larger, then lowest vertex."""
    return [list(component) for component in sorted(components, key=_component_key)]


def format_components(components: Iterable[Sequence[int]]) -> str:
    """Render one component per line with 1-based vertices."""
    return "\n".join(
        "".join(f"{vertex + 1} " for vertex in component) for component in components
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = iter(sys.argv[1:] if argv is None else argv)
    input_path = output_path = None
    for arg in args:
        if arg == "-h":
            sys.stdout.write(_HELP)
            return 0
        if arg in ("-f", "-o"):
            value = next(args, None)
            if value is None:
                break
            if arg == "-f":
                input_path = value
            else:
                output_path = value

    if input_path is None:
        print(
            "Erro: Arquivo de entrada nao especificado. Use -f <arquivo>.",
            file=sys.stderr,
        )
        return 1

    with contextlib.ExitStack() as stack:
        if output_path is None:
            out = sys.stdout
        else:
            try:
                out = stack.enter_context(open(output_path, "w"))
            except OSError as exc:
                print(f"Erro ao abrir arquivo de saida: {exc.strerror}", file=sys.stderr)
                return 1
        try:
            graph = load_directed_graph(input_path)
        except OSError as exc:
            print(f"Erro ao abrir arquivo: {exc.strerror}", file=sys.stderr)
            return 1
        except GraphFormatError as exc:
            print(f"Erro: {exc}", file=sys.stderr)
            return 1
        components = sort_components(strongly_connected_components(graph))
        out.write(format_components(components))
    return 0


if __name__ == "__main__":
    sys.exit(main())