# grafoalg

Classic graph algorithms over small graphs read from text files, each usable
as a library function or as a command-line tool.

## Installation

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Input format

Every tool reads a whitespace-separated file whose first two numbers are the
vertex count `n` and the edge count `m`, followed by `m` edges. Vertices are
numbered from 1 in files and from 0 in the library.

Weighted graphs (Dijkstra, Kruskal, Prim, edge check) are undirected and list
each edge as `source destination weight`:

    4 5
    1 2 3
    1 3 1
    2 3 7
    2 4 2
    3 4 5

Directed graphs (Kosaraju) list each edge as `source destination`.

Malformed input (a token that is not an integer, a missing number, a negative
count, or a vertex outside `1..n`) raises `grafoalg.graph.GraphFormatError`;
the tools report it on standard error and exit with status 1.

## Command-line tools

Shortest distances from a start vertex (`-i`, default 1), printed as
`vertex:distance` pairs; unreachable vertices print as `-1`:

    grafoalg-dijkstra -f graph.txt -i 1

Strongly connected components, one per line. The component made of vertex 1
alone comes first, then larger components before smaller ones, ties broken by
the lowest vertex:

    grafoalg-kosaraju -f digraph.txt

Minimum spanning tree cost, or its edges as `(u,v)` pairs with `-s`:

    grafoalg-kruskal -f graph.txt
    grafoalg-kruskal -f graph.txt -s

    grafoalg-prim -f graph.txt -i 1
    grafoalg-prim -f graph.txt -s

Kruskal builds a spanning forest over the whole graph; it accepts `-i` but
only warns if the vertex is out of range. Prim grows the tree from the start
vertex (`-i`, default 1) and covers only that vertex's component.

All four tools accept `-h` for help and `-o <file>` to write the result to a
file.

Check that the vertex pairs read from standard input are all edges of a
graph. At most `m` pairs are checked; the first pair that is not an edge is
reported and the exit status is 1:

    grafoalg-agm graph.txt < pairs.txt

## Library use

    from grafoalg.graph import load_weighted_graph
    from grafoalg.dijkstra import shortest_distances, format_distances
    from grafoalg.prim import prim, format_tree

    graph = load_weighted_graph("graph.txt")
    print(format_distances(shortest_distances(graph, 0)))
    tree = prim(graph, 0)
    print(tree.cost, format_tree(tree))

Graphs can also be built in code with `WeightedGraph` and `DirectedGraph`, or
parsed from strings with `parse_weighted_graph` and `parse_directed_graph`.

Other entry points:

- `grafoalg.kosaraju.strongly_connected_components`, `sort_components`,
  `format_components`
- `grafoalg.kruskal.minimum_spanning_tree`, `total_weight`, `format_tree`,
  `parse_edges`, `load_edges`, and the `Edge` and `DisjointSet` classes
- `grafoalg.agm.find_missing_edge`, `parse_pairs`

## Limits

Edge weights are plain integers and negative weights are not rejected;
shortest distances are only meaningful for non-negative weights. Results are
not reconstructed as paths: Dijkstra reports distances only.