# adjgraph

A small weighted graph of positive integer vertices, stored as an adjacency
matrix (`adjgraph.graph.Graph`). A weight of zero in the matrix means "no
edge". The package also has a scripted demo (`adjgraph.demo`) that exercises
the graph with random data and prints a transcript.

## Installing

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install ".[test]"
```

## Using the graph

```python
import sys
from adjgraph.graph import Graph

g = Graph()
g.add_vertex(10, 0, 0)        # the first vertex of an empty graph needs no neighbour
g.add_vertex(20, 10, 15)      # vertex 20 joined to 10 with weight 15
g.add_vertex(30, 20, 25)
g.add_edge(10, 30, 5)

g.vertex_count                # 3  (property; len(g) gives the same)
g.edge_count                  # 3  (property)
g.vertices                    # [10, 20, 30], in insertion order
20 in g                       # True
g.is_connected(10, 30)        # True

print(g.format_matrix())      # one row per line, each entry left-aligned in 5 columns
g.print_matrix()              # writes to sys.stdout
g.print_matrix(sys.stderr)    # or to any text stream

g.breadth_first_search(10)    # [10, 20, 30]
g.depth_first_search(10)      # [10, 20, 30]

g.delete_edge(10, 30)
g.remove_vertex(30)
g.clear()
g.is_empty()                  # True
```

### Rules the graph enforces

Mutating methods return `True` when they changed the graph and `False` when
they refused to.

- `add_vertex(new_vertex, old_vertex, weight)` refuses a duplicate vertex, a
  vertex id that is not positive, and, in a non-empty graph, an
  `old_vertex` that is not present. Once the vertex is accepted it is kept
  even if the edge to `old_vertex` is then rejected (for example a
  non-positive weight).
- `add_edge(vertex_one, vertex_two, weight)` sets both matrix entries. It
  refuses missing vertices, an edge from a vertex to itself, an existing
  edge, and a non-positive weight.
- `delete_edge(vertex_one, vertex_two)` clears only the entry from
  `vertex_one` to `vertex_two`, and only when the row of `vertex_one` and
  the column of `vertex_two` each hold more than one edge.
- `remove_vertex(value)` removes the vertex and its row and column. When the
  vertex had two or more edges, each of its neighbours is first joined to
  the first vertex of the graph with weight 1.
- `breadth_first_search(start)` and `depth_first_search(start)` return the
  vertices reachable from `start` in visiting order, and raise `KeyError`
  if `start` is not in the graph.

`edge_count` is a running tally kept by these operations, not a recount of
the matrix.

## Demo

The demo runs two rounds: one on a fixed set of vertex ids and weights, one
on 30 random values below 1000. Each round tries every operation, including
ones that are meant to fail, and reports the result.

```
adjgraph-demo
adjgraph-demo --seed 42
```

`--seed` makes a run repeatable. From code, call
`adjgraph.demo.run_demo(rng, out)`, where `rng` is a `random.Random` and
`out` is a text stream; both default to a fresh generator and `sys.stdout`.