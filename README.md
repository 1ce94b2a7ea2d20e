# graphalgo

A small toolkit with no dependencies for weighted undirected graphs whose
vertices are the integers `0 .. n-1`. It provides these tree algorithms in
`graphalgo.algorithms`:

- `bfs(graph, source, out=None)` returns the breadth-first search tree rooted
  at `source`.
- `dfs(graph, source, out=None)` returns the depth-first search forest. When
  the stack runs empty, the vertices that have not been reached are visited
  too.
- `dijkstra(graph, source)` returns the shortest-path tree. Each reached
  vertex is linked to its predecessor.
- `prim(graph, source, out=None)` returns a minimum spanning tree of the
  component that holds `source`.

Each algorithm returns a new `Graph` with the same number of vertices.

Two more modules hold the containers that the algorithms use:

- `graphalgo.containers` has a FIFO `Queue` and a LIFO `Stack`.
- `graphalgo.priority` has `PrioQ`, `PrimQ` and `Edge`. `PrioQ` is a priority
  queue kept in ascending key order and supports `decrease_key`. `PrimQ` is a
  `PrioQ` of `Edge(s, d, w)` values.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from graphalgo.graph import Graph
from graphalgo.algorithms import dijkstra, prim

g = Graph(5)
g.add_edge(0, 1, 2)
g.add_edge(0, 2, 5)
g.add_edge(1, 2, 1)
g.add_edge(1, 3, 2)
g.add_edge(3, 4, 1)

tree = dijkstra(g, 0)
print(tree.format())

mst = prim(g, 0)
print(mst.get(1).weight_of(2))  # 1
```

### Edges and vertices

Edges are undirected. `add_edge(a, b, w)` records `b` as a neighbour of `a`
and `a` as a neighbour of `b`, with weight `w`. The weight defaults to 1.
Adding an edge that already exists sets its weight again.

Errors:

- A vertex index outside the graph raises `IndexError`. This covers
  `add_edge`, `remove_edge`, `get` and the algorithms' `source`.
- Removing an edge that does not exist raises `ValueError`.

`Graph.get(index)` returns a `Vertex`. A `Vertex`:

- iterates over its `EdgeTo` entries, each with `vertex` and `weight`;
- supports `is_neighbor`, `weight_of`, `set_weight`, `add_neighbor` and
  `del_neighbor`;
- converts to a string of the form `v-1,w-1;v-3,w-4`.

`Graph.format()` returns a text description of the graph: a header, then one
line for each vertex that has neighbours. `Graph.print_graph(file=None)`
writes that description to the given stream, or to standard output.
`Graph.copy()` returns an independent copy.

### Output from the algorithms

`bfs`, `dfs` and `prim` write text to the stream passed as `out`, or to
standard output when `out` is not given:

- `bfs` writes a start message and then the resulting tree.
- `dfs` writes the resulting forest.
- `prim` writes a single `prim` line.

`dijkstra` writes nothing.

### Containers

On an empty container, `Queue.dequeue`, `Queue.peek`, `Stack.pop`,
`Stack.peek`, `PrioQ.dequeue` and `PrioQ.peek` raise `IndexError`.
`PrioQ.decrease_key` raises `IndexError` on an empty queue and `KeyError` for
an item that is not in the queue.

## Demo

```
graphalgo-demo
```

This builds two fixed sample graphs and prints each of these to standard
output:

- the first graph;
- its BFS tree;
- the Dijkstra tree of the second graph;
- the Prim tree of the second graph.

## What it does not do

- Graphs are built only in code. There is no reader for graph files and no
  command-line input of edges.
- The demo command takes no options beyond `--help`.
- Edge weights are integers. Dijkstra assumes they are non-negative.