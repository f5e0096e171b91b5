# algokit

A small library of classic data structures and algorithms for graphs and
search tables. It is plain Python and has no third-party dependencies.

## What it contains

### Adjacency-matrix graphs: `algokit.mgraph`

`MGraph(kind, vertices)` holds a graph or a network as a square matrix.
`kind` is a `GraphKind`:

- `DG`: directed graph
- `DN`: directed network
- `UDG`: undirected graph
- `UDN`: undirected network

Vertices are single characters. Vertex positions are 1-based. In a plain
graph an absent arc is stored as `0`. In a network it is stored as
`INFINITY`, which is `math.inf`. The property `no_arc` gives the marker
that applies to a given graph.

Methods:

- `locate`
- `get_vertex`
- `put_vertex`
- `first_adjacent` and `next_adjacent`, which return a position or `None`
- `insert_vertex` and `delete_vertex`
- `insert_arc(tail, head, weight)` and `delete_arc`
- `weight(tail, head)`
- `clear`
- `dfs()` and `bfs()`, which are generators of vertices
- `render()`, which returns the matrix as text

`arc_count` tracks the number of arcs. A graph holds at most
`MAX_VERTEX_NUM` (20) vertices.

`read_mgraph(text)` builds a graph from a whitespace-separated description
in this order:

1. the kind (0 to 3)
2. the vertex count, the arc count and an info flag, which is ignored
3. the vertex characters
4. each arc as two vertex characters, followed by a weight when the kind is a network

### Minimum spanning trees: `algokit.mst`

Each function works on an `MGraph` network and returns a list of `Edge(tail, head, weight)`.

- `prim(graph, start)`: Prim's algorithm. Ties go to the earlier vertex.
- `prim_order(graph, start)`: Prim's algorithm, listing each vertex as it
  joins the tree. Ties go to the later vertex.
- `kruskal(graph)`: Kruskal's algorithm. A disconnected network yields a
  spanning forest.

### Shortest paths: `algokit.shortest_path`

- `dijkstra(graph, source)` returns `SingleSourcePaths`. It offers
  `distance(target)` and `path_to(target)`. Both take 1-based positions,
  and `path_to` returns `None` when the target is unreachable.
- `floyd(graph)` returns `AllPairsPaths`. It offers `distance(i, j)` and
  `path(i, j)`.
- `dijkstra_sets` and `floyd_sets` return the distances together with the
  set of positions that lie on each path.
- `format_dijkstra` and `format_floyd` render one report line per path.

### Search tables: `algokit.table`

`Element(key, weight)` is a table entry.

- `read_table(text, limit)` reads up to `limit` key/weight pairs.
- `format_element` and `format_key` format a single entry.
- `format_entries(elements, formatter)` lays entries out ten to a line.

### Binary sort trees: `algokit.bst`

`BinarySortTree(elements)` is an unbalanced search tree with unique keys.
It provides:

- `insert(element)` and `delete(key)`, each returning `True` or `False`
- `search(key)`, which returns the `Element` or `None`
- `inorder()`
- `in` and `len()`

### AVL trees: `algokit.avl`

`AVLTree(elements)` keeps itself height-balanced. It has the same
operations as `BinarySortTree`, plus:

- `depth()`
- `render()`, which draws the keys level by level in two-character columns

### B-trees: `algokit.btree`

`BTree(keys, order=3)` is a B-tree in which each node holds at most
`order - 1` keys.

- `search(key)` returns a `SearchResult(node, index, found)`.
- `insert` and `delete` return `True` or `False`.
- `inorder()` yields the keys in ascending order.
- `levels()` gives the keys of each node, level by level.
- `render_levels()` gives the same as text.

### Hash tables: `algokit.hashtable`

`HashTable()` stores integer keys with open addressing and linear probing.

- `search(key)` returns a `(Probe, slot)` pair.
- `insert(key)` raises the capacity to the next size in `HASH_SIZES`, and
  returns `False`, once a search meets as many collisions as half the
  capacity. The rebuild empties the table.
- `build_hash_table(keys)` fills a table and starts again from the first
  key after every rebuild.
- `keys()`, `render()`, `in` and `len()` are also available.

## Example

```python
from algokit.mgraph import MGraph, GraphKind
from algokit.mst import kruskal

g = MGraph(GraphKind.UDN, "ABCD")
g.insert_arc("A", "B", 4)
g.insert_arc("B", "C", 1)
g.insert_arc("A", "C", 2)
g.insert_arc("C", "D", 3)

print(g.render())
print(list(g.dfs()))
for edge in kruskal(g):
    print(edge)
```

```python
from algokit.btree import BTree

tree = BTree([45, 24, 53, 12, 37, 93], 3)
tree.delete(45)
print(list(tree.inorder()))
print(tree.render_levels())
```

## Errors

In `algokit.mgraph`:

- A vertex that is not in the graph raises `VertexNotFoundError`.
- Adding a vertex beyond the limit raises `GraphFullError`.
- A malformed description given to `read_mgraph` raises `GraphError`.
- `get_vertex` raises `IndexError` for a position out of range.
- `VertexNotFoundError` and `GraphFullError` both derive from `GraphError`.

The spanning-tree and shortest-path functions raise `GraphError` when they
are given a graph that is not a network. `prim` and `prim_order` also raise
it when the network is disconnected.

`HashTable` raises `HashTableExhaustedError` when no larger capacity is left.

`BTree` raises `ValueError` for an order below 3 and for duplicate keys
passed to its constructor.

## What it does not do

The package has:

- only the adjacency-matrix graph representation, with no adjacency-list,
  orthogonal-list or multilist forms
- no topological sorting
- no critical-path analysis of activity networks
- no command-line program

It is a library only.

## Running the tests

Install the package with its `test` extra, then run `pytest`.