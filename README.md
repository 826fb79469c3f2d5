# dsalgo

Classic data structures and algorithms in plain Python, with no runtime
dependencies. Each structure is small and readable, and two command-line
programs show them at work.

## What is inside

- `dsalgo.formatting` – `format_value` renders a value as text (floats with
  six significant digits, so `1.0` shows as `1`) and `format_sequence`
  renders items as `prefix[a, b, c]`.
- `dsalgo.arrays` – `array_insert(items, index, value)` and
  `array_delete(items, index)`; both raise `IndexError` for a position out of
  range (insertion allows `index == len(items)` to append).
- `dsalgo.sorting` – in-place `insertion_sort`, stable `merge_sort` (optionally
  on a slice `start:stop`), `merge` of two sorted iterables, and
  `counting_sort(items, k)` for integers in `range(k)` (a value outside that
  range raises `ValueError`). `insert(items, i)` moves one element into the
  sorted prefix before it.
- `dsalgo.linked_list` – a singly linked `Node` whose head acts as a sentinel:
  `insert_after`, `find_predecessor`, `delete_after`, `to_list`, and
  iteration over the values after the head.
- `dsalgo.stack` – a fixed-capacity `Stack` with `push`, `pop` (returns the
  value), `top`, `is_empty`, `is_full`, `clear` and `len()`. Pushing onto a
  full stack raises `OverflowError`; reading an empty one raises `IndexError`.
  `stack << value` pushes, and `stack << plus` or `stack << multiplies`
  applies an operation to the two top values, reverse-Polish style.
- `dsalgo.ring_queue` – a ring-buffer `Queue` (`enqueue`, `dequeue`, `front`,
  `is_empty`, `is_full`) and `Deque`, which adds `back`, `enqueue_front`,
  `dequeue_back` and `clear`.
- `dsalgo.binary_tree` – linked `BinaryTree` nodes (built with
  `make_binary_tree`) that keep a `parent` link, and `CompleteBinaryTree`, a
  view of a list as a complete binary tree with `value`, `parent`, `left`,
  `right` and `subtree`; an empty subtree is falsy.
- `dsalgo.tree_print` – `format_binary_tree` and `print_binary_tree` draw
  either kind of tree as text.
- `dsalgo.traversal` – `height` (-1 for an empty tree), and the generators
  `depth_first` (in order) and `breadth_first`.
- `dsalgo.bst` – `bst_insert` (returns the root; equal values go left),
  `bst_search` (the node with the largest value not exceeding the key, or
  `None`), `bst_min` and `bst_max`.
- `dsalgo.heap` – `heap_sift_up`, `heap_sift_down`, `build_heap`,
  `heap_sort`, `priority_enqueue` and `priority_dequeue` over a plain list.
  The comparison defaults to `operator.gt` (a max-heap; `heap_sort` then
  sorts ascending); pass `operator.lt` for a min-heap.
- `dsalgo.hash_table` – a chained `HashTable(num_chains, hash_function=hash)`
  with `insert`, `get` (returns `None` for a missing key), `table[key]`
  (raises `KeyError`), `key in table` and `format_stats`; and
  `division_hash(text, m)`, which hashes a string as a base-256 number modulo
  `m` in 32-bit arithmetic.
- `dsalgo.graph` – graphs as adjacency matrices (with `math.inf` for a
  missing edge) or adjacency lists of `Hop(weight, vertex)`, the sample graphs
  `TEST_GRAPH` and `SPARSE_TEST_GRAPH`, `dense_to_sparse`, `graph_to_dot`,
  `format_graph` and `print_graph`. With `as_url=True` the DOT text is
  percent-encoded byte by byte and appended to the given `prefix`.
- `dsalgo.shortest_paths` – `bellman_ford` and `bellman_ford_sparse` (both
  return `distances` and `has_negative_cycle`), `dijkstra`,
  `dijkstra_priority`, `dijkstra_sparse`, `floyd_warshall`, the edge
  relaxations `relax` and `relax_sparse`, and `decode` to recover a path from
  a row of distances and predecessors. An out-of-range source raises
  `IndexError`.
- `dsalgo.lsh` – locality-sensitive hashing for cosine distance:
  `sample_unit_vector`, `sample_dataset`, `cosine_distance`,
  `sample_lsh_function`, `sample_amplified_lsh_function`, `LSHFamily`,
  `LSHTable` (with `insert` and `get(query, m, tau)` returning a
  `SearchResult`), `naive_retrieve` for a linear scan and `benchmark`.
- `dsalgo.demo` – walkthroughs of the structures above; `run_demo(name)`
  returns the text a demo prints.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sorting in place:

```python
from dsalgo.sorting import insertion_sort

values = [3, 1, 0, 18, 7]
insertion_sort(values)
print(values)  # [0, 1, 3, 7, 18]
```

A binary search tree:

```python
from dsalgo.bst import bst_insert, bst_min, bst_max

tree = None
for x in (12, 5, 18, 2, 9, 15, 19, 13, 17):
    tree = bst_insert(tree, x)

print(bst_min(tree).value, bst_max(tree).value)  # 2 19
```

Reverse-Polish arithmetic on a stack:

```python
from dsalgo.stack import Stack, plus, multiplies

stack = Stack(100)
stack << 2 << 2 << 3 << plus << multiplies
print(stack.top())  # 10
```

Shortest paths on an adjacency matrix:

```python
from math import inf
from dsalgo.shortest_paths import dijkstra, decode

graph = [
    [inf, 1.0, 4.0],
    [inf, inf, 2.0],
    [inf, inf, inf],
]
dp = dijkstra(graph, 0)
print(decode(dp, 2))  # [0, 1, 2]
```

## Command-line programs

`dsalgo-demo` prints the walkthroughs. With no arguments it runs all of them;
name one or more to run only those, or pass `--list` to see the names:

```
dsalgo-demo --list
dsalgo-demo heap shortest_paths_fw_decode
```

`dsalgo-lsh` samples random unit vectors, builds LSH tables with a range of
table counts, comparison budgets and amplifications, and prints a table
comparing their distances, success rate and speed-up with a linear scan. The
options `--dataset-size` (default 10000), `--queries` (default 1000) and
`--seed` (default 0) set the sample sizes and the random seed:

```
dsalgo-lsh --dataset-size 2000 --queries 200 --seed 1
```