# algokit

algokit is a set of plain-Python implementations of classic algorithms. It has
no dependencies; each algorithm is a function or a small class that you call
from your own code.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `algokit.binary_tree` | `Node` and `HDPair`; `build_tree` (pre-order values, `-1` for a missing child) and `level_order_build` (root, then a pair of child values for each node in level order); `level_order_levels` and `level_order_print`; `height`, `diameter` and the single-pass `opt_diameter`; `replace_with_sum` |
| `algokit.graph` | `Graph`, an adjacency-list graph over vertices `0..v-1` with `add_edge`, `bfs` and `dfs`, both returning the visiting order as a list |
| `algokit.boggle` | `TrieNode`, `Trie` and `find_words`, which returns the set of dictionary words that can be traced on a letter board moving in eight directions without reusing a cell |
| `algokit.grid` | `largest_island`, the size of the largest 4-connected group of ones, and `shortest_path`, the minimum sum of cell costs from the top-left to the bottom-right cell, start cell included |
| `algokit.searching` | `min_pair`, the pair `(x, y)` from two sequences with the smallest difference, and `square_root`, a square root truncated to a chosen number of decimal places |
| `algokit.sorting` | `inversion_count` (merge-sort based; equal values count as an inversion), `partition` (in place, last element as pivot) and `quickselect` (k-th smallest, counting from 0) |
| `algokit.queues` | `max_subarray_k`, the maximum of every window of `k` values, and `simplify_path`, which normalises a slash-separated path |

Invalid input raises an exception: `ValueError` for incomplete tree input,
empty sequences or grids, negative square-root arguments and bad window sizes;
`IndexError` for out-of-range graph vertices and an out-of-range `k` in
`quickselect`.

## Examples

### Trees

```python
from algokit.binary_tree import level_order_build, level_order_levels, opt_diameter

root = level_order_build([1, 2, 3, 4, 5, -1, 6, -1, -1, 7, -1, -1, -1, -1, -1])
print(level_order_levels(root))   # [[1], [2, 3], [4, 5, 6], [7]]
print(opt_diameter(root).diameter)
```

`level_order_print(root, out)` writes each level on its own line, every value
followed by a space, to `out`, or to standard output when `out` is omitted.

### Graphs

```python
from algokit.graph import Graph

g = Graph(7)
for a, b in [(0, 1), (1, 2), (2, 3), (3, 5), (5, 6), (4, 5), (0, 4), (3, 4)]:
    g.add_edge(a, b)

print(g.bfs(1))
print(g.dfs(1))
```

Pass `undirected=False` to `add_edge` for a one-way edge.

### Word search

```python
from algokit.boggle import find_words

board = ["SERT", "UNKS", "TCAT"]
words = ["SNAKE", "FOR", "QUEZ", "SNACK", "SNACKS", "GO", "TUNES", "CAT"]
print(sorted(find_words(board, words)))
```

### Grids

```python
from algokit.grid import largest_island, shortest_path

print(largest_island([[1, 0, 0, 1, 0],
                      [1, 0, 1, 0, 0],
                      [1, 1, 1, 0, 0],
                      [1, 0, 1, 1, 1],
                      [1, 0, 1, 1, 0]]))
print(shortest_path([[1, 3, 1], [1, 5, 1], [4, 2, 1]]))
```

### Searching, sorting and queues

```python
from algokit.searching import min_pair, square_root
from algokit.sorting import inversion_count, quickselect
from algokit.queues import max_subarray_k, simplify_path

print(min_pair([-1, 5, 10, 20, 3], [26, 134, 135, 15, 17]))
print(square_root(10, 3))
print(inversion_count([10, 5, 2, 0, 7, 6, 4]))
print(quickselect([10, 5, 2, 0, 7, 6, 4], 2))
print(max_subarray_k([1, 2, 3, 1, 4, 5, 2, 3, 5], 3))
print(simplify_path("/../x/y/../z/././w/a///../..//./"))
```

## What it does not do

algokit is a library only. It has no command-line program and reads nothing
from standard input: tree builders take any iterable of integers, and every
function returns its result instead of printing it, apart from
`level_order_print`.