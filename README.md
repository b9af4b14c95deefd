# dsalgo

A compact collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.arrays` | `array_insert`, `array_delete`, `format_sequence` |
| `dsalgo.sorting` | `insert`, `insertion_sort`, `counting_sort`, `merge`, `merge_sort`, `radix_sort` (all but `merge` sort in place) |
| `dsalgo.linked_list` | `Node`: a singly linked list with a sentinel head node |
| `dsalgo.stack` | `Stack` with a fixed capacity, plus the RPN helpers `plus`, `minus`, `multiplies`, `divides`, `negate` |
| `dsalgo.ring_queue` | Bounded `Queue` and `Deque`, which adds `back`, `enqueue_front`, `dequeue_back` and `clear` |
| `dsalgo.binary_tree` | `BinaryTree` nodes that know their parent, `make_binary_tree`, `bst_insert`, `bst_search`, `bst_min`, `bst_max`, `height`, `df_traversal`, `bf_traversal`, `format_binary_tree`, `print_binary_tree` |
| `dsalgo.complete_tree` | `CompleteTree`: a complete binary tree view over a list |
| `dsalgo.heap` | `heap_sift_up`, `heap_sift_down`, `build_heap`, `heap_sort`, `priority_enqueue`, `priority_dequeue` |
| `dsalgo.hashtable` | `HashTable` with separate chaining and a caller-supplied hash function |
| `dsalgo.graph` | `Hop`, `graph_to_sparse`, `graph_to_dot`, `percent_encode`, `print_graph`, and the sample graphs `TEST_GRAPH` and `SPARSE_TEST_GRAPH` |
| `dsalgo.shortest_paths` | `relax`, `bellman_ford`, `dijkstra`, `dijkstra_priority`, `floyd_warshall`, `decode`, `sparse_bellman_ford`, `sparse_dijkstra` |
| `dsalgo.lsh` | Locality-sensitive hashing for cosine distance: `LSHFamily`, `LSHTable`, `LSHResult`, `naive_retrieve`, `benchmark` |
| `dsalgo.demos` | Short walkthroughs of everything above, run with `run_demo` |

A few behaviours worth knowing:

- Bounded containers (`Stack`, `Queue`, `Deque`) raise `IndexError` when pushed
  past capacity or read while empty; `Stack.pop` and `Queue.dequeue` return the
  removed value.
- `divides` truncates towards zero on integers and raises `ZeroDivisionError`
  on a zero divisor.
- `bst_search` returns the node holding the value, or else the node with the
  largest value below it, or `None`.
- The heap functions take a `compare(a, b)` that is true when `a` belongs above
  `b`; the default `operator.gt` gives a max-heap, so `heap_sort` sorts
  ascending.
- `HashTable.get` returns `None` for a missing key; `HashTable.report` returns
  a text summary of the slot sizes.
- Shortest-path results are lists of `Hop(weight, vertex)` giving the path
  length and the predecessor (`-1` for the source and unreachable vertices).
  `bellman_ford` and `sparse_bellman_ford` raise `ValueError` when they detect
  a negative cycle.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A reverse Polish calculation on a bounded stack:

```python
from dsalgo.stack import Stack, plus, multiplies

stack = Stack(100)
stack.push(2)
stack.push(2)
stack.push(3)
plus(stack)
multiplies(stack)
print(stack.top())  # 10
```

A linked list with a sentinel head node:

```python
from dsalgo.linked_list import Node

head = Node()
for i in range(5):
    head.insert_after(i)
print(head.to_list())  # [4, 3, 2, 1, 0]
```

Building a binary search tree:

```python
from dsalgo.binary_tree import bst_insert, bst_min, bst_max, print_binary_tree

tree = None
for x in (12, 5, 18, 2, 9, 15, 19, 13, 17):
    tree = bst_insert(tree, x)

print_binary_tree(tree)
print(bst_min(tree).value, bst_max(tree).value)  # 2 19
```

A hash table with a caller-supplied hash function:

```python
from dsalgo.hashtable import HashTable

table = HashTable(31, lambda key: sum(map(ord, key)))
table.insert("Apple", 0)
table.insert("Banana", 1)
print(table.get("Banana"))  # 1
print("Cherries" in table)  # False
```

Shortest paths on the bundled sample graph:

```python
from dsalgo.graph import TEST_GRAPH
from dsalgo.shortest_paths import dijkstra, decode

table = dijkstra(TEST_GRAPH, 2)
print(decode(table, 7))  # [2, 5, 6, 7]
```

## Command-line tools

List the bundled walkthroughs, or run some of them by name:

```
dsalgo-demo
dsalgo-demo --list
dsalgo-demo stack heap shortest_paths_fw_decode
```

Run the locality-sensitive hashing benchmark, which compares LSH tables of
different shapes against a linear scan over random unit vectors:

```
dsalgo-lsh
dsalgo-lsh --dataset-size 2000 --queryset-size 200 --seed 1
```

## What it does not do

Graphs are only written out as DOT text (`graph_to_dot`, `print_graph`); with
`as_url=True`, `print_graph` prints that text percent-encoded after a `#`, ready
to append to the address of a DOT viewer of your choice. The package draws no
pictures itself and opens no browser.