"""Small demonstration programs for the data structures and algorithms.

Each demo writes a short walk-through to a text stream. Run one with
:func:`run_demo` or from the command line through :func:`main`.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional, TextIO

from .arrays import array_delete, array_insert, format_sequence
from .binary_tree import (
    bf_traversal,
    bst_insert,
    bst_max,
    bst_min,
    bst_search,
    df_traversal,
    format_binary_tree,
    make_binary_tree,
)
from .complete_tree import CompleteTree
from .graph import SPARSE_TEST_GRAPH, TEST_GRAPH, graph_to_dot
from .hashtable import HashTable
from .heap import build_heap, heap_sort, priority_dequeue, priority_enqueue
from .linked_list import Node
from .ring_queue import Deque, Queue
from .shortest_paths import (
    bellman_ford,
    decode,
    dijkstra,
    dijkstra_priority,
    floyd_warshall,
    sparse_bellman_ford,
    sparse_dijkstra,
)
from .sorting import insertion_sort, merge_sort, radix_sort
from .stack import Stack, multiplies, plus

Demo = Callable[[TextIO], None]

BST_VALUES = (12, 5, 18, 2, 9, 15, 19, 13, 17)
BST_QUERIES = (0, 5, 6, 18, 19, 20)
UNSORTED = (1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20)
FRUITS = (
    "Apple", "Apricots", "Avocado", "Banana", "Blackberries", "Blackcurrant",
    "Blueberries", "Breadfruit", "Cantaloupe", "Carambola", "Cherimoya",
    "Cherries", "Clementine",
)
HASH_CHAINS = 31


def _num(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _write_tree(tree: Any, out: TextIO) -> None:
    rendering = format_binary_tree(tree)
    if rendering:
        print(rendering, file=out)


def _sample_tree() -> Any:
    return make_binary_tree(
        1.0,
        make_binary_tree(
            2.0,
            make_binary_tree(4.0),
            make_binary_tree(5.0, None, make_binary_tree(8.0)),
        ),
        make_binary_tree(3.0, make_binary_tree(6.0), make_binary_tree(7.0)),
    )


def _visit_printer(out: TextIO) -> Callable[[Any], None]:
    def action(tree: Any) -> None:
        print(f"Visited subtree: {_num(tree.value)}", file=out)

    return action


def _demo_array(out: TextIO) -> None:
    items: list[float] = []
    print(format_sequence(items, "Array before inserting any elment = "), file=out)
    for i in range(5):
        array_insert(items, 0, float(i))
        print(format_sequence(items, f"Array after inserting {i} at position 0 = "), file=out)


def _demo_array_delete(out: TextIO) -> None:
    items = [0.0, 1.0, 2.0, 3.0, 4.0]
    print(format_sequence(items, "Initially A = "), file=out)
    while items:
        array_delete(items, 0)
        print(format_sequence(items, "After deleting the element at position 0: A = "), file=out)


def _demo_insertion_sort(out: TextIO) -> None:
    items = [3.0, 1.0, 0.0, 18.0, 7.0]
    print(format_sequence(items, "Before sorting: "), file=out)
    insertion_sort(items)
    print(format_sequence(items, "After sorting: "), file=out)


def _demo_merge_sort(out: TextIO) -> None:
    items = [float(x) for x in UNSORTED]
    print(format_sequence(items, "Before merge sort: "), file=out)
    merge_sort(items)
    print(format_sequence(items, "After merge sort: "), file=out)


def _demo_radix_sort(out: TextIO) -> None:
    items = list(UNSORTED)
    print(format_sequence(items, "Before sorting: "), file=out)
    radix_sort(items)
    print(format_sequence(items, "After sorting: "), file=out)


def _demo_list(out: TextIO) -> None:
    head = Node()
    for i in range(10):
        head.insert_after(float(i))
    print(format_sequence(head.to_list()), file=out)


def _demo_list_enhanced(out: TextIO) -> None:
    head = Node()
    last = head
    for i in range(10):
        last = last.insert_after(float(i))
        print(format_sequence(head.to_list()), file=out)
    for _ in range(10):
        head.delete_after()
        print(format_sequence(head.to_list()), file=out)


def _demo_list_iterator(out: TextIO) -> None:
    head = Node()
    for i in range(10):
        head.insert_after(float(i))
    line = "".join(f"{_num(x)} " for x in head)
    print(line, file=out)
    print(line, file=out)
    print(format_sequence(head, "List content: "), file=out)


def _demo_stack(out: TextIO) -> None:
    stack = Stack(10)
    pushed = []
    for i in range(5):
        stack.push(i)
        pushed.append(str(i))
    print("Pushing " + " ".join(pushed), file=out)
    popped = []
    while not stack.is_empty():
        popped.append(_num(stack.pop()))
    print("Popping " + " ".join(popped), file=out)


def _demo_stack_enhanced(out: TextIO) -> None:
    stack = Stack(100)
    stack << 1 << 2 << 3
    stack.clear()
    stack << 4 << 5 << 6
    content = []
    while not stack.is_empty():
        content.append(_num(stack.pop()))
    print("Stack content: " + " ".join(content), file=out)


def _demo_stack_rpn(out: TextIO) -> None:
    stack = Stack(100)
    for value in (2, 2, 3):
        stack.push(value)
    plus(stack)
    multiplies(stack)
    print(f"2 2 3 + * = {_num(stack.top())}", file=out)


def _demo_queue(out: TextIO) -> None:
    queue = Queue(5)
    for _ in range(3):
        for i in range(3):
            queue.enqueue(i)
        print("Enqueued " + " ".join(str(i) for i in range(3)), file=out)
        dequeued = [_num(queue.dequeue()) for _ in range(3)]
        print("Dequeued " + " ".join(dequeued), file=out)


def _demo_queue_enhanced(out: TextIO) -> None:
    queue = Deque(5)
    for _ in range(3):
        for i in range(3):
            queue.enqueue_front(i)
        print("Enqueued front " + " ".join(str(i) for i in range(3)), file=out)
        print("Dequeued front " + " ".join(_num(queue.dequeue()) for _ in range(3)), file=out)
        for i in range(3):
            queue.enqueue(i)
        print("Enqueued back " + " ".join(str(i) for i in range(3)), file=out)
        print("Dequeued back " + " ".join(_num(queue.dequeue_back()) for _ in range(3)), file=out)


def _demo_binary_search_tree(out: TextIO) -> None:
    tree = None
    for x in BST_VALUES:
        tree = bst_insert(tree, x)
        print(f"Tree after inserting {x}:", file=out)
        _write_tree(tree, out)
        print(file=out)
    for x in BST_QUERIES:
        result = bst_search(tree, x)
        found = _num(result.value) if result else "none"
        print(f"The largest element not exceeding {x} is {found}", file=out)


def _demo_binary_search_tree_enhanced(out: TextIO) -> None:
    tree = None
    for x in BST_VALUES:
        tree = bst_insert(tree, x)
    print("Tree:", file=out)
    _write_tree(tree, out)
    print(file=out)
    print(f"The smallest element is {_num(bst_min(tree).value)}", file=out)
    print(f"The largest element is {_num(bst_max(tree).value)}", file=out)


def _demo_binary_tree_complete(out: TextIO) -> None:
    storage = [float(x) for x in range(1, 9)]
    tree = CompleteTree(storage)
    print("Tree:", file=out)
    _write_tree(tree, out)
    action = _visit_printer(out)
    print("\nDepth-first traversal (DFT)", file=out)
    df_traversal(tree, action)
    print("\nBreadth-first traversal (BFT)", file=out)
    bf_traversal(tree, action)


def _demo_binary_tree_enhanced(out: TextIO) -> None:
    tree = _sample_tree()
    print("Tree:", file=out)
    _write_tree(tree, out)

    def action(node: Any) -> None:
        parent = node.parent
        if parent is not None:
            print(f"The parent of {_num(node.value)} is {_num(parent.value)}", file=out)
        else:
            print(f"Node {_num(node.value)} has no parent", file=out)

    df_traversal(tree, action)


def _demo_binary_tree_traversal(out: TextIO) -> None:
    tree = _sample_tree()
    print("Tree:", file=out)
    _write_tree(tree, out)
    action = _visit_printer(out)
    print("\nDepth-first traversal (DFT)", file=out)
    df_traversal(tree, action)
    print("\nBreadth-first traversal (BFT)", file=out)
    bf_traversal(tree, action)


def _demo_heap(out: TextIO) -> None:
    storage = [float(x) for x in UNSORTED]
    print(format_sequence(storage, "Before building the heap: "), file=out)
    _write_tree(CompleteTree(storage), out)
    build_heap(storage)
    print(format_sequence(storage, "\nAfter building the heap: "), file=out)
    _write_tree(CompleteTree(storage), out)
    heap_sort(storage)
    print(format_sequence(storage, "\nArray after heapsort: "), file=out)


def _demo_priority_queue(out: TextIO) -> None:
    queue: list[int] = []

    def enqueue(x: int) -> None:
        priority_enqueue(queue, x)
        print(f"Enqueued {x} " + format_sequence(queue), file=out)

    def dequeue() -> None:
        top = priority_dequeue(queue)
        print(f"Dequeued {top} " + format_sequence(queue), file=out)

    for x in (15, 9, 3, 23):
        enqueue(x)
    dequeue()
    dequeue()
    for x in (2, 1):
        enqueue(x)
    while queue:
        dequeue()


def _fruit_hash(text: str) -> int:
    return sum(ord(c) for c in text) % HASH_CHAINS


def _demo_hash(out: TextIO) -> None:
    table = HashTable(HASH_CHAINS, _fruit_hash)
    for value, key in enumerate(FRUITS):
        table.insert(key, value)
    print(table.report(), file=out)
    print(f"'Carambola' is the {table.get('Carambola')}-th fruit", file=out)
    print(f"Retrieving 'Beans' results in the value {table.get('Beans')}", file=out)


def _write_graph(graph: Any, out: TextIO) -> None:
    print(graph_to_dot(graph), file=out)


def _demo_graph(out: TextIO) -> None:
    _write_graph(TEST_GRAPH, out)
    _write_graph(SPARSE_TEST_GRAPH, out)


def _demo_shortest_paths_bf(out: TextIO) -> None:
    _write_graph(TEST_GRAPH, out)
    source = 2
    print(f"Bellman-Ford SSSP from source {source}", file=out)
    try:
        table = bellman_ford(TEST_GRAPH, source)
    except ValueError:
        print("The graph has a negative cycle.", file=out)
    else:
        print(format_sequence(table), file=out)
    print(file=out)


def _demo_shortest_paths_dijkstra(out: TextIO) -> None:
    _write_graph(TEST_GRAPH, out)
    source = 2
    print(f"Dijkstra from source {source}", file=out)
    print(format_sequence(dijkstra(TEST_GRAPH, source)), file=out)
    print(file=out)
    print(f"Dijkstra priority from source {source}", file=out)
    print(format_sequence(dijkstra_priority(TEST_GRAPH, source)), file=out)
    print(file=out)


def _demo_shortest_paths_fw(out: TextIO) -> None:
    _write_graph(TEST_GRAPH, out)
    print("Floyd-Warshall all pairs", file=out)
    for row in floyd_warshall(TEST_GRAPH):
        print(format_sequence(row), file=out)
    print(file=out)


def _demo_shortest_paths_fw_decode(out: TextIO) -> None:
    _write_graph(TEST_GRAPH, out)
    print("Floyd-Warshall ASPS", file=out)
    table = floyd_warshall(TEST_GRAPH)
    for row in table:
        print(format_sequence(row), file=out)
    print(file=out)
    for u, row in enumerate(table):
        for v, hop in enumerate(row):
            path = decode(row, v)
            if path:
                print(
                    f"Shortest path {u} ~~> {v} (weight {_num(hop.weight)}): "
                    + format_sequence(path),
                    file=out,
                )


def _demo_shortest_paths_sparse(out: TextIO) -> None:
    _write_graph(SPARSE_TEST_GRAPH, out)
    source = 2
    print(f"Bellman-Ford from source {source}", file=out)
    try:
        print(format_sequence(sparse_bellman_ford(SPARSE_TEST_GRAPH, source)), file=out)
    except ValueError:
        print("The graph has a negative cycle.", file=out)
    print(file=out)
    print(f"Dijkstra from source {source}", file=out)
    print(format_sequence(sparse_dijkstra(SPARSE_TEST_GRAPH, source)), file=out)
    print(file=out)


DEMOS: dict[str, Demo] = {
    "array": _demo_array,
    "array_delete": _demo_array_delete,
    "insertion_sort": _demo_insertion_sort,
    "merge_sort": _demo_merge_sort,
    "radix_sort": _demo_radix_sort,
    "list": _demo_list,
    "list_enhanced": _demo_list_enhanced,
    "list_iterator": _demo_list_iterator,
    "stack": _demo_stack,
    "stack_enhanced": _demo_stack_enhanced,
    "stack_rpn": _demo_stack_rpn,
    "queue": _demo_queue,
    "queue_enhanced": _demo_queue_enhanced,
    "binary_search_tree": _demo_binary_search_tree,
    "binary_search_tree_enhanced": _demo_binary_search_tree_enhanced,
    "binary_tree_complete": _demo_binary_tree_complete,
    "binary_tree_enhanced": _demo_binary_tree_enhanced,
    "binary_tree_traversal": _demo_binary_tree_traversal,
    "heap": _demo_heap,
    "priority_queue": _demo_priority_queue,
    "hash": _demo_hash,
    "graph": _demo_graph,
    "shortest_paths_bf": _demo_shortest_paths_bf,
    "shortest_paths_dijkstra": _demo_shortest_paths_dijkstra,
    "shortest_paths_fw": _demo_shortest_paths_fw,
    "shortest_paths_fw_decode": _demo_shortest_paths_fw_decode,
    "shortest_paths_sparse": _demo_shortest_paths_sparse,
}


def run_demo(name: str, out: Optional[TextIO] = None) -> None:
    """Run the demo called ``name``, writing to ``out`` (standard output by default)."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo {name!r}") from None
    demo(sys.stdout if out is None else out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demos in turn, or list them."""
    parser = argparse.ArgumentParser(description="Run data structure demos.")
    parser.add_argument("names", nargs="*", metavar="DEMO", help="demos to run")
    parser.add_argument("--list", action="store_true", help="list the available demos")
    args = parser.parse_args(argv)

    unknown = [name for name in args.names if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    if args.list or not args.names:
        for name in DEMOS:
            print(name)
        return 0

    for name in args.names:
        run_demo(name)
    return 0