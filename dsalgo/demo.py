"""Walk-throughs of the data structures and algorithms, printed as text."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .arrays import array_delete, array_insert
from .binary_tree import BinaryTree, CompleteBinaryTree, make_binary_tree
from .bst import bst_insert, bst_max, bst_min, bst_search
from .formatting import format_sequence, format_value
from .graph import SPARSE_TEST_GRAPH, TEST_GRAPH, format_graph
from .hash_table import HashTable
from .heap import build_heap, heap_sort, priority_dequeue, priority_enqueue
from .linked_list import Node
from .ring_queue import Deque, Queue
from .shortest_paths import (
    bellman_ford,
    bellman_ford_sparse,
    decode,
    dijkstra,
    dijkstra_priority,
    dijkstra_sparse,
    floyd_warshall,
)
from .sorting import counting_sort, insertion_sort, merge_sort
from .stack import Stack, multiplies, plus
from .traversal import breadth_first, depth_first
from .tree_print import format_binary_tree

Demo = Callable[[], Iterator[str]]

DEMOS: dict[str, Demo] = {}


def _demo(name: str) -> Callable[[Demo], Demo]:
    def register(function: Demo) -> Demo:
        DEMOS[name] = function
        return function

    return register


def _tree_lines(tree: Any) -> list[str]:
    text = format_binary_tree(tree)
    return text.split("\n") if text else []


def _joined(values: Sequence[Any]) -> str:
    return "".join(f" {format_value(v)}" for v in values)


@_demo("array")
def _array() -> Iterator[str]:
    items: list[float] = []
    yield format_sequence(items, "Array before inserting any elment = ")
    for i in range(5):
        array_insert(items, 0, float(i))
        yield format_sequence(items, f"Array after inserting {i} at position 0 = ")


@_demo("array_delete")
def _array_delete() -> Iterator[str]:
    items = [0.0, 1.0, 2.0, 3.0, 4.0]
    yield format_sequence(items, "Initially A = ")
    while items:
        array_delete(items, 0)
        yield format_sequence(items, "After deleting the element at position 0: A = ")


@_demo("insertion_sort")
def _insertion_sort() -> Iterator[str]:
    items = [3.0, 1.0, 0.0, 18.0, 7.0]
    yield format_sequence(items, "Before sorting: ")
    insertion_sort(items)
    yield format_sequence(items, "After sorting: ")


@_demo("merge_sort")
def _merge_sort() -> Iterator[str]:
    items = [float(x) for x in (1, 19, 2, 9, 12, 18, 4, 8, 5, 6,
                                17, 10, 11, 14, 16, 15, 7, 3, 13, 20)]
    yield format_sequence(items, "Before merge sort: ")
    merge_sort(items)
    yield format_sequence(items, "After merge sort: ")


@_demo("counting_sort")
def _counting_sort() -> Iterator[str]:
    items = [5, 3, 0, 1, 5, 3]
    yield format_sequence(items, "Before sorting: ")
    counting_sort(items, 6)
    yield format_sequence(items, "After sorting: ")


@_demo("list")
def _list() -> Iterator[str]:
    head = Node(0.0)
    for i in range(10):
        head.insert_after(float(i))
    yield format_sequence(head.to_list())


@_demo("list_enhanced")
def _list_enhanced() -> Iterator[str]:
    head = Node(0.0)
    last = head
    for i in range(10):
        last = last.insert_after(float(i))
        yield format_sequence(head.to_list())
    for _ in range(10):
        head.delete_after()
        yield format_sequence(head.to_list())


@_demo("list_iterator")
def _list_iterator() -> Iterator[str]:
    head = Node(0.0)
    for i in range(10):
        head.insert_after(float(i))
    yield "".join(f"{format_value(x)} " for x in head)
    yield "".join(f"{format_value(x)} " for x in head)
    yield format_sequence(head, "List content: ")


@_demo("stack")
def _stack() -> Iterator[str]:
    stack = Stack(10)
    pushed = []
    for i in range(5):
        stack.push(float(i))
        pushed.append(i)
    yield "Pushing" + _joined(pushed)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    yield "Popping" + _joined(popped)


@_demo("stack_enhanced")
def _stack_enhanced() -> Iterator[str]:
    stack = Stack(100)
    stack << 1 << 2 << 3
    stack.clear()
    stack << 4 << 5 << 6
    content = []
    while not stack.is_empty():
        content.append(stack.pop())
    yield "Stack content:" + _joined(content)


@_demo("stack_rpn")
def _stack_rpn() -> Iterator[str]:
    stack = Stack(100)
    stack.push(2)
    stack.push(2)
    stack.push(3)
    plus(stack)
    multiplies(stack)
    yield f"2 2 3 + * = {format_value(stack.top())}"
    stack << 2 << 2 << 3 << plus << multiplies
    yield f"2 2 3 + * = {format_value(stack.top())}"


@_demo("queue")
def _queue() -> Iterator[str]:
    queue = Queue(5)
    for _ in range(3):
        enqueued = []
        for i in range(3):
            queue.enqueue(float(i))
            enqueued.append(i)
        yield "Enqueued" + _joined(enqueued)
        yield "Dequeued" + _joined([queue.dequeue() for _ in range(3)])


@_demo("queue_enhanced")
def _queue_enhanced() -> Iterator[str]:
    queue = Deque(5)
    for _ in range(3):
        for i in range(3):
            queue.enqueue_front(float(i))
        yield "Enqueued front" + _joined(range(3))
        yield "Dequeued front" + _joined([queue.dequeue() for _ in range(3)])
        for i in range(3):
            queue.enqueue(float(i))
        yield "Enqueued back" + _joined(range(3))
        yield "Dequeued back" + _joined([queue.dequeue_back() for _ in range(3)])


_BST_VALUES = (12, 5, 18, 2, 9, 15, 19, 13, 17)


@_demo("binary_search_tree")
def _binary_search_tree() -> Iterator[str]:
    tree: BinaryTree | None = None
    for x in _BST_VALUES:
        tree = bst_insert(tree, x)
        yield f"Tree after inserting {x}:"
        yield from _tree_lines(tree)
        yield ""
    for x in (0, 5, 6, 18, 19, 20):
        result = bst_search(tree, x)
        shown = "none" if result is None else format_value(result.value)
        yield f"The largest element not exceeding {x} is {shown}"


@_demo("binary_search_tree_enhanced")
def _binary_search_tree_enhanced() -> Iterator[str]:
    tree: BinaryTree | None = None
    for x in _BST_VALUES:
        tree = bst_insert(tree, x)
    lines = _tree_lines(tree)
    yield "Tree:" + lines[0]
    yield from lines[1:]
    yield ""
    yield f"The smallest element is {format_value(bst_min(tree).value)}"
    yield f"The largest element is {format_value(bst_max(tree).value)}"


def _sample_tree() -> BinaryTree:
    return make_binary_tree(
        1.0,
        make_binary_tree(
            2.0,
            make_binary_tree(4.0),
            make_binary_tree(5.0, None, make_binary_tree(8.0)),
        ),
        make_binary_tree(3.0, make_binary_tree(6.0), make_binary_tree(7.0)),
    )


def _traversals(tree: Any) -> Iterator[str]:
    yield "Tree:"
    yield from _tree_lines(tree)
    yield ""
    yield "Depth-first traversal (DFT)"
    for sub in depth_first(tree):
        yield f"Visited subtree: {format_value(sub.value)}"
    yield ""
    yield "Breadth-first traversal (BFT)"
    for sub in breadth_first(tree):
        yield f"Visited subtree: {format_value(sub.value)}"


@_demo("binary_tree_complete")
def _binary_tree_complete() -> Iterator[str]:
    storage = [float(x) for x in range(1, 9)]
    yield from _traversals(CompleteBinaryTree(storage))


@_demo("binary_tree_traversal")
def _binary_tree_traversal() -> Iterator[str]:
    yield from _traversals(_sample_tree())


@_demo("binary_tree_enhanced")
def _binary_tree_enhanced() -> Iterator[str]:
    tree = _sample_tree()
    yield "Tree:"
    yield from _tree_lines(tree)
    for sub in depth_first(tree):
        p = sub.parent
        if p is not None:
            yield f"The parent of {format_value(sub.value)} is {format_value(p.value)}"
        else:
            yield f"Node {format_value(sub.value)} has no parent"


@_demo("heap")
def _heap() -> Iterator[str]:
    storage = [float(x) for x in (1, 19, 2, 9, 12, 18, 4, 8, 5, 6,
                                  17, 10, 11, 14, 16, 15, 7, 3, 13, 20)]
    yield format_sequence(storage, "Before building the heap: ")
    yield from _tree_lines(CompleteBinaryTree(storage))
    build_heap(storage)
    yield ""
    yield format_sequence(storage, "After building the heap: ")
    yield from _tree_lines(CompleteBinaryTree(storage))
    heap_sort(storage)
    yield ""
    yield format_sequence(storage, "Array after heapsort: ")


@_demo("priority_queue")
def _priority_queue() -> Iterator[str]:
    queue: list[int] = []
    for x in (15, 9, 3, 23):
        priority_enqueue(queue, x)
        yield format_sequence(queue, f"Enqueued {x} ")
    for _ in range(2):
        top = priority_dequeue(queue)
        yield format_sequence(queue, f"Dequeued {top} ")
    for x in (2, 1):
        priority_enqueue(queue, x)
        yield format_sequence(queue, f"Enqueued {x} ")
    while queue:
        top = priority_dequeue(queue)
        yield format_sequence(queue, f"Dequeued {top} ")


_NUM_CHAINS = 31
_FRUITS = ("Apple", "Apricots", "Avocado", "Banana", "Blackberries",
           "Blackcurrant", "Blueberries", "Breadfruit", "Cantaloupe",
           "Carambola", "Cherimoya", "Cherries", "Clementine")


def _fruit_hash(key: str) -> int:
    return sum(ord(c) for c in key) % _NUM_CHAINS


@_demo("hash")
def _hash() -> Iterator[str]:
    table = HashTable(_NUM_CHAINS, _fruit_hash)
    for value, key in enumerate(_FRUITS):
        table.insert(key, value)
    yield from table.format_stats().split("\n")
    yield f"'Carambola' is the {table.get('Carambola')}-th fruit"
    yield f"Retrieving 'Beans' results in the pointer value {table.get('Beans')}"


@_demo("graph")
def _graph() -> Iterator[str]:
    yield format_graph(TEST_GRAPH)
    yield format_graph(SPARSE_TEST_GRAPH)


@_demo("shortest_paths_bf")
def _shortest_paths_bf() -> Iterator[str]:
    yield format_graph(TEST_GRAPH)
    source = 2
    yield f"Bellman-Ford SSSP from source {source}"
    result = bellman_ford(TEST_GRAPH, source)
    if result.has_negative_cycle:
        yield "The graph has a negative cycle."
    else:
        yield format_sequence(result.distances)
    yield ""


@_demo("shortest_paths_dijkstra")
def _shortest_paths_dijkstra() -> Iterator[str]:
    yield format_graph(TEST_GRAPH)
    source = 2
    yield f"Dijkstra from source {source}"
    yield format_sequence(dijkstra(TEST_GRAPH, source))
    yield ""
    yield f"Dijkstra priority from source {source}"
    yield format_sequence(dijkstra_priority(TEST_GRAPH, source))
    yield ""


@_demo("shortest_paths_fw")
def _shortest_paths_fw() -> Iterator[str]:
    yield format_graph(TEST_GRAPH)
    yield "Floyd-Warshall all pairs"
    for row in floyd_warshall(TEST_GRAPH):
        yield format_sequence(row)
    yield ""


@_demo("shortest_paths_fw_decode")
def _shortest_paths_fw_decode() -> Iterator[str]:
    yield format_graph(TEST_GRAPH)
    yield "Floyd-Warshall ASPS"
    dp = floyd_warshall(TEST_GRAPH)
    for row in dp:
        yield format_sequence(row)
    yield ""
    for u, row in enumerate(dp):
        for v, hop in enumerate(row):
            path = decode(row, v)
            if path:
                yield format_sequence(
                    path,
                    f"Shortest path {u} ~~> {v} (weight {format_value(hop.weight)}): ",
                )


@_demo("shortest_paths_sparse")
def _shortest_paths_sparse() -> Iterator[str]:
    yield format_graph(SPARSE_TEST_GRAPH)
    source = 2
    yield f"Bellman-Ford from source {source}"
    yield format_sequence(bellman_ford_sparse(SPARSE_TEST_GRAPH, source).distances)
    yield ""
    yield f"Dijkstra from source {source}"
    yield format_sequence(dijkstra_sparse(SPARSE_TEST_GRAPH, source))
    yield ""


def run_demo(name: str) -> str:
    """Run the demo called ``name`` and return everything it prints."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo {name!r}") from None
    return "".join(f"{line}\n" for line in demo())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the named demos, or all of them when none is named."""
    parser = argparse.ArgumentParser(
        description="Show the data structures and algorithms at work."
    )
    parser.add_argument("names", nargs="*", help="demos to run (default: all)")
    parser.add_argument("--list", action="store_true", help="list the demo names")
    args = parser.parse_args(argv)

    if args.list:
        for name in DEMOS:
            print(name)
        return 0

    names = args.names or list(DEMOS)
    unknown = [name for name in names if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    for name in names:
        if len(names) > 1:
            print(f"== {name} ==")
        print(run_demo(name), end="")
    return 0