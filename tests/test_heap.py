import operator

import pytest

from dsalgo.binary_tree import CompleteBinaryTree
from dsalgo.heap import (
    build_heap,
    heap_sift_up,
    heap_sort,
    priority_dequeue,
    priority_enqueue,
)

ARRAY = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]


def _is_heap(storage, compare=operator.gt):
    return all(not compare(storage[i], storage[(i - 1) // 2]) for i in range(1, len(storage)))


def test_build_heap_gives_max_heap():
    array = [float(x) for x in ARRAY]
    build_heap(array)
    assert _is_heap(array)
    assert array[0] == max(ARRAY)
    assert sorted(array) == sorted(ARRAY)


def test_build_min_heap():
    array = list(ARRAY)
    build_heap(array, operator.lt)
    assert _is_heap(array, operator.lt)
    assert array[0] == min(ARRAY)


def test_heap_sort_ascending_and_descending():
    ascending = list(ARRAY)
    heap_sort(ascending)
    assert ascending == sorted(ARRAY)
    descending = list(ARRAY)
    heap_sort(descending, operator.lt)
    assert descending == sorted(ARRAY, reverse=True)


def test_heap_sort_small_inputs():
    empty = []
    heap_sort(empty)
    assert empty == []
    one = [7]
    heap_sort(one)
    assert one == [7]


def test_sift_up_moves_new_maximum_to_root():
    storage = [9, 5, 3, 10]
    heap_sift_up(CompleteBinaryTree(storage, 3, 4))
    assert storage[0] == 10
    assert _is_heap(storage)


def test_priority_queue_driver_sequence():
    queue = []
    for x in (15, 9, 3, 23):
        priority_enqueue(queue, x)
        assert _is_heap(queue)
    assert priority_dequeue(queue) == 23
    assert priority_dequeue(queue) == 15
    for x in (2, 1):
        priority_enqueue(queue, x)
    assert len(queue) == 4
    drained = []
    for _ in range(4):
        drained.append(priority_dequeue(queue))
        assert _is_heap(queue)
    assert drained == [9, 3, 2, 1]
    assert queue == []


def test_min_priority_queue():
    queue = []
    for x in ARRAY:
        priority_enqueue(queue, x, operator.lt)
    drained = [priority_dequeue(queue, operator.lt) for _ in range(len(ARRAY))]
    assert drained == sorted(ARRAY)


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        priority_dequeue([])