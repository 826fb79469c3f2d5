import random
from functools import total_ordering

import pytest

from dsalgo.sorting import counting_sort, insert, insertion_sort, merge, merge_sort

DRIVER_DATA = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]


@total_ordering
class Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


def test_insertion_sort_driver_example():
    v = [3.0, 1.0, 0.0, 18.0, 7.0]
    insertion_sort(v)
    assert v == sorted([3.0, 1.0, 0.0, 18.0, 7.0])


def test_insert_moves_last_into_place():
    items = [1, 3, 5, 2]
    insert(items, 3)
    assert items == [1, 2, 3, 5]


@pytest.mark.parametrize("i", [-1, 4])
def test_insert_out_of_range(i):
    with pytest.raises(IndexError):
        insert([1, 2, 3, 4], i)


def test_merge_sort_driver_example():
    v = [float(x) for x in DRIVER_DATA]
    merge_sort(v)
    assert v == sorted(float(x) for x in DRIVER_DATA)


def test_merge_sort_subrange_only():
    v = [9, 8, 7, 6, 5, 4]
    merge_sort(v, 1, 4)
    assert v[0] == 9 and v[4:] == [5, 4]
    assert v[1:4] == sorted([8, 7, 6])


def test_merge_is_stable_and_prefers_first():
    first = [Keyed(1, "a"), Keyed(2, "a")]
    second = [Keyed(1, "b"), Keyed(2, "b")]
    tags = [(x.key, x.tag) for x in merge(first, second)]
    assert tags == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


@pytest.mark.parametrize("seed", range(5))
def test_sorts_agree_with_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randrange(50) for _ in range(40)]
    a, b, c = list(data), list(data), list(data)
    insertion_sort(a)
    merge_sort(b)
    counting_sort(c, 50)
    assert a == b == c == sorted(data)


def test_merge_sort_stable():
    data = [Keyed(k, i) for i, k in enumerate([2, 1, 2, 1, 0])]
    merge_sort(data)
    assert [(x.key, x.tag) for x in data] == sorted((x.key, x.tag) for x in data)


def test_counting_sort_driver_example():
    a = [5, 3, 0, 1, 5, 3]
    counting_sort(a, 6)
    assert a == sorted([5, 3, 0, 1, 5, 3])


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 6], 6)