import random
from dataclasses import dataclass, field

import pytest

from dsalgo.sorting import (
    counting_sort,
    insert,
    insertion_sort,
    merge,
    merge_sort,
    radix_sort,
)

DRIVER_VALUES = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]


@dataclass(order=True)
class Tagged:
    key: int
    tag: int = field(compare=False)


def _random_lists(seed, count=20, size=30, high=50):
    rng = random.Random(seed)
    return [[rng.randrange(high) for _ in range(rng.randrange(size))] for _ in range(count)]


def test_insert_places_last_element():
    items = [1, 3, 5, 2]
    insert(items, 3)
    assert items == [1, 2, 3, 5]


def test_insert_leaves_sorted_prefix_alone():
    items = [1, 2, 3]
    insert(items, 2)
    assert items == [1, 2, 3]


def test_insert_out_of_range_raises():
    with pytest.raises(IndexError):
        insert([1, 2], 2)


def test_insertion_sort_driver_example():
    items = [3.0, 1.0, 0.0, 18.0, 7.0]
    expected = sorted(items)
    insertion_sort(items)
    assert items == expected


@pytest.mark.parametrize("items", _random_lists(1))
def test_insertion_sort_random(items):
    expected = sorted(items)
    insertion_sort(items)
    assert items == expected


def test_counting_sort_driver_example():
    items = [5, 3, 0, 1, 5, 3]
    expected = sorted(items)
    counting_sort(items, 6)
    assert items == expected


def test_counting_sort_rejects_value_out_of_range():
    items = [1, 6, 2]
    with pytest.raises(ValueError):
        counting_sort(items, 6)
    assert items == [1, 6, 2]


@pytest.mark.parametrize("items", _random_lists(2))
def test_counting_sort_random(items):
    expected = sorted(items)
    counting_sort(items, 50)
    assert items == expected


def test_merge_two_sorted():
    left = [1, 4, 9]
    right = [2, 3, 10, 11]
    assert merge(left, right) == sorted(left + right)


def test_merge_takes_left_first_on_ties():
    left = [Tagged(1, 0)]
    right = [Tagged(1, 1)]
    assert [item.tag for item in merge(left, right)] == [0, 1]


def test_merge_sort_driver_example():
    items = [float(v) for v in DRIVER_VALUES]
    expected = sorted(items)
    merge_sort(items)
    assert items == expected


def test_merge_sort_is_stable():
    rng = random.Random(3)
    items = [Tagged(rng.randrange(5), tag) for tag in range(40)]
    merge_sort(items)
    pairs = [(item.key, item.tag) for item in items]
    assert pairs == sorted(pairs)


@pytest.mark.parametrize("items", _random_lists(4))
def test_merge_sort_random(items):
    expected = sorted(items)
    merge_sort(items)
    assert items == expected


def test_radix_sort_driver_example():
    items = list(DRIVER_VALUES)
    radix_sort(items)
    assert items == sorted(DRIVER_VALUES)


def test_radix_sort_empty():
    items = []
    radix_sort(items)
    assert items == []


def test_radix_sort_all_zero():
    items = [0, 0, 0]
    radix_sort(items)
    assert items == [0, 0, 0]


@pytest.mark.parametrize("items", _random_lists(5, high=10_000))
def test_radix_sort_random(items):
    expected = sorted(items)
    radix_sort(items)
    assert items == expected