import operator

import pytest

from dsalgo.complete_tree import CompleteTree
from dsalgo.heap import (
    build_heap,
    heap_sift_down,
    heap_sift_up,
    heap_sort,
    priority_dequeue,
    priority_enqueue,
)

ARRAY = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]


def is_heap(data, compare=operator.gt):
    return not any(
        compare(data[child], data[i])
        for i in range(len(data))
        for child in (2 * i + 1, 2 * i + 2)
        if child < len(data)
    )


def test_build_heap_gives_max_heap():
    data = list(ARRAY)
    build_heap(data)
    assert is_heap(data)
    assert data[0] == max(ARRAY)
    assert sorted(data) == sorted(ARRAY)


def test_build_heap_min_heap():
    data = list(ARRAY)
    build_heap(data, operator.lt)
    assert is_heap(data, operator.lt)
    assert data[0] == min(ARRAY)


def test_heap_sort_ascending():
    data = list(ARRAY)
    heap_sort(data)
    assert data == sorted(ARRAY)


def test_heap_sort_descending_with_lt():
    data = list(ARRAY)
    heap_sort(data, operator.lt)
    assert data == sorted(ARRAY, reverse=True)


@pytest.mark.parametrize("data", [[], [7], [2, 1], [3, 3, 1, 3]])
def test_heap_sort_small_inputs(data):
    expected = sorted(data)
    heap_sort(data)
    assert data == expected


def test_sift_up_moves_largest_to_root():
    data = [5, 3, 4, 9]
    heap_sift_up(CompleteTree(data, 3))
    assert data[0] == 9
    assert is_heap(data)


def test_sift_down_restores_heap():
    data = [1, 9, 8, 7, 6]
    heap_sift_down(CompleteTree(data))
    assert is_heap(data)
    assert data[0] == 9


def test_priority_queue_driver_sequence():
    queue = []
    dequeued = []
    heap_states = []
    for x in (15, 9, 3, 23):
        priority_enqueue(queue, x)
        heap_states.append(is_heap(queue))
    dequeued.append(priority_dequeue(queue))
    dequeued.append(priority_dequeue(queue))
    for x in (2, 1):
        priority_enqueue(queue, x)
        heap_states.append(is_heap(queue))
    while queue:
        dequeued.append(priority_dequeue(queue))
        heap_states.append(is_heap(queue))
    assert dequeued == [23, 15, 9, 3, 2, 1]
    assert len(heap_states) == 10
    assert all(heap_states)


def test_min_priority_queue():
    queue = []
    for x in ARRAY:
        priority_enqueue(queue, x, operator.lt)
    out = [priority_dequeue(queue, operator.lt) for _ in ARRAY]
    assert out == sorted(ARRAY)
    assert queue == []


def test_dequeue_from_empty_raises():
    with pytest.raises(IndexError):
        priority_dequeue([])