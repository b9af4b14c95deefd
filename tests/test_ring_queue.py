import random
from collections import deque

import pytest

from dsalgo.ring_queue import Deque, Queue


def test_fifo_with_repeated_wraparound():
    queue = Queue(5)
    for _ in range(3):
        for value in range(3):
            queue.enqueue(value)
        dequeued = []
        for _ in range(3):
            dequeued.append(queue.front())
            queue.dequeue()
        assert dequeued == list(range(3))
    assert queue.is_empty()


def test_dequeue_returns_front():
    queue = Queue(3)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    assert list(queue) == ["b"]


def test_full_queue_rejects_enqueue():
    queue = Queue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(IndexError):
        queue.enqueue(3)
    assert len(queue) == 2


def test_empty_queue_errors():
    queue = Queue(2)
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.dequeue()


@pytest.mark.parametrize("capacity", [0, -3])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError):
        Queue(capacity)


def test_deque_driver_sequence():
    dq = Deque(5)
    for _ in range(3):
        for value in range(3):
            dq.enqueue_front(value)
        front_out = []
        for _ in range(3):
            front_out.append(dq.front())
            dq.dequeue()
        assert front_out == list(reversed(range(3)))

        for value in range(3):
            dq.enqueue(value)
        back_out = []
        for _ in range(3):
            back_out.append(dq.back())
            dq.dequeue_back()
        assert back_out == list(reversed(range(3)))
    assert dq.is_empty()


def test_deque_front_and_back():
    dq = Deque(4)
    dq.enqueue(1)
    dq.enqueue_front(0)
    dq.enqueue(2)
    assert dq.front() == 0
    assert dq.back() == 2
    assert list(dq) == [0, 1, 2]


def test_deque_enqueue_front_when_full_raises():
    dq = Deque(1)
    dq.enqueue(1)
    with pytest.raises(IndexError):
        dq.enqueue_front(2)


def test_deque_empty_back_errors():
    dq = Deque(2)
    with pytest.raises(IndexError):
        dq.back()
    with pytest.raises(IndexError):
        dq.dequeue_back()


def test_deque_clear():
    dq = Deque(3)
    dq.enqueue(1)
    dq.enqueue(2)
    dq.clear()
    assert dq.is_empty()
    dq.enqueue(7)
    assert dq.front() == dq.back() == 7


def test_deque_matches_reference_model():
    rng = random.Random(11)
    capacity = 6
    dq = Deque(capacity)
    model = deque()
    for step in range(500):
        op = rng.randrange(4)
        if op == 0 and len(model) < capacity:
            dq.enqueue(step)
            model.append(step)
        elif op == 1 and len(model) < capacity:
            dq.enqueue_front(step)
            model.appendleft(step)
        elif op == 2 and model:
            assert dq.dequeue() == model.popleft()
        elif op == 3 and model:
            assert dq.dequeue_back() == model.pop()
        assert list(dq) == list(model)
        assert dq.is_full() == (len(model) == capacity)