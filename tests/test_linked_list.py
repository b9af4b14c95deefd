from dsalgo.linked_list import Node


def _build(values):
    head = Node()
    last = head
    for value in values:
        last = last.insert_after(value)
    return head


def test_insert_after_head_reverses():
    head = Node()
    for value in range(10):
        head.insert_after(float(value))
    assert head.to_list() == [float(v) for v in reversed(range(10))]


def test_insert_after_tail_keeps_order():
    values = list(range(10))
    assert _build(values).to_list() == values


def test_insert_after_returns_new_node():
    head = Node()
    node = head.insert_after(7)
    assert node.value == 7
    assert head.next is node
    assert node.next is None


def test_iteration_matches_to_list_and_skips_head():
    head = _build([1, 2, 3])
    head.value = "sentinel"
    assert list(head) == head.to_list() == [1, 2, 3]


def test_empty_list():
    head = Node()
    assert head.to_list() == []
    assert head.find_predecessor(lambda v: True) is None


def test_find_predecessor_returns_node_before_match():
    head = _build([1, 2, 3, 4])
    pred = head.find_predecessor(lambda v: v == 3)
    assert pred.value == 2
    assert pred.next.value == 3


def test_find_predecessor_of_first_is_head():
    head = _build([5, 6])
    assert head.find_predecessor(lambda v: v == 5) is head


def test_find_predecessor_no_match():
    head = _build([1, 2, 3])
    assert head.find_predecessor(lambda v: v > 10) is None


def test_delete_after_from_front_until_empty():
    values = list(range(10))
    head = _build(values)
    for removed in range(1, len(values) + 1):
        head.delete_after()
        assert head.to_list() == values[removed:]


def test_delete_after_on_last_node_is_noop():
    head = _build([1, 2])
    last = head.next.next
    last.delete_after()
    assert head.to_list() == [1, 2]