import pytest

from alienwar.structures import (
    ArrayStack,
    LinkedQueue,
    PriorityQueue,
    queue_sum,
    remove_leading_zeros,
    remove_negatives,
    reversed_stack,
)


def test_queue_fifo_order():
    q = LinkedQueue()
    for value in [5, 1, 4, 2, 3]:
        q.enqueue(value)
    assert [q.dequeue() for _ in range(5)] == [5, 1, 4, 2, 3]
    assert q.is_empty()


def test_queue_enqueue_front_and_dequeue_rear():
    q = LinkedQueue([2, 3])
    q.enqueue_front(1)
    q.enqueue(4)
    assert list(q) == [1, 2, 3, 4]
    assert q.dequeue_rear() == 4
    assert q.dequeue_rear() == 3
    assert list(q) == [1, 2]
    assert len(q) == 2


def test_queue_dequeue_rear_single_item_empties_queue():
    q = LinkedQueue(["only"])
    assert q.dequeue_rear() == "only"
    assert q.is_empty()
    q.enqueue("next")
    assert q.peek() == "next"


def test_queue_peek_does_not_remove():
    q = LinkedQueue(["a", "b"])
    assert q.peek() == "a"
    assert len(q) == 2


@pytest.mark.parametrize("method", ["dequeue", "dequeue_rear", "peek"])
def test_queue_empty_operations_raise(method):
    with pytest.raises(IndexError):
        getattr(LinkedQueue(), method)()


def test_stack_lifo_order():
    s = ArrayStack()
    for value in [1, 2, 3]:
        s.push(value)
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert s.is_empty()


def test_stack_iterates_top_to_bottom():
    s = ArrayStack([1, 2, 3])
    assert list(s) == [3, 2, 1]
    assert len(s) == 3


def test_stack_default_capacity_is_one_hundred():
    s = ArrayStack(range(100))
    with pytest.raises(OverflowError):
        s.push(100)
    assert len(s) == 100


def test_stack_custom_capacity():
    s = ArrayStack(capacity=2)
    s.push("x")
    s.push("y")
    with pytest.raises(OverflowError):
        s.push("z")
    assert s.pop() == "y"


@pytest.mark.parametrize("method", ["pop", "peek"])
def test_stack_empty_operations_raise(method):
    with pytest.raises(IndexError):
        getattr(ArrayStack(), method)()


def test_priority_queue_highest_first():
    pq = PriorityQueue()
    pq.enqueue("low", 1)
    pq.enqueue("high", 9)
    pq.enqueue("mid", 5)
    assert pq.dequeue() == ("high", 9)
    assert pq.dequeue() == ("mid", 5)
    assert pq.dequeue() == ("low", 1)
    assert pq.is_empty()


def test_priority_queue_equal_priorities_keep_arrival_order():
    pq = PriorityQueue()
    for name in ["first", "second", "third"]:
        pq.enqueue(name, 3)
    pq.enqueue("top", 4)
    assert [item for item, _ in pq] == ["top", "first", "second", "third"]


def test_priority_queue_peek_and_len():
    pq = PriorityQueue()
    pq.enqueue("a", 2)
    pq.enqueue("b", 7)
    assert pq.peek() == ("b", 7)
    assert len(pq) == 2


def test_priority_queue_iteration_is_sorted_descending():
    pq = PriorityQueue()
    for priority in [4, 8, 1, 8, 0, 3]:
        pq.enqueue(str(priority), priority)
    priorities = [p for _, p in pq]
    assert priorities == sorted(priorities, reverse=True)
    assert len(priorities) == 6


@pytest.mark.parametrize("method", ["dequeue", "peek"])
def test_priority_queue_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(PriorityQueue(), method)()


def test_reversed_stack_leaves_original():
    s = ArrayStack([1, 2, 3, 4, 5])
    rev = reversed_stack(s)
    assert list(s) == [5, 4, 3, 2, 1]
    assert list(rev) == [1, 2, 3, 4, 5]
    assert rev.capacity == s.capacity


def test_reversed_twice_is_identity():
    s = ArrayStack([7, -1, 3])
    assert list(reversed_stack(reversed_stack(s))) == list(s)


def test_remove_negatives_keeps_order():
    s = ArrayStack([3, -2, 0, -7, 5])
    remove_negatives(s)
    assert list(s) == [5, 0, 3]


def test_remove_leading_zeros_stops_at_nonzero():
    q = LinkedQueue([0, 0, 4, 0, 2])
    remove_leading_zeros(q)
    assert list(q) == [4, 0, 2]


def test_remove_leading_zeros_all_zero_empties():
    q = LinkedQueue([0, 0, 0])
    remove_leading_zeros(q)
    assert q.is_empty()


def test_queue_sum_does_not_modify():
    values = [1, 2, 3, 4, 5]
    q = LinkedQueue(values)
    assert queue_sum(q) == 15
    assert list(q) == values


def test_queue_sum_empty_is_zero():
    assert queue_sum(LinkedQueue()) == 0