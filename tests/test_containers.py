import pytest

from algokit.containers import (
    CircularDeque,
    StackOverflowError,
    StackUnderflowError,
    TwoStacks,
)


def _driver_stacks():
    stacks = TwoStacks(5)
    stacks.push1(5)
    stacks.push2(10)
    stacks.push2(15)
    stacks.push1(11)
    stacks.push2(7)
    return stacks


def test_two_stacks_driver_sequence():
    stacks = _driver_stacks()
    assert stacks.pop1() == 11
    stacks.push2(40)
    assert stacks.pop2() == 40


def test_two_stacks_overflow_when_full():
    stacks = _driver_stacks()
    with pytest.raises(StackOverflowError):
        stacks.push1(1)
    with pytest.raises(StackOverflowError):
        stacks.push2(1)


def test_two_stacks_lifo_order_on_both_sides():
    stacks = _driver_stacks()
    assert [stacks.pop1(), stacks.pop1()] == [11, 5]
    assert [stacks.pop2(), stacks.pop2(), stacks.pop2()] == [7, 15, 10]


def test_two_stacks_underflow():
    stacks = TwoStacks(3)
    with pytest.raises(StackUnderflowError):
        stacks.pop1()
    with pytest.raises(StackUnderflowError):
        stacks.pop2()


def test_two_stacks_one_side_can_use_whole_array():
    stacks = TwoStacks(3)
    for value in (1, 2, 3):
        stacks.push1(value)
    with pytest.raises(StackOverflowError):
        stacks.push2(4)
    with pytest.raises(StackUnderflowError):
        stacks.pop2()


def test_two_stacks_negative_capacity():
    with pytest.raises(ValueError):
        TwoStacks(-1)


def _driver_deque():
    deque = CircularDeque(5)
    for value in (1, 2, 3, 4, 5):
        deque.insert_front(value)
    return deque


def test_deque_driver_sequence():
    deque = _driver_deque()
    assert list(deque) == [5, 4, 3, 2, 1]
    assert deque.front() == 5
    assert deque.rear() == 1
    deque.delete_front()
    assert list(deque) == [4, 3, 2, 1]
    deque.delete_rear()
    assert list(deque) == [4, 3, 2]
    deque.insert_rear(10)
    assert list(deque) == [4, 3, 2, 10]


def test_deque_full_rejects_inserts():
    deque = _driver_deque()
    assert deque.is_full()
    assert len(deque) == 5
    with pytest.raises(StackOverflowError):
        deque.insert_front(6)
    with pytest.raises(StackOverflowError):
        deque.insert_rear(6)


def test_deque_empty_operations_raise():
    deque = CircularDeque(2)
    assert deque.is_empty()
    assert len(deque) == 0
    with pytest.raises(StackUnderflowError):
        deque.front()
    with pytest.raises(StackUnderflowError):
        deque.rear()
    with pytest.raises(StackUnderflowError):
        deque.delete_front()
    with pytest.raises(StackUnderflowError):
        deque.delete_rear()


def test_deque_wraps_around():
    deque = CircularDeque(3)
    for value in (1, 2, 3):
        deque.insert_rear(value)
    assert deque.is_full()
    deque.delete_front()
    deque.insert_rear(4)
    assert list(deque) == [2, 3, 4]
    assert deque.front() == 2
    assert deque.rear() == 4


def test_deque_emptied_then_reused():
    deque = CircularDeque(2)
    deque.insert_front(7)
    deque.delete_rear()
    assert deque.is_empty()
    deque.insert_rear(8)
    assert list(deque) == [8]
    assert deque.front() == deque.rear() == 8


def test_deque_invalid_capacity():
    with pytest.raises(ValueError):
        CircularDeque(0)