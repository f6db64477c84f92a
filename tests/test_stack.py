import pytest

from nys.linked_list import DataType
from nys.stack import Stack


def test_push_peek_pop_order():
    stack = Stack(DataType.INT, None, None)
    for value in [1, 2, 3, 4, 5]:
        stack.push(value)
    assert stack.peek() == 5
    assert len(stack) == 5
    assert [stack.pop() for _ in range(5)] == [5, 4, 3, 2, 1]
    assert stack.is_empty()


def test_empty_stack_errors():
    stack = Stack(DataType.INT, None, None)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_peek_does_not_remove():
    stack = Stack(DataType.INT, None, None)
    stack.push(9)
    assert stack.peek() == 9
    assert len(stack) == 1


def test_adt_stack_requires_callbacks():
    with pytest.raises(ValueError):
        Stack(DataType.ADT, None, None)


def test_adt_items_released_on_pop_and_clear():
    released = []
    stack = Stack(DataType.ADT, lambda a, b: a is b, released.append)
    a, b, c = object(), object(), object()
    for item in (a, b, c):
        stack.push(item)
    assert stack.pop() is c
    assert released == [c]
    stack.clear()
    assert released == [c, b, a]
    assert len(stack) == 0