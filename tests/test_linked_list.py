import pytest

from nys.linked_list import DataType, LinkedList


def _int_list(values):
    lst = LinkedList(DataType.INT, None, None)
    for value in values:
        lst.add(value)
    return lst


def test_items_are_added_at_head():
    lst = _int_list([1, 2, 3, 4, 5])
    assert lst.to_list() == [5, 4, 3, 2, 1]
    assert [lst[i] for i in range(5)] == [5, 4, 3, 2, 1]
    assert len(lst) == 5


def test_remove_by_index_then_missing_search():
    lst = _int_list([1, 2, 3, 4, 5])
    lst.remove_at(1)
    assert lst.to_list() == [5, 3, 2, 1]
    with pytest.raises(ValueError):
        lst.remove(4)
    assert lst.to_list() == [5, 3, 2, 1]


def test_remove_by_value():
    lst = _int_list([1, 2, 3])
    lst.remove(2)
    assert lst.to_list() == [3, 1]
    assert not lst.contains(2)
    assert lst.contains(3)


def test_index_out_of_range():
    lst = _int_list([1])
    with pytest.raises(IndexError):
        lst[1]
    with pytest.raises(IndexError):
        lst.remove_at(3)


def test_empty_list():
    lst = LinkedList(DataType.FLOAT, None, None)
    assert lst.is_empty()
    with pytest.raises(ValueError):
        lst.remove(1.0)
    lst.add(1.0)
    assert not lst.is_empty()


def test_invalid_data_type_rejected():
    with pytest.raises(ValueError):
        LinkedList(42, None, None)


def test_adt_requires_callbacks():
    with pytest.raises(ValueError):
        LinkedList(DataType.ADT, None, lambda item: None)
    with pytest.raises(ValueError):
        LinkedList(DataType.ADT, lambda a, b: a == b, None)


def test_adt_release_on_remove_and_clear():
    released = []
    lst = LinkedList(
        DataType.ADT, lambda a, b: a["id"] == b["id"], released.append
    )
    first, second, third = {"id": 1}, {"id": 2}, {"id": 3}
    for item in (first, second, third):
        lst.add(item)
    lst.remove({"id": 2})
    assert released == [second]
    lst.remove_at(0)
    assert released == [second, third]
    lst.clear()
    assert released == [second, third, first]
    assert len(lst) == 0


def test_primitive_list_releases_nothing():
    lst = LinkedList(DataType.INT, lambda a, b: False, lambda item: 1 / 0)
    lst.add(7)
    lst.remove(7)
    assert lst.is_empty()


def test_contains_with_adt_kind_uses_equality():
    lst = LinkedList(DataType.ADT, lambda a, b: a.lower() == b.lower(), lambda x: None)
    lst.add("Alpha")
    assert lst.contains("alpha", DataType.ADT)
    assert not lst.contains("alpha", DataType.INT)


def test_iteration_matches_indexing():
    lst = _int_list([10, 20, 30])
    assert list(lst) == [lst[0], lst[1], lst[2]]


def test_render():
    lst = _int_list([1, 2])
    assert lst.render(str) == "21FIM LISTA\n"
    assert LinkedList(DataType.INT, None, None).render(str) == "FIM LISTA\n"