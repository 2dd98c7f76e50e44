import pytest

from dsakit.singly import SinglyLinkedList


def make():
    return SinglyLinkedList([10, 20, 30, 40])


def test_construction_and_iteration_keep_order():
    lst = make()
    assert list(lst) == [10, 20, 30, 40]
    assert len(lst) == 4


def test_empty_list():
    lst = SinglyLinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_at_begin():
    lst = SinglyLinkedList([10, 20, 30])
    lst.insert_at_begin(40)
    assert list(lst) == [40, 10, 20, 30]
    assert len(lst) == 4


def test_insert_at_begin_on_empty():
    lst = SinglyLinkedList()
    lst.insert_at_begin(7)
    assert list(lst) == [7]


def test_insert_at_end():
    lst = SinglyLinkedList([10, 20, 30])
    lst.insert_at_end(45)
    assert list(lst) == [10, 20, 30, 45]


def test_insert_at_end_on_empty():
    lst = SinglyLinkedList()
    lst.insert_at_end(45)
    assert list(lst) == [45]
    assert len(lst) == 1


def test_insert_at_position():
    lst = make()
    lst.insert_at(3, 69)
    assert list(lst) == [10, 20, 69, 30, 40]
    assert lst.search(69) == 3


def test_insert_at_first_and_after_last():
    lst = make()
    lst.insert_at(1, 1)
    lst.insert_at(len(lst) + 1, 99)
    assert list(lst)[0] == 1
    assert list(lst)[-1] == 99
    assert len(lst) == 6


@pytest.mark.parametrize("position", [0, -1, 6])
def test_insert_at_out_of_bounds(position):
    lst = make()
    with pytest.raises(IndexError):
        lst.insert_at(position, 69)
    assert list(lst) == [10, 20, 30, 40]


def test_delete_at_begin():
    lst = make()
    assert lst.delete_at_begin() == 10
    assert list(lst) == [20, 30, 40]


def test_delete_at_end():
    lst = make()
    assert lst.delete_at_end() == 40
    assert list(lst) == [10, 20, 30]
    assert len(lst) == 3


def test_delete_single_element_from_end():
    lst = SinglyLinkedList([5])
    assert lst.delete_at_end() == 5
    assert list(lst) == []


def test_delete_at_begin_from_empty_raises():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_at_begin()
    assert list(lst) == []
    assert len(lst) == 0


def test_delete_at_end_from_empty_raises():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_at_end()
    assert list(lst) == []
    assert len(lst) == 0


def test_delete_at_position_last():
    lst = make()
    assert lst.delete_at(4) == 40
    assert list(lst) == [10, 20, 30]


def test_delete_at_position_first_and_middle():
    lst = make()
    assert lst.delete_at(1) == 10
    assert lst.delete_at(2) == 30
    assert list(lst) == [20, 40]


@pytest.mark.parametrize("position", [0, -3, 5])
def test_delete_at_invalid_position(position):
    lst = make()
    with pytest.raises(IndexError):
        lst.delete_at(position)
    assert len(lst) == 4


def test_search_found_and_missing():
    lst = SinglyLinkedList([10, 20, 30])
    assert lst.search(10) == 1
    assert lst.search(30) == 3
    assert lst.search(0) is None


def test_length_matches_iteration_after_mixed_operations():
    lst = SinglyLinkedList()
    for value in range(5):
        lst.insert_at_end(value)
    lst.insert_at(2, 100)
    lst.delete_at_begin()
    lst.delete_at_end()
    assert len(lst) == len(list(lst))