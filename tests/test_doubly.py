import pytest

from dsakit.doubly import DoublyLinkedList


def make():
    return DoublyLinkedList([10, 20, 30, 40])


def assert_links_consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)


def test_forward_and_backward_iteration():
    lst = make()
    assert list(lst) == [10, 20, 30, 40]
    assert list(reversed(lst)) == [40, 30, 20, 10]


def test_format_forward_and_backward():
    lst = make()
    assert lst.format_forward() == " 10 -> 20 -> 30 -> 40 -> NULL"
    assert lst.format_backward() == " 40 -> 30 -> 20 -> 10 -> NULL"


def test_format_empty():
    lst = DoublyLinkedList()
    assert lst.format_forward() == " NULL"
    assert lst.format_backward() == lst.format_forward()


def test_single_node_list():
    lst = DoublyLinkedList([23])
    assert list(lst) == [23]
    assert list(reversed(lst)) == [23]
    assert len(lst) == 1


def test_insert_at_begin():
    lst = DoublyLinkedList([2, 3, 4])
    lst.insert_at_begin(1)
    assert list(lst) == [1, 2, 3, 4]
    assert_links_consistent(lst)


def test_insert_at_begin_on_empty():
    lst = DoublyLinkedList()
    lst.insert_at_begin(1)
    assert list(reversed(lst)) == [1]


def test_insert_at_end():
    lst = make()
    lst.insert_at_end(5)
    assert list(lst) == [10, 20, 30, 40, 5]
    assert_links_consistent(lst)


def test_insert_at_middle_position():
    lst = make()
    lst.insert_at(3, 69)
    assert list(lst) == [10, 20, 69, 30, 40]
    assert_links_consistent(lst)


def test_insert_at_first_and_after_last():
    lst = make()
    lst.insert_at(1, 69)
    lst.insert_at(len(lst) + 1, 70)
    assert list(lst) == [69, 10, 20, 30, 40, 70]
    assert_links_consistent(lst)


@pytest.mark.parametrize("position", [0, -2, 6])
def test_insert_at_out_of_bound(position):
    lst = make()
    with pytest.raises(IndexError):
        lst.insert_at(position, 69)
    assert list(lst) == [10, 20, 30, 40]


def test_delete_at_begin():
    lst = make()
    assert lst.delete_at_begin() == 10
    assert list(lst) == [20, 30, 40]
    assert_links_consistent(lst)


def test_delete_at_end():
    lst = make()
    assert lst.delete_at_end() == 40
    assert list(lst) == [10, 20, 30]
    assert_links_consistent(lst)


def test_delete_until_empty_from_both_ends():
    lst = make()
    taken = [lst.delete_at_begin(), lst.delete_at_end(), lst.delete_at_end(), lst.delete_at_begin()]
    assert sorted(taken) == [10, 20, 30, 40]
    assert list(lst) == []
    assert list(reversed(lst)) == []


def test_delete_at_begin_from_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_at_begin()
    assert list(lst) == []
    assert len(lst) == 0


def test_delete_at_end_from_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_at_end()
    assert list(lst) == []
    assert len(lst) == 0


def test_reuse_after_emptying():
    lst = DoublyLinkedList([1])
    lst.delete_at_end()
    lst.insert_at_end(2)
    lst.insert_at_begin(1)
    assert list(lst) == [1, 2]
    assert_links_consistent(lst)