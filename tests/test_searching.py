import pytest

from dsakit.searching import binary_search, linear_search

SORTED = [2, 3, 4, 10, 40]


def test_binary_search_finds_element():
    index = binary_search(SORTED, 10)
    assert index is not None
    assert SORTED[index] == 10


def test_binary_search_finds_every_element():
    for position, value in enumerate(SORTED):
        assert binary_search(SORTED, value) == position


@pytest.mark.parametrize("target", [1, 5, 41])
def test_binary_search_absent(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_linear_search_absent():
    assert linear_search([12, 45, 6, 78, 99, 69, 23], 7) is None
    assert linear_search([1, 2, 3, 4], 9) is None


def test_linear_search_found():
    data = [12, 45, 6, 78, 99, 69, 23]
    index = linear_search(data, 78)
    assert index is not None
    assert data[index] == 78


def test_linear_search_returns_first_match():
    assert linear_search([5, 1, 5], 5) == 0


def test_linear_search_accepts_iterables():
    data = (x for x in [7, 8, 9])
    assert linear_search(data, 9) == 2