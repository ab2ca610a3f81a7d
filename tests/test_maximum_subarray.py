import pytest

from algobox.dynamic_programming.maximum_subarray import maximum_subarray


def test_non_negative():
    assert maximum_subarray([1, 0, 5, 8]) == 14


def test_negative():
    assert maximum_subarray([-3, -1, -8, -2]) == -1


def test_normal():
    assert maximum_subarray([-4, 3, -2, 5, -8]) == 6


def test_single_element():
    assert maximum_subarray([6]) == 6
    assert maximum_subarray([-6]) == -6


def test_empty_raises():
    with pytest.raises(ValueError):
        maximum_subarray([])


def test_tuple_input():
    assert maximum_subarray((2, -1, 2, -5, 4)) == 4