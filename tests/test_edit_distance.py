import pytest

from algobox.dynamic_programming.edit_distance import edit_distance, edit_distance_se


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("Hello, world!", "Hello, world!", 0),
        ("Test_Case_#1", "Test_Case_#1", 0),
    ],
)
def test_equal_strings(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance_se(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("Hello, world!", "Hell, world!", 1),
        ("Test_Case_#1", "Test_Case_#2", 1),
        ("Test_Case_#1", "Test_Case_#10", 1),
    ],
)
def test_one_edit_difference(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance_se(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("My Cat", "My Case", 2),
        ("Hello, world!", "Goodbye, world!", 7),
        ("Test_Case_#3", "Case #3", 6),
    ],
)
def test_several_differences(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance_se(a, b) == expected


def test_counts_bytes_not_characters():
    # "é" is two bytes in UTF-8, "e" is one.
    assert edit_distance("é", "e") == 2
    assert edit_distance_se("é", "e") == 2


@pytest.mark.parametrize(
    "a, b",
    [("kitten", "sitting"), ("flaw", "lawn"), ("", "x"), ("abc", "cba"), ("héllo", "hello")],
)
def test_versions_agree_and_are_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance_se(a, b)
    assert edit_distance(a, b) == edit_distance(b, a)