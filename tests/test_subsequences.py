import pytest

from algobox.dynamic_programming.subsequences import (
    longest_common_subsequence,
    longest_continuous_increasing_subsequence,
)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("", "", ""),
        ("", "abcd", ""),
        ("abcd", "", ""),
        ("abcd", "c", "c"),
        ("abcd", "d", "d"),
        ("abcd", "e", ""),
        ("abcdefghi", "acegi", "acegi"),
        ("abcdgh", "aedfhr", "adh"),
        ("aggtab", "gxtxayb", "gtab"),
        ("你好，世界", "再见世界", "世界"),
    ],
)
def test_longest_common_subsequence(a, b, expected):
    assert longest_common_subsequence(a, b) == expected


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([], []),
        ([1], [1]),
        ([1, 2, 3, 4], [1, 2, 3, 4]),
        ([1, 2, 2, 3, 4, 2], [2, 3, 4]),
        ([5, 4, 3, 2, 1], [5]),
        ([5, 4, 3, 4, 2, 1], [3, 4]),
        (["a", "b", "c"], ["a", "b", "c"]),
        (["d", "c", "d"], ["c", "d"]),
    ],
)
def test_longest_continuous_increasing_subsequence(values, expected):
    assert longest_continuous_increasing_subsequence(values) == expected


def test_increasing_run_on_string_returns_string():
    assert longest_continuous_increasing_subsequence("dcd") == "cd"