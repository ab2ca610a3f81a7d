"""Longest common subsequence and longest run of increasing items."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

_S = TypeVar("_S", bound=Sequence[Any])


def longest_common_subsequence(a: str, b: str) -> str:
    """Return a longest string that is a subsequence of both ``a`` and ``b``."""
    # lengths[i][j] is the LCS length of a[:i] and b[:j].
    lengths = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, char_a in enumerate(a):
        for j, char_b in enumerate(b):
            if char_a == char_b:
                lengths[i + 1][j + 1] = lengths[i][j] + 1
            else:
                lengths[i + 1][j + 1] = max(lengths[i][j + 1], lengths[i + 1][j])

    result = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))


def longest_continuous_increasing_subsequence(input_array: _S) -> _S:
    """Return the first longest strictly increasing run of ``input_array`` as a slice."""
    length = len(input_array)
    if length <= 1:
        return input_array[:]

    # run[i] is the length of the increasing run starting at i.
    run = [1] * length
    for i in range(length - 2, -1, -1):
        if input_array[i] < input_array[i + 1]:
            run[i] = run[i + 1] + 1

    best_start = 0
    for index, value in enumerate(run):
        if value > run[best_start]:
            best_start = index
    return input_array[best_start : best_start + run[best_start]]