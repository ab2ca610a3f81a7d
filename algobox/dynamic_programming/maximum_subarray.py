"""Largest sum of a contiguous, non-empty subarray."""

from __future__ import annotations

from collections.abc import Sequence


def maximum_subarray(array: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous part of ``array``.

    Raises ValueError if ``array`` is empty.
    """
    if not array:
        raise ValueError("array must hold at least one number")
    ending_here = array[0]
    best = ending_here
    for value in array[1:]:
        ending_here = ending_here + value if ending_here > 0 else value
        best = max(best, ending_here)
    return best