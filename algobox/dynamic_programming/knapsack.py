"""The 0/1 knapsack problem."""

from __future__ import annotations

from collections.abc import Sequence


def _table(capacity: int, weights: Sequence[int], values: Sequence[int]) -> list[list[int]]:
    """Return ``best`` where ``best[i][j]`` is the top value using items 1..i within weight j."""
    best = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        previous = best[-1]
        best.append(
            [
                max(value + previous[j - weight], previous[j]) if weight <= j else previous[j]
                for j in range(capacity + 1)
            ]
        )
    # Column 0 is always empty, whatever the item weights.
    for row in best:
        row[0] = 0
    return best


def _chosen_items(weights: Sequence[int], best: list[list[int]], capacity: int) -> list[int]:
    """Walk the table back from the last item; return the 1-based indices taken."""
    items = []
    remaining = capacity
    for i in range(len(weights), 0, -1):
        if best[i][remaining] > best[i - 1][remaining]:
            items.append(i)
            remaining -= weights[i - 1]
    items.reverse()
    return items


def knapsack(w: int, weights: Sequence[int], values: Sequence[int]) -> tuple[int, int, list[int]]:
    """Solve the 0/1 knapsack of capacity ``w``.

    Returns the optimal value, the total weight of the chosen items and the
    1-based indices of those items in ascending order. Raises ValueError if
    ``weights`` and ``values`` differ in length or any number is negative.
    """
    if len(weights) != len(values):
        raise ValueError(
            "Number of items in the list of weights doesn't match "
            "the number of items in the list of values!"
        )
    if w < 0 or any(weight < 0 for weight in weights) or any(value < 0 for value in values):
        raise ValueError("capacity, weights and values must be non-negative")

    best = _table(w, weights, values)
    items = _chosen_items(weights, best, w)
    total_weight = sum(weights[i - 1] for i in items)
    return best[len(weights)][w], total_weight, items