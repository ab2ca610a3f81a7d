"""Fewest coins needed to make up an amount."""

from __future__ import annotations

from collections.abc import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Return the fewest coins from ``coins`` that sum to ``amount``.

    Each denomination may be used any number of times. Returns None if the
    amount cannot be made up. Coins and amount must be non-negative.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin denominations must be non-negative")

    # fewest[i] is the fewest coins making up amount i, or None if impossible.
    fewest: list[int | None] = [0] + [None] * amount
    for total in range(amount + 1):
        for coin in coins:
            if coin > total:
                continue
            previous = fewest[total - coin]
            if previous is None:
                continue
            current = fewest[total]
            if current is None or previous + 1 < current:
                fewest[total] = previous + 1
    return fewest[amount]