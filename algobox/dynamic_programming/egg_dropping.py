"""The egg dropping puzzle."""


def egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that always find the highest safe floor.

    ``eggs`` must be positive and ``floors`` non-negative.
    """
    if eggs <= 0:
        raise ValueError(f"eggs must be positive, got {eggs}")
    if floors < 0:
        raise ValueError(f"floors must be non-negative, got {floors}")

    if eggs == 1 or floors <= 1:
        return floors

    # drops[j] holds the answer for the current egg count and j floors.
    previous = list(range(floors + 1))  # one egg: j drops for j floors
    for _ in range(2, eggs + 1):
        current = [0, 1] + [0] * (floors - 1)
        for j in range(2, floors + 1):
            current[j] = 1 + min(
                max(previous[k - 1], current[j - k]) for k in range(1, j + 1)
            )
        previous = current
    return previous[floors]