"""Fibonacci numbers with F(0) = F(1) = 1, bounded to unsigned 128 bits."""

_LIMIT = (1 << 128) - 1


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def _add(a: int, b: int) -> int:
    total = a + b
    if total > _LIMIT:
        raise OverflowError("Fibonacci number does not fit in 128 bits")
    return total


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting F(0) = F(1) = 1.

    Raises OverflowError from n = 186 on, where the value exceeds 128 bits.
    """
    _check(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, _add(previous, current)
    return current


def recursive_fibonacci(n: int) -> int:
    """Return the same value as :func:`fibonacci`, computed recursively."""
    _check(n)
    return _recursive(n, 0, 1)


def _recursive(n: int, previous: int, current: int) -> int:
    if n == 0:
        return current
    return _recursive(n - 1, current, _add(current, previous))