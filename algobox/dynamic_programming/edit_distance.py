"""Levenshtein edit distance between two strings, measured on UTF-8 bytes."""


def edit_distance(str_a: str, str_b: str) -> int:
    """Return the number of byte insertions, deletions or substitutions turning one string into the other.

    Uses a full table of size ``(len(a) + 1) * (len(b) + 1)``.
    """
    a = str_a.encode("utf-8")
    b = str_b.encode("utf-8")
    distances = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    distances[0] = list(range(len(b) + 1))
    for i, row in enumerate(distances):
        row[0] = i
    for i, byte_a in enumerate(a, start=1):
        for j, byte_b in enumerate(b, start=1):
            substitution = distances[i - 1][j - 1] + (0 if byte_a == byte_b else 1)
            distances[i][j] = min(
                distances[i - 1][j] + 1,
                distances[i][j - 1] + 1,
                substitution,
            )
    return distances[len(a)][len(b)]


def edit_distance_se(str_a: str, str_b: str) -> int:
    """Return the same distance as :func:`edit_distance`, keeping only one table row."""
    a = str_a.encode("utf-8")
    b = str_b.encode("utf-8")
    row = list(range(len(b) + 1))
    for i, byte_a in enumerate(a, start=1):
        diagonal = i - 1  # distance[i-1][j-1]
        left = i  # distance[i][j-1]
        for j, byte_b in enumerate(b, start=1):
            left = min(
                diagonal + (0 if byte_a == byte_b else 1),
                left + 1,
                row[j] + 1,
            )
            diagonal = row[j]
            row[j] = left
    return row[len(b)]