"""Dynamic programming solutions to classic problems."""

__all__ = [
    "coin_change",
    "edit_distance",
    "egg_dropping",
    "fibonacci",
    "knapsack",
    "maximum_subarray",
    "subsequences",
]