"""Classic ciphers, data structures and dynamic programming algorithms."""

__version__ = "0.1.0"
__all__ = ["ciphers", "data_structures", "dynamic_programming"]