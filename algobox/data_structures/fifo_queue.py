"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueEmptyError(LookupError):
    """Raised when reading from an empty queue."""


class Queue:
    """A FIFO queue of values."""

    def __init__(self) -> None:
        self._elements: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._elements.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise QueueEmptyError if empty."""
        if not self._elements:
            raise QueueEmptyError("Queue is empty")
        return self._elements.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it; raise QueueEmptyError if empty."""
        if not self._elements:
            raise QueueEmptyError("Queue is empty")
        return self._elements[0]

    def size(self) -> int:
        """Return the number of queued values."""
        return len(self._elements)

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)