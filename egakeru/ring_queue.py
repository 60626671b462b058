"""A fixed-capacity first-in first-out queue."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """FIFO queue over a fixed circular buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._block: list[T | None] = [None] * capacity
        self._length = 0
        self._head = 0
        self._tail = -1

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._length

    def enqueue(self, value: T) -> None:
        """Append ``value``; raises OverflowError when the queue is full."""
        if self._length == self._capacity:
            raise OverflowError("capacity exceeded")
        self._tail = (self._tail + 1) % self._capacity
        self._block[self._tail] = value
        self._length += 1

    def dequeue(self) -> T:
        """Remove and return the oldest value; raises IndexError when empty."""
        value = self.peek()
        self._block[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._length -= 1
        return value

    def peek(self) -> T:
        """Return the oldest value without removing it."""
        if self._length == 0:
            raise IndexError("cannot read from an empty ring queue")
        return self._block[self._head]  # type: ignore[return-value]