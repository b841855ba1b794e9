"""Circular-buffer and linked queues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class QueueOverflow(Exception):
    """Raised when enqueuing onto a full circular queue."""


class QueueUnderflow(IndexError):
    """Raised when dequeuing from an empty queue."""


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO queue over a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be at least 1")
        self.capacity = capacity
        self._buffer: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear; raise QueueOverflow when full."""
        if self.is_full():
            raise QueueOverflow("overflow")
        rear = (self._front + self._size) % self.capacity
        self._buffer[rear] = item
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self._size == 0:
            raise QueueUnderflow("underflow")
        item = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        if self._size == 0:
            self._front = 0
        return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        for offset in range(self._size):
            yield self._buffer[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedQueue(Generic[T]):
    """An unbounded FIFO queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, item: T) -> None:
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self._front is None:
            raise QueueUnderflow("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"