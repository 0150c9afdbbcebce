"""Fixed-capacity containers: two stacks sharing one array and a circular deque."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(IndexError):
    """Raised when pushing onto a container that has no free slot."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class TwoStacks:
    """Two stacks sharing one fixed-size array, growing toward each other."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    def _has_room(self) -> bool:
        return self._top1 < self._top2 - 1

    def push1(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        if not self._has_room():
            raise StackOverflowError("stack overflow")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        if not self._has_room():
            raise StackOverflowError("stack overflow")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        if self._top1 < 0:
            raise StackUnderflowError("stack underflow")
        value = self._slots[self._top1]
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        if self._top2 >= self.capacity:
            raise StackUnderflowError("stack underflow")
        value = self._slots[self._top2]
        self._slots[self._top2] = None
        self._top2 += 1
        return value


class CircularDeque:
    """A double-ended queue of fixed capacity backed by a circular array."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = 0

    def is_full(self) -> bool:
        """Report whether no further element fits."""
        return (
            self._front == 0 and self._rear == self.capacity - 1
        ) or self._front == self._rear + 1

    def is_empty(self) -> bool:
        """Report whether the deque holds no elements."""
        return self._front == -1

    def insert_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        if self.is_full():
            raise StackOverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._front == 0:
            self._front = self.capacity - 1
        else:
            self._front -= 1
        self._slots[self._front] = value

    def insert_rear(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise StackOverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._rear == self.capacity - 1:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def delete_front(self) -> None:
        """Remove the front element."""
        if self.is_empty():
            raise StackUnderflowError("deque underflow")
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self.capacity - 1:
            self._front = 0
        else:
            self._front += 1

    def delete_rear(self) -> None:
        """Remove the rear element."""
        if self.is_empty():
            raise StackUnderflowError("deque underflow")
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._rear == 0:
            self._rear = self.capacity - 1
        else:
            self._rear -= 1

    def front(self) -> Any:
        """Return the front element."""
        if self.is_empty():
            raise StackUnderflowError("deque underflow")
        return self._slots[self._front]

    def rear(self) -> Any:
        """Return the rear element."""
        if self.is_empty() or self._rear < 0:
            raise StackUnderflowError("deque underflow")
        return self._slots[self._rear]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r}, capacity={self.capacity})"