"""A linked stack and a growable array with doubling capacity."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _StackNode:
    value: int
    below: Optional[_StackNode] = None


class LinkedStack:
    """A last-in, first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_StackNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self._top = _StackNode(value, self._top)
        self._size += 1

    def top(self) -> int:
        """Return the value on top of the stack without removing it."""
        if self._top is None:
            raise IndexError("top of an empty stack")
        return self._top.value

    def pop(self) -> Optional[int]:
        """Remove and return the top value; an empty stack is left as it is."""
        if self._top is None:
            return None
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value


class Vector:
    """An array of integers whose capacity doubles whenever it fills up."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        """The number of values the vector holds before it grows again."""
        return self._capacity

    def push_back(self, value: int) -> None:
        """Append ``value``, doubling the capacity first if it is full."""
        if len(self._items) >= self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"