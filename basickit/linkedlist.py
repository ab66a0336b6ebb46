"""A singly linked list of integers with the classic pointer exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """One link of a list; nodes compare by identity."""

    value: int
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps both a head and a tail reference."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: int) -> Node:
        """Insert ``value`` before the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        return node

    def push_back(self, value: int) -> Node:
        """Append ``value`` after the tail and return its node."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        return node

    def insert_sorted(self, value: int) -> Node:
        """Insert ``value`` into an ascending list, after any equal values."""
        if self.head is None or value < self.head.value:
            return self.push_front(value)
        previous = self.head
        while previous.next is not None and previous.next.value <= value:
            previous = previous.next
        if previous.next is None:
            return self.push_back(value)
        node = Node(value, previous.next)
        previous.next = node
        return node

    def delete_at(self, pos: int) -> int:
        """Remove the node at 1-based position ``pos`` and return its value."""
        if not 1 <= pos <= len(self):
            raise IndexError(f"invalid position: {pos}")
        assert self.head is not None
        if pos == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
            return removed.value
        previous = self.head
        for _ in range(pos - 2):
            assert previous.next is not None
            previous = previous.next
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed is self.tail:
            self.tail = previous
        return removed.value

    def merge(self, other: LinkedList) -> LinkedList:
        """Insert copies of ``other``'s values into this ascending list; return self."""
        for value in list(other):
            self.insert_sorted(value)
        return self

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[Node] = None
        node = self.head
        self.tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def nth_from_end(self, n: int) -> int:
        """Return the value ``n`` places from the end, 1 being the last."""
        if n < 1:
            raise ValueError(f"n must be positive: {n}")
        if len(self) < n:
            raise IndexError(f"list is shorter than {n}")
        slow = fast = self.head
        for _ in range(n - 1):
            assert fast is not None
            fast = fast.next
        assert fast is not None and slow is not None
        while fast.next is not None:
            fast = fast.next
            slow = slow.next
            assert slow is not None
        return slow.value

    def middle(self) -> int:
        """Return the middle value; of two middles, the first."""
        if self.head is None:
            raise IndexError("empty list has no middle")
        slow = fast = self.head
        while fast.next is not None and fast.next.next is not None:
            fast = fast.next.next
            assert slow.next is not None
            slow = slow.next
        return slow.value

    def has_cycle(self) -> bool:
        """Return True if following the links from the head never ends."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            assert slow is not None
            slow = slow.next
            if fast is slow:
                return True
        return False

    def remove_consecutive_duplicates(self) -> int:
        """Drop each node equal to its predecessor; return how many were removed."""
        removed = 0
        node = self.head
        while node is not None and node.next is not None:
            if node.next.value == node.value:
                if node.next is self.tail:
                    self.tail = node
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        return removed

    def split_odd_even(self) -> tuple[LinkedList, LinkedList]:
        """Return new lists of the values at odd and at even 1-based positions."""
        values = list(self)
        return LinkedList(values[0::2]), LinkedList(values[1::2])


def find_intersection(first: LinkedList, second: LinkedList) -> Optional[Node]:
    """Return the first node shared by two lists, or None if they do not meet."""
    if first.head is None or second.head is None:
        return None
    a: Optional[Node] = first.head
    b: Optional[Node] = second.head
    while a is not b:
        a = second.head if a is None else a.next
        b = first.head if b is None else b.next
    return a