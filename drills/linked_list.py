"""Singly linked list with insertion at both ends, removal and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: Any
    next: ListNode | None = None


def reverse_nodes(head: ListNode | None) -> ListNode | None:
    """Reverse a chain of nodes in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self.head = ListNode(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = ListNode(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``; a missing value is ignored."""
        previous: ListNode | None = None
        node = self.head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous, node = node, node.next

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._tail = self.head
        self.head = reverse_nodes(self.head)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size