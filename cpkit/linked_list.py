"""A singly linked list with in-place reversal, middle lookup and sorted merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: Any
    next: Optional[ListNode] = None


class LinkedList:
    """Singly linked list keeping a reference to its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self._size = 0
        tail: Optional[ListNode] = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        self.head = ListNode(value, self.head)
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        previous: Optional[ListNode] = None
        current = self.head
        while current.next is not None:
            previous, current = current, current.next
        if previous is None:
            self.head = None
        else:
            previous.next = None
        self._size -= 1
        return current.value

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Optional[ListNode] = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def middle(self) -> Any:
        """Return the middle value; for an even length, the later of the two middles."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[assignment]
            fast = fast.next.next
        return slow.value


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two sorted lists by splicing their nodes; both inputs are left empty.

    Equal values from ``first`` come before those from ``second``.
    """
    dummy = ListNode(None)
    tail = dummy
    a, b = first.head, second.head
    while a is not None and b is not None:
        if a.value > b.value:
            tail.next, b = b, b.next
        else:
            tail.next, a = a, a.next
        tail = tail.next
    tail.next = a if a is not None else b

    merged = LinkedList()
    merged.head = dummy.next
    merged._size = len(first) + len(second)
    first.head, first._size = None, 0
    second.head, second._size = None, 0
    return merged