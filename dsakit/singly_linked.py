"""Singly linked list with positional edits and classic node-level algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    data: Any
    next: Optional["ListNode"] = None


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def reverse_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a chain of nodes in place and return its new head."""
    prev = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the slow and fast pointers meet, or None."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the chain starting at ``head`` loops back on itself."""
    return _meeting_point(head) is not None


def cycle_start(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the first node of the loop, or None when there is no loop."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    slow, fast = head, meet
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def remove_cycle(head: Optional[ListNode]) -> None:
    """Break the loop, if any, so the chain ends after its last distinct node."""
    start = cycle_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None


class SinglyLinkedList:
    """A singly linked list that keeps both head and tail; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def _node_at(self, position: int) -> ListNode:
        return next(islice(_walk(self.head), position - 1, None))

    def push_front(self, data: Any) -> None:
        node = ListNode(data, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, data: Any) -> None:
        node = ListNode(data)
        if self.head is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at(self, data: Any, position: int) -> None:
        """Insert so the value lands at ``position``.

        Positions at or below 1 go to the front; positions past the length go
        to the back.
        """
        length = len(self)
        if position <= 1:
            self.push_front(data)
        elif position > length:
            self.push_back(data)
        else:
            prev = self._node_at(position - 1)
            prev.next = ListNode(data, prev.next)

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if self.head is None:
            raise IndexError("deletion from an empty list")
        length = len(self)
        if not 1 <= position <= length:
            raise IndexError(f"position {position} outside 1..{length}")
        if position == 1:
            victim = self.head
            self.head = victim.next
            if self.head is None:
                self.tail = None
        else:
            prev = self._node_at(position - 1)
            victim = prev.next
            prev.next = victim.next
            if victim is self.tail:
                self.tail = prev
        victim.next = None
        return victim.data

    def reverse(self) -> None:
        old_head = self.head
        self.head = reverse_nodes(self.head)
        self.tail = old_head

    def middle(self) -> Any:
        """Return the middle value; for an even length, the second of the two."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.data

    def add_one(self) -> None:
        """Treat the nodes as decimal digits, most significant first, and add one."""
        if self.head is None:
            raise ValueError("cannot add one to an empty list")
        self.head = reverse_nodes(self.head)
        carry = 1
        last = self.head
        for node in _walk(self.head):
            total = node.data + carry
            node.data, carry = total % 10, total // 10
            last = node
            if not carry:
                break
        if carry:
            last.next = ListNode(carry)
        self.tail = self.head
        self.head = reverse_nodes(self.head)

    def is_palindrome(self) -> bool:
        values = list(self)
        return values == values[::-1]