"""Doubly linked list with positional inserts and deletes."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list. Nodes compare by identity."""

    data: Any
    prev: Optional["DoublyNode"] = None
    next: Optional["DoublyNode"] = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.data!r})"


class DoublyLinkedList:
    """A doubly linked list with head and tail; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)

    def _node_at(self, position: int) -> DoublyNode:
        return next(islice(self._nodes(), position - 1, None))

    def push_front(self, data: Any) -> None:
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def push_back(self, data: Any) -> None:
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at(self, data: Any, position: int) -> None:
        """Insert so the value lands at ``position`` (1 to length + 1).

        An empty list takes the value whatever the position.
        """
        if self.head is None:
            self.push_back(data)
            return
        length = len(self)
        if not 1 <= position <= length + 1:
            raise IndexError(f"position {position} outside 1..{length + 1}")
        if position == 1:
            self.push_front(data)
        elif position == length + 1:
            self.push_back(data)
        else:
            current = self._node_at(position)
            node = DoublyNode(data, prev=current.prev, next=current)
            current.prev.next = node
            current.prev = node

    def pop_front(self) -> Any:
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        node.next = None
        return node.data

    def pop_back(self) -> Any:
        if self.tail is None:
            raise IndexError("pop from an empty list")
        node = self.tail
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        node.prev = None
        return node.data

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if self.head is None:
            raise IndexError("deletion from an empty list")
        length = len(self)
        if not 1 <= position <= length:
            raise IndexError(f"position {position} outside 1..{length}")
        if position == 1:
            return self.pop_front()
        if position == length:
            return self.pop_back()
        node = self._node_at(position)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        return node.data