"""Fixed-capacity queues backed by a plain array: linear, circular and double-ended.

Slots never written hold ``None``; slots freed by a pop are reset to ``-1``.
"""

from __future__ import annotations

from typing import Any, List


class QueueOverflow(OverflowError):
    """Raised when pushing into a queue that has no room left."""


class QueueUnderflow(IndexError):
    """Raised when reading or removing from an empty queue."""


_FREED = -1


class _ArrayBacked:
    """Shared state of the array-backed queues: a slot array and two indices."""

    def _setup(self, capacity: int, minimum: int) -> None:
        if capacity < minimum:
            raise ValueError(f"capacity must be at least {minimum}")
        self.capacity = capacity
        self._slots: List[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def _check_not_empty(self) -> None:
        if self._empty():
            raise QueueUnderflow("queue is empty")

    def _reset(self) -> None:
        self._front = -1
        self._rear = -1

    def _front_item(self) -> Any:
        self._check_not_empty()
        return self._slots[self._front]

    def _rear_item(self) -> Any:
        self._check_not_empty()
        return self._slots[self._rear]

    def _copy_slots(self) -> List[Any]:
        return list(self._slots)


class LinearQueue(_ArrayBacked):
    """A queue whose rear only moves forward; slots freed at the front are not reused
    until the queue empties completely."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity, 0)

    def push(self, data: Any) -> None:
        if self._rear == self.capacity - 1:
            raise QueueOverflow("queue overflow")
        if self._empty():
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = data

    def pop(self) -> Any:
        """Remove the front item and return it."""
        self._check_not_empty()
        value = self._slots[self._front]
        self._slots[self._front] = _FREED
        if self._front == self._rear:
            self._reset()
        else:
            self._front += 1
        return value

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        return self._front_item()

    def rear(self) -> Any:
        """Return the item at the rear without removing it."""
        return self._rear_item()

    def is_empty(self) -> bool:
        return self._empty()

    def __len__(self) -> int:
        if self._empty():
            return 0
        return self._rear - self._front + 1

    def slots(self) -> List[Any]:
        """Return a copy of the whole backing array."""
        return self._copy_slots()


class _Ring(_ArrayBacked):
    """Index arithmetic for queues whose ends wrap around the array."""

    def _is_full(self) -> bool:
        return (
            self._front == 0 and self._rear == self.capacity - 1
        ) or self._rear == self._front - 1

    def _append(self, data: Any) -> None:
        if self._is_full():
            raise QueueOverflow("queue overflow")
        if self._empty():
            self._front = self._rear = 0
        elif self._rear == self.capacity - 1 and self._front != 0:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = data

    def _appendleft(self, data: Any) -> None:
        if self._is_full():
            raise QueueOverflow("queue overflow")
        if self._empty():
            self._front = self._rear = 0
        elif self._front == 0 and self._rear != self.capacity - 1:
            self._front = self.capacity - 1
        else:
            self._front -= 1
        self._slots[self._front] = data

    def _popleft(self) -> Any:
        self._check_not_empty()
        value = self._slots[self._front]
        self._slots[self._front] = _FREED
        if self._front == self._rear:
            self._reset()
        elif self._front == self.capacity - 1:
            self._front = 0
        else:
            self._front += 1
        return value

    def _popright(self) -> Any:
        self._check_not_empty()
        value = self._slots[self._rear]
        self._slots[self._rear] = _FREED
        if self._front == self._rear:
            self._reset()
        elif self._rear == 0:
            self._rear = self.capacity - 1
        else:
            self._rear -= 1
        return value

    def _count(self) -> int:
        if self._empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1


class CircularQueue(_Ring):
    """A queue whose rear wraps to the start of the array when room is free there."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity, 1)

    def push(self, data: Any) -> None:
        self._append(data)

    def pop(self) -> Any:
        """Remove the front item and return it."""
        return self._popleft()

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        return self._front_item()

    def rear(self) -> Any:
        """Return the item at the rear without removing it."""
        return self._rear_item()

    def is_empty(self) -> bool:
        return self._empty()

    def __len__(self) -> int:
        return self._count()

    def slots(self) -> List[Any]:
        """Return a copy of the whole backing array."""
        return self._copy_slots()


class ArrayDeque(_Ring):
    """A double-ended queue over a circular array."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity, 1)

    def push_back(self, data: Any) -> None:
        self._append(data)

    def push_front(self, data: Any) -> None:
        self._appendleft(data)

    def pop_front(self) -> Any:
        """Remove the front item and return it."""
        return self._popleft()

    def pop_back(self) -> Any:
        """Remove the rear item and return it."""
        return self._popright()

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        return self._front_item()

    def rear(self) -> Any:
        """Return the item at the rear without removing it."""
        return self._rear_item()

    def is_empty(self) -> bool:
        return self._empty()

    def __len__(self) -> int:
        return self._count()

    def slots(self) -> List[Any]:
        """Return a copy of the whole backing array."""
        return self._copy_slots()