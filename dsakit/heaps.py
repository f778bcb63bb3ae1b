"""A fixed-capacity max-heap and array heap routines: heapify, build, sort."""

from __future__ import annotations

from typing import Any, Iterator, List, MutableSequence


class HeapOverflow(OverflowError):
    """Raised when inserting into a heap that has no room left."""


class HeapUnderflow(IndexError):
    """Raised when reading or removing from an empty heap."""


def _sift_down(values: MutableSequence[Any], size: int, index: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and values[largest] < values[child]:
                largest = child
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


class MaxHeap:
    """A max-heap holding at most ``capacity`` items in a flat array."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value`` and move it up to its place."""
        if len(self._items) == self.capacity:
            raise HeapOverflow("heap overflow")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def pop(self) -> Any:
        """Remove the largest item and return it."""
        if not self._items:
            raise HeapUnderflow("heap is empty")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            _sift_down(items, len(items), 0)
        return top

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        if not self._items:
            raise HeapUnderflow("heap is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items in array (level) order."""
        return iter(self._items)


def heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items (0-based)."""
    if not 0 <= size <= len(values):
        raise ValueError(f"size must be between 0 and {len(values)}, got {size}")
    if not 0 <= index < max(size, 1):
        raise IndexError(f"index {index} outside the heap")
    _sift_down(values, size, index)


def build_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(values, size, index)


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in ascending order."""
    build_heap(values)
    for end in range(len(values) - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)