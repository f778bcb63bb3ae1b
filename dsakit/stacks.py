"""Fixed-capacity stacks and classic stack-based algorithms."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

_OPERATORS = frozenset("+-*/")


class StackOverflow(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflow(IndexError):
    """Raised when reading or removing from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def push(self, data: Any) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflow("stack overflowed")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove the top item and return it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)


class TwoStacks:
    """Two stacks sharing one fixed array: the first grows from the left,
    the second from the right. Freed slots are reset to 0."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._slots: List[Any] = [0] * size
        self._top1 = -1
        self._top2 = size

    def _ensure_room(self) -> None:
        if self._top2 - self._top1 == 1:
            raise StackOverflow("no room left in the shared array")

    def push1(self, data: Any) -> None:
        self._ensure_room()
        self._top1 += 1
        self._slots[self._top1] = data

    def push2(self, data: Any) -> None:
        self._ensure_room()
        self._top2 -= 1
        self._slots[self._top2] = data

    def pop1(self) -> Any:
        if self._top1 == -1:
            raise StackUnderflow("stack 1 is empty")
        value = self._slots[self._top1]
        self._slots[self._top1] = 0
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        if self._top2 == len(self._slots):
            raise StackUnderflow("stack 2 is empty")
        value = self._slots[self._top2]
        self._slots[self._top2] = 0
        self._top2 += 1
        return value

    def slots(self) -> List[Any]:
        """Return a copy of the whole shared array."""
        return list(self._slots)


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing its characters and popping them back."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))


def middle_element(stack: List[Any]) -> Any:
    """Return the middle item of a stack whose top is the last list item.

    For an even size the item nearer the top is chosen. The stack is left
    unchanged.
    """
    size = len(stack)
    if size == 0:
        raise IndexError("middle of an empty stack")
    position_from_top = size // 2 + 1 if size % 2 else size // 2
    return stack[size - position_from_top]


def insert_at_bottom(stack: List[Any], value: Any) -> None:
    """Place ``value`` beneath every item of the stack."""
    stack.insert(0, value)


def reverse_stack(stack: List[Any]) -> None:
    """Reverse the stack in place."""
    items = [stack.pop() for _ in range(len(stack))]
    for item in items:
        stack.append(item)


def insert_sorted(stack: List[Any], value: Any) -> None:
    """Insert ``value`` below every item on top that is greater than it."""
    index = len(stack)
    while index > 0 and stack[index - 1] > value:
        index -= 1
    stack.insert(index, value)


def sort_stack(stack: List[Any]) -> None:
    """Sort the stack in place so that the largest item ends on top."""
    items = list(stack)
    stack.clear()
    for item in items:
        insert_sorted(stack, item)


def has_redundant_brackets(expression: str) -> bool:
    """Tell whether some pair of brackets encloses no operator."""
    stack: List[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            operators = 0
            while stack and stack[-1] != "(":
                stack.pop()
                operators += 1
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
            if operators == 0:
                return True
    return False


def _nearest_smaller(values: Iterable[Any]) -> Iterator[Any]:
    stack: List[Any] = []
    for value in values:
        while stack and stack[-1] >= value:
            stack.pop()
        yield stack[-1] if stack else -1
        stack.append(value)


def next_smaller_elements(values: Iterable[Any]) -> List[Any]:
    """For each value, the nearest strictly smaller value to its right, or -1."""
    ordered = list(values)
    return list(_nearest_smaller(reversed(ordered)))[::-1]


def prev_smaller_elements(values: Iterable[Any]) -> List[Any]:
    """For each value, the nearest strictly smaller value to its left, or -1."""
    return list(_nearest_smaller(values))