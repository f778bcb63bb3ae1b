"""Classic problems solved with queues and double-ended queues."""

from __future__ import annotations

import operator
from collections import Counter, deque
from typing import Any, Callable, Deque, Iterable, Iterator, List, Sequence


def reverse_queue(queue: Deque[Any]) -> None:
    """Reverse the queue in place by way of a stack."""
    stack = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())


def reverse_first_k(queue: Iterable[Any], k: int) -> Deque[Any]:
    """Return a new queue with the first ``k`` items reversed, the rest kept."""
    items = deque(queue)
    n = len(items)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}, got {k}")
    stack = [items.popleft() for _ in range(k)]
    while stack:
        items.append(stack.pop())
    items.rotate(-(n - k))
    return items


def interleave_halves(queue: Deque[Any]) -> None:
    """Interleave the first half of the queue with the second half, in place.

    Each item of the first half is followed by its counterpart from the
    second half. With an odd length the middle item is rotated along with
    the rest.
    """
    half = len(queue) // 2
    first = deque(queue.popleft() for _ in range(half))
    for _ in range(half):
        queue.append(first.popleft())
        queue.append(queue.popleft())


def _check_window(values: Sequence[Any], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}, got {k}")


def first_negative_in_windows(values: Iterable[int], k: int) -> List[int]:
    """For every window of size ``k``, its first negative value, or 0."""
    items = list(values)
    _check_window(items, k)
    negatives: Deque[int] = deque()
    result = []
    for i, value in enumerate(items):
        if value < 0:
            negatives.append(i)
        if i >= k - 1:
            while negatives and negatives[0] <= i - k:
                negatives.popleft()
            result.append(items[negatives[0]] if negatives else 0)
    return result


def first_non_repeating_stream(text: str) -> List[str]:
    """After each character, the first character seen only once so far, or '#'."""
    counts: Counter = Counter()
    pending: Deque[str] = deque()
    result = []
    for ch in text:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else "#")
    return result


def _window_extremes(
    values: Sequence[Any], k: int, dominates: Callable[[Any, Any], bool]
) -> Iterator[Any]:
    window: Deque[int] = deque()
    for i, value in enumerate(values):
        if window and window[0] <= i - k:
            window.popleft()
        while window and dominates(value, values[window[-1]]):
            window.pop()
        window.append(i)
        if i >= k - 1:
            yield values[window[0]]


def sliding_window_max(values: Iterable[Any], k: int) -> List[Any]:
    """The maximum of every window of size ``k``."""
    items = list(values)
    _check_window(items, k)
    return list(_window_extremes(items, k, operator.ge))


def sum_of_window_min_max(values: Iterable[Any], k: int) -> Any:
    """Sum, over every window of size ``k``, of its maximum plus its minimum."""
    items = list(values)
    _check_window(items, k)
    maxima = _window_extremes(items, k, operator.ge)
    minima = _window_extremes(items, k, operator.le)
    return sum(high + low for high, low in zip(maxima, minima))