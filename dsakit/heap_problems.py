"""Classic problems solved with heaps."""

from __future__ import annotations

import heapq
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from dsakit.binary_tree import TreeNode, inorder


def _check_k(items: Sequence[Any], k: int) -> None:
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """The ``k``-th smallest value, keeping a heap of only ``k`` items."""
    items = list(values)
    _check_k(items, k)
    return heapq.nsmallest(k, items)[-1]


def kth_largest(values: Iterable[Any], k: int) -> Any:
    """The ``k``-th largest value, keeping a heap of only ``k`` items."""
    items = list(values)
    _check_k(items, k)
    return heapq.nlargest(k, items)[-1]


def _postorder_nodes(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _postorder_nodes(node.left)
    yield from _postorder_nodes(node.right)
    yield node


def bst_to_max_heap(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Turn a binary search tree into a max-heap in place and return its root.

    The sorted values are written back in postorder, so every node ends up
    larger than all nodes of its subtrees.
    """
    ordered = inorder(root)
    for node, value in zip(_postorder_nodes(root), ordered):
        node.data = value
    return root


def merge_k_sorted(arrays: Iterable[Sequence[Any]]) -> List[Any]:
    """Merge sorted sequences into one sorted list using a min-heap."""
    rows = [list(row) for row in arrays]
    pending = [(row[0], r, 0) for r, row in enumerate(rows) if row]
    heapq.heapify(pending)
    merged = []
    while pending:
        value, r, c = heapq.heappop(pending)
        merged.append(value)
        if c + 1 < len(rows[r]):
            heapq.heappush(pending, (rows[r][c + 1], r, c + 1))
    return merged


def running_medians(values: Iterable[Any]) -> List[Any]:
    """The median of the values seen so far, after each new value.

    With an even count the median is the mean of the two middle values.
    """
    lower: List[Any] = []  # max-heap by negation
    upper: List[Any] = []  # min-heap
    median: Any = 0
    medians = []
    for value in values:
        if len(lower) == len(upper):
            if value > median:
                heapq.heappush(upper, value)
                median = upper[0]
            else:
                heapq.heappush(lower, -value)
                median = -lower[0]
        elif len(lower) > len(upper):
            if value > median:
                heapq.heappush(upper, value)
            else:
                heapq.heappush(upper, -heapq.heapreplace(lower, -value))
            median = (upper[0] - lower[0]) / 2
        else:
            if value > median:
                heapq.heappush(lower, -heapq.heapreplace(upper, value))
            else:
                heapq.heappush(lower, -value)
            median = (upper[0] - lower[0]) / 2
        medians.append(median)
    return medians