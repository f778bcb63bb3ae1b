import random
import statistics

import pytest

from dsakit.binary_tree import TreeNode, level_order, postorder
from dsakit.bst import build_bst
from dsakit.heap_problems import (
    bst_to_max_heap,
    kth_largest,
    kth_smallest,
    merge_k_sorted,
    running_medians,
)

SOURCE_VALUES = [3, 5, 4, 6, 9, 8, 7]


@pytest.mark.parametrize("k", range(1, len(SOURCE_VALUES) + 1))
def test_kth_smallest_agrees_with_sorted_order(k):
    assert kth_smallest(SOURCE_VALUES, k) == sorted(SOURCE_VALUES)[k - 1]


@pytest.mark.parametrize("k", range(1, len(SOURCE_VALUES) + 1))
def test_kth_largest_agrees_with_sorted_order(k):
    assert kth_largest(SOURCE_VALUES, k) == sorted(SOURCE_VALUES, reverse=True)[k - 1]


def test_kth_source_example():
    assert kth_smallest(SOURCE_VALUES, 5) == 7
    assert kth_largest(SOURCE_VALUES, 5) == 5


@pytest.mark.parametrize("k", [0, 8, -1])
def test_kth_rejects_bad_k(k):
    with pytest.raises(ValueError):
        kth_smallest(SOURCE_VALUES, k)
    with pytest.raises(ValueError):
        kth_largest(SOURCE_VALUES, k)


def _is_max_heap(node):
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.data >= node.data:
            return False
    return _is_max_heap(node.left) and _is_max_heap(node.right)


def test_bst_to_max_heap_source_example():
    values = [100, 50, 150, 40, 60, 110, 200, 20]
    root = build_bst(values)
    shape_before = len(level_order(root))
    result = bst_to_max_heap(root)
    assert result is root
    assert postorder(result) == sorted(values)
    assert result.data == max(values)
    assert _is_max_heap(result)
    assert len(level_order(result)) == shape_before


def test_bst_to_max_heap_empty():
    assert bst_to_max_heap(None) is None


def test_bst_to_max_heap_single():
    node = TreeNode(7)
    assert bst_to_max_heap(node).data == 7


def test_merge_k_sorted_source_example():
    arrays = [[1, 4, 8, 11], [2, 3, 6, 10], [5, 7, 12, 14]]
    merged = merge_k_sorted(arrays)
    assert merged == sorted(v for row in arrays for v in row)


def test_merge_k_sorted_uneven_and_empty_rows():
    arrays = [[], [3], [1, 2, 9], []]
    assert merge_k_sorted(arrays) == [1, 2, 3, 9]


def test_merge_k_sorted_nothing():
    assert merge_k_sorted([]) == []


def test_running_medians_source_example():
    values = [12, 10, 8, 4, 2, 3, 15]
    medians = running_medians(values)
    expected = [statistics.median(values[: i + 1]) for i in range(len(values))]
    assert medians == expected
    assert medians[0] == 12


@pytest.mark.parametrize("seed", range(6))
def test_running_medians_random(seed):
    rng = random.Random(seed)
    values = [rng.randint(-20, 20) for _ in range(30)]
    medians = running_medians(values)
    expected = [statistics.median(values[: i + 1]) for i in range(len(values))]
    assert medians == expected


def test_running_medians_empty():
    assert running_medians([]) == []