import pytest

from dsakit.binary_tree import TreeNode, inorder, level_lines, preorder
from dsakit.bst import (
    build_bst,
    delete,
    dll_to_bst,
    dll_values,
    from_sorted,
    insert,
    max_value,
    min_value,
    search,
    to_sorted_dll,
)

SAMPLE = [50, 30, 40, 20, 60, 55, 70, 80, 25]


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_inorder_of_built_tree_is_sorted():
    root = build_bst(SAMPLE)
    assert inorder(root) == sorted(SAMPLE)


def test_sample_tree_shape():
    root = build_bst(SAMPLE)
    assert level_lines(root) == [[50], [30, 60], [20, 40, 55, 70], [25, 80]]


def test_build_stops_at_marker():
    root = build_bst([10, 5, -1, 99])
    assert inorder(root) == [5, 10]


def test_insert_ignores_duplicates():
    root = build_bst([10, 5, 15])
    root = insert(root, 5)
    assert inorder(root) == [5, 10, 15]


def test_insert_into_empty():
    root = insert(None, 7)
    assert root.data == 7 and root.left is None and root.right is None


def test_search():
    root = build_bst(SAMPLE)
    assert all(search(root, value) for value in SAMPLE)
    assert not search(root, 99)
    assert not search(None, 1)


def test_min_and_max():
    root = build_bst(SAMPLE)
    assert min_value(root) == min(SAMPLE)
    assert max_value(root) == max(SAMPLE)


def test_min_max_of_empty_tree_raise():
    with pytest.raises(ValueError):
        min_value(None)
    with pytest.raises(ValueError):
        max_value(None)


@pytest.mark.parametrize("target", SAMPLE)
def test_delete_each_value(target):
    root = delete(build_bst(SAMPLE), target)
    expected = sorted(SAMPLE)
    expected.remove(target)
    assert inorder(root) == expected


def test_delete_root_takes_left_maximum():
    root = delete(build_bst(SAMPLE), 50)
    assert root.data == 40


def test_delete_missing_value_keeps_tree():
    root = build_bst(SAMPLE)
    before = preorder(root)
    assert preorder(delete(root, 99)) == before


def test_delete_last_node():
    assert delete(build_bst([5]), 5) is None


def test_from_sorted_is_balanced():
    values = [10, 20, 30, 40, 50, 60, 70]
    root = from_sorted(values)
    assert inorder(root) == values
    assert root.data == 40
    assert _height(root) == 3


def test_from_sorted_empty():
    assert from_sorted([]) is None


def test_to_sorted_dll_links_both_ways():
    values = [10, 20, 30, 40, 50, 60, 70]
    head = to_sorted_dll(from_sorted(values))
    assert head.left is None
    assert dll_values(head) == values
    node = head
    while node.right is not None:
        assert node.right.left is node
        node = node.right
    backwards = []
    while node is not None:
        backwards.append(node.data)
        node = node.left
    assert backwards == values[::-1]


def test_dll_to_bst_three_nodes():
    first, second, third = TreeNode(10), TreeNode(20), TreeNode(30)
    first.right, second.left = second, first
    second.right, third.left = third, second
    root = dll_to_bst(first, 3)
    assert root is second
    assert root.left is first and root.right is third
    assert first.left is None and first.right is None
    assert third.left is None and third.right is None


def test_round_trip_through_dll():
    values = list(range(1, 16))
    head = to_sorted_dll(build_bst(values))
    root = dll_to_bst(head, len(values))
    assert inorder(root) == values
    assert _height(root) == 4


def test_dll_to_bst_empty():
    assert dll_to_bst(None, 3) is None
    assert dll_to_bst(TreeNode(1), 0) is None