import pytest

from dsakit.binary_tree import build_from_preorder, inorder, postorder, preorder
from dsakit.tree_construction import (
    build_from_inorder_postorder,
    build_from_inorder_preorder,
)

SHAPES = [
    [10, 20, 40, -1, -1, 50, 70, 110, -1, -1, 111, -1, -1, 80, -1, -1,
     30, -1, 60, -1, 90, 112, -1, -1, 113, -1, -1],
    [1, 2, 3, 4, -1, -1, -1, -1, -1],
    [1, -1, 2, -1, 3, -1, 4, -1, -1],
    [5, 3, -1, 4, -1, -1, 8, 7, -1, -1, 9, -1, -1],
    [42, -1, -1],
]


def _shape(node):
    if node is None:
        return None
    return (node.data, _shape(node.left), _shape(node.right))


def test_source_example_inorder_postorder():
    ino = [8, 14, 6, 2, 10, 4]
    post = [8, 6, 14, 4, 10, 2]
    root = build_from_inorder_postorder(ino, post)
    assert root.data == 2
    assert inorder(root) == ino
    assert postorder(root) == post


def test_source_example_inorder_preorder():
    ino = [10, 8, 6, 2, 4, 12]
    pre = [2, 8, 10, 6, 4, 12]
    root = build_from_inorder_preorder(ino, pre)
    assert root.data == 2
    assert inorder(root) == ino
    assert preorder(root) == pre


@pytest.mark.parametrize("values", SHAPES)
def test_round_trip_through_preorder(values):
    original = build_from_preorder(values)
    rebuilt = build_from_inorder_preorder(inorder(original), preorder(original))
    assert _shape(rebuilt) == _shape(original)


@pytest.mark.parametrize("values", SHAPES)
def test_round_trip_through_postorder(values):
    original = build_from_preorder(values)
    rebuilt = build_from_inorder_postorder(inorder(original), postorder(original))
    assert _shape(rebuilt) == _shape(original)


def test_both_constructions_agree():
    original = build_from_preorder(SHAPES[3])
    from_pre = build_from_inorder_preorder(inorder(original), preorder(original))
    from_post = build_from_inorder_postorder(inorder(original), postorder(original))
    assert _shape(from_pre) == _shape(from_post)


def test_empty_traversals_give_no_tree():
    assert build_from_inorder_preorder([], []) is None
    assert build_from_inorder_postorder([], []) is None


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 2], [1])


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        build_from_inorder_postorder([1, 2, 3], [1, 2, 4])


def test_duplicate_values_raise():
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 1], [1, 1])