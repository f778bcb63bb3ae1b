"""Rebuilding a binary tree from two of its traversals."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Sequence

from dsakit.binary_tree import TreeNode


def _index_map(inorder: Sequence[Any], other: Sequence[Any]) -> Dict[Any, int]:
    if len(inorder) != len(other):
        raise ValueError("traversals have different lengths")
    positions = {value: index for index, value in enumerate(inorder)}
    if len(positions) != len(inorder):
        raise ValueError("inorder traversal holds duplicate values")
    if set(other) != positions.keys():
        raise ValueError("traversals do not hold the same values")
    return positions


def _build(
    values: Iterator[Any],
    positions: Dict[Any, int],
    size: int,
    right_first: bool,
) -> Optional[TreeNode]:
    consumed = 0

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal consumed
        if consumed >= size or start > end:
            return None
        value = next(values)
        consumed += 1
        node = TreeNode(value)
        pos = positions[value]
        if right_first:
            node.right = build(pos + 1, end)
            node.left = build(start, pos - 1)
        else:
            node.left = build(start, pos - 1)
            node.right = build(pos + 1, end)
        return node

    return build(0, size - 1)


def build_from_inorder_preorder(
    inorder: Sequence[Any], preorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild the tree whose inorder and preorder traversals are given."""
    inorder, preorder = list(inorder), list(preorder)
    positions = _index_map(inorder, preorder)
    return _build(iter(preorder), positions, len(inorder), right_first=False)


def build_from_inorder_postorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild the tree whose inorder and postorder traversals are given."""
    inorder, postorder = list(inorder), list(postorder)
    positions = _index_map(inorder, postorder)
    return _build(reversed(postorder), positions, len(inorder), right_first=True)