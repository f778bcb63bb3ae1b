"""Binary trees: building from a preorder stream, traversals and views."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree. Nodes compare by identity."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_from_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values given in preorder, with -1 marking a missing child.

    Values left over once the tree is complete are ignored.
    """
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder sequence ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.data


def preorder(root: Optional[TreeNode]) -> List[Any]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> List[Any]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> List[Any]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def level_lines(root: Optional[TreeNode]) -> List[List[Any]]:
    """Values grouped by depth, each level read left to right."""
    lines: List[List[Any]] = []
    level = [root] if root is not None else []
    while level:
        lines.append([node.data for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return lines


def level_order(root: Optional[TreeNode]) -> List[Any]:
    """Values in breadth-first order."""
    return [value for line in level_lines(root) for value in line]


def _side_view(root: Optional[TreeNode], from_left: bool) -> List[Any]:
    view: List[Any] = []

    def visit(node: Optional[TreeNode], depth: int) -> None:
        if node is None:
            return
        if depth == len(view):
            view.append(node.data)
        first, second = (node.left, node.right) if from_left else (node.right, node.left)
        visit(first, depth + 1)
        visit(second, depth + 1)

    visit(root, 0)
    return view


def left_view(root: Optional[TreeNode]) -> List[Any]:
    """The first node seen at each depth when looking from the left."""
    return _side_view(root, from_left=True)


def right_view(root: Optional[TreeNode]) -> List[Any]:
    """The first node seen at each depth when looking from the right."""
    return _side_view(root, from_left=False)


def _by_distance(root: Optional[TreeNode]) -> Iterator[tuple]:
    """Yield (horizontal distance, value) pairs in breadth-first order."""
    if root is None:
        return
    pending = deque([(root, 0)])
    while pending:
        node, distance = pending.popleft()
        yield distance, node.data
        if node.left is not None:
            pending.append((node.left, distance - 1))
        if node.right is not None:
            pending.append((node.right, distance + 1))


def top_view(root: Optional[TreeNode]) -> List[Any]:
    """The highest node at each horizontal distance, from leftmost to rightmost."""
    seen: Dict[int, Any] = {}
    for distance, value in _by_distance(root):
        seen.setdefault(distance, value)
    return [seen[distance] for distance in sorted(seen)]


def bottom_view(root: Optional[TreeNode]) -> List[Any]:
    """The lowest node at each horizontal distance, from leftmost to rightmost."""
    seen: Dict[int, Any] = dict(_by_distance(root))
    return [seen[distance] for distance in sorted(seen)]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _left_edge(node: Optional[TreeNode]) -> Iterator[Any]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.left if node.left is not None else node.right


def _right_edge(node: Optional[TreeNode]) -> Iterator[Any]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.right if node.right is not None else node.left


def _leaves(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    if _is_leaf(node):
        yield node.data
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary_traversal(root: Optional[TreeNode]) -> List[Any]:
    """The root, the left edge downwards, the leaves, then the right edge upwards."""
    if root is None:
        return []
    return [
        root.data,
        *_left_edge(root.left),
        *_leaves(root.left),
        *_leaves(root.right),
        *reversed(list(_right_edge(root.right))),
    ]