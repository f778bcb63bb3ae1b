"""Binary search trees: insertion, search, deletion and conversions to and from
sorted doubly linked lists."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Sequence

from dsakit.binary_tree import NULL_MARKER, TreeNode


def insert(root: Optional[TreeNode], data: Any) -> TreeNode:
    """Insert ``data`` and return the root. A value already present is ignored."""
    if root is None:
        return TreeNode(data)
    if data > root.data:
        root.right = insert(root.right, data)
    elif data < root.data:
        root.left = insert(root.left, data)
    return root


def build_bst(values: Iterable[Any]) -> Optional[TreeNode]:
    """Insert values one after another, stopping at the first -1."""
    root: Optional[TreeNode] = None
    for value in values:
        if value == NULL_MARKER:
            break
        root = insert(root, value)
    return root


def search(root: Optional[TreeNode], target: Any) -> bool:
    """Tell whether ``target`` is stored in the tree."""
    node = root
    while node is not None:
        if node.data == target:
            return True
        node = node.right if target > node.data else node.left
    return False


def _extreme(root: Optional[TreeNode], side: str) -> TreeNode:
    if root is None:
        raise ValueError("no node present in the tree")
    node = root
    while getattr(node, side) is not None:
        node = getattr(node, side)
    return node


def min_value(root: Optional[TreeNode]) -> Any:
    """The smallest value in the tree."""
    return _extreme(root, "left").data


def max_value(root: Optional[TreeNode]) -> Any:
    """The largest value in the tree."""
    return _extreme(root, "right").data


def delete(root: Optional[TreeNode], target: Any) -> Optional[TreeNode]:
    """Remove ``target`` if present and return the new root.

    A node with two children takes the largest value of its left subtree.
    """
    if root is None:
        return None
    if root.data == target:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        replacement = max_value(root.left)
        root.data = replacement
        root.left = delete(root.left, replacement)
    elif root.data < target:
        root.right = delete(root.right, target)
    else:
        root.left = delete(root.left, target)
    return root


def from_sorted(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a balanced tree from values already in ascending order."""
    items = list(values)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        node = TreeNode(items[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(items) - 1)


def to_sorted_dll(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree's nodes into a sorted doubly linked list and return its head.

    ``right`` becomes the link to the next node and ``left`` the link to the
    previous one.
    """
    head: Optional[TreeNode] = None

    def visit(node: Optional[TreeNode]) -> None:
        nonlocal head
        if node is None:
            return
        visit(node.right)
        node.right = head
        if head is not None:
            head.left = node
        head = node
        visit(node.left)

    visit(root)
    if head is not None:
        head.left = None
    return head


def _forward(head: Optional[TreeNode]) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.data
        node = node.right


def dll_values(head: Optional[TreeNode]) -> List[Any]:
    """Values of a doubly linked list, following the ``right`` links."""
    return list(_forward(head))


def dll_to_bst(head: Optional[TreeNode], n: int) -> Optional[TreeNode]:
    """Relink the first ``n`` nodes of a sorted doubly linked list into a balanced tree."""
    current = head

    def build(count: int) -> Optional[TreeNode]:
        nonlocal current
        if current is None or count <= 0:
            return None
        left = build(count // 2)
        node = current
        node.left = left
        current = current.right
        node.right = build(count - count // 2 - 1)
        return node

    return build(n)