"""Trees whose nodes may have any number of children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional


@dataclass(eq=False)
class NaryNode:
    """A node holding a value and an ordered list of children."""

    data: Any
    children: List["NaryNode"] = field(default_factory=list)


def build_nary(values: Iterable[Any]) -> NaryNode:
    """Build a tree from a preorder stream of ``value, child count`` pairs.

    Each node's value is followed by its number of children, then by each
    child in turn. Values left over once the tree is complete are ignored.
    """
    stream = iter(values)

    def take() -> Any:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("sequence ended before the tree was complete") from None

    def build() -> NaryNode:
        node = NaryNode(take())
        count = take()
        if count < 0:
            raise ValueError(f"negative children count {count} for {node.data!r}")
        node.children = [build() for _ in range(count)]
        return node

    return build()


def level_lines(root: Optional[NaryNode]) -> List[List[Any]]:
    """Values grouped by depth, each level read left to right."""
    lines: List[List[Any]] = []
    level = [root] if root is not None else []
    while level:
        lines.append([node.data for node in level])
        level = [child for node in level for child in node.children]
    return lines