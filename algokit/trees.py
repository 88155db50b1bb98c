"""Binary trees and their vertical-order traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def vertical_traversal(root: TreeNode | None) -> list[list[Any]]:
    """Group values by column from left to right, each column top to bottom.

    Values sharing both column and depth come out in ascending order.
    """
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, depth, column = queue.popleft()
        if node.left is not None:
            queue.append((node.left, depth + 1, column - 1))
        if node.right is not None:
            queue.append((node.right, depth + 1, column + 1))
        columns[column][depth].append(node.val)

    return [
        [
            value
            for depth in sorted(columns[column])
            for value in sorted(columns[column][depth])
        ]
        for column in sorted(columns)
    ]