"""A B+ tree of keys: sorted leaves chained left to right under separator nodes."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class _Node:
    keys: list[Any] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)
    next_leaf: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BPlusTree:
    """A B+ tree whose nodes split once they hold more than ``order`` keys."""

    def __init__(self, order: int = 3) -> None:
        if order < 2:
            raise ValueError("order must be at least 2")
        self.order = order
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._root is None:
            self._root = _Node([key])
        else:
            split = self._insert(self._root, key)
            if split is not None:
                median, sibling = split
                self._root = _Node([median], [self._root, sibling])
        self._size += 1

    def _insert(self, node: _Node, key: Any) -> tuple[Any, _Node] | None:
        if node.is_leaf:
            insort(node.keys, key)
            if len(node.keys) <= self.order:
                return None
            half = len(node.keys) // 2
            sibling = _Node(node.keys[half:], next_leaf=node.next_leaf)
            del node.keys[half:]
            node.next_leaf = sibling
            return sibling.keys[0], sibling

        index = bisect_right(node.keys, key)
        split = self._insert(node.children[index], key)
        if split is None:
            return None
        median, child = split
        insort(node.keys, median)
        node.children.insert(index + 1, child)
        if len(node.keys) <= self.order:
            return None
        mid = len(node.keys) // 2
        median = node.keys[mid]
        sibling = _Node(node.keys[mid + 1 :], node.children[mid + 1 :])
        del node.keys[mid:]
        del node.children[mid + 1 :]
        return median, sibling

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.is_leaf:
                index = bisect_left(node.keys, key)
                return index < len(node.keys) and node.keys[index] == key
            node = node.children[bisect_right(node.keys, key)]
        return False

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def keys_preorder(self) -> list[Any]:
        """Return the keys node by node, each node before its children."""
        result: list[Any] = []
        stack = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            result.extend(node.keys)
            stack.extend(reversed(node.children))
        return result

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored keys in ascending order by walking the leaf chain."""
        node = self._root
        if node is None:
            return
        while not node.is_leaf:
            node = node.children[0]
        leaf: _Node | None = node
        while leaf is not None:
            yield from leaf.keys
            leaf = leaf.next_leaf

    def __len__(self) -> int:
        return self._size