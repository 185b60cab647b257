"""An unbalanced binary search tree with in-order and pre-order traversal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go into its right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, value: Any) -> None:
        """Insert ``value`` into the tree."""
        self._size += 1
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order (sorted order)."""
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result