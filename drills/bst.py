"""A binary search tree with insertion, removal and the four traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """Binary search tree; equal values go into the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` as a new leaf."""
        node = TreeNode(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _find(self, value: Any) -> tuple[TreeNode | None, TreeNode | None]:
        parent = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return parent, node

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value``; a missing value is ignored.

        A node with two children takes the value of its in-order successor,
        which is then unlinked in its place.
        """
        parent, node = self._find(value)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def min(self) -> Any:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def inorder(self) -> list[Any]:
        """Values in left, node, right order (ascending)."""
        return list(self)

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        reversed_order: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed_order[::-1]

    def level_order(self) -> list[Any]:
        """Values level by level, left to right."""
        result: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def __contains__(self, value: Any) -> bool:
        return self._find(value)[1] is not None

    def __iter__(self) -> Iterator[Any]:
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size