"""A binary tree filled in search-tree order, with queue and stack traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from drills.bst import TreeNode


class BinaryTree:
    """Binary tree that places each new value as a leaf in search-tree order.

    Values less than or equal to a node go left, larger values go right.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` as a new leaf, walking down with a queue."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                queue.append(current.left)
            else:
                if current.right is None:
                    current.right = node
                    return
                queue.append(current.right)

    def level_order(self) -> list[Any]:
        """Values level by level, left to right; empty for an empty tree."""
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

    def inorder_iterative(self) -> list[Any]:
        """In-order values computed with an explicit stack."""
        result: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def inorder_recursive(self) -> list[Any]:
        """In-order values computed by recursion."""
        return list(self._walk(self.root))

    def _walk(self, node: TreeNode | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._walk(node.left)
        yield node.value
        yield from self._walk(node.right)