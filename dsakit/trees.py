"""Binary search tree with structural queries, deletion and traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _clone(node: TreeNode | None) -> TreeNode | None:
    if node is None:
        return None
    return TreeNode(node.value, _clone(node.left), _clone(node.right))


def _subtree_height(node: TreeNode | None) -> int:
    height = -1
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for item in level for child in (item.left, item.right) if child]
    return height


class BinarySearchTree:
    """Binary search tree holding distinct values; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _locate(self, value: Any) -> tuple[TreeNode | None, TreeNode | None, int]:
        """Return (node, parent, depth) for ``value``; node is None when absent."""
        parent: TreeNode | None = None
        node = self.root
        depth = 0
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
            depth += 1
        return node, parent, depth

    def _require(self, value: Any) -> tuple[TreeNode, TreeNode | None, int]:
        node, parent, depth = self._locate(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the tree")
        return node, parent, depth

    def insert(self, value: Any) -> None:
        """Add ``value`` at its ordered position unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def find(self, value: Any) -> TreeNode | None:
        """Return the node holding ``value``, or None."""
        return self._locate(value)[0]

    def depth(self, value: Any) -> int:
        """Number of edges from the root to ``value``."""
        return self._require(value)[2]

    def level(self, value: Any) -> int:
        """Depth of ``value`` counted from 1 at the root."""
        return self.depth(value) + 1

    def height(self, value: Any) -> int:
        """Edges on the longest path from ``value`` down to a leaf."""
        return _subtree_height(self._require(value)[0])

    def sibling(self, value: Any) -> Any:
        """Return the value of the other child of ``value``'s parent, or None.

        A node counts as having a sibling only when its parent has two children.
        """
        node, parent, _ = self._locate(value)
        if node is None or parent is None:
            return None
        if parent.left is None or parent.right is None:
            return None
        return parent.right.value if parent.left is node else parent.left.value

    def minimum(self) -> Any:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return whether it was present."""
        node, parent, _ = self._locate(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            node, parent = successor, successor_parent
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def copy(self) -> BinarySearchTree:
        """Return an independent tree with the same shape and values."""
        clone = BinarySearchTree()
        clone.root = _clone(self.root)
        clone._size = self._size
        return clone

    def _in_order(self) -> Iterator[Any]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def in_order(self) -> list[Any]:
        """Values in left, root, right order (ascending)."""
        return list(self._in_order())

    def pre_order(self) -> list[Any]:
        """Values in root, left, right order."""
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

    def post_order(self) -> list[Any]:
        """Values in left, right, root order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return result[::-1]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return self._in_order()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.pre_order()!r})"