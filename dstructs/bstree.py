"""Unbalanced binary search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class BSTNode:
    """A node of a binary search tree."""

    __slots__ = ("key", "left", "right", "parent")

    def __init__(
        self,
        key: Any,
        parent: BSTNode | None = None,
        left: BSTNode | None = None,
        right: BSTNode | None = None,
    ) -> None:
        self.key = key
        self.parent = parent
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BSTNode({self.key!r})"


def _subtree_min(node: BSTNode | None) -> BSTNode | None:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _subtree_max(node: BSTNode | None) -> BSTNode | None:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """Binary search tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, key: Any) -> BSTNode:
        """Add ``key`` as a new leaf and return its node."""
        z = BSTNode(key)
        y = None
        x = self.root
        while x is not None:
            y = x
            x = x.left if key < x.key else x.right
        z.parent = y
        if y is None:
            self.root = z
        elif key < y.key:
            y.left = z
        else:
            y.right = z
        return z

    def delete(self, key: Any) -> bool:
        """Remove one node holding ``key``; False if there is none."""
        z = self.search(key)
        if z is None:
            return False
        y = z if z.left is None or z.right is None else self.successor(z)
        x = y.left if y.left is not None else y.right
        if x is not None:
            x.parent = y.parent
        if y.parent is None:
            self.root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
        if y is not z:
            z.key = y.key
        return True

    def search(self, key: Any) -> BSTNode | None:
        """Node holding ``key``, found recursively, or None."""

        def find(node: BSTNode | None) -> BSTNode | None:
            if node is None or node.key == key:
                return node
            return find(node.left if key < node.key else node.right)

        return find(self.root)

    def iterative_search(self, key: Any) -> BSTNode | None:
        """Node holding ``key``, found by a loop, or None."""
        x = self.root
        while x is not None and x.key != key:
            x = x.left if key < x.key else x.right
        return x

    def minimum(self) -> BSTNode | None:
        return _subtree_min(self.root)

    def maximum(self) -> BSTNode | None:
        return _subtree_max(self.root)

    def successor(self, node: BSTNode) -> BSTNode | None:
        """Node with the next larger key, or None."""
        if node.right is not None:
            return _subtree_min(node.right)
        y = node.parent
        while y is not None and node is y.right:
            node = y
            y = y.parent
        return y

    def predecessor(self, node: BSTNode) -> BSTNode | None:
        """Node with the next smaller key, or None."""
        if node.left is not None:
            return _subtree_max(node.left)
        y = node.parent
        while y is not None and node is y.left:
            node = y
            y = y.parent
        return y

    def _preorder(self, node: BSTNode | None) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _inorder(self, node: BSTNode | None) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def _postorder(self, node: BSTNode | None) -> Iterator[Any]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.key

    def preorder(self) -> list:
        return list(self._preorder(self.root))

    def inorder(self) -> list:
        return list(self._inorder(self.root))

    def postorder(self) -> list:
        return list(self._postorder(self.root))

    def describe(self) -> str:
        """One line per node naming it as root or as its parent's left or right child."""
        lines: list[str] = []

        def walk(node: BSTNode | None, parent_key: Any, side: str | None) -> None:
            if node is None:
                return
            if side is None:
                lines.append(f"{node.key:2} is root")
            else:
                lines.append(f"{node.key:2} is {parent_key:2}'s {side:>6} child")
            walk(node.left, node.key, "left")
            walk(node.right, node.key, "right")

        walk(self.root, None, None)
        return "".join(line + "\n" for line in lines)