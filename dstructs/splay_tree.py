"""Top-down splay tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class SplayNode:
    """A node of a splay tree."""

    __slots__ = ("key", "left", "right")

    def __init__(
        self,
        key: Any,
        left: SplayNode | None = None,
        right: SplayNode | None = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"SplayNode({self.key!r})"


def _splay(tree: SplayNode | None, key: Any) -> SplayNode | None:
    """Bring ``key`` to the root of ``tree``, or the last node met while looking for it."""
    if tree is None:
        return None
    header = SplayNode(None)
    left_max = right_min = header
    while True:
        if key < tree.key:
            if tree.left is None:
                break
            if key < tree.left.key:
                c = tree.left
                tree.left = c.right
                c.right = tree
                tree = c
                if tree.left is None:
                    break
            right_min.left = tree
            right_min = tree
            tree = tree.left
        elif key > tree.key:
            if tree.right is None:
                break
            if key > tree.right.key:
                c = tree.right
                tree.right = c.left
                c.left = tree
                tree = c
                if tree.right is None:
                    break
            left_max.right = tree
            left_max = tree
            tree = tree.right
        else:
            break
    left_max.right = tree.left
    right_min.left = tree.right
    tree.left = header.right
    tree.right = header.left
    return tree


class SplayTree:
    """Splay tree; each insert brings the new key to the root."""

    def __init__(self) -> None:
        self.root: SplayNode | None = None

    def splay(self, key: Any) -> SplayNode | None:
        """Rotate ``key`` (or its nearest neighbour met on the way) to the root and return it."""
        self.root = _splay(self.root, key)
        return self.root

    def insert(self, key: Any) -> bool:
        """Add ``key`` and splay it to the root; False if it was already present."""
        parent = None
        x = self.root
        while x is not None:
            parent = x
            if key < x.key:
                x = x.left
            elif key > x.key:
                x = x.right
            else:
                self.splay(key)
                return False
        node = SplayNode(key)
        if parent is None:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self.splay(key)
        return True

    def delete(self, key: Any) -> bool:
        """Remove ``key``; its predecessor becomes the root. False if absent."""
        if self.root is None or self.search(key) is None:
            return False
        tree = _splay(self.root, key)
        if tree.left is not None:
            x = _splay(tree.left, key)
            x.right = tree.right
        else:
            x = tree.right
        self.root = x
        return True

    def search(self, key: Any) -> SplayNode | None:
        """Node holding ``key``, found recursively without splaying, or None."""

        def find(node: SplayNode | None) -> SplayNode | None:
            if node is None or node.key == key:
                return node
            return find(node.left if key < node.key else node.right)

        return find(self.root)

    def iterative_search(self, key: Any) -> SplayNode | None:
        """Node holding ``key``, found by a loop without splaying, or None."""
        x = self.root
        while x is not None and x.key != key:
            x = x.left if key < x.key else x.right
        return x

    def minimum(self) -> SplayNode | None:
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> SplayNode | None:
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def _preorder(self, node: SplayNode | None) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _inorder(self, node: SplayNode | None) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def _postorder(self, node: SplayNode | None) -> Iterator[Any]:
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

        def walk(node: SplayNode | None, parent_key: Any, side: str | None) -> None:
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