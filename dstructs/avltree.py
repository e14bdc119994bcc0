"""AVL tree of unique keys, rebalanced by rotations on insert and delete."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class AVLNode:
    """A node of an AVL tree; ``height`` counts levels, a leaf having 1."""

    __slots__ = ("key", "height", "left", "right")

    def __init__(
        self,
        key: Any,
        left: AVLNode | None = None,
        right: AVLNode | None = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right
        self.height = max(_height(left), _height(right)) + 1

    def __repr__(self) -> str:
        return f"AVLNode({self.key!r})"


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _left_left(k2: AVLNode) -> AVLNode:
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    _update(k2)
    _update(k1)
    return k1


def _right_right(k1: AVLNode) -> AVLNode:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    _update(k1)
    _update(k2)
    return k2


def _left_right(k3: AVLNode) -> AVLNode:
    k3.left = _right_right(k3.left)
    return _left_left(k3)


def _right_left(k1: AVLNode) -> AVLNode:
    k1.right = _left_left(k1.right)
    return _right_right(k1)


def _subtree_min(node: AVLNode | None) -> AVLNode | None:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _subtree_max(node: AVLNode | None) -> AVLNode | None:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def _insert(node: AVLNode | None, key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
        if _height(node.left) - _height(node.right) == 2:
            node = _left_left(node) if key < node.left.key else _left_right(node)
    else:
        node.right = _insert(node.right, key)
        if _height(node.right) - _height(node.left) == 2:
            node = _right_right(node) if key > node.right.key else _right_left(node)
    _update(node)
    return node


def _delete(node: AVLNode | None, key: Any) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
        if _height(node.right) - _height(node.left) == 2:
            r = node.right
            if _height(r.left) > _height(r.right):
                node = _right_left(node)
            else:
                node = _right_right(node)
    elif key > node.key:
        node.right = _delete(node.right, key)
        if _height(node.left) - _height(node.right) == 2:
            left = node.left
            if _height(left.right) > _height(left.left):
                node = _left_right(node)
            else:
                node = _left_left(node)
    elif node.left is not None and node.right is not None:
        # Replace from the taller side so the subtree stays balanced.
        if _height(node.left) > _height(node.right):
            stand_in = _subtree_max(node.left)
            node.key = stand_in.key
            node.left = _delete(node.left, stand_in.key)
        else:
            stand_in = _subtree_min(node.right)
            node.key = stand_in.key
            node.right = _delete(node.right, stand_in.key)
    else:
        return node.left if node.left is not None else node.right
    _update(node)
    return node


class AVLTree:
    """Self-balancing binary search tree; a key can be stored only once."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self.root)

    def insert(self, key: Any) -> bool:
        """Add ``key``; False if it is already present."""
        if self.search(key) is not None:
            return False
        self.root = _insert(self.root, key)
        return True

    def delete(self, key: Any) -> bool:
        """Remove ``key``; False if it is not present."""
        if self.search(key) is None:
            return False
        self.root = _delete(self.root, key)
        return True

    def search(self, key: Any) -> AVLNode | None:
        """Node holding ``key``, found recursively, or None."""

        def find(node: AVLNode | None) -> AVLNode | None:
            if node is None or node.key == key:
                return node
            return find(node.left if key < node.key else node.right)

        return find(self.root)

    def iterative_search(self, key: Any) -> AVLNode | None:
        """Node holding ``key``, found by a loop, or None."""
        x = self.root
        while x is not None and x.key != key:
            x = x.left if key < x.key else x.right
        return x

    def minimum(self) -> AVLNode | None:
        return _subtree_min(self.root)

    def maximum(self) -> AVLNode | None:
        return _subtree_max(self.root)

    def _preorder(self, node: AVLNode | None) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _inorder(self, node: AVLNode | None) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def _postorder(self, node: AVLNode | None) -> Iterator[Any]:
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

        def walk(node: AVLNode | None, parent_key: Any, side: str | None) -> None:
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