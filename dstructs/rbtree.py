"""Red-black tree of unique keys."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any


class Color(enum.Enum):
    RED = 0
    BLACK = 1


class RBNode:
    """A node of a red-black tree."""

    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(
        self,
        key: Any,
        color: Color = Color.BLACK,
        parent: RBNode | None = None,
        left: RBNode | None = None,
        right: RBNode | None = None,
    ) -> None:
        self.key = key
        self.color = color
        self.parent = parent
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"RBNode({self.key!r}, {self.color.name})"


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


def _is_black(node: RBNode | None) -> bool:
    return node is None or node.color is Color.BLACK


class RedBlackTree:
    """Red-black tree; a key can be stored only once."""

    def __init__(self) -> None:
        self.root: RBNode | None = None

    # -- lookup ---------------------------------------------------------

    def _search(self, key: Any) -> RBNode | None:
        def find(node: RBNode | None) -> RBNode | None:
            if node is None or node.key == key:
                return node
            return find(node.left if key < node.key else node.right)

        return find(self.root)

    def __contains__(self, key: Any) -> bool:
        return self._search(key) is not None

    def iterative_search(self, key: Any) -> bool:
        """True if ``key`` is in the tree, found by a loop."""
        x = self.root
        while x is not None and x.key != key:
            x = x.left if key < x.key else x.right
        return x is not None

    def minimum(self) -> Any:
        """Smallest key; raises ValueError on an empty tree."""
        node = self.root
        if node is None:
            raise ValueError("minimum of empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """Largest key; raises ValueError on an empty tree."""
        node = self.root
        if node is None:
            raise ValueError("maximum of empty tree")
        while node.right is not None:
            node = node.right
        return node.key

    # -- rotations ------------------------------------------------------

    def _left_rotate(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x.parent.left is x:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, y: RBNode) -> None:
        x = y.left
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    # -- insertion ------------------------------------------------------

    def insert(self, key: Any) -> bool:
        """Add ``key``; False if it is already present."""
        if self._search(key) is not None:
            return False
        node = RBNode(key, Color.RED)
        y = None
        x = self.root
        while x is not None:
            y = x
            x = x.left if key < x.key else x.right
        node.parent = y
        if y is None:
            self.root = node
        elif key < y.key:
            y.left = node
        else:
            y.right = node
        self._insert_fixup(node)
        return True

    def _insert_fixup(self, node: RBNode) -> None:
        while (parent := node.parent) is not None and parent.color is Color.RED:
            gparent = parent.parent
            if parent is gparent.left:
                uncle = gparent.right
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.right is node:
                    self._left_rotate(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._right_rotate(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.left is node:
                    self._right_rotate(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._left_rotate(gparent)
        self.root.color = Color.BLACK

    # -- deletion -------------------------------------------------------

    def delete(self, key: Any) -> bool:
        """Remove ``key``; False if it is not present."""
        node = self._search(key)
        if node is None:
            return False
        self._delete_node(node)
        return True

    def _delete_node(self, node: RBNode) -> None:
        if node.left is not None and node.right is not None:
            replace = node.right
            while replace.left is not None:
                replace = replace.left
            if node.parent is not None:
                if node.parent.left is node:
                    node.parent.left = replace
                else:
                    node.parent.right = replace
            else:
                self.root = replace
            child = replace.right
            parent = replace.parent
            color = replace.color
            if parent is node:
                parent = replace
            else:
                if child is not None:
                    child.parent = parent
                parent.left = child
                replace.right = node.right
                node.right.parent = replace
            replace.parent = node.parent
            replace.color = node.color
            replace.left = node.left
            node.left.parent = replace
            if color is Color.BLACK:
                self._delete_fixup(child, parent)
            return

        child = node.left if node.left is not None else node.right
        parent = node.parent
        color = node.color
        if child is not None:
            child.parent = parent
        if parent is not None:
            if parent.left is node:
                parent.left = child
            else:
                parent.right = child
        else:
            self.root = child
        if color is Color.BLACK:
            self._delete_fixup(child, parent)

    def _delete_fixup(self, node: RBNode | None, parent: RBNode | None) -> None:
        while _is_black(node) and node is not self.root:
            if parent.left is node:
                other = parent.right
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._left_rotate(parent)
                    other = parent.right
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.right):
                        other.left.color = Color.BLACK
                        other.color = Color.RED
                        self._right_rotate(other)
                        other = parent.right
                    other.color = parent.color
                    parent.color = Color.BLACK
                    other.right.color = Color.BLACK
                    self._left_rotate(parent)
                    node = self.root
                    break
            else:
                other = parent.left
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._right_rotate(parent)
                    other = parent.left
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.left):
                        other.right.color = Color.BLACK
                        other.color = Color.RED
                        self._left_rotate(other)
                        other = parent.left
                    other.color = parent.color
                    parent.color = Color.BLACK
                    other.left.color = Color.BLACK
                    self._right_rotate(parent)
                    node = self.root
                    break
        if node is not None:
            node.color = Color.BLACK

    # -- traversal ------------------------------------------------------

    def _preorder(self, node: RBNode | None) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _inorder(self, node: RBNode | None) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def _postorder(self, node: RBNode | None) -> Iterator[Any]:
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
        """One line per node with its colour, naming it as root or as a child of its parent."""
        lines: list[str] = []

        def walk(node: RBNode | None, parent_key: Any, side: str | None) -> None:
            if node is None:
                return
            if side is None:
                lines.append(f"{node.key:2}(B) is root")
            else:
                mark = "R" if node.color is Color.RED else "B"
                lines.append(
                    f"{node.key:2}({mark}) is {parent_key:2}'s {side:>6} child"
                )
            walk(node.left, node.key, "left")
            walk(node.right, node.key, "right")

        walk(self.root, None, None)
        return "".join(line + "\n" for line in lines)