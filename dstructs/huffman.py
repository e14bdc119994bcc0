"""Huffman trees built from integer weights with an array min-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class HuffmanNode:
    """A node of a Huffman tree; ``key`` is its weight."""

    __slots__ = ("key", "left", "right", "parent")

    def __init__(
        self,
        key: Any,
        left: HuffmanNode | None = None,
        right: HuffmanNode | None = None,
        parent: HuffmanNode | None = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right
        self.parent = parent

    def __repr__(self) -> str:
        return f"HuffmanNode({self.key!r})"


class _MinHeap:
    """Array min-heap of nodes ordered by key; children of slot N at 2N+1, 2N+2."""

    def __init__(self, nodes: list[HuffmanNode]) -> None:
        self._items = nodes
        for i in range(len(nodes) // 2 - 1, -1, -1):
            self._sift_down(i, len(nodes) - 1)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, start: int, end: int) -> None:
        heap = self._items
        c = start
        left = 2 * c + 1
        tmp = heap[c]
        while left <= end:
            if left < end and heap[left].key > heap[left + 1].key:
                left += 1
            if tmp.key <= heap[left].key:
                break
            heap[c] = heap[left]
            c = left
            left = 2 * left + 1
        heap[c] = tmp

    def _sift_up(self, start: int) -> None:
        heap = self._items
        c = start
        tmp = heap[c]
        while c > 0:
            p = (c - 1) // 2
            if heap[p].key <= tmp.key:
                break
            heap[c] = heap[p]
            c = p
        heap[c] = tmp

    def push(self, node: HuffmanNode) -> None:
        self._items.append(node)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> HuffmanNode:
        heap = self._items
        smallest = heap[0]
        heap[0], heap[-1] = heap[-1], heap[0]
        heap.pop()
        if heap:
            self._sift_down(0, len(heap) - 1)
        return smallest


def build_huffman(weights: Iterable[Any]) -> HuffmanNode:
    """Build the Huffman tree of ``weights``; the smaller of each pair goes left."""
    leaves = [HuffmanNode(w) for w in weights]
    if not leaves:
        raise ValueError("cannot build a Huffman tree from no weights")
    heap = _MinHeap(leaves)
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        parent = HuffmanNode(left.key + right.key, left, right)
        left.parent = parent
        right.parent = parent
        heap.push(parent)
    return heap.pop()


def _preorder(node: HuffmanNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: HuffmanNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _postorder(node: HuffmanNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def preorder(tree: HuffmanNode | None) -> list:
    return list(_preorder(tree))


def inorder(tree: HuffmanNode | None) -> list:
    return list(_inorder(tree))


def postorder(tree: HuffmanNode | None) -> list:
    return list(_postorder(tree))


def describe(tree: HuffmanNode | None) -> str:
    """One line per node naming it as root or as its parent's left or right child."""
    lines: list[str] = []

    def walk(node: HuffmanNode | None, parent_key: Any, side: str | None) -> None:
        if node is None:
            return
        if side is None:
            lines.append(f"{node.key:2} is root")
        else:
            lines.append(f"{node.key:2} is {parent_key:2}'s {side:>6} child")
        walk(node.left, node.key, "left")
        walk(node.right, node.key, "right")

    walk(tree, None, None)
    return "".join(line + "\n" for line in lines)