"""Binary tree nodes, traversals and the classic whole-tree questions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any


class TreeNode:
    """A node of a binary tree."""

    __slots__ = ("val", "left", "right")

    def __init__(
        self,
        val: Any,
        left: TreeNode | None = None,
        right: TreeNode | None = None,
    ) -> None:
        self.val = val
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def node_count(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return node_count(root.left) + node_count(root.right) + 1


def depth(root: TreeNode | None) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder(root: TreeNode | None) -> list:
    """Values in root, left, right order, by recursion."""
    return list(_preorder(root))


def preorder_iterative(root: TreeNode | None) -> list:
    """Values in root, left, right order, with an explicit stack."""
    vals: list = []
    stack: list[TreeNode] = []
    p = root
    while stack or p is not None:
        if p is None:
            # Pop every node whose right subtree is done or absent.
            while stack and (p is stack[-1].right or stack[-1].right is None):
                p = stack.pop()
            if not stack:
                break
            p = stack[-1].right
        else:
            vals.append(p.val)
            stack.append(p)
            p = p.left
    return vals


def inorder(root: TreeNode | None) -> list:
    """Values in left, root, right order, by recursion."""
    return list(_inorder(root))


def inorder_iterative(root: TreeNode | None) -> list:
    """Values in left, root, right order, with an explicit stack."""
    vals: list = []
    stack: list[TreeNode] = []
    p = root
    while stack or p is not None:
        while p is not None:
            stack.append(p)
            p = p.left
        p = stack.pop()
        vals.append(p.val)
        p = p.right
    return vals


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, root order, by recursion."""
    return list(_postorder(root))


def postorder_iterative(root: TreeNode | None) -> list:
    """Values in left, right, root order, with an explicit stack."""
    vals: list = []
    stack: list[TreeNode] = []
    p = root
    while stack or p is not None:
        while p is not None:
            stack.append(p)
            p = p.left
        done = None
        while stack and done is stack[-1].right:
            done = stack.pop()
            vals.append(done.val)
        if not stack:
            break
        p = stack[-1].right
    return vals


def level_order(root: TreeNode | None) -> list:
    """Values level by level, left to right, with a queue."""
    vals: list = []
    if root is None:
        return vals
    queue = deque([root])
    while queue:
        node = queue.popleft()
        vals.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return vals


def level_order_recursive(root: TreeNode | None) -> list:
    """Values level by level, left to right, collecting one level at a time."""

    def at_level(node: TreeNode | None, level: int) -> Iterator[Any]:
        if node is None:
            return
        if level == 1:
            yield node.val
            return
        yield from at_level(node.left, level - 1)
        yield from at_level(node.right, level - 1)

    return [
        val for level in range(1, depth(root) + 1) for val in at_level(root, level)
    ]


def to_linked_list(
    root: TreeNode | None,
) -> tuple[TreeNode | None, TreeNode | None]:
    """Relink a search tree into a sorted doubly linked list in place.

    ``left`` becomes the link to the previous node and ``right`` to the next.
    Returns (first node, last node); (None, None) for an empty tree.
    """
    if root is None:
        return None, None
    if root.left is None:
        first = root
    else:
        first, last_left = to_linked_list(root.left)
        root.left = last_left
        last_left.right = root
    if root.right is None:
        last = root
    else:
        first_right, last = to_linked_list(root.right)
        root.right = first_right
        first_right.left = root
    return first, last


def count_at_level(root: TreeNode | None, k: int) -> int:
    """Number of nodes on level ``k`` (the root is level 1)."""
    if root is None or k < 1:
        return 0
    if k == 1:
        return 1
    return count_at_level(root.left, k - 1) + count_at_level(root.right, k - 1)


def leaf_count(root: TreeNode | None) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def same_structure(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """True if the two trees have the same shape, whatever their values."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None:
        return False
    return same_structure(root1.left, root2.left) and same_structure(
        root1.right, root2.right
    )


def _balanced_height(node: TreeNode | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_height(node.left)
    right_ok, right_height = _balanced_height(node.right)
    height = max(left_height, right_height) + 1
    return left_ok and right_ok and abs(left_height - right_height) <= 1, height


def is_balanced(root: TreeNode | None) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    return _balanced_height(root)[0]


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Swap left and right at every node, in place; returns the root."""
    if root is None:
        return None
    left = mirror(root.left)
    right = mirror(root.right)
    root.left = right
    root.right = left
    return root


def contains_node(root: TreeNode | None, node: TreeNode | None) -> bool:
    """True if ``node`` itself (not merely an equal value) is in the tree."""
    if root is None or node is None:
        return False
    if root is node:
        return True
    return contains_node(root.left, node) or contains_node(root.right, node)


def lowest_common_ancestor(
    root: TreeNode | None, node1: TreeNode, node2: TreeNode
) -> TreeNode:
    """Deepest node having both ``node1`` and ``node2`` in its subtree."""
    if not (contains_node(root, node1) and contains_node(root, node2)):
        raise ValueError("both nodes must be in the tree")
    current = root
    while True:
        if current is node1 or current is node2:
            return current
        left1 = contains_node(current.left, node1)
        left2 = contains_node(current.left, node2)
        if left1 != left2:
            return current
        current = current.left if left1 else current.right


def _distance_depth(node: TreeNode | None) -> tuple[int, int]:
    """(longest path inside the subtree in edges, levels in the subtree)."""
    if node is None:
        return 0, 0
    left_dist, left_depth = _distance_depth(node.left)
    right_dist, right_depth = _distance_depth(node.right)
    best = max(left_dist, right_dist, left_depth + right_depth)
    return best, max(left_depth, right_depth) + 1


def max_distance(root: TreeNode | None) -> int:
    """Number of edges on the longest path between two nodes."""
    return _distance_depth(root)[0]


def rebuild(
    preorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder value sequences."""
    pre = list(preorder_values)
    ino = list(inorder_values)
    if len(pre) != len(ino):
        raise ValueError("Invalid input")

    def build(pre: list, ino: list) -> TreeNode | None:
        if not pre:
            return None
        root = TreeNode(pre[0])
        try:
            split = ino.index(root.val)
        except ValueError:
            raise ValueError("Invalid input") from None
        root.left = build(pre[1 : split + 1], ino[:split])
        root.right = build(pre[split + 1 :], ino[split + 1 :])
        return root

    return build(pre, ino)


def is_complete(root: TreeNode | None) -> bool:
    """True for a complete binary tree; an empty tree is not one."""
    if root is None:
        return False
    queue = deque([root])
    must_have_no_child = False
    while queue:
        node = queue.popleft()
        if must_have_no_child:
            if node.left is not None or node.right is not None:
                return False
        elif node.left is not None and node.right is not None:
            queue.append(node.left)
            queue.append(node.right)
        elif node.left is not None:
            must_have_no_child = True
            queue.append(node.left)
        elif node.right is not None:
            return False
        else:
            must_have_no_child = True
    return True