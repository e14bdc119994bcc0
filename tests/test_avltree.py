import pytest

from dstructs.avltree import AVLTree

SOURCE_KEYS = [3, 2, 1, 4, 5, 6, 7, 16, 15, 14, 13, 12, 11, 10, 8, 9]


def _check(node):
    """Return the subtree height, asserting balance, stored heights and ordering."""
    if node is None:
        return 0
    lh = _check(node.left)
    rh = _check(node.right)
    assert abs(lh - rh) <= 1
    assert node.height == max(lh, rh) + 1
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return max(lh, rh) + 1


@pytest.fixture
def tree():
    t = AVLTree()
    for key in SOURCE_KEYS:
        assert t.insert(key) is True
        _check(t.root)
    return t


def test_source_traversals(tree):
    assert tree.preorder() == [7, 4, 2, 1, 3, 6, 5, 13, 11, 9, 8, 10, 12, 15, 14, 16]
    assert tree.inorder() == list(range(1, 17))
    assert tree.postorder() == [1, 3, 2, 5, 6, 4, 8, 10, 9, 12, 11, 14, 16, 15, 13, 7]


def test_source_height_min_max(tree):
    assert tree.height() == 5
    assert tree.minimum().key == 1
    assert tree.maximum().key == 16


def test_source_delete(tree):
    assert tree.delete(8) is True
    assert tree.height() == 5
    assert tree.inorder() == [1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12, 13, 14, 15, 16]
    _check(tree.root)


def test_duplicate_insert_rejected(tree):
    assert tree.insert(5) is False
    assert tree.inorder() == list(range(1, 17))


def test_delete_missing(tree):
    assert tree.delete(100) is False
    assert len(tree.inorder()) == 16


def test_search_both_ways(tree):
    assert tree.search(12).key == 12
    assert tree.iterative_search(12) is tree.search(12)
    assert tree.search(40) is None
    assert tree.iterative_search(40) is None


def test_delete_all_keeps_balance(tree):
    remaining = list(range(1, 17))
    for key in SOURCE_KEYS:
        assert tree.delete(key)
        remaining.remove(key)
        _check(tree.root)
        assert tree.inorder() == remaining
    assert tree.root is None
    assert tree.height() == 0


def test_delete_node_with_two_children():
    t = AVLTree()
    for key in (2, 1, 3):
        t.insert(key)
    t.delete(2)
    assert t.preorder() == [3, 1]


def test_describe_small_tree():
    t = AVLTree()
    for key in (3, 2, 1):
        t.insert(key)
    assert t.describe() == " 2 is root\n 1 is  2's   left child\n 3 is  2's  right child\n"


def test_empty_tree():
    t = AVLTree()
    assert t.minimum() is None
    assert t.maximum() is None
    assert t.describe() == ""