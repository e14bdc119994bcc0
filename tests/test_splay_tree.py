import pytest

from dstructs.splay_tree import SplayTree

SOURCE_KEYS = [10, 50, 40, 30, 20, 60]


@pytest.fixture
def tree():
    t = SplayTree()
    for key in SOURCE_KEYS:
        assert t.insert(key) is True
        assert t.root.key == key
    return t


def test_source_traversals(tree):
    assert tree.preorder() == [60, 30, 20, 10, 50, 40]
    assert tree.inorder() == [10, 20, 30, 40, 50, 60]
    assert tree.postorder() == [10, 20, 40, 50, 30, 60]


def test_source_min_max(tree):
    assert tree.minimum().key == 10
    assert tree.maximum().key == 60


def test_source_describe(tree):
    assert tree.describe() == (
        "60 is root\n"
        "30 is 60's   left child\n"
        "20 is 30's   left child\n"
        "10 is 20's   left child\n"
        "50 is 30's  right child\n"
        "40 is 50's   left child\n"
    )


def test_source_splay(tree):
    root = tree.splay(30)
    assert root.key == 30
    assert tree.describe() == (
        "30 is root\n"
        "20 is 30's   left child\n"
        "10 is 20's   left child\n"
        "60 is 30's  right child\n"
        "50 is 60's   left child\n"
        "40 is 50's   left child\n"
    )


def test_delete_makes_predecessor_root(tree):
    assert tree.delete(30) is True
    assert tree.root.key == 20
    assert tree.inorder() == [10, 20, 40, 50, 60]


def test_delete_missing(tree):
    before = tree.preorder()
    assert tree.delete(35) is False
    assert tree.preorder() == before


def test_duplicate_insert(tree):
    assert tree.insert(40) is False
    assert tree.root.key == 40
    assert tree.inorder() == [10, 20, 30, 40, 50, 60]


def test_search_does_not_splay(tree):
    assert tree.search(40).key == 40
    assert tree.iterative_search(40) is tree.search(40)
    assert tree.search(45) is None
    assert tree.root.key == 60


def test_splay_absent_key_keeps_order(tree):
    tree.splay(45)
    assert tree.root.key in (40, 50)
    assert tree.inorder() == [10, 20, 30, 40, 50, 60]


def test_delete_everything(tree):
    for key in SOURCE_KEYS:
        assert tree.delete(key)
    assert tree.root is None
    assert tree.minimum() is None
    assert tree.maximum() is None