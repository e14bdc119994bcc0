import pytest

from dstructs.string_match import compute_next, kmp, naive_index

CASES = [
    ("huqunwei", "wei"),
    ("aaaabaabcacdd", "abaabcac"),
    ("abcabcabd", "abcabd"),
    ("aaaaa", "aab"),
    ("mississippi", "issip"),
    ("abc", "abcd"),
    ("abababab", "abab"),
    ("xyz", "z"),
]


@pytest.mark.parametrize("text,pattern", CASES)
def test_kmp_agrees_with_find(text, pattern):
    assert kmp(text, pattern) == text.find(pattern)


@pytest.mark.parametrize("text,pattern", CASES)
def test_naive_agrees_with_find(text, pattern):
    assert naive_index(text, pattern) == text.find(pattern)


@pytest.mark.parametrize("pos", range(0, 9))
def test_start_position(pos):
    text, pattern = "abababab", "abab"
    assert kmp(text, pattern, pos) == text.find(pattern, pos)
    assert naive_index(text, pattern, pos) == text.find(pattern, pos)


def test_compute_next_documented_example():
    assert compute_next("abaabcac") == [-1, 0, 0, 1, 1, 2, 0, 1]


def test_compute_next_shape():
    table = compute_next("aaaa")
    assert table[0] == -1
    assert len(table) == 4
    assert all(table[j] < j for j in range(4))
    assert compute_next("") == []


def test_naive_rejects_empty_and_negative():
    assert naive_index("", "a") == -1
    assert naive_index("abc", "") == -1
    assert naive_index("abc", "a", -1) == -1


def test_kmp_bounds():
    assert kmp("abc", "a", -1) == -1
    assert kmp("abc", "a", 10) == -1
    assert kmp("abc", "", 2) == 2