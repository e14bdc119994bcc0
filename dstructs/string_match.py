"""Substring search: the naive method and Knuth-Morris-Pratt.

Like ``str.find``, the searches return -1 when the pattern is not found.
"""

from __future__ import annotations


def naive_index(text: str, pattern: str, pos: int = 0) -> int:
    """First index at or after ``pos`` where ``pattern`` occurs, by brute force.

    Returns -1 for an empty text or pattern, a position out of range, or no match.
    """
    if not text or not pattern or pos < 0 or pos > len(text):
        return -1
    i, j = pos, 0
    while i != len(text) and j != len(pattern):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return i - j if j == len(pattern) else -1


def compute_next(pattern: str) -> list[int]:
    """KMP failure table: next[0] is -1, next[j] the longest proper border of pattern[:j]."""
    if not pattern:
        return []
    table = [0] * len(pattern)
    table[0] = -1
    i, j = 0, -1
    while i != len(pattern) - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]
    return table


def kmp(text: str, pattern: str, pos: int = 0) -> int:
    """First index at or after ``pos`` where ``pattern`` occurs, by Knuth-Morris-Pratt.

    An empty pattern matches at ``pos``; a position out of range gives -1.
    """
    if pos < 0 or pos > len(text):
        return -1
    table = compute_next(pattern)
    i, j = pos, 0
    while i != len(text) and j != len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == len(pattern) else -1