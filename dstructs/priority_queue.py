"""A largest-first priority queue and a k-smallest selection built on it."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


class _Desc:
    """Wrapper that inverts ordering so heapq yields the largest item first."""

    __slots__ = ("item",)

    def __init__(self, item: Any) -> None:
        self.item = item

    def __lt__(self, other: _Desc) -> bool:
        return other.item < self.item


class PriorityQueue:
    """Priority queue whose top is its largest item."""

    def __init__(self) -> None:
        self._heap: list[_Desc] = []

    def push(self, item: Any) -> None:
        heapq.heappush(self._heap, _Desc(item))

    def pop(self) -> Any:
        """Remove and return the largest item; IndexError if empty."""
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        return heapq.heappop(self._heap).item

    def top(self) -> Any:
        """The largest item, left in place; IndexError if empty."""
        if not self._heap:
            raise IndexError("top of empty priority queue")
        return self._heap[0].item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def smallest_k(values: Iterable[Any], k: int) -> list:
    """The ``k`` smallest values in ascending order, kept in a bounded max-heap."""
    if k < 0:
        raise ValueError("k must not be negative")
    queue = PriorityQueue()
    if k == 0:
        return []
    for value in values:
        if len(queue) < k:
            queue.push(value)
        elif value < queue.top():
            queue.pop()
            queue.push(value)
    result = []
    while queue:
        result.append(queue.pop())
    result.reverse()
    return result