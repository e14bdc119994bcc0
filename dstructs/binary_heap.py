"""A bounded binary heap kept in an array, either largest-first or smallest-first."""

from __future__ import annotations

from collections.abc import Iterator


class HeapFullError(Exception):
    """Raised when inserting into a heap that is at capacity."""


class BinaryHeap:
    """Binary heap with a fixed capacity; children of slot N sit at 2N+1 and 2N+2."""

    def __init__(self, capacity: int = 30, largest_first: bool = True) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.largest_first = largest_first
        self._items: list[int] = []

    def _outranks(self, a: int, b: int) -> bool:
        """True if ``a`` must sit strictly above ``b``."""
        return a > b if self.largest_first else a < b

    def _sift_down(self, start: int, end: int) -> None:
        heap = self._items
        c = start
        left = 2 * c + 1
        tmp = heap[c]
        while left <= end:
            if left < end and self._outranks(heap[left + 1], heap[left]):
                left += 1
            if not self._outranks(heap[left], tmp):
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
            if not self._outranks(tmp, heap[p]):
                break
            heap[c] = heap[p]
            c = p
        heap[c] = tmp

    def insert(self, data: int) -> None:
        """Add ``data``; raises HeapFullError when the heap is at capacity."""
        if len(self._items) >= self.capacity:
            raise HeapFullError(f"heap is full ({self.capacity} items)")
        self._items.append(data)
        self._sift_up(len(self._items) - 1)

    def index(self, data: int) -> int:
        """Array position of the first occurrence of ``data``; ValueError if absent."""
        try:
            return self._items.index(data)
        except ValueError:
            raise ValueError(f"{data!r} is not in the heap") from None

    def remove(self, data: int) -> None:
        """Remove one occurrence of ``data``, filling its slot with the last item."""
        if not self._items:
            raise IndexError("remove from empty heap")
        position = self.index(data)
        last = self._items.pop()
        if position < len(self._items):
            self._items[position] = last
            self._sift_down(position, len(self._items) - 1)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        kind = "max" if self.largest_first else "min"
        return f"BinaryHeap({kind}, {self._items!r})"