"""Hash set of integers with separate chaining over a prime number of buckets."""

from __future__ import annotations

from bisect import bisect_left

_PRIMES = (
    53, 97, 193, 389, 769,
    1543, 3079, 6151, 12289, 24593,
    49157, 98317, 196613, 393241, 786433,
    1572869, 3145739, 6291469, 12582917, 25165843,
    50331653, 100663319, 201326611, 402653189, 805306457,
    1610612741, 3221225473, 4294967291,
)


def next_prime(n: int) -> int:
    """Smallest listed prime at least ``n``; the largest one if ``n`` exceeds them all."""
    i = bisect_left(_PRIMES, n)
    return _PRIMES[i] if i < len(_PRIMES) else _PRIMES[-1]


class HashTable:
    """Set of unique integers; new values go to the front of their bucket's chain."""

    def __init__(self, n: int) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(next_prime(n))]
        self._count = 0

    def _bucket(self, val: int) -> list[int]:
        return self._buckets[val % len(self._buckets)]

    def insert(self, val: int) -> bool:
        """Add ``val``; False if it is already present."""
        bucket = self._bucket(val)
        if val in bucket:
            return False
        bucket.insert(0, val)
        self._count += 1
        return True

    def __contains__(self, val: int) -> bool:
        return val in self._bucket(val)

    def erase(self, val: int) -> bool:
        """Remove ``val``; False if it is not present."""
        bucket = self._bucket(val)
        try:
            bucket.remove(val)
        except ValueError:
            return False
        self._count -= 1
        return True

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def bucket_count(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"HashTable(size={self._count}, buckets={len(self._buckets)})"