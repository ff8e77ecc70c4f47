"""A separate-chaining hash set with explicit bucket control."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from itertools import chain


class UnorderedSet:
    """Keys kept in buckets chosen by ``hash(key) % bucket_count``.

    Like the chained table it models, inserting a key twice stores it twice.
    The table doubles its bucket count when it would hold more keys than buckets.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        items = list(items)
        self._buckets: list[list[Hashable]] = [[] for _ in items]
        self._count = len(items)
        for item in items:
            self._buckets[hash(item) % len(self._buckets)].append(item)

    @classmethod
    def with_buckets(cls, count: int) -> UnorderedSet:
        """An empty set with ``count`` buckets."""
        if count < 0:
            raise ValueError("bucket count must not be negative")
        result = cls()
        result._buckets = [[] for _ in range(count)]
        return result

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Hashable]:
        return chain.from_iterable(self._buckets)

    def __contains__(self, key: object) -> bool:
        if not self._buckets:
            return False
        return key in self._buckets[hash(key) % len(self._buckets)]

    def insert(self, key: Hashable) -> None:
        """Add a key, growing the table first if it is full."""
        if self._count + 1 > len(self._buckets):
            self.rehash(2 * len(self._buckets) if self._buckets else 1)
        self._buckets[hash(key) % len(self._buckets)].append(key)
        self._count += 1

    def erase(self, key: Hashable) -> None:
        """Remove one occurrence of a key; does nothing if it is absent."""
        if not self._buckets:
            return
        bucket = self._buckets[hash(key) % len(self._buckets)]
        if key in bucket:
            bucket.remove(key)
            self._count -= 1

    def clear(self) -> None:
        """Drop every key and every bucket."""
        self._buckets = []
        self._count = 0

    def load_factor(self) -> float:
        """Keys per bucket, or 0.0 when there are no buckets."""
        if not self._buckets:
            return 0.0
        return self._count / len(self._buckets)

    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_size(self, index: int) -> int:
        """Keys in the bucket at ``index``; 0 for an index past the end."""
        if not 0 <= index < len(self._buckets):
            return 0
        return len(self._buckets[index])

    def bucket(self, key: Hashable) -> int:
        """Index of the bucket that holds, or would hold, ``key``."""
        if not self._buckets:
            raise ValueError("the set has no buckets")
        return hash(key) % len(self._buckets)

    def rehash(self, new_bucket_count: int) -> None:
        """Rebuild with a new bucket count if it differs and fits every key."""
        if new_bucket_count != len(self._buckets) and new_bucket_count >= self._count:
            self._redistribute(new_bucket_count)

    def reserve(self, new_bucket_count: int) -> None:
        """Rebuild with more buckets; a smaller count is ignored."""
        if new_bucket_count > len(self._buckets):
            self._redistribute(new_bucket_count)

    def _redistribute(self, new_bucket_count: int) -> None:
        table: list[list[Hashable]] = [[] for _ in range(new_bucket_count)]
        for key in chain.from_iterable(self._buckets):
            table[hash(key) % new_bucket_count].append(key)
        self._buckets = table