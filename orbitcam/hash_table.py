"""An open addressing hash table supporting insertion and look-up only.

The number of buckets is always a power of two, collisions are resolved by
triangular (quadratic) probing and the load factor is kept under two thirds.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Hasher(Protocol):
    """What the table needs to know about its keys."""

    def hash(self, key: Any) -> int: ...

    def is_equal(self, key1: Any, key2: Any) -> bool: ...


class DefaultHasher:
    """Uses the built-in hash and equality."""

    def hash(self, key: Hashable) -> int:
        return hash(key)

    def is_equal(self, key1: Any, key2: Any) -> bool:
        return key1 == key2


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY = _Empty()


def _buckets_for(expected_keys: int) -> int:
    buckets = 1
    while buckets < 3 * expected_keys // 2:
        buckets *= 2
    return buckets


class HashTable(Generic[K, V]):
    """Maps keys to values; entries can be added or overwritten, never removed."""

    def __init__(self, expected_keys: int = 8, hasher: Optional[Hasher] = None) -> None:
        if expected_keys < 0:
            raise ValueError("expected_keys must not be negative")
        self._hasher: Hasher = hasher if hasher is not None else DefaultHasher()
        self._size = 0
        self._buckets = _buckets_for(expected_keys)
        self._keys: List[Any] = [_EMPTY] * self._buckets
        self._vals: List[Any] = [None] * self._buckets

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return self._buckets

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._keys[self._lookup(self._keys, key)] is not _EMPTY

    def items(self) -> Iterator[Tuple[K, V]]:
        """Key, value pairs in bucket order."""
        for key, val in zip(self._keys, self._vals):
            if key is not _EMPTY:
                yield key, val

    def clear(self) -> None:
        """Forget every entry, keeping the current capacity."""
        self._keys = [_EMPTY] * self._buckets
        self._vals = [None] * self._buckets
        self._size = 0

    def reserve(self, expected_keys: int) -> None:
        """Make room for expected_keys entries without further growth."""
        self._grow(_buckets_for(expected_keys))

    def get(self, key: K) -> Optional[V]:
        """The value stored for key, or None when absent."""
        bucket = self._lookup(self._keys, key)
        return None if self._keys[bucket] is _EMPTY else self._vals[bucket]

    def get_or_set(self, key: K, alt_val: V) -> Optional[V]:
        """Return the stored value; if absent, store alt_val and return None."""
        bucket = self._lookup(self._keys, key)
        if self._keys[bucket] is not _EMPTY:
            return self._vals[bucket]
        self._keys[bucket] = key
        self._vals[bucket] = alt_val
        self._after_insert()
        return None

    def set_at(self, key: K, val: V) -> None:
        """Store val for key, inserting or overwriting."""
        bucket = self._lookup(self._keys, key)
        self._vals[bucket] = val
        if self._keys[bucket] is _EMPTY:
            self._keys[bucket] = key
            self._after_insert()

    def load_factor(self) -> float:
        return self._size / self._buckets

    def _after_insert(self) -> None:
        self._size += 1
        if not self._load_factor_ok():
            self._grow(2 * self._buckets)

    def _load_factor_ok(self) -> bool:
        return self._buckets > self._size + self._size // 2

    def _lookup(self, keys: List[Any], key: Any) -> int:
        buckets = len(keys)
        mask = buckets - 1
        bucket = self._hasher.hash(key) & mask
        for probe in range(buckets):
            slot = keys[bucket]
            if slot is _EMPTY or self._hasher.is_equal(slot, key):
                return bucket
            bucket = (bucket + probe + 1) & mask
        raise RuntimeError("hash table is full")

    def _grow(self, new_buckets: int) -> None:
        if new_buckets <= self._buckets:
            return
        new_keys: List[Any] = [_EMPTY] * new_buckets
        new_vals: List[Any] = [None] * new_buckets
        for key, val in zip(self._keys, self._vals):
            if key is _EMPTY:
                continue
            idx = self._lookup(new_keys, key)
            new_keys[idx] = key
            new_vals[idx] = val
        self._keys = new_keys
        self._vals = new_vals
        self._buckets = new_buckets