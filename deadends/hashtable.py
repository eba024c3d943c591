"""HashTable: a bucketed hash table of keyed elements.

Each element's key is obtained with a ``get_key`` function. Elements that hash
to the same bucket are kept in a Block in insertion order. An optional
``delete`` function is called on elements that the table discards.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

from .block import Block, Delete
from .sort import Compare, GetKey

DEFAULT_BUCKETS = 1024

_MASK64 = (1 << 64) - 1


def get_hash(key: str, max_hash: int) -> int:
    """Return the bucket index in ``range(max_hash)`` for ``key``.

    Uses the djb2 string hash (hash * 33 + c) over the UTF-8 bytes of the key,
    keeps the bits selected by 0xEFFF and reduces modulo ``max_hash``.
    """
    if max_hash < 1:
        raise ValueError("max_hash must be positive")
    value = 5381
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + value + char) & _MASK64
    return (value & 0xEFFF) % max_hash


class HashTable:
    """A hash table of elements identified by string keys."""

    def __init__(
        self,
        get_key: GetKey,
        compare: Optional[Compare] = None,
        delete: Delete = None,
        num_buckets: int = DEFAULT_BUCKETS,
    ) -> None:
        if num_buckets < 1:
            raise ValueError("num_buckets must be positive")
        self.get_key = get_key
        self.compare = compare
        self.delete = delete
        self.num_buckets = num_buckets
        self._buckets: List[Optional[Block]] = [None] * num_buckets

    def _locate(self, key: str) -> Tuple[int, Optional[Any], int]:
        bucket_index = get_hash(key, self.num_buckets)
        bucket = self._buckets[bucket_index]
        if bucket is None:
            return bucket_index, None, -1
        element, index = bucket.find(key, self.get_key)
        return bucket_index, element, index

    def search(self, key: str) -> Optional[Any]:
        """Return the element with ``key``, or None if there is none."""
        return self._locate(key)[1]

    def search_element(self, element: Any) -> Optional[Any]:
        """Return the stored element that has the same key as ``element``."""
        return self.search(self.get_key(element))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def add(self, element: Any, replace: bool = False) -> bool:
        """Add ``element``.

        If an element with the same key is present it is replaced when
        ``replace`` is true (the old one is passed to ``delete``); otherwise
        the table is left unchanged. Returns True if the table changed.
        """
        key = self.get_key(element)
        bucket_index, found, index = self._locate(key)
        if found is not None:
            if not replace:
                return False
            bucket = self._buckets[bucket_index]
            assert bucket is not None
            bucket.set(index, element, self.delete)
            return True
        bucket = self._buckets[bucket_index]
        if bucket is None:
            bucket = Block()
            self._buckets[bucket_index] = bucket
        bucket.append(element)
        return True

    def remove(self, key: str) -> bool:
        """Remove the element with ``key``; returns False if there was none."""
        bucket = self._buckets[get_hash(key, self.num_buckets)]
        if bucket is None:
            return False
        return bucket.remove_key(key, self.get_key, self.delete)

    def remove_element(self, element: Any) -> bool:
        """Remove the element with the same key as ``element``."""
        return self.remove(self.get_key(element))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets if bucket is not None)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in bucket order, then insertion order."""
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket

    def count_if(self, predicate: Callable[[Any], bool]) -> int:
        """Return the number of elements for which ``predicate`` is true."""
        return sum(1 for element in self if predicate(element))

    def describe(self, show: Optional[Callable[[Any], str]] = None) -> str:
        """Return a listing of the elements with their bucket and element indexes."""
        lines = []
        for bucket_index, bucket in enumerate(self._buckets):
            if bucket is None:
                continue
            for element_index, element in enumerate(bucket):
                prefix = f"{bucket_index} {element_index} "
                lines.append(prefix + (show(element) if show is not None else ""))
        lines.append(f"showHashTable showed {len(lines)} elements")
        return "\n".join(lines) + "\n"