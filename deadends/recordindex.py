"""RecordIndex: a hash table mapping record keys to record roots.

A record root is any object with a ``key`` attribute holding its record key.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .hashtable import HashTable

NUM_RECORD_INDEX_BUCKETS = 2047


def _record_key(root: Any) -> str:
    return root.key


class RecordIndex(HashTable):
    """An index of record roots by key. Roots are never deleted by the index."""

    def __init__(self) -> None:
        super().__init__(_record_key, None, None, NUM_RECORD_INDEX_BUCKETS)

    def add_record(self, root: Any) -> bool:
        """Add a record root; an existing record with the same key is kept.

        Returns True if the record was added.
        """
        if root is None or getattr(root, "key", None) is None:
            raise ValueError("a record added to the index must have a key")
        return self.add(root, False)

    def lookup(self, key: str) -> Optional[Any]:
        """Return the record root with ``key``, or None."""
        return self.search(key)

    def keys(self) -> Iterator[str]:
        """Yield the keys of the indexed records in index order."""
        for root in self:
            yield root.key

    def describe_keys(self) -> str:
        """Return one line per record giving its key."""
        return "".join(f"Key {key}\n" for key in self.keys())