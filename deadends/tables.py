"""Hash tables that map strings to integers and strings to strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .hashtable import HashTable


@dataclass
class _IntegerElement:
    key: str
    value: int


@dataclass
class _StringElement:
    key: str
    value: Optional[str]


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


class IntegerTable:
    """A table mapping string keys to integer values."""

    def __init__(self, num_buckets: int) -> None:
        self._table = HashTable(lambda element: element.key, None, None, num_buckets)

    def lookup(self, key: str) -> int:
        """Return the value for ``key``; raises KeyError if it is absent."""
        element = self._table.search(key)
        if element is None:
            raise KeyError(key)
        return element.value

    def insert(self, key: str, value: int) -> None:
        """Set the value for ``key``, adding it if it is absent."""
        element = self._table.search(key)
        if element is not None:
            element.value = value
            return
        self._table.add(_IntegerElement(key, value))

    def increment(self, key: str) -> None:
        """Add one to the value for ``key``; an absent key starts at 1."""
        element = self._table.search(key)
        if element is not None:
            element.value += 1
        else:
            self.insert(key, 1)

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield ``(key, value)`` pairs in table order."""
        for element in self._table:
            yield element.key, element.value

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def describe(self) -> str:
        """Return a listing of the table's contents."""
        return self._table.describe(lambda el: f" {el.key} -> {el.value}")


class StringTable:
    """A table mapping string keys to string values, which may be None."""

    def __init__(self, num_buckets: int) -> None:
        self._table = HashTable(lambda element: element.key, _compare, None, num_buckets)

    def lookup(self, key: str) -> Optional[str]:
        """Return the value for ``key``, or None if it is absent or has no value."""
        element = self._table.search(key)
        return element.value if element is not None else None

    def insert(self, key: str, value: Optional[str]) -> None:
        """Map ``key`` to ``value``, replacing any existing mapping."""
        if self._table.search(key) is not None:
            self._table.remove(key)
        self._table.add(_StringElement(key, value))

    def fix_string(self, string: str) -> str:
        """Return the table's stored copy of ``string``, storing it first if needed."""
        saved = self.lookup(string)
        if saved is not None:
            return saved
        self.insert(string, string)
        stored = self.lookup(string)
        assert stored is not None
        return stored

    def items(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield ``(key, value)`` pairs in table order."""
        for element in self._table:
            yield element.key, element.value

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def describe(self) -> str:
        """Return a listing of the table's contents."""
        return self._table.describe(
            lambda el: f"  {el.key} -> {el.value if el.value is not None else 'null'}"
        )