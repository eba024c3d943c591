"""KeyedSet: a set of keyed elements kept in key order, and StringSet."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .block import Delete
from .keyedlist import KeyedList
from .sort import Compare, GetKey


class KeyedSet:
    """A set of elements with unique string keys, held in a sorted KeyedList."""

    def __init__(self, get_key: GetKey, compare: Compare, delete: Delete = None) -> None:
        self._list = KeyedList(get_key, compare, delete, True)

    def add(self, element: Any) -> None:
        """Add ``element``, replacing any element that has the same key."""
        key = self._list._require_get_key()(element)
        old, index = self._list.find(key)
        if old is not None:
            self._list.remove_at(index)
        self._list.insert(index, element)

    def remove(self, key: str) -> None:
        """Remove the element with ``key``; does nothing if there is none."""
        if key is None:
            return
        element, index = self._list.find(key)
        if element is None:
            return
        self._list.remove_at(index)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._list.contains(key)

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._list)!r})"

    def as_list(self) -> KeyedList:
        """Return the KeyedList that holds the set's elements."""
        return self._list

    def describe(self, to_string: Callable[[Any], str]) -> str:
        """Return a one-line description of the set's contents."""
        return self._list.describe(to_string)


def _string_key(element: Any) -> str:
    """Return a string element as its own key; reject anything else."""
    if not isinstance(element, str):
        raise TypeError(f"StringSet elements must be str, not {type(element).__name__}")
    return element


def _string_compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


class StringSet(KeyedSet):
    """A KeyedSet whose elements are strings that serve as their own keys."""

    def __init__(self) -> None:
        super().__init__(_string_key, _string_compare, None)