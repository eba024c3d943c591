"""KeyedList: a list of elements with string keys that can be sorted and searched.

A KeyedList holds its elements in a Block. ``get_key`` maps an element to its
key and ``compare`` orders two keys. ``delete`` is an optional function called
on elements that the list discards. A list created with ``sorted=True`` sorts
itself before key lookups and then uses binary search.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Tuple

from .block import Block, Delete
from .sort import Compare, GetKey


class KeyedList:
    """A growable list of keyed elements that tracks whether it is sorted."""

    def __init__(
        self,
        get_key: Optional[GetKey] = None,
        compare: Optional[Compare] = None,
        delete: Delete = None,
        sorted: bool = False,
    ) -> None:
        self.get_key = get_key
        self.compare = compare
        self.delete = delete
        self.sorted = sorted
        self.is_sorted = False
        self._block = Block()

    def __len__(self) -> int:
        return len(self._block)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._block)

    def __getitem__(self, index: int) -> Any:
        return self._block[index]

    def __repr__(self) -> str:
        return f"KeyedList({list(self._block)!r}, sorted={self.sorted})"

    def _require_get_key(self) -> GetKey:
        if self.get_key is None:
            raise ValueError("this operation needs a get_key function")
        return self.get_key

    def _require_compare(self) -> Tuple[GetKey, Compare]:
        get_key = self._require_get_key()
        if self.compare is None:
            raise ValueError("this operation needs a compare function")
        return get_key, self.compare

    def get(self, index: int) -> Optional[Any]:
        """Return the element at ``index``, or None if the index is out of range."""
        return self._block.get(index)

    def first(self) -> Optional[Any]:
        """Return the first element, or None if the list is empty."""
        return self._block.first()

    def last(self) -> Optional[Any]:
        """Return the last element, or None if the list is empty."""
        return self._block.last()

    def set(self, index: int, element: Any) -> bool:
        """Replace the element at ``index``; returns False if out of range."""
        replaced = self._block.set(index, element, self.delete)
        self.is_sorted = False
        return replaced

    def append(self, element: Any) -> None:
        """Add an element to the end; the list is no longer known to be sorted."""
        self._block.append(element)
        self.is_sorted = False

    def prepend(self, element: Any) -> None:
        """Add an element to the front; the list is no longer known to be sorted."""
        self._block.prepend(element)
        self.is_sorted = False

    def insert(self, index: int, element: Any) -> None:
        """Insert an element at ``index``.

        The sorted flag is left unchanged; a caller inserting out of order
        should clear ``is_sorted`` itself.
        """
        self._block.insert(index, element)

    def remove_at(self, index: int) -> bool:
        """Remove the element at ``index``, passing it to ``delete``."""
        return self._block.remove_at(index, self.delete)

    def remove_first(self) -> bool:
        """Remove the first element, passing it to ``delete``."""
        return self._block.remove_first(self.delete)

    def remove_last(self) -> bool:
        """Remove the last element, passing it to ``delete``."""
        return self._block.remove_last(self.delete)

    def pop_first(self) -> Optional[Any]:
        """Remove and return the first element, or None if the list is empty."""
        element = self._block.first()
        self._block.remove_first()
        return element

    def pop_last(self) -> Optional[Any]:
        """Remove and return the last element, or None if the list is empty."""
        element = self._block.last()
        self._block.remove_last()
        return element

    def sort(self) -> None:
        """Sort the list by key unless it is already flagged as sorted."""
        if self.is_sorted:
            return
        get_key, compare = self._require_compare()
        self._block.sort(get_key, compare)
        self.is_sorted = True

    def is_really_sorted(self) -> bool:
        """Check the elements themselves, ignoring the sorted flag."""
        get_key, compare = self._require_compare()
        return self._block.is_sorted(get_key, compare)

    def search(self, key: str, sorted: bool = False) -> Tuple[Optional[Any], int]:
        """Search for ``key``; with ``sorted`` the list must already be in order.

        Returns ``(element, index)``. On a miss a sorted search gives the
        insertion point and an unsorted search gives -1.
        """
        if sorted:
            get_key, compare = self._require_compare()
            return self._block.find_sorted(key, get_key, compare)
        return self._block.find(key, self._require_get_key())

    def unique(self) -> None:
        """Sort the list and drop elements whose keys repeat."""
        self.sort()
        self._block.unique(self._require_get_key(), self.delete)

    def find(self, key: str) -> Tuple[Optional[Any], int]:
        """Return ``(element, index)`` for ``key``.

        A sorted list is sorted first and searched by binary search, giving the
        insertion point on a miss; otherwise linear search gives -1 on a miss.
        """
        if self.sorted:
            self.sort()
            get_key, compare = self._require_compare()
            return self._block.find_sorted(key, get_key, compare)
        return self._block.find(key, self._require_get_key())

    def contains(self, key: str) -> bool:
        """Return True if an element with ``key`` is in the list."""
        return self.find(key)[0] is not None

    def is_first(self, element: Any) -> bool:
        """Return True if ``element`` is the very object at the front."""
        return len(self._block) > 0 and self._block[0] is element

    def is_last(self, element: Any) -> bool:
        """Return True if ``element`` is the very object at the end."""
        return len(self._block) > 0 and self._block[-1] is element

    def copy(self, copy_func: Optional[Callable[[Any], Any]] = None) -> "KeyedList":
        """Return a new list with the same settings holding copies of the elements."""
        duplicate = KeyedList(self.get_key, self.compare, self.delete, self.sorted)
        duplicate.is_sorted = self.is_sorted
        duplicate._block = self._block.copy(copy_func)
        return duplicate

    def empty(self) -> None:
        """Remove every element, passing each to ``delete``."""
        self._block.empty(self.delete)

    def describe(self, to_string: Callable[[Any], str]) -> str:
        """Return a one-line description of the list's contents."""
        body = " ".join(to_string(element) for element in self._block)
        return f"showList: len = {len(self._block)}\n{body}\n"