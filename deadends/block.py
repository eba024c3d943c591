"""Block: a growable sequence of elements with keyed search and sorting."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .sort import Compare, GetKey, binary_search, linear_search, sort_elements

Delete = Optional[Callable[[Any], None]]


class Block:
    """An ordered, growable collection of non-None elements."""

    def __init__(self, elements: Optional[Iterable[Any]] = None) -> None:
        self._elements: List[Any] = []
        for element in elements or ():
            self.append(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._elements))

    def __getitem__(self, index: int) -> Any:
        return self._elements[index]

    def __repr__(self) -> str:
        return f"Block({self._elements!r})"

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._elements)

    def get(self, index: int) -> Optional[Any]:
        """Return the element at ``index``, or None if the index is out of range."""
        return self._elements[index] if self._in_range(index) else None

    def first(self) -> Optional[Any]:
        """Return the first element, or None if the Block is empty."""
        return self.get(0)

    def last(self) -> Optional[Any]:
        """Return the last element, or None if the Block is empty."""
        return self.get(len(self._elements) - 1)

    def set(self, index: int, element: Any, delete: Delete = None) -> bool:
        """Replace the element at ``index``; returns False if out of range."""
        if not self._in_range(index):
            return False
        old = self._elements[index]
        if delete is not None and old is not None:
            delete(old)
        self._elements[index] = element
        return True

    def append(self, element: Any) -> None:
        """Add an element to the end."""
        self.insert(len(self._elements), element)

    def prepend(self, element: Any) -> None:
        """Add an element to the front."""
        self.insert(0, element)

    def insert(self, index: int, element: Any) -> None:
        """Insert an element at ``index``, shifting later elements along."""
        if element is None:
            raise ValueError("a Block cannot hold None")
        if not 0 <= index <= len(self._elements):
            raise IndexError(f"insert index {index} out of range")
        self._elements.insert(index, element)

    def remove_at(self, index: int, delete: Delete = None) -> bool:
        """Remove the element at ``index``; returns False if out of range."""
        if not self._in_range(index):
            return False
        element = self._elements.pop(index)
        if delete is not None:
            delete(element)
        return True

    def remove_first(self, delete: Delete = None) -> bool:
        """Remove the first element; returns False if the Block is empty."""
        return self.remove_at(0, delete)

    def remove_last(self, delete: Delete = None) -> bool:
        """Remove the last element; returns False if the Block is empty."""
        return self.remove_at(len(self._elements) - 1, delete)

    def remove_key(self, key: str, get_key: GetKey, delete: Delete = None) -> bool:
        """Remove the first element with ``key``, found by linear search."""
        element, index = linear_search(self._elements, key, get_key)
        if element is None:
            return False
        return self.remove_at(index, delete)

    def remove_key_sorted(
        self, key: str, get_key: GetKey, compare: Compare, delete: Delete = None
    ) -> bool:
        """Remove an element with ``key`` from a sorted Block, found by binary search."""
        element, index = binary_search(self._elements, key, get_key, compare)
        if element is None:
            return False
        return self.remove_at(index, delete)

    def find(self, key: str, get_key: GetKey) -> Tuple[Optional[Any], int]:
        """Linear search: return ``(element, index)``, or ``(None, -1)``."""
        return linear_search(self._elements, key, get_key)

    def find_sorted(
        self, key: str, get_key: GetKey, compare: Compare
    ) -> Tuple[Optional[Any], int]:
        """Binary search: return ``(element, index)``, or ``(None, insertion point)``."""
        if not self._elements:
            return None, 0
        return binary_search(self._elements, key, get_key, compare)

    def contains(self, key: str, get_key: GetKey) -> bool:
        """Return True if an element with ``key`` is present (linear search)."""
        return self.find(key, get_key)[0] is not None

    def contains_sorted(self, key: str, get_key: GetKey, compare: Compare) -> bool:
        """Return True if an element with ``key`` is present (binary search)."""
        return self.find_sorted(key, get_key, compare)[0] is not None

    def sort(self, get_key: GetKey, compare: Compare) -> None:
        """Sort the elements by key."""
        sort_elements(self._elements, get_key, compare)

    def is_sorted(self, get_key: GetKey, compare: Compare) -> bool:
        """Return True if the elements are in key order."""
        keys = [get_key(element) for element in self._elements]
        return all(compare(a, b) <= 0 for a, b in zip(keys, keys[1:]))

    def unique(self, get_key: GetKey, delete: Delete = None) -> None:
        """Drop elements whose key equals that of the element kept before them.

        Elements with equal keys must be adjacent, as in a sorted Block.
        """
        if not self._elements:
            return
        kept = [self._elements[0]]
        key = get_key(kept[0])
        for element in self._elements[1:]:
            next_key = get_key(element)
            if next_key != key:
                kept.append(element)
                key = next_key
            elif delete is not None:
                delete(element)
        self._elements = kept

    def copy(self, copy_func: Optional[Callable[[Any], Any]] = None) -> "Block":
        """Return a new Block holding ``copy_func`` applied to each element."""
        if copy_func is None:
            return Block(self._elements)
        return Block(copy_func(element) for element in self._elements)

    def empty(self, delete: Delete = None) -> None:
        """Remove all elements, calling ``delete`` on each if given."""
        if delete is not None:
            for element in self._elements:
                delete(element)
        self._elements = []

    def describe(self, to_string: Callable[[Any], str]) -> str:
        """Return a multi-line description of the Block's contents."""
        lines = [f"Block: {len(self._elements)}"]
        lines.extend(to_string(element) for element in self._elements)
        return "\n".join(lines) + "\n\n"