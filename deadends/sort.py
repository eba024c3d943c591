"""Low-level sorting and searching over sequences of keyed elements.

Elements are arbitrary objects. A ``get_key`` function maps an element to its
string key, and a ``compare`` function orders two keys. It returns a negative
number, zero or a positive number, as ``strcmp`` does.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, MutableSequence, Optional, Sequence, Tuple

GetKey = Callable[[Any], str]
Compare = Callable[[str, str], int]


def sort_elements(elements: MutableSequence[Any], get_key: GetKey, compare: Compare) -> None:
    """Sort ``elements`` in place by key, using ``compare`` to order keys."""
    ordered = sorted(
        elements,
        key=cmp_to_key(lambda a, b: compare(get_key(a), get_key(b))),
    )
    elements[:] = ordered


def linear_search(
    elements: Sequence[Any], key: Optional[str], get_key: Optional[GetKey]
) -> Tuple[Optional[Any], int]:
    """Find the first element whose key equals ``key``.

    Returns ``(element, index)``, or ``(None, -1)`` when there is no match.
    """
    if key is None or get_key is None:
        return None, -1
    for index, element in enumerate(elements):
        if get_key(element) == key:
            return element, index
    return None, -1


def binary_search(
    elements: Sequence[Any], key: str, get_key: GetKey, compare: Compare
) -> Tuple[Optional[Any], int]:
    """Find an element with ``key`` in a sequence sorted by ``compare``.

    Returns ``(element, index)`` on a match. On a miss returns
    ``(None, index)`` where ``index`` is the position at which an element
    with ``key`` would be inserted to keep the sequence sorted.
    """
    lo, hi = 0, len(elements) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        relation = compare(key, get_key(elements[mid]))
        if relation < 0:
            hi = mid - 1
        elif relation > 0:
            lo = mid + 1
        else:
            return elements[mid], mid
    return None, lo