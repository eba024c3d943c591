# deadends

Containers for programs that work with genealogical records. Every element
in them is identified by a string key, got from the element with a
`get_key` function. Where keys must be ordered, a `compare` function returns
a negative number, zero or a positive number, as `strcmp` does. Some
containers also take an optional `delete` callback, which is called on
elements they discard.

## Modules

- `deadends.sort`
  - `sort_elements(elements, get_key, compare)` sorts a list by key in place.
  - `linear_search(elements, key, get_key)` returns `(element, index)`, or
    `(None, -1)` when there is no match.
  - `binary_search(elements, key, get_key, compare)` searches a sorted list.
    It returns `(element, index)`, or `(None, insertion_point)` on a miss.
- `deadends.block.Block` is a growable sequence that does not accept `None`.
  Its methods find, insert, remove, sort and de-duplicate elements by key:
  `find`, `find_sorted`, `contains`, `contains_sorted`, `remove_key`,
  `remove_key_sorted`, `sort`, `is_sorted`, `unique`, `copy` and `empty`.
  The methods `get`, `first` and `last` return `None` for an index that is
  out of range.
- `deadends.hashtable`
  - `HashTable(get_key, compare, delete, num_buckets)` is a table of buckets.
  - `add(element, replace)` returns `True` if the table changed.
  - Other methods: `search`, `search_element`, `remove`, `remove_element`
    and `count_if`. The table also supports `in`, `len()` and iteration in
    bucket order.
  - `get_hash(key, max_hash)` gives the bucket of a key, using the djb2 hash.
- `deadends.tables`
  - `IntegerTable` maps strings to integers. Its methods are `insert`,
    `increment` and `items`. `lookup` raises `KeyError` for a key that is
    missing.
  - `StringTable` maps strings to strings or `None`. Its methods are
    `insert`, `fix_string` and `items`. `lookup` returns `None` for a key
    that is missing.
- `deadends.recordindex.RecordIndex` is a `HashTable` of record roots. A root
  is any object with a `key` attribute, such as `@I1@`. `add_record` keeps a
  record that is already present under the same key, and raises `ValueError`
  for a root without a key. The other methods are `lookup` and `keys`.
- `deadends.keyedlist.KeyedList(get_key, compare, delete, sorted)` is a list
  that records whether it is sorted. A list created with `sorted=True`
  sorts itself before `find` and `contains`, and then uses binary search.
  `pop_first` and `pop_last` remove an element and return it.
- `deadends.keyedset`
  - `KeyedSet` is a set kept sorted by key. Adding an element replaces any
    element that has the same key.
  - `StringSet` is a `KeyedSet` of plain strings.

Several classes also have a `describe` method. It returns a text listing of
the contents, for debugging.

## Installation

```
pip install .
```

## Example

```python
from deadends.hashtable import HashTable
from deadends.keyedset import StringSet
from deadends.tables import IntegerTable

counts = IntegerTable(101)
for word in ["birth", "death", "birth"]:
    counts.increment(word)
assert counts.lookup("birth") == 2

names = StringSet()
names.add("smith")
names.add("jones")
names.add("smith")
assert len(names) == 2
assert list(names) == ["jones", "smith"]

people = HashTable(lambda p: p["key"], None, None, 97)
people.add({"key": "@I1@", "name": "Ann"}, False)
assert "@I1@" in people
assert people.search("@I1@")["name"] == "Ann"
```

## What it does not do

The package provides containers only. It does not do any of the following:

- read or write GEDCOM files
- parse records into node trees
- validate keys or references
- build a name index or a database
- provide a command-line program

A `RecordIndex` holds whatever root objects you give it.

## Running the tests

```
pip install .[test]
pytest
```