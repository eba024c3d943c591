from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from deadends.hashtable import HashTable, get_hash


@dataclass
class Item:
    key: str
    value: int = 0


def key_of(item):
    return item.key


def make_table(num_buckets=17, delete=None):
    return HashTable(key_of, None, delete, num_buckets)


@given(st.text(), st.integers(min_value=1, max_value=5000))
def test_get_hash_in_range(key, max_hash):
    assert 0 <= get_hash(key, max_hash) < max_hash


@given(st.text(), st.integers(min_value=1, max_value=5000))
def test_get_hash_reduces_masked_hash(key, max_hash):
    # Hashes are masked below 0xf000, so a large modulus leaves them unchanged.
    assert get_hash(key, max_hash) == get_hash(key, 100000) % max_hash


def test_get_hash_rejects_nonpositive():
    with pytest.raises(ValueError):
        get_hash("abc", 0)


def test_constructor_rejects_zero_buckets():
    with pytest.raises(ValueError):
        HashTable(key_of, None, None, 0)


def test_add_and_search():
    table = make_table()
    item = Item("@I1@", 1)
    assert table.add(item) is True
    assert table.search("@I1@") is item
    assert table.search("@I2@") is None
    assert "@I1@" in table
    assert "@I2@" not in table


def test_add_without_replace_keeps_original():
    table = make_table()
    first = Item("k", 1)
    second = Item("k", 2)
    table.add(first)
    assert table.add(second, False) is False
    assert table.search("k") is first
    assert len(table) == 1


def test_add_with_replace_deletes_old():
    deleted = []
    table = make_table(delete=deleted.append)
    first = Item("k", 1)
    second = Item("k", 2)
    table.add(first)
    assert table.add(second, True) is True
    assert table.search("k") is second
    assert deleted == [first]
    assert len(table) == 1


def test_search_element():
    table = make_table()
    stored = Item("x", 5)
    table.add(stored)
    assert table.search_element(Item("x", 99)) is stored


def test_remove_calls_delete():
    deleted = []
    table = make_table(delete=deleted.append)
    item = Item("a")
    table.add(item)
    assert table.remove("a") is True
    assert deleted == [item]
    assert table.search("a") is None
    assert table.remove("a") is False


def test_remove_element():
    table = make_table()
    table.add(Item("a"))
    table.add(Item("b"))
    assert table.remove_element(Item("a")) is True
    assert [item.key for item in table] == ["b"]
    assert table.remove_element(Item("zz")) is False


def test_collisions_in_one_bucket():
    table = make_table(num_buckets=1)
    for key in ["c", "a", "b"]:
        table.add(Item(key))
    assert [item.key for item in table] == ["c", "a", "b"]
    table.remove("a")
    assert [item.key for item in table] == ["c", "b"]


def test_iteration_follows_bucket_order():
    table = make_table(num_buckets=7)
    for index in range(40):
        table.add(Item(f"key{index}"))
    hashes = [get_hash(item.key, 7) for item in table]
    assert hashes == sorted(hashes)
    assert len(hashes) == 40


def test_count_if():
    table = make_table()
    for index in range(10):
        table.add(Item(f"k{index}", index))
    assert table.count_if(lambda item: item.value % 2 == 0) == 5


def test_describe_lists_every_element():
    table = make_table(num_buckets=1)
    table.add(Item("a"))
    table.add(Item("b"))
    text = table.describe(lambda item: item.key)
    lines = text.splitlines()
    assert lines == ["0 0 a", "0 1 b", "showHashTable showed 2 elements"]


@given(st.lists(st.tuples(st.text(min_size=1, max_size=5), st.integers()), max_size=40))
def test_matches_dict_model(pairs):
    table = make_table(num_buckets=5)
    model = {}
    for key, value in pairs:
        table.add(Item(key, value), True)
        model[key] = value
    assert len(table) == len(model)
    assert {item.key: item.value for item in table} == model
    to_remove = list(model)[::2]
    results = [table.remove(key) for key in to_remove]
    assert results == [True] * len(to_remove)
    for key in to_remove:
        del model[key]
    assert {item.key: item.value for item in table} == model
    assert len(table) == len(model)