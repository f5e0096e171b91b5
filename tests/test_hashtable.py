import pytest

from algokit.hashtable import (
    HASH_SIZES,
    HashTable,
    HashTableExhaustedError,
    Probe,
    build_hash_table,
)


def test_new_table_uses_first_size():
    table = HashTable()
    assert table.capacity() == HASH_SIZES[0]
    assert len(table) == 0
    assert table.keys() == []


def test_insert_places_key_at_hash():
    table = HashTable()
    assert table.insert(3)
    assert table.search(3) == (Probe.FOUND, table.hash(3))
    assert 3 in table
    assert 4 not in table


def test_collision_moves_to_next_slot():
    table = HashTable()
    cap = table.capacity()
    table.insert(cap)
    table.insert(2 * cap)
    outcome, position = table.search(2 * cap)
    assert outcome is Probe.FOUND
    assert position == (table.hash(2 * cap) + 1) % cap


def test_duplicate_insert_keeps_count():
    table = HashTable()
    table.insert(5)
    assert table.insert(5)
    assert len(table) == 1


def test_crowded_insert_rebuilds_empty():
    table = HashTable()
    cap = table.capacity()
    for k in (0, cap, 2 * cap):
        assert table.insert(k)
    assert table.search(3 * cap)[0] is Probe.FULL
    assert not table.insert(3 * cap)
    assert table.capacity() == HASH_SIZES[1]
    assert len(table) == 0


def test_build_hash_table_grows_and_keeps_all_keys():
    cap = HASH_SIZES[0]
    keys = [0, cap, 2 * cap, 3 * cap]
    table = build_hash_table(keys)
    assert table.capacity() == HASH_SIZES[1]
    assert sorted(table.keys()) == sorted(keys)
    assert len(table) == len(keys)
    assert all(k in table for k in keys)


def test_rebuild_exhausts_sizes():
    table = HashTable()
    for _ in range(len(HASH_SIZES) - 1):
        table.rebuild()
    assert table.capacity() == HASH_SIZES[-1]
    with pytest.raises(HashTableExhaustedError):
        table.rebuild()


def test_render_lists_keys():
    table = build_hash_table([1, 2])
    lines = table.render().splitlines()
    assert lines[0] == f"capacity: {table.capacity()}, count: 2"
    assert lines[1].split() == ["1", "2"]