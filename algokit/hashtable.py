"""Open-addressing hash table with linear probing and growth on crowding."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

HASH_SIZES = (7, 13, 17, 101, 211, 307, 401, 503, 601, 701, 809, 907, 997)


class Probe(Enum):
    """Outcome of a hash table search."""

    EMPTY = "empty"
    FOUND = "found"
    FULL = "full"


class HashTableExhaustedError(Exception):
    """No larger capacity is available for a rebuild."""


class HashTable:
    """Integer keys stored with linear probing.

    A search that meets as many collisions as half the capacity reports
    the table full; inserting then rebuilds the table at the next size.
    """

    def __init__(self) -> None:
        self._size_index = -1
        self._slots: list[int | None] = []
        self._count = 0
        self.rebuild()

    def capacity(self) -> int:
        return HASH_SIZES[self._size_index]

    def hash(self, key: int) -> int:
        return key % self.capacity()

    def search(self, key: int) -> tuple[Probe, int]:
        """Return the probe outcome and the slot where the search stopped."""
        limit = self.capacity() // 2
        collisions = 0
        position = self.hash(key)
        while True:
            slot = self._slots[position]
            if slot is None:
                return Probe.EMPTY, position
            if slot == key:
                return Probe.FOUND, position
            collisions += 1
            if collisions == limit:
                return Probe.FULL, position
            position = (position + 1) % self.capacity()

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if the table had to be rebuilt empty."""
        outcome, position = self.search(key)
        if outcome is Probe.FULL:
            self.rebuild()
            return False
        if outcome is Probe.EMPTY:
            self._slots[position] = key
            self._count += 1
        return True

    def rebuild(self) -> None:
        """Discard all keys and move to the next larger capacity."""
        if self._size_index + 1 >= len(HASH_SIZES):
            raise HashTableExhaustedError("no larger hash table size available")
        self._size_index += 1
        self._slots = [None] * self.capacity()
        self._count = 0

    def keys(self) -> list[int]:
        """Stored keys in slot order."""
        return [k for k in self._slots if k is not None]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)[0] is Probe.FOUND

    def __len__(self) -> int:
        return self._count

    def render(self) -> str:
        header = f"capacity: {self.capacity()}, count: {self._count}\n"
        return header + "".join(f"{k} " for k in self.keys()) + "\n"


def build_hash_table(keys: Iterable[int]) -> HashTable:
    """Insert every key, restarting from the first after each rebuild."""
    pending = list(keys)
    table = HashTable()
    i = 0
    while i < len(pending):
        i = i + 1 if table.insert(pending[i]) else 0
    return table