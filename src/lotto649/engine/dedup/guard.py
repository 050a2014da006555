"""Run-scoped set of ticket fingerprints."""

from __future__ import annotations

import numpy as np

from lotto649.engine.rng.xorshift import MASK64

INITIAL_CAPACITY = 1024
MAX_LOAD_FACTOR = 0.5


class DuplicateGuard:
    """Open-addressing hash set of 64-bit fingerprints.

    Keys live in a ``uint64`` array and occupancy in a separate boolean
    array, so a fingerprint of 0 is an ordinary key. Linear probing over a
    power-of-two table that doubles before the load factor passes 0.5.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0.")
        size = 1
        while size < capacity:
            size <<= 1
        self._keys = np.zeros(size, dtype=np.uint64)
        self._occupied = np.zeros(size, dtype=np.bool_)
        self._size = 0

    @property
    def capacity(self) -> int:
        return int(self._keys.shape[0])

    def __len__(self) -> int:
        return self._size

    def __contains__(self, fp: int) -> bool:
        return self.contains(fp)

    def contains(self, fp: int) -> bool:
        """Return True if the fingerprint was inserted earlier in this run."""
        fp = self._check(fp)
        _, found = self._probe(fp)
        return found

    def insert(self, fp: int) -> bool:
        """Record a fingerprint. Returns False if it was already present."""
        fp = self._check(fp)
        slot, found = self._probe(fp)
        if found:
            return False
        if (self._size + 1) > self.capacity * MAX_LOAD_FACTOR:
            self._grow()
            slot, _ = self._probe(fp)
        self._keys[slot] = fp
        self._occupied[slot] = True
        self._size += 1
        return True

    def _probe(self, fp: int) -> tuple[int, bool]:
        mask = self.capacity - 1
        keys = self._keys
        occupied = self._occupied
        index = fp & mask
        while occupied[index]:
            if int(keys[index]) == fp:
                return index, True
            index = (index + 1) & mask
        return index, False

    def _grow(self) -> None:
        old_keys = self._keys[self._occupied]
        new_size = self.capacity * 2
        self._keys = np.zeros(new_size, dtype=np.uint64)
        self._occupied = np.zeros(new_size, dtype=np.bool_)
        for key in old_keys.tolist():
            slot, _ = self._probe(int(key))
            self._keys[slot] = key
            self._occupied[slot] = True

    @staticmethod
    def _check(fp: int) -> int:
        fp = int(fp)
        if not (0 <= fp <= MASK64):
            raise ValueError("fingerprint must be in range 0 ~ 2**64 - 1.")
        return fp
