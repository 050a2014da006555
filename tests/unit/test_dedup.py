from __future__ import annotations

import pytest

from lotto649.engine import DuplicateGuard, Ticket, fingerprint
from lotto649.engine.dedup import FINGERPRINT_SEED
from lotto649.engine.rng import GOLDEN_GAMMA, MASK64


def test_t411_fingerprint_is_deterministic_and_accepts_sequences():
    ticket = Ticket((6, 9, 14, 25, 32, 45), 7)

    assert fingerprint(ticket) == fingerprint(ticket)
    assert fingerprint(ticket) == fingerprint([6, 9, 14, 25, 32, 45, 7])


def test_t412_fingerprint_of_single_value():
    assert fingerprint([5]) == ((FINGERPRINT_SEED ^ 5) * GOLDEN_GAMMA) & MASK64


def test_t413_fingerprint_changes_with_bonus_and_position():
    base = fingerprint([1, 2, 3, 4, 5, 6, 7])

    assert fingerprint([1, 2, 3, 4, 5, 6, 8]) != base
    assert fingerprint([1, 2, 3, 4, 5, 7, 6]) != base
    assert fingerprint([1, 2, 3, 4, 5, 6]) != base


def test_t414_adjacent_tickets_do_not_collide():
    fingerprints = {
        fingerprint(Ticket((1, 2, 3, 4, 5, last), bonus))
        for last in range(6, 50)
        for bonus in range(1, 50)
        if bonus not in (1, 2, 3, 4, 5, last)
    }

    assert len(fingerprints) == 44 * 43


def test_t421_zero_fingerprint_is_not_an_empty_slot():
    guard = DuplicateGuard()

    assert not guard.contains(0)
    assert guard.insert(0)
    assert guard.contains(0)
    assert 0 in guard
    assert not guard.insert(0)
    assert len(guard) == 1


def test_t422_keys_sharing_a_slot_with_zero():
    guard = DuplicateGuard(capacity=16)
    guard.insert(0)

    assert not guard.contains(16)
    assert guard.insert(16)
    assert guard.insert(32)
    assert guard.contains(0)
    assert guard.contains(16)
    assert guard.contains(32)
    assert not guard.contains(48)


def test_t423_guard_grows_and_keeps_members():
    guard = DuplicateGuard()
    keys = [(index * GOLDEN_GAMMA) & MASK64 for index in range(5000)]

    for key in keys:
        assert guard.insert(key)

    assert len(guard) == 5000
    assert guard.capacity >= 2 * len(guard)
    assert all(guard.contains(key) for key in keys)
    assert not guard.contains(MASK64 - 1)


def test_guard_accepts_full_64_bit_range():
    guard = DuplicateGuard()

    assert guard.insert(MASK64)
    assert guard.contains(MASK64)


@pytest.mark.parametrize("value", [-1, MASK64 + 1])
def test_guard_rejects_out_of_range_keys(value):
    guard = DuplicateGuard()

    with pytest.raises(ValueError, match="fingerprint must be in range"):
        guard.insert(value)


def test_capacity_rounds_up_to_power_of_two():
    assert DuplicateGuard(capacity=1000).capacity == 1024
    with pytest.raises(ValueError):
        DuplicateGuard(capacity=0)
