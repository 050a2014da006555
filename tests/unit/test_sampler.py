from __future__ import annotations

import numpy as np

from lotto649.engine import FisherYatesSampler, Ticket, TicketRules, Xorshift128Plus

# chi-square, 48 degrees of freedom; p < 1e-4 is well below this bound
CHI_SQUARE_LIMIT = 95.0


def _chi_square(counts: np.ndarray) -> float:
    expected = counts.sum() / counts.size
    return float(((counts - expected) ** 2 / expected).sum())


def test_t311_tickets_satisfy_invariants():
    rules = TicketRules()
    sampler = FisherYatesSampler(Xorshift128Plus(123), rules)

    for _ in range(2000):
        ticket = sampler.draw()
        ticket.validate(rules)
        assert len(ticket.main) == 6
        assert list(ticket.main) == sorted(ticket.main)
        assert 1 <= ticket.bonus <= 49
        assert ticket.bonus not in ticket.main


def test_t312_shuffle_is_a_permutation_of_the_pool():
    sampler = FisherYatesSampler(Xorshift128Plus(5))

    pool = sampler.shuffle()

    assert sorted(pool) == list(range(1, 50))


def test_t313_fixed_seed_reproduces_draws():
    first = FisherYatesSampler(Xorshift128Plus(77))
    second = FisherYatesSampler(Xorshift128Plus(77))

    assert [first.draw() for _ in range(50)] == [second.draw() for _ in range(50)]


def test_t314_no_value_or_position_bias_over_100k_draws():
    rules = TicketRules()
    sampler = FisherYatesSampler(Xorshift128Plus(20251106), rules)
    draws = np.array([sampler.shuffle()[: rules.ticket_size] for _ in range(100_000)], dtype=np.int64)

    main_counts = np.bincount(draws[:, :6].ravel(), minlength=50)[1:]
    bonus_counts = np.bincount(draws[:, 6], minlength=50)[1:]

    assert main_counts.sum() == 600_000
    assert _chi_square(main_counts) < CHI_SQUARE_LIMIT
    assert _chi_square(bonus_counts) < CHI_SQUARE_LIMIT
    for position in range(rules.ticket_size):
        position_counts = np.bincount(draws[:, position], minlength=50)[1:]
        assert _chi_square(position_counts) < CHI_SQUARE_LIMIT


def test_draw_matches_head_of_shuffle():
    rules = TicketRules()
    a = FisherYatesSampler(Xorshift128Plus(11), rules)
    b = FisherYatesSampler(Xorshift128Plus(11), rules)

    assert a.draw() == Ticket.from_draw(b.shuffle(), rules)


def test_small_pool_without_bonus():
    rules = TicketRules(number_max=10, main_count=3, bonus=False)
    sampler = FisherYatesSampler(Xorshift128Plus(3), rules)

    for _ in range(200):
        ticket = sampler.draw()
        ticket.validate(rules)
        assert ticket.bonus is None
