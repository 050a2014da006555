"""Fisher–Yates ticket sampler."""

from __future__ import annotations

from lotto649.engine.rng import Xorshift128Plus
from lotto649.engine.ticket import NUMBER_MIN, Ticket, TicketRules


class FisherYatesSampler:
    """Draw tickets by shuffling the full number pool and taking a prefix."""

    def __init__(self, engine: Xorshift128Plus, rules: TicketRules | None = None) -> None:
        self.engine = engine
        self.rules = rules or TicketRules()

    def shuffle(self) -> list[int]:
        """Return a uniformly shuffled copy of the pool 1..number_max."""
        pool = list(range(NUMBER_MIN, self.rules.number_max + 1))
        next_u64 = self.engine.next_u64
        for i in range(len(pool) - 1, 0, -1):
            j = next_u64() % (i + 1)
            pool[i], pool[j] = pool[j], pool[i]
        return pool

    def draw(self) -> Ticket:
        """Draw one ticket: sorted main numbers plus the next pool entry as bonus."""
        return Ticket.from_draw(self.shuffle(), self.rules)
