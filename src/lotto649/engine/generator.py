"""Unique ticket generation for a single run."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from lotto649.engine.dedup import DuplicateGuard, fingerprint
from lotto649.engine.rng import EntropySeeder, Xorshift128Plus
from lotto649.engine.sampler import FisherYatesSampler
from lotto649.engine.ticket import Ticket, TicketRules
from lotto649.logging_utils import get_logger

DEFAULT_TICKET_COUNT = 5
DEFAULT_MAX_RETRIES = 1_000_000

logger = get_logger(__name__)


class TicketSpaceExhaustedError(RuntimeError):
    """Raised when no further unique ticket can be produced."""

    def __init__(self, message: str, *, requested: int, emitted: int, attempts: int = 0) -> None:
        super().__init__(message)
        self.requested = requested
        self.emitted = emitted
        self.attempts = attempts


@dataclass(frozen=True)
class GeneratedTicket:
    """A ticket accepted into the run, with its 1-based position."""

    index: int
    ticket: Ticket
    fingerprint: int
    attempts: int


@dataclass
class GenerationStats:
    """Draw counters for one run."""

    draws: int = 0
    rejected: int = 0
    collisions: int = 0


class TicketGenerator:
    """Draw tickets until the requested number of unique ones is reached.

    Engine, sampler and guard belong to this instance; a new generator is a
    new run with an empty seen-set.
    """

    def __init__(
        self,
        engine: Xorshift128Plus,
        rules: TicketRules | None = None,
        *,
        sampler: FisherYatesSampler | None = None,
        guard: DuplicateGuard | None = None,
        max_retries_per_ticket: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        if max_retries_per_ticket <= 0:
            raise ValueError("max_retries_per_ticket must be > 0.")

        self.engine = engine
        self.rules = rules or TicketRules()
        self.sampler = sampler or FisherYatesSampler(engine, self.rules)
        self.guard = guard if guard is not None else DuplicateGuard()
        self.max_retries_per_ticket = max_retries_per_ticket
        self.stats = GenerationStats()
        self._emitted: dict[int, Ticket] = {}

    @classmethod
    def from_seed(
        cls,
        seed: int | None = None,
        rules: TicketRules | None = None,
        *,
        seeder: EntropySeeder | None = None,
        max_retries_per_ticket: int = DEFAULT_MAX_RETRIES,
    ) -> TicketGenerator:
        """Build a generator from a fixed seed, or from local entropy when seed is None."""
        if seed is None:
            seeder = seeder or EntropySeeder()
            seed = seeder.seed()
            logger.debug("Seeded engine from %s entropy.", seeder.source)
        return cls(
            Xorshift128Plus(seed),
            rules,
            max_retries_per_ticket=max_retries_per_ticket,
        )

    @property
    def seed(self) -> int:
        return self.engine.seed

    @property
    def emitted_count(self) -> int:
        return len(self._emitted)

    def generate(self, count: int = DEFAULT_TICKET_COUNT) -> list[GeneratedTicket]:
        """Return ``count`` tickets, none equal to any other ticket of this run."""
        return list(self.iter_tickets(count))

    def iter_tickets(self, count: int = DEFAULT_TICKET_COUNT) -> Iterator[GeneratedTicket]:
        """Yield ``count`` unique tickets as they are produced."""
        if count <= 0:
            raise ValueError("count must be > 0.")

        remaining = self.rules.total_space() - self.emitted_count
        if count > remaining:
            raise TicketSpaceExhaustedError(
                f"Requested {count} tickets but only {remaining} unique tickets remain "
                f"(game has {self.rules.total_space()}).",
                requested=count,
                emitted=self.emitted_count,
            )
        return self._iter_unique(count)

    def _iter_unique(self, count: int) -> Iterator[GeneratedTicket]:
        for _ in range(count):
            yield self._next_unique(count)

        logger.info(
            "Generated %d tickets in %d draws (%d duplicates rejected).",
            self.emitted_count,
            self.stats.draws,
            self.stats.rejected,
        )

    def _next_unique(self, requested: int) -> GeneratedTicket:
        for attempt in range(1, self.max_retries_per_ticket + 1):
            ticket = self.sampler.draw()
            fp = fingerprint(ticket)
            self.stats.draws += 1

            if self.guard.contains(fp):
                self.stats.rejected += 1
                if self._emitted.get(fp) != ticket:
                    # Distinct tickets, same 64-bit fingerprint; still rejected.
                    self.stats.collisions += 1
                    logger.warning("Fingerprint collision on %016x: %s", fp, ticket.format())
                continue

            self.guard.insert(fp)
            self._emitted[fp] = ticket
            return GeneratedTicket(
                index=self.emitted_count,
                ticket=ticket,
                fingerprint=fp,
                attempts=attempt,
            )

        raise TicketSpaceExhaustedError(
            f"No new unique ticket after {self.max_retries_per_ticket} draws "
            f"({self.emitted_count} of {requested} produced).",
            requested=requested,
            emitted=self.emitted_count,
            attempts=self.max_retries_per_ticket,
        )
