"""Ticket generation engine."""

from .ticket import NUMBER_MAX, NUMBER_MIN, Ticket, TicketRules
from .rng import EntropySeeder, Xorshift128Plus
from .sampler import FisherYatesSampler
from .dedup import DuplicateGuard, fingerprint
from .generator import (
    GeneratedTicket,
    GenerationStats,
    TicketGenerator,
    TicketSpaceExhaustedError,
)

__all__ = [
    "DuplicateGuard",
    "EntropySeeder",
    "FisherYatesSampler",
    "GeneratedTicket",
    "GenerationStats",
    "NUMBER_MAX",
    "NUMBER_MIN",
    "Ticket",
    "TicketGenerator",
    "TicketRules",
    "TicketSpaceExhaustedError",
    "Xorshift128Plus",
    "fingerprint",
]
