"""64-bit ticket fingerprint for duplicate checks (not a cryptographic hash)."""

from __future__ import annotations

from collections.abc import Iterable

from lotto649.engine.rng.xorshift import GOLDEN_GAMMA, MASK64
from lotto649.engine.ticket import Ticket

FINGERPRINT_SEED = 0x517CC1B727220A95


def fingerprint(ticket: Ticket | Iterable[int]) -> int:
    """Multiplicative XOR hash over the ticket values in ticket order."""
    values = ticket.values if isinstance(ticket, Ticket) else ticket
    h = FINGERPRINT_SEED
    for value in values:
        h = ((h ^ int(value)) * GOLDEN_GAMMA) & MASK64
    return h
