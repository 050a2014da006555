"""Text and JSON rendering of generated tickets."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from .generator import GeneratedTicket
from .ticket import TicketRules


def render_text(tickets: Sequence[GeneratedTicket]) -> str:
    """One line per ticket, e.g. ``Ticket  1: 06 09 14 25 32 45  Bonus 07``."""
    return "\n".join(format_line(item) for item in tickets)


def format_line(item: GeneratedTicket) -> str:
    return f"Ticket {item.index:2d}: {item.ticket.format()}"


def to_payload(
    tickets: Sequence[GeneratedTicket],
    *,
    rules: TicketRules,
    seed: int | None = None,
) -> dict[str, Any]:
    """Build the JSON-serializable payload of a run."""
    return {
        "seed": seed,
        "rules": asdict(rules),
        "tickets": [
            {
                "index": item.index,
                "main": list(item.ticket.main),
                "bonus": item.ticket.bonus,
            }
            for item in tickets
        ],
    }


def render_json(
    tickets: Sequence[GeneratedTicket],
    *,
    rules: TicketRules,
    seed: int | None = None,
) -> str:
    return json.dumps(to_payload(tickets, rules=rules, seed=seed), indent=2)
