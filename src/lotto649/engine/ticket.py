"""Ticket rules and the ticket value type."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

NUMBER_MIN = 1
NUMBER_MAX = 49
MAIN_COUNT = 6


@dataclass(frozen=True)
class TicketRules:
    """Shape of a lottery game: pool size, main-number count, bonus on/off."""

    number_max: int = NUMBER_MAX
    main_count: int = MAIN_COUNT
    bonus: bool = True

    def __post_init__(self) -> None:
        if self.main_count < 1:
            raise ValueError("main_count must be >= 1.")
        if self.number_max < self.ticket_size:
            raise ValueError(
                f"number_max must be >= {self.ticket_size} to draw "
                f"{self.main_count} main numbers{' and a bonus' if self.bonus else ''}."
            )

    @property
    def ticket_size(self) -> int:
        return self.main_count + (1 if self.bonus else 0)

    def total_space(self) -> int:
        """Number of distinct tickets (main set plus bonus) this game can produce."""
        combos = math.comb(self.number_max, self.main_count)
        if self.bonus:
            return combos * (self.number_max - self.main_count)
        return combos


@dataclass(frozen=True)
class Ticket:
    """One generated ticket: sorted main numbers plus an optional bonus."""

    main: tuple[int, ...]
    bonus: int | None = None

    @classmethod
    def from_draw(cls, drawn: Sequence[int], rules: TicketRules) -> Ticket:
        """Build a ticket from the head of a shuffled pool.

        The first ``main_count`` values are sorted; the value after them is
        the bonus and keeps its own slot.
        """
        if len(drawn) < rules.ticket_size:
            raise ValueError(f"Draw must contain at least {rules.ticket_size} numbers.")
        main = tuple(sorted(int(value) for value in drawn[: rules.main_count]))
        bonus = int(drawn[rules.main_count]) if rules.bonus else None
        return cls(main=main, bonus=bonus)

    @property
    def values(self) -> tuple[int, ...]:
        """Main numbers followed by the bonus, in ticket order."""
        if self.bonus is None:
            return self.main
        return (*self.main, self.bonus)

    def validate(self, rules: TicketRules) -> None:
        """Raise ValueError if the ticket breaks the rules of its game."""
        if len(self.main) != rules.main_count:
            raise ValueError(f"Ticket must contain {rules.main_count} main numbers.")
        if list(self.main) != sorted(self.main):
            raise ValueError("Main numbers must be sorted in ascending order.")
        if rules.bonus and self.bonus is None:
            raise ValueError("Ticket is missing its bonus number.")
        if not rules.bonus and self.bonus is not None:
            raise ValueError("Ticket has a bonus number but the game has none.")
        values = self.values
        if len(set(values)) != len(values):
            raise ValueError("Ticket numbers must be unique.")
        if any(value < NUMBER_MIN or value > rules.number_max for value in values):
            raise ValueError(f"Ticket numbers must be in range {NUMBER_MIN}~{rules.number_max}.")

    def format(self) -> str:
        """Render as zero-padded numbers, e.g. ``06 09 14 25 32 45  Bonus 07``."""
        text = " ".join(f"{value:02d}" for value in self.main)
        if self.bonus is not None:
            text += f"  Bonus {self.bonus:02d}"
        return text
