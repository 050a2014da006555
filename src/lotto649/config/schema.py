"""Pydantic schema for generator configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lotto649.engine.generator import DEFAULT_MAX_RETRIES, DEFAULT_TICKET_COUNT
from lotto649.engine.rng.xorshift import MASK64
from lotto649.engine.ticket import MAIN_COUNT, NUMBER_MAX, TicketRules


class GeneratorConfig(BaseModel):
    """Validated runtime configuration with defaults."""

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=DEFAULT_TICKET_COUNT, gt=0)
    number_max: int = Field(default=NUMBER_MAX, ge=2)
    main_count: int = Field(default=MAIN_COUNT, ge=1)
    bonus: bool = True
    max_retries_per_ticket: int = Field(default=DEFAULT_MAX_RETRIES, gt=0)
    seed: int | None = Field(default=None, ge=0, le=MASK64)
    output_format: Literal["text", "json"] = "text"

    @model_validator(mode="after")
    def _check_pool_size(self) -> GeneratorConfig:
        needed = self.main_count + (1 if self.bonus else 0)
        if self.number_max < needed:
            raise ValueError(f"number_max must be >= {needed} for this ticket shape.")
        return self

    def to_rules(self) -> TicketRules:
        return TicketRules(
            number_max=self.number_max,
            main_count=self.main_count,
            bonus=self.bonus,
        )
