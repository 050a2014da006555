"""Per-run seed from local entropy.

The OS CSPRNG is used when it is available; otherwise the seed is a XOR of
wall-clock time, the performance counter and an object address (varied by
ASLR). Either way the result only needs to differ between runs: tickets
drawn from it are not suitable for gambling stakes or any cryptographic
purpose.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable

from lotto649.logging_utils import get_logger

from .xorshift import MASK64

SEED_BYTES = 8

logger = get_logger(__name__)


class EntropySeeder:
    """Produce one 64-bit seed from the best available local source."""

    def __init__(
        self,
        urandom: Callable[[int], bytes] | None = os.urandom,
        clock: Callable[[], float] = time.time,
        counter: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self._urandom = urandom
        self._clock = clock
        self._counter = counter
        self.source: str | None = None

    def seed(self) -> int:
        """Return a seed in [0, 2**64). Never raises for lack of entropy."""
        if self._urandom is not None:
            try:
                raw = self._urandom(SEED_BYTES)
            except (NotImplementedError, OSError) as exc:
                logger.debug("OS entropy unavailable (%s); using time-based seed.", exc)
            else:
                if len(raw) >= SEED_BYTES:
                    self.source = "urandom"
                    return int.from_bytes(raw[:SEED_BYTES], "little")
                logger.debug("OS entropy returned %d bytes; using time-based seed.", len(raw))

        self.source = "time"
        return self._composite_seed()

    def _composite_seed(self) -> int:
        marker = object()
        entropy = int(self._clock())
        entropy ^= int(self._counter())
        entropy ^= id(marker)
        return entropy & MASK64
