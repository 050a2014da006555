"""xorshift128+ pseudo-random engine.

128 bits of state, period 2**128 - 1, 64-bit outputs. Given the same seed
the output sequence is exactly reproducible, which is what the tests rely
on. Not a cryptographic generator.
"""

from __future__ import annotations

MASK64 = 0xFFFFFFFFFFFFFFFF
# floor(2**64 / golden ratio); odd, so seed ^ GOLDEN_GAMMA differs from seed.
GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class Xorshift128Plus:
    """Two-word xorshift128+ generator."""

    def __init__(self, seed: int) -> None:
        seed = int(seed)
        if not (0 <= seed <= MASK64):
            raise ValueError("seed must be in range 0 ~ 2**64 - 1.")
        self.seed = seed
        # The second word differs from the first, so the state is never all-zero.
        self._s0 = seed
        self._s1 = seed ^ GOLDEN_GAMMA

    def next_u64(self) -> int:
        """Advance the state and return the next 64-bit value."""
        x = self._s0
        y = self._s1
        self._s0 = y
        x = (x ^ (x << 23)) & MASK64
        self._s1 = x ^ y ^ (x >> 17) ^ (y >> 26)
        return (self._s1 + y) & MASK64

    def randbelow(self, n: int) -> int:
        """Return an integer in [0, n) by reduction of a 64-bit draw."""
        if n <= 0:
            raise ValueError("n must be > 0.")
        return self.next_u64() % n

    def __iter__(self) -> Xorshift128Plus:
        return self

    def __next__(self) -> int:
        return self.next_u64()
