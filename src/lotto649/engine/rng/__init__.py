"""Random engine and seeding."""

from .seeder import EntropySeeder
from .xorshift import GOLDEN_GAMMA, MASK64, Xorshift128Plus

__all__ = ["EntropySeeder", "GOLDEN_GAMMA", "MASK64", "Xorshift128Plus"]
