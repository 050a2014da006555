"""Duplicate ticket detection."""

from .fingerprint import FINGERPRINT_SEED, fingerprint
from .guard import DuplicateGuard

__all__ = ["DuplicateGuard", "FINGERPRINT_SEED", "fingerprint"]
