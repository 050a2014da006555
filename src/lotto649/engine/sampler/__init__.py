"""Ticket samplers."""

from .fisher_yates import FisherYatesSampler

__all__ = ["FisherYatesSampler"]
