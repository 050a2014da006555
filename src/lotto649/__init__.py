"""Unique random 6/49 lotto ticket generator."""

__version__ = "0.1.0"
