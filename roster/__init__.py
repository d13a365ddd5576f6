"""Roster: declarative queries over an in-memory dataset of noble houses."""

__version__ = "0.1.0"
