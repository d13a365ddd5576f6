"""Unit tests for core domain logic.

These tests exercise core query logic without the seed dataset.
All ports are replaced with in-memory fakes from tests/fakes/.
"""
