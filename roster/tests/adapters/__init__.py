"""Tests for adapter implementations.

Covers the seed-data repository and the CLI command handler.
"""
