"""External adapters for the Roster system.

This package provides implementations of the core port interfaces and
the outward-facing surfaces that present query results.

Adapter Organization:

- repository/: Member dataset implementations (in-memory seed data)
- cli/: Command-line interface mapping commands onto queries
"""
