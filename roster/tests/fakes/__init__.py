"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
against small, hand-built datasets:

- FakeMemberRepository: In-memory members with call tracking
"""

from .repository import FakeMemberRepository

__all__ = [
    "FakeMemberRepository",
]
