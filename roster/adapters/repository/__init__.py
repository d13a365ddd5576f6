"""Member repository adapters."""

from .memory import InMemoryMemberRepository

__all__ = ["InMemoryMemberRepository"]
