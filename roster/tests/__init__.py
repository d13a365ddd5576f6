"""Test suite for the Roster query system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Seed dataset repository and CLI command handler

3. fakes/: Port implementations for testing
   - In-memory MemberRepositoryPort with call tracking
   - Used by core unit tests
"""
