"""Tests for the fake port implementations."""

from datetime import date

import pytest

from roster.core.models import House, Member, Title
from roster.core.ports import MemberRepositoryPort
from roster.tests.fakes import FakeMemberRepository


@pytest.fixture
def stark() -> House:
    return House("Stark", "The North")


class TestFakeMemberRepository:
    """Test FakeMemberRepository behaviour."""

    def test_is_a_repository_port(self) -> None:
        assert isinstance(FakeMemberRepository(), MemberRepositoryPort)

    def test_empty_by_default(self) -> None:
        repo = FakeMemberRepository()
        assert repo.get_all() == ()
        assert repo.get_houses() == ()

    def test_tracks_calls(self, stark: House) -> None:
        repo = FakeMemberRepository(
            [Member("Arya Stark", stark, None, 1.0, date(1997, 4, 15))]
        )
        repo.get_all()
        repo.get_all()
        repo.get_houses()
        assert repo.get_all_call_count == 2
        assert repo.get_houses_call_count == 1

    def test_get_all_returns_snapshot(self, stark: House) -> None:
        repo = FakeMemberRepository()
        snapshot = repo.get_all()
        repo.add_member(Member("Jon Snow", stark, Title.KING, 1.0, date(1986, 12, 26)))
        assert snapshot == ()
        assert len(repo.get_all()) == 1

    def test_reset(self, stark: House) -> None:
        repo = FakeMemberRepository(
            [Member("Arya Stark", stark, None, 1.0, date(1997, 4, 15))]
        )
        repo.get_all()
        repo.reset()
        assert repo.members == []
        assert repo.get_all_call_count == 0
