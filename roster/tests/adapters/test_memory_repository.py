"""Tests for InMemoryMemberRepository and its seed dataset."""

from datetime import date

import pytest

from roster.adapters.repository.memory import (
    SEED_HOUSES,
    SEED_MEMBERS,
    STARK,
    InMemoryMemberRepository,
)
from roster.core.member_queries import MemberQueryService
from roster.core.models import House, Member, Title


@pytest.fixture
def repository() -> InMemoryMemberRepository:
    return InMemoryMemberRepository()


class TestSeedDataset:
    """Test the hard-coded dataset loaded by default."""

    def test_loads_seed_members(self, repository: InMemoryMemberRepository) -> None:
        assert repository.get_all() == SEED_MEMBERS
        assert repository.get_houses() == SEED_HOUSES

    def test_every_member_house_is_known(self, repository: InMemoryMemberRepository) -> None:
        houses = set(repository.get_houses())
        assert all(m.house in houses for m in repository.get_all())

    def test_members_share_house_instances(self, repository: InMemoryMemberRepository) -> None:
        starks = [m for m in repository.get_all() if m.house_name == "Stark"]
        assert all(m.house is STARK for m in starks)

    def test_seed_covers_every_title(self, repository: InMemoryMemberRepository) -> None:
        titles = {m.title for m in repository.get_all()}
        assert set(Title) <= titles

    def test_no_greyjoys(self, repository: InMemoryMemberRepository) -> None:
        queries = MemberQueryService(repository)
        assert queries.of_house("Greyjoy") == []
        assert queries.any_of_house("Greyjoy") is False

    def test_seed_queries(self, repository: InMemoryMemberRepository) -> None:
        queries = MemberQueryService(repository)
        top = queries.highest_paid()
        assert top is not None and top.name == "Tywin Lannister"
        assert [m.name for m in queries.starting_with("S")] == [
            "Sansa Stark",
            "Stannis Baratheon",
        ]
        assert queries.all_earn_more_than(100_000) is False
        assert queries.count_of_house("Lannister") == 5


class TestImmutability:
    """Test that callers cannot change repository state."""

    def test_get_all_returns_tuple(self, repository: InMemoryMemberRepository) -> None:
        members = repository.get_all()
        assert isinstance(members, tuple)
        with pytest.raises(TypeError):
            members[0] = members[1]  # type: ignore[index]

    def test_repeated_calls_are_identical(self, repository: InMemoryMemberRepository) -> None:
        assert repository.get_all() == repository.get_all()


class TestCustomDataset:
    """Test construction with caller-supplied data."""

    def test_houses_derived_from_members(self) -> None:
        tully = House("Tully", "The Riverlands")
        stark = House("Stark", "The North")
        members = [
            Member("Edmure Tully", tully, Title.LORD, 65_000.0, date(1976, 2, 2)),
            Member("Arya Stark", stark, None, 50_000.0, date(1997, 4, 15)),
            Member("Brynden Tully", tully, Title.KNIGHT, 55_000.0, date(1948, 9, 14)),
        ]
        repo = InMemoryMemberRepository(members=members)
        assert repo.get_houses() == (tully, stark)
        assert repo.get_all() == tuple(members)

    def test_later_changes_to_input_are_not_seen(self) -> None:
        stark = House("Stark")
        members = [Member("Arya Stark", stark, None, 50_000.0, date(1997, 4, 15))]
        repo = InMemoryMemberRepository(members=members)
        members.append(Member("Jon Snow", stark, Title.KING, 90_000.0, date(1986, 12, 26)))
        assert len(repo.get_all()) == 1

    def test_rejects_member_of_unknown_house(self) -> None:
        stark = House("Stark")
        greyjoy = House("Greyjoy", "The Iron Islands")
        members = [Member("Theon Greyjoy", greyjoy, Title.LORD, 1.0, date(1989, 1, 1))]
        with pytest.raises(ValueError, match="unknown house"):
            InMemoryMemberRepository(houses=[stark], members=members)

    def test_empty_dataset(self) -> None:
        repo = InMemoryMemberRepository(houses=[], members=[])
        queries = MemberQueryService(repo)
        assert repo.get_all() == ()
        assert queries.average_salary() is None
        assert queries.highest_paid() is None
