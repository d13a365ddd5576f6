"""Member query service: declarative queries over the member dataset.

Each operation reads the full member collection from the repository and
returns a new derived value. Nothing here mutates the repository or the
members it returns. All sorts are stable, so members with equal keys keep
their relative repository order.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .models import MEN, WOMEN, House, Member, SalaryStats, Title
from .ports import MemberRepositoryPort

logger = logging.getLogger(__name__)


class MemberQueryService:
    """Filtering, sorting, grouping and aggregation over members.

    The repository is an explicit dependency; the service holds no other
    state, so one instance can serve any number of callers.

    Every operation emits one DEBUG record whose ``extra`` carries the
    operation name, its parameters and the size of the result.
    """

    def __init__(self, repository: MemberRepositoryPort):
        """Initialize the query service.

        Args:
            repository: MemberRepositoryPort implementation to read from.
        """
        self.repository = repository

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _members(self) -> tuple[Member, ...]:
        return self.repository.get_all()

    def _select(self, predicate: Callable[[Member], bool]) -> list[Member]:
        return [m for m in self._members() if predicate(m)]

    def _of_house_unsorted(self, house_name: str) -> list[Member]:
        return self._select(lambda m: m.house_name == house_name)

    @staticmethod
    def _log_query(operation: str, result_size: int, **params: Any) -> None:
        logger.debug(
            f"{operation} query returned {result_size} result(s)",
            extra={"operation": operation, "result_size": result_size, **params},
        )

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    def houses(self) -> tuple[House, ...]:
        """Every house known to the repository, in declaration order."""
        houses = self.repository.get_houses()
        self._log_query("houses", len(houses))
        return houses

    # ------------------------------------------------------------------
    # Filtered and sorted listings
    # ------------------------------------------------------------------

    def starting_with(self, prefix: str) -> list[Member]:
        """Members whose name starts with prefix, in natural order."""
        result = sorted(self._select(lambda m: m.name.startswith(prefix)))
        self._log_query("starting_with", len(result), prefix=prefix)
        return result

    def of_house(self, house_name: str) -> list[Member]:
        """Members of the named house, sorted by name.

        An unknown house yields an empty list.
        """
        result = sorted(self._of_house_unsorted(house_name), key=lambda m: m.name)
        self._log_query("of_house", len(result), house=house_name)
        return result

    def earning_less_than(self, threshold: float) -> list[Member]:
        """Members whose salary is strictly below threshold, sorted by house name."""
        result = sorted(
            self._select(lambda m: m.salary < threshold),
            key=lambda m: m.house_name,
        )
        self._log_query("earning_less_than", len(result), threshold=threshold)
        return result

    def sorted_by_house_then_name(self) -> list[Member]:
        """All members, sorted by house name and then by name."""
        result = sorted(self._members(), key=lambda m: (m.house_name, m.name))
        self._log_query("sorted_by_house_then_name", len(result))
        return result

    def of_house_by_birthdate(self, house_name: str) -> list[Member]:
        """Members of the named house, oldest first."""
        result = sorted(self._of_house_unsorted(house_name), key=lambda m: m.birthdate)
        self._log_query("of_house_by_birthdate", len(result), house=house_name)
        return result

    def with_title_descending(self, title: Title) -> list[Member]:
        """Members holding title, sorted by name in descending order."""
        # reverse=True keeps equal names in their original relative order
        result = sorted(
            self._select(lambda m: m.title == title),
            key=lambda m: m.name,
            reverse=True,
        )
        self._log_query("with_title_descending", len(result), title=title.value)
        return result

    def names_of_house(self, house_name: str) -> list[str]:
        """Names of the house's members in natural order."""
        result = [m.name for m in sorted(self._of_house_unsorted(house_name))]
        self._log_query("names_of_house", len(result), house=house_name)
        return result

    def sample_of_house(self, house_name: str, limit: int) -> list[Member]:
        """Up to limit members of the house, in repository order.

        Raises:
            ValueError: If limit is negative.
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        result = self._of_house_unsorted(house_name)[:limit]
        self._log_query("sample_of_house", len(result), house=house_name, limit=limit)
        return result

    def joined_names_of_house(self, house_name: str, separator: str = ", ") -> str:
        """Names of the house's members joined by separator, in repository order."""
        names = [m.name for m in self._of_house_unsorted(house_name)]
        self._log_query("joined_names_of_house", len(names), house=house_name)
        return separator.join(names)

    # ------------------------------------------------------------------
    # Scalars and predicates
    # ------------------------------------------------------------------

    def average_salary(self) -> float | None:
        """Mean salary over all members, or None if there are no members."""
        members = self._members()
        self._log_query("average_salary", len(members))
        if not members:
            return None
        return sum(m.salary for m in members) / len(members)

    def all_earn_more_than(self, threshold: float) -> bool:
        """True iff no member earns threshold or less."""
        members = self._members()
        result = all(m.salary > threshold for m in members)
        self._log_query("all_earn_more_than", len(members), threshold=threshold)
        return result

    def any_of_house(self, house_name: str) -> bool:
        """True iff at least one member belongs to the named house."""
        result = any(m.house_name == house_name for m in self._members())
        self._log_query("any_of_house", int(result), house=house_name)
        return result

    def count_of_house(self, house_name: str) -> int:
        result = sum(1 for m in self._members() if m.house_name == house_name)
        self._log_query("count_of_house", result, house=house_name)
        return result

    def highest_paid(self) -> Member | None:
        """Member with the maximum salary.

        Ties go to the first such member in repository order. Returns None
        if there are no members.
        """
        members = self._members()
        self._log_query("highest_paid", min(len(members), 1))
        if not members:
            return None
        # max() returns the first maximal element
        return max(members, key=lambda m: m.salary)

    def salary_stats(self) -> SalaryStats | None:
        """Salary statistics across all members, or None if there are none."""
        stats = SalaryStats.of([m.salary for m in self._members()])
        self._log_query("salary_stats", stats.count if stats else 0)
        return stats

    # ------------------------------------------------------------------
    # Groupings
    # ------------------------------------------------------------------

    def partition_by_gender(self) -> dict[str, list[Member]]:
        """Split members into women (queens and ladies) and men (everyone else).

        Both keys are always present, even when a side is empty.
        """
        partition: dict[str, list[Member]] = {MEN: [], WOMEN: []}
        for member in self._members():
            partition[WOMEN if member.is_woman else MEN].append(member)
        self._log_query(
            "partition_by_gender",
            len(partition[MEN]) + len(partition[WOMEN]),
            men=len(partition[MEN]),
            women=len(partition[WOMEN]),
        )
        return partition

    def group_by_house(self) -> dict[House, list[Member]]:
        """Members grouped by house; houses in first-seen order."""
        groups = _group(self._members(), key=lambda m: m.house)
        self._log_query("group_by_house", len(groups))
        return groups

    def count_by_house(self) -> dict[House, int]:
        counts = {
            house: len(members)
            for house, members in _group(self._members(), key=lambda m: m.house).items()
        }
        self._log_query("count_by_house", len(counts))
        return counts

    def salary_stats_by_house(self) -> dict[House, SalaryStats]:
        """Max, min and average salary for each house that has members."""
        stats: dict[House, SalaryStats] = {}
        for house, members in _group(self._members(), key=lambda m: m.house).items():
            house_stats = SalaryStats.of([m.salary for m in members])
            # Groups are never empty
            if house_stats is not None:
                stats[house] = house_stats
        self._log_query("salary_stats_by_house", len(stats))
        return stats


def _group(
    members: Iterable[Member], key: Callable[[Member], House]
) -> dict[House, list[Member]]:
    groups: dict[House, list[Member]] = {}
    for member in members:
        groups.setdefault(key(member), []).append(member)
    return groups
