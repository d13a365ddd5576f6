"""CLI command implementations for Roster queries.

Provides the display side of the system through a command-line interface.

This adapter maps CLI commands onto MemberQueryService operations and the
word query functions. It handles argument defaults, CLI-specific formatting
and error reporting; the core only ever returns values.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from roster.config import Settings
from roster.core import word_queries
from roster.core.member_queries import MemberQueryService
from roster.core.models import House, Member, SalaryStats, Title

logger = logging.getLogger(__name__)

COMMANDS: tuple[str, ...] = (
    "starting-with",
    "house",
    "earning-less-than",
    "sorted",
    "house-by-birthdate",
    "title",
    "average-salary",
    "house-names",
    "all-earn-more-than",
    "any-of-house",
    "count-of-house",
    "sample",
    "joined-names",
    "highest-paid",
    "partition",
    "group-by-house",
    "count-by-house",
    "house-stats",
    "stats",
    "houses",
    "words",
)

# Word list containing missing entries, used by the non-null filter exercise
WORDS_WITH_GAPS: tuple[str | None, ...] = (
    "this", "is", None, "a", None, "list", "of", None, "strings",
)


def member_to_dict(member: Member) -> dict[str, Any]:
    """Convert a member to a JSON-serialisable dictionary."""
    return {
        "name": member.name,
        "house": member.house_name,
        "region": member.house.region,
        "title": member.title.value if member.title else None,
        "salary": member.salary,
        "birthdate": member.birthdate.isoformat(),
    }


def stats_to_dict(stats: SalaryStats) -> dict[str, Any]:
    return {
        "count": stats.count,
        "min": stats.minimum,
        "max": stats.maximum,
        "average": stats.average,
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to MemberQueryService.

    Every command returns a dictionary with a status, the operation name,
    and either the result data or an error message. Arguments a command
    does not receive fall back to the configured defaults.
    """

    def __init__(self, queries: MemberQueryService, settings: Settings):
        """Initialize the CLI command handler.

        Args:
            queries: MemberQueryService to execute queries against.
            settings: Settings supplying argument defaults and output format.
        """
        self.queries = queries
        self.settings = settings

    # ------------------------------------------------------------------
    # Result envelopes
    # ------------------------------------------------------------------

    def _format(self, args: Mapping[str, Any]) -> str:
        return str(args.get("format", self.settings.output_format))

    def _success(
        self,
        operation: str,
        data: Any,
        text: Callable[[], str],
        output_format: str,
    ) -> dict[str, Any]:
        if output_format == "json":
            return {"status": "success", "operation": operation, "data": data}
        if output_format == "text":
            return {"status": "success", "operation": operation, "data": text()}
        return self._error(operation, f"Unsupported format: {output_format}")

    @staticmethod
    def _error(operation: str, message: str) -> dict[str, Any]:
        logger.error(f"Command {operation} failed: {message}")
        return {"status": "error", "operation": operation, "message": message}

    def _members_result(
        self, operation: str, members: Sequence[Member], output_format: str
    ) -> dict[str, Any]:
        return self._success(
            operation,
            [member_to_dict(m) for m in members],
            lambda: self._format_members_as_text(members),
            output_format,
        )

    def _scalar_result(
        self, operation: str, value: Any, output_format: str
    ) -> dict[str, Any]:
        return self._success(
            operation,
            value,
            lambda: "no result" if value is None else str(value),
            output_format,
        )

    # ------------------------------------------------------------------
    # Filtered and sorted listings
    # ------------------------------------------------------------------

    def starting_with(self, args: Mapping[str, Any]) -> dict[str, Any]:
        prefix = str(args.get("prefix", self.settings.name_prefix))
        return self._members_result(
            "starting_with", self.queries.starting_with(prefix), self._format(args)
        )

    def house(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        return self._members_result(
            "of_house", self.queries.of_house(house_name), self._format(args)
        )

    def earning_less_than(self, args: Mapping[str, Any]) -> dict[str, Any]:
        try:
            threshold = float(args.get("threshold", self.settings.salary_ceiling))
        except (TypeError, ValueError) as e:
            return self._error("earning_less_than", f"Invalid threshold: {e}")
        return self._members_result(
            "earning_less_than",
            self.queries.earning_less_than(threshold),
            self._format(args),
        )

    def sorted_members(self, args: Mapping[str, Any]) -> dict[str, Any]:
        return self._members_result(
            "sorted_by_house_then_name",
            self.queries.sorted_by_house_then_name(),
            self._format(args),
        )

    def house_by_birthdate(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        return self._members_result(
            "of_house_by_birthdate",
            self.queries.of_house_by_birthdate(house_name),
            self._format(args),
        )

    def title(self, args: Mapping[str, Any]) -> dict[str, Any]:
        raw = str(args.get("title", Title.KING.value))
        try:
            title = Title[raw.upper()]
        except KeyError:
            valid = ", ".join(t.value.lower() for t in Title)
            return self._error("with_title_descending", f"Unknown title: {raw}. Valid: {valid}")
        return self._members_result(
            "with_title_descending",
            self.queries.with_title_descending(title),
            self._format(args),
        )

    def house_names(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        names = self.queries.names_of_house(house_name)
        return self._success(
            "names_of_house", names, lambda: "\n".join(names), self._format(args)
        )

    def sample(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        limit = args.get("limit", self.settings.sample_size)
        # bool is an int subclass
        if isinstance(limit, bool) or not isinstance(limit, int):
            return self._error("sample_of_house", f"limit must be an integer, got {limit!r}")
        try:
            members = self.queries.sample_of_house(house_name, limit)
        except ValueError as e:
            return self._error("sample_of_house", str(e))
        return self._members_result("sample_of_house", members, self._format(args))

    def joined_names(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        separator = str(args.get("separator", self.settings.name_separator))
        joined = self.queries.joined_names_of_house(house_name, separator)
        return self._success(
            "joined_names_of_house", joined, lambda: joined, self._format(args)
        )

    # ------------------------------------------------------------------
    # Scalars and predicates
    # ------------------------------------------------------------------

    def average_salary(self, args: Mapping[str, Any]) -> dict[str, Any]:
        return self._scalar_result(
            "average_salary", self.queries.average_salary(), self._format(args)
        )

    def all_earn_more_than(self, args: Mapping[str, Any]) -> dict[str, Any]:
        try:
            threshold = float(args.get("threshold", self.settings.salary_floor))
        except (TypeError, ValueError) as e:
            return self._error("all_earn_more_than", f"Invalid threshold: {e}")
        return self._scalar_result(
            "all_earn_more_than",
            self.queries.all_earn_more_than(threshold),
            self._format(args),
        )

    def any_of_house(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        return self._scalar_result(
            "any_of_house", self.queries.any_of_house(house_name), self._format(args)
        )

    def count_of_house(self, args: Mapping[str, Any]) -> dict[str, Any]:
        house_name = str(args.get("house", self.settings.default_house))
        return self._scalar_result(
            "count_of_house", self.queries.count_of_house(house_name), self._format(args)
        )

    def highest_paid(self, args: Mapping[str, Any]) -> dict[str, Any]:
        member = self.queries.highest_paid()
        return self._success(
            "highest_paid",
            member_to_dict(member) if member else None,
            lambda: self._format_member_line(member) if member else "no result",
            self._format(args),
        )

    # ------------------------------------------------------------------
    # Groupings
    # ------------------------------------------------------------------

    def partition(self, args: Mapping[str, Any]) -> dict[str, Any]:
        partition = self.queries.partition_by_gender()
        return self._success(
            "partition_by_gender",
            {key: [member_to_dict(m) for m in members] for key, members in partition.items()},
            lambda: self._format_groups_as_text(partition),
            self._format(args),
        )

    def group_by_house(self, args: Mapping[str, Any]) -> dict[str, Any]:
        groups = self.queries.group_by_house()
        return self._success(
            "group_by_house",
            {house.name: [member_to_dict(m) for m in members] for house, members in groups.items()},
            lambda: self._format_groups_as_text(groups),
            self._format(args),
        )

    def count_by_house(self, args: Mapping[str, Any]) -> dict[str, Any]:
        counts = self.queries.count_by_house()
        return self._success(
            "count_by_house",
            {house.name: count for house, count in counts.items()},
            lambda: "\n".join(f"{house}: {count}" for house, count in counts.items()),
            self._format(args),
        )

    def house_stats(self, args: Mapping[str, Any]) -> dict[str, Any]:
        stats = self.queries.salary_stats_by_house()
        return self._success(
            "salary_stats_by_house",
            {house.name: stats_to_dict(s) for house, s in stats.items()},
            lambda: self._format_stats_as_text(stats),
            self._format(args),
        )

    def stats(self, args: Mapping[str, Any]) -> dict[str, Any]:
        stats = self.queries.salary_stats()
        return self._success(
            "salary_stats",
            stats_to_dict(stats) if stats else None,
            lambda: (
                f"maxSalary: {stats.maximum} minSalary: {stats.minimum} "
                f"averageSalary: {stats.average}"
                if stats
                else "no result"
            ),
            self._format(args),
        )

    def houses(self, args: Mapping[str, Any]) -> dict[str, Any]:
        houses = self.queries.houses()
        return self._success(
            "houses",
            [{"name": h.name, "region": h.region} for h in houses],
            lambda: "\n".join(
                f"{h} ({h.region})" if h.region else str(h) for h in houses
            ),
            self._format(args),
        )

    # ------------------------------------------------------------------
    # Word exercises
    # ------------------------------------------------------------------

    def words(self, args: Mapping[str, Any]) -> dict[str, Any]:
        words = args.get("words", list(WORDS_WITH_GAPS))
        if not isinstance(words, list) or not all(
            w is None or isinstance(w, str) for w in words
        ):
            return self._error("words", "words must be a list of strings or nulls")
        present = [w for w in words if w is not None]
        data = {
            "by_length": word_queries.sort_by_length(present),
            "by_comparator": word_queries.sort_by_comparator(present),
            "natural": word_queries.sort_naturally(present),
            "even_length": word_queries.even_length(present),
            "non_null_even_length": word_queries.non_null_even_length(words),
            "lengths": word_queries.word_lengths(present),
        }
        return self._success(
            "words",
            data,
            lambda: "\n".join(f"{key}: {value}" for key, value in data.items()),
            self._format(args),
        )

    # ------------------------------------------------------------------
    # Text formatting
    # ------------------------------------------------------------------

    @staticmethod
    def _format_member_line(member: Member) -> str:
        title = member.title.value.title() if member.title else "-"
        return (
            f"{member.name} [{member.house_name}] {title}, "
            f"salary {member.salary:,.2f}, born {member.birthdate.isoformat()}"
        )

    def _format_members_as_text(self, members: Sequence[Member]) -> str:
        if not members:
            return "(no members)"
        return "\n".join(self._format_member_line(m) for m in members)

    def _format_groups_as_text(
        self, groups: Mapping[str, list[Member]] | Mapping[House, list[Member]]
    ) -> str:
        lines = []
        for key, members in groups.items():
            names = ", ".join(m.name for m in members)
            lines.append(f"{key}: {names}")
        return "\n".join(lines)

    @staticmethod
    def _format_stats_as_text(stats: Mapping[House, SalaryStats]) -> str:
        return "\n".join(
            f"{house}: maxSalary: {s.maximum} minSalary: {s.minimum} averageSalary: {s.average}"
            for house, s in stats.items()
        )


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: Mapping[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler instance.
        command: Command name (see COMMANDS).
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized.
    """
    if command == "starting-with":
        return handler.starting_with(args)
    elif command == "house":
        return handler.house(args)
    elif command == "earning-less-than":
        return handler.earning_less_than(args)
    elif command == "sorted":
        return handler.sorted_members(args)
    elif command == "house-by-birthdate":
        return handler.house_by_birthdate(args)
    elif command == "title":
        return handler.title(args)
    elif command == "average-salary":
        return handler.average_salary(args)
    elif command == "house-names":
        return handler.house_names(args)
    elif command == "all-earn-more-than":
        return handler.all_earn_more_than(args)
    elif command == "any-of-house":
        return handler.any_of_house(args)
    elif command == "count-of-house":
        return handler.count_of_house(args)
    elif command == "sample":
        return handler.sample(args)
    elif command == "joined-names":
        return handler.joined_names(args)
    elif command == "highest-paid":
        return handler.highest_paid(args)
    elif command == "partition":
        return handler.partition(args)
    elif command == "group-by-house":
        return handler.group_by_house(args)
    elif command == "count-by-house":
        return handler.count_by_house(args)
    elif command == "house-stats":
        return handler.house_stats(args)
    elif command == "stats":
        return handler.stats(args)
    elif command == "houses":
        return handler.houses(args)
    elif command == "words":
        return handler.words(args)
    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
