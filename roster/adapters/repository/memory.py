"""In-memory member repository.

Implements MemberRepositoryPort over a fixed, hard-coded dataset that is
built once at construction time and never changes afterwards.
"""

import logging
from collections.abc import Iterable
from datetime import date

from roster.core.models import House, Member, Title
from roster.core.ports import MemberRepositoryPort

logger = logging.getLogger(__name__)


# ============================================================================
# Seed data
# ============================================================================

STARK = House("Stark", "The North")
LANNISTER = House("Lannister", "The Westerlands")
TARGARYEN = House("Targaryen", "Dragonstone")
BARATHEON = House("Baratheon", "The Stormlands")
TYRELL = House("Tyrell", "The Reach")
TULLY = House("Tully", "The Riverlands")

SEED_HOUSES: tuple[House, ...] = (
    STARK,
    LANNISTER,
    TARGARYEN,
    BARATHEON,
    TYRELL,
    TULLY,
)

SEED_MEMBERS: tuple[Member, ...] = (
    Member("Eddard Stark", STARK, Title.LORD, 100_000.0, date(1959, 4, 17)),
    Member("Catelyn Stark", STARK, Title.LADY, 80_000.0, date(1964, 1, 17)),
    Member("Arya Stark", STARK, None, 50_000.0, date(1997, 4, 15)),
    Member("Sansa Stark", STARK, Title.LADY, 60_000.0, date(1996, 2, 21)),
    Member("Bran Stark", STARK, None, 10_000.0, date(1999, 4, 9)),
    Member("Robb Stark", STARK, Title.KING, 100_000.0, date(1986, 6, 18)),
    Member("Jon Snow", STARK, Title.KING, 90_000.0, date(1986, 12, 26)),
    Member("Jaime Lannister", LANNISTER, Title.KNIGHT, 120_000.0, date(1970, 7, 27)),
    Member("Tyrion Lannister", LANNISTER, Title.LORD, 70_000.0, date(1969, 6, 11)),
    Member("Tywin Lannister", LANNISTER, Title.LORD, 200_000.0, date(1946, 10, 10)),
    Member("Cersei Lannister", LANNISTER, Title.QUEEN, 120_000.0, date(1970, 7, 27)),
    Member("Kevan Lannister", LANNISTER, Title.KNIGHT, 75_000.0, date(1948, 3, 22)),
    Member("Daenerys Targaryen", TARGARYEN, Title.QUEEN, 100_000.0, date(1987, 5, 1)),
    Member("Viserys Targaryen", TARGARYEN, Title.LORD, 100_000.0, date(1983, 5, 18)),
    Member("Robert Baratheon", BARATHEON, Title.KING, 100_000.0, date(1964, 2, 1)),
    Member("Joffrey Baratheon", BARATHEON, Title.KING, 100_000.0, date(1992, 5, 20)),
    Member("Myrcella Baratheon", BARATHEON, Title.LADY, 50_000.0, date(1995, 11, 5)),
    Member("Tommen Baratheon", BARATHEON, Title.KING, 60_000.0, date(1997, 9, 7)),
    Member("Stannis Baratheon", BARATHEON, Title.KING, 123_456.0, date(1957, 3, 27)),
    Member("Renly Baratheon", BARATHEON, Title.LORD, 100_000.0, date(1969, 5, 2)),
    Member("Margaery Tyrell", TYRELL, Title.QUEEN, 80_000.0, date(1982, 2, 11)),
    Member("Loras Tyrell", TYRELL, Title.KNIGHT, 70_000.0, date(1984, 7, 12)),
    Member("Olenna Tyrell", TYRELL, Title.LADY, 130_000.0, date(1938, 8, 22)),
    Member("Edmure Tully", TULLY, Title.LORD, 65_000.0, date(1976, 2, 2)),
    Member("Brynden Tully", TULLY, Title.KNIGHT, 55_000.0, date(1948, 9, 14)),
)


class InMemoryMemberRepository(MemberRepositoryPort):
    """Fixed, read-only member dataset held in memory.

    With no arguments the repository holds the seed dataset. Alternative
    houses and members may be supplied (for example in tests); when only
    members are given, the house set is taken from them in first-seen
    order.

    Returned collections are tuples of frozen objects, so callers cannot
    alter the repository through them. The instance is safe to share
    across threads.
    """

    def __init__(
        self,
        houses: Iterable[House] | None = None,
        members: Iterable[Member] | None = None,
    ):
        """Load the dataset.

        Args:
            houses: Houses known to the repository (optional).
            members: Members to hold (optional). Defaults to the seed data.

        Raises:
            ValueError: If a member refers to a house outside the house set.
        """
        if members is None:
            member_tuple = SEED_MEMBERS
            house_tuple = SEED_HOUSES if houses is None else tuple(houses)
        else:
            member_tuple = tuple(members)
            house_tuple = (
                tuple(dict.fromkeys(m.house for m in member_tuple))
                if houses is None
                else tuple(houses)
            )

        known = set(house_tuple)
        for member in member_tuple:
            if member.house not in known:
                raise ValueError(
                    f"Member {member.name!r} belongs to unknown house {member.house_name!r}"
                )

        self._houses = house_tuple
        self._members = member_tuple

        logger.info(
            f"Loaded {len(self._members)} members across {len(self._houses)} houses",
            extra={"members": len(self._members), "houses": len(self._houses)},
        )

    def get_all(self) -> tuple[Member, ...]:
        return self._members

    def get_houses(self) -> tuple[House, ...]:
        return self._houses
