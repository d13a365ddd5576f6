"""Domain models for the Roster member dataset.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum


@dataclass(frozen=True, order=True)
class House:
    """A noble family.

    Equality, hashing and ordering use the name only; the region is
    descriptive data shared by every member of the house.
    """

    name: str
    region: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        """Validate house invariants on creation."""
        if not self.name or not self.name.strip():
            raise ValueError("House name must be a non-empty string")

    def __str__(self) -> str:
        return self.name


class Title(Enum):
    """Ranks a member can hold.

    Closed set: extend only by adding members here.
    """

    KING = "KING"
    QUEEN = "QUEEN"
    LORD = "LORD"
    LADY = "LADY"
    KNIGHT = "KNIGHT"


# Partition keys used when splitting members by title
MEN = "Men"
WOMEN = "Women"

FEMALE_TITLES = frozenset({Title.QUEEN, Title.LADY})


@dataclass(frozen=True)
class Member:
    """A person belonging to a house.

    Members share their House instance with every other member of the
    same house; the house is referenced, never owned.

    Natural ordering is ascending by name. Only ``__lt__`` is defined,
    which is all ``sorted`` and ``min``/``max`` need.
    """

    name: str
    house: House
    title: Title | None
    salary: float
    birthdate: date

    def __post_init__(self) -> None:
        """Validate member invariants on creation."""
        if not self.name or not self.name.strip():
            raise ValueError("Member name must be a non-empty string")
        if self.salary < 0:
            raise ValueError(
                f"salary must be non-negative, got {self.salary}"
            )

    def __lt__(self, other: "Member") -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.name < other.name

    @property
    def house_name(self) -> str:
        """Name of the member's house."""
        return self.house.name

    @property
    def is_woman(self) -> bool:
        """True for queens and ladies."""
        return self.title in FEMALE_TITLES


@dataclass(frozen=True)
class SalaryStats:
    """Summary statistics over a non-empty group of salaries."""

    count: int
    total: float
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        """Validate statistics invariants on creation."""
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) cannot exceed maximum ({self.maximum})"
            )

    @property
    def average(self) -> float:
        return self.total / self.count

    @classmethod
    def of(cls, salaries: Sequence[float]) -> "SalaryStats | None":
        """Summarise salaries, or return None when there are none."""
        if not salaries:
            return None
        return cls(
            count=len(salaries),
            total=float(sum(salaries)),
            minimum=float(min(salaries)),
            maximum=float(max(salaries)),
        )
