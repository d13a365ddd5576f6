"""Core domain logic for the Roster system.

This package contains zero external dependencies and represents
the pure query logic of the application. The dataset itself and
all display concerns are handled by the adapters package.
"""

from .models import (
    FEMALE_TITLES,
    MEN,
    WOMEN,
    House,
    Member,
    SalaryStats,
    Title,
)

__all__ = [
    "FEMALE_TITLES",
    "MEN",
    "WOMEN",
    "House",
    "Member",
    "SalaryStats",
    "Title",
]
