"""Port interfaces for the Roster system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - MemberRepositoryPort: Read-only access to the member dataset
"""

from abc import ABC, abstractmethod

from .models import House, Member


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class MemberRepositoryPort(ABC):
    """Port for retrieving the fixed set of members and houses.

    Adapters implementing this port own a dataset that is loaded once
    and never mutated afterwards.

    Implementations must guarantee:
    - Callers cannot mutate repository state through returned values
    - Every member's house is one of the repository's houses
    - Iteration order is stable across calls
    """

    @abstractmethod
    def get_all(self) -> tuple[Member, ...]:
        """Retrieve every member in the dataset.

        Returns:
            Immutable tuple of Member objects in load order.
            Empty tuple if the dataset has no members.

        This operation never fails.
        """

    @abstractmethod
    def get_houses(self) -> tuple[House, ...]:
        """Retrieve every house known to the dataset.

        Returns:
            Immutable tuple of House objects in declaration order.
        """
