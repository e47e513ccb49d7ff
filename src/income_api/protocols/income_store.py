"""Income storage protocol.

Defines the interface the income handlers delegate to. Implementations
can include:
- Redis hashes with a sorted-set time index (default)
- A relational table
- An in-memory store for tests
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from income_api.entities import IncomePatchEntity, IncomeRecordEntity


@runtime_checkable
class IncomeStore(Protocol):
    """Protocol for income storage backends.

    Any object implementing these coroutines satisfies the protocol,
    no explicit inheritance needed. Every method may raise; callers
    treat any exception as an internal failure.
    """

    async def get_income(self, start: int, end: int) -> Sequence[IncomeRecordEntity]:
        """Return income entries that happened within a time range.

        Args:
            start: Range start in Unix seconds
            end: Range end in Unix seconds

        Returns:
            Raw records in the order the store chooses
        """
        ...

    async def remove_income(self, income_id: str) -> None:
        """Delete an income entry.

        Args:
            income_id: The entry to delete
        """
        ...

    async def edit_income(self, income_id: str, patch: IncomePatchEntity) -> None:
        """Overwrite the editable fields of an income entry.

        Args:
            income_id: The entry to edit
            patch: Validated new field values
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
