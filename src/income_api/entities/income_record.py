"""Income record domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomeRecordEntity:
    """Domain entity for a stored income entry.

    This is the raw shape returned by income stores. Handlers pass it
    through a mapper before it leaves the API.

    Attributes:
        id: Store-assigned identifier
        description: Free text, may be empty
        timestamp: When the income happened (Unix seconds)
        category: Category name, may be empty
        amount: Amount received
    """

    id: str
    description: str
    timestamp: int
    category: str
    amount: float = 0.0
