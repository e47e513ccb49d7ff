"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from income_api.entities import IncomeRecordEntity

from .errors import ErrorCode


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    code: ErrorCode = Field(..., description="Machine-readable error code")


class IncomeItem(BaseModel):
    """Public representation of an income entry."""

    id: str = Field(..., description="Income identifier")
    description: str = Field(..., description="Free-text description")
    timestamp: int = Field(..., description="When the income happened (Unix seconds)", ge=0)
    category: str = Field(..., description="Category name")
    amount: float = Field(..., description="Amount received")


def income_to_item(record: IncomeRecordEntity) -> IncomeItem:
    """Default mapper from a stored record to its public shape."""
    return IncomeItem(
        id=record.id,
        description=record.description,
        timestamp=record.timestamp,
        category=record.category,
        amount=record.amount,
    )
