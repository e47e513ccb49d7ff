"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal code exchanges entities from the entities package; handlers
convert them with a mapper before responding.
"""

from .errors import ErrorCode
from .responses import ErrorResponse, IncomeItem, income_to_item

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "IncomeItem",
    "income_to_item",
]
