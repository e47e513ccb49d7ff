"""Domain entities for internal representation.

These are frozen dataclasses exchanged between handlers and income stores.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .income_patch import IncomePatchEntity
from .income_record import IncomeRecordEntity

__all__ = ["IncomePatchEntity", "IncomeRecordEntity"]
