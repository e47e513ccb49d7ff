"""Repository layer for data access.

Repositories satisfy the IncomeStore protocol through structural typing,
not inheritance.
"""

from income_api.protocols import IncomeStore

from .redis_repository import RedisIncomeRepository

__all__ = [
    "IncomeStore",
    "RedisIncomeRepository",
]
