"""Protocol interfaces for swappable implementations.

Handlers depend on these protocols, never on a concrete store, so tests
can pass any object with matching methods.
"""

from .income_store import IncomeStore

__all__ = [
    "IncomeStore",
]
