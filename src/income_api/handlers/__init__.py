"""Handler layer for HTTP endpoints.

Handlers validate request input, delegate to an income store and map the
outcome to exactly one JSON response.

Architecture:
    Handler -> IncomeStore
    (HTTP)  -> (Data Access)
"""

from .income_handler import (
    make_edit_handler,
    make_list_handler,
    make_remove_handler,
)

__all__ = [
    "make_edit_handler",
    "make_list_handler",
    "make_remove_handler",
]
