"""Income API - income tracking endpoints of a personal finance REST API.

Layers:
    - protocols: Interface contracts (IncomeStore)
    - repositories: Data access implementations
    - handlers: HTTP request handler factories
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from income_api.api.app import create_app

    app = create_app(store=my_store)
    ```
"""

from income_api.config import get_redis_client, settings
from income_api.dto import ErrorCode, ErrorResponse, IncomeItem, income_to_item
from income_api.entities import IncomePatchEntity, IncomeRecordEntity
from income_api.exceptions import IncomeNotFoundError, IncomeValidationError
from income_api.handlers import make_edit_handler, make_list_handler, make_remove_handler
from income_api.protocols import IncomeStore
from income_api.repositories import RedisIncomeRepository

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "IncomeStore",
    # Handlers (HTTP)
    "make_list_handler",
    "make_remove_handler",
    "make_edit_handler",
    # Repositories (data access)
    "RedisIncomeRepository",
    # Entities (domain models)
    "IncomeRecordEntity",
    "IncomePatchEntity",
    # DTOs (API contracts)
    "ErrorCode",
    "ErrorResponse",
    "IncomeItem",
    "income_to_item",
    # Errors
    "IncomeValidationError",
    "IncomeNotFoundError",
]
