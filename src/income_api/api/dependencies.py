"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The income store is placed in app.state by create_app
    - Dependency functions retrieve it from request.app.state
    - The lifespan checks the store on startup and closes it on shutdown
"""

import inspect
import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from income_api.protocols import IncomeStore

logger = logging.getLogger(__name__)


def get_income_store(request: Request) -> IncomeStore:
    """Dependency injection for the IncomeStore from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The IncomeStore instance from app.state

    Raises:
        RuntimeError: If the store is not initialized
    """
    store = getattr(request.app.state, "income_store", None)
    if store is None:
        raise RuntimeError("IncomeStore not initialized. Check create_app setup.")
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Logs whether the store is reachable at startup (an unreachable store
    does not stop the app) and closes it on shutdown.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    store: IncomeStore = app.state.income_store
    logger.info("Starting Income API with store %s", type(store).__name__)

    try:
        healthy = await store.health_check()
    except Exception:
        logger.exception("Income store health check raised")
        healthy = False
    if healthy:
        logger.info("Income store connection successful")
    else:
        logger.warning("Income store is not reachable, requests will fail until it is")

    yield

    close = getattr(store, "close", None)
    if close is not None:
        result = close()
        if inspect.isawaitable(result):
            await result
    logger.info("Income API shut down")


# Type alias for cleaner dependency injection
StoreDep = Annotated[IncomeStore, Depends(get_income_store)]
