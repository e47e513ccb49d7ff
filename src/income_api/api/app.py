import logging
import time
from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from income_api.api.dependencies import StoreDep, lifespan
from income_api.api.routes import build_income_router
from income_api.config import settings
from income_api.dto import income_to_item
from income_api.handlers.income_handler import Clock, IncomeMapper
from income_api.protocols import IncomeStore
from income_api.repositories import RedisIncomeRepository

API_VERSION = "0.1.0"


def configure_logging(log_level: str) -> None:
    """Configure process logging."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(
    store: IncomeStore | None = None,
    to_model: IncomeMapper = income_to_item,
    clock: Clock = time.time,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Income store. If None, a Redis repository is built from settings.
        to_model: Mapper applied to records returned by the list endpoint.
        clock: Current time source used by edit validation.

    Returns:
        Configured FastAPI app
    """
    configure_logging(settings.log_level)

    if store is None:
        store = RedisIncomeRepository.create()

    app = FastAPI(
        title="Income API",
        description="Income tracking endpoints of the personal finance API",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.income_store = store

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Income API",
            "version": API_VERSION,
            "endpoints": {
                "income": "/income",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(store: StoreDep) -> JSONResponse:
        """Health check endpoint."""
        store_healthy = await store.health_check()
        return JSONResponse(
            status_code=status.HTTP_200_OK if store_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "healthy" if store_healthy else "unhealthy",
                "store_healthy": store_healthy,
            },
        )

    app.include_router(build_income_router(store, to_model, clock))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "income_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
