"""Route table for the income endpoints."""

from fastapi import APIRouter

from income_api.dto import ErrorResponse
from income_api.dto.errors import EDIT_ERRORS, LIST_ERRORS, REMOVE_ERRORS, ErrorCode
from income_api.handlers import make_edit_handler, make_list_handler, make_remove_handler
from income_api.handlers.income_handler import Clock, IncomeMapper
from income_api.protocols import IncomeStore


def _error_responses(codes: frozenset[ErrorCode]) -> dict[int | str, dict]:
    """OpenAPI entries for the 400 and 500 bodies of one endpoint."""
    listed = ", ".join(sorted(code.value for code in codes))
    return {
        400: {"model": ErrorResponse, "description": f"Invalid input: {listed}"},
        500: {"model": ErrorResponse, "description": "Store failure: INTERNAL_ERROR"},
    }


def build_income_router(store: IncomeStore, to_model: IncomeMapper, clock: Clock) -> APIRouter:
    """Build the /income router with handlers bound to their collaborators.

    Args:
        store: Income store shared by all three handlers
        to_model: Mapper applied to listed records
        clock: Current time source for edit validation

    Returns:
        Router ready to include in the app
    """
    router = APIRouter(prefix="/income", tags=["income"])

    router.add_api_route(
        "",
        make_list_handler(store, to_model),
        methods=["GET"],
        summary="List income within a time range",
        responses=_error_responses(LIST_ERRORS),
    )
    router.add_api_route(
        "/{id}",
        make_remove_handler(store),
        methods=["DELETE"],
        summary="Remove an income entry",
        responses=_error_responses(REMOVE_ERRORS),
    )
    router.add_api_route(
        "/{id}",
        make_edit_handler(store, clock),
        methods=["PATCH", "PUT"],
        summary="Edit an income entry",
        responses=_error_responses(EDIT_ERRORS),
    )

    return router
