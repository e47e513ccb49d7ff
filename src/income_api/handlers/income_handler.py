"""HTTP handlers for income operations.

Each factory closes over its collaborators and returns a stateless
coroutine taking a Starlette request. Validation failures become 400
responses carrying the first failing check's code; any failure from the
store becomes a 500 response and is logged, never re-raised.
"""

import json
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.requests import Request

from income_api.dto import ErrorCode, ErrorResponse, income_to_item
from income_api.entities import IncomePatchEntity, IncomeRecordEntity
from income_api.exceptions import IncomeValidationError
from income_api.protocols import IncomeStore
from income_api.validators import (
    require_id,
    require_int,
    require_str,
    validate_timestamp,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[JSONResponse]]
IncomeMapper = Callable[[IncomeRecordEntity], Any]
Clock = Callable[[], float]


def error_response(code: ErrorCode, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    """Build a `{"code": ...}` response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=code).model_dump(mode="json"),
    )


def internal_error() -> JSONResponse:
    return error_response(ErrorCode.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Read the request body as a JSON object.

    Empty, malformed and non-object bodies all read as an object with no fields.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        # Covers invalid UTF-8, malformed JSON and over-long integer literals
        return {}
    return payload if isinstance(payload, dict) else {}


def make_list_handler(store: IncomeStore, to_model: IncomeMapper = income_to_item) -> Handler:
    """Create the handler for GET /income.

    Returns all income that happened during a time range.

    Query parameters:
        start: Start time in Unix seconds
        end: End time in Unix seconds

    Args:
        store: Income store to read from
        to_model: Maps each stored record to its public shape

    Returns:
        Request handler coroutine
    """

    async def list_income(request: Request) -> JSONResponse:
        try:
            start = require_int(request.query_params.get("start"), ErrorCode.REQUIRE_START)
            end = require_int(request.query_params.get("end"), ErrorCode.REQUIRE_END)
        except IncomeValidationError as e:
            return error_response(e.code)

        try:
            records = await store.get_income(start, end)
            items = jsonable_encoder([to_model(record) for record in records])
        except Exception:
            logger.exception("Failed to list income for range start=%s end=%s", start, end)
            return internal_error()

        return JSONResponse(content=items)

    return list_income


def make_remove_handler(store: IncomeStore) -> Handler:
    """Create the handler for DELETE /income/{id}.

    Responds with `{}` once the store settles, whether or not the id existed.

    Args:
        store: Income store to delete from

    Returns:
        Request handler coroutine
    """

    async def remove_income(request: Request) -> JSONResponse:
        try:
            income_id = require_id(request.path_params.get("id"))
        except IncomeValidationError as e:
            return error_response(e.code)

        try:
            await store.remove_income(income_id)
        except Exception:
            logger.exception("Failed to remove income id=%s", income_id)
            return internal_error()

        return JSONResponse(content={})

    return remove_income


def make_edit_handler(store: IncomeStore, clock: Clock = time.time) -> Handler:
    """Create the handler for PATCH/PUT /income/{id}.

    Checks run in a fixed order and stop at the first failure:
    id, description, timestamp (parse), timestamp (range), category.
    A timestamp is in range when `0 <= timestamp <= now`.

    Args:
        store: Income store to write to
        clock: Returns the current time in Unix seconds

    Returns:
        Request handler coroutine
    """

    async def edit_income(request: Request) -> JSONResponse:
        try:
            income_id = require_id(request.path_params.get("id"))
            body = await _read_json_object(request)
            description = require_str(body.get("description"), ErrorCode.REQUIRE_DESCRIPTION)
            timestamp = require_int(body.get("timestamp"), ErrorCode.REQUIRE_TIMESTAMP)
            validate_timestamp(timestamp, now=int(clock()))
            category = require_str(body.get("category"), ErrorCode.REQUIRE_CATEGORY)
        except IncomeValidationError as e:
            return error_response(e.code)

        patch = IncomePatchEntity(
            description=description,
            timestamp=timestamp,
            category=category,
        )
        try:
            await store.edit_income(income_id, patch)
        except Exception:
            logger.exception("Failed to edit income id=%s", income_id)
            return internal_error()

        return JSONResponse(content={})

    return edit_income
