"""Error codes returned in `{"code": ...}` error bodies."""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of error codes exposed by the income endpoints."""

    REQUIRE_START = "REQUIRE_START"
    REQUIRE_END = "REQUIRE_END"
    REQUIRE_ID = "REQUIRE_ID"
    REQUIRE_DESCRIPTION = "REQUIRE_DESCRIPTION"
    REQUIRE_TIMESTAMP = "REQUIRE_TIMESTAMP"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    REQUIRE_CATEGORY = "REQUIRE_CATEGORY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Codes each endpoint can answer with, besides INTERNAL_ERROR
LIST_ERRORS = frozenset({ErrorCode.REQUIRE_START, ErrorCode.REQUIRE_END})
REMOVE_ERRORS = frozenset({ErrorCode.REQUIRE_ID})
EDIT_ERRORS = frozenset(
    {
        ErrorCode.REQUIRE_ID,
        ErrorCode.REQUIRE_DESCRIPTION,
        ErrorCode.REQUIRE_TIMESTAMP,
        ErrorCode.INVALID_TIMESTAMP,
        ErrorCode.REQUIRE_CATEGORY,
    }
)
