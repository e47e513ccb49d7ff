"""Validation helpers for income request fields.

Each helper either returns the cleaned value or raises
IncomeValidationError carrying the code to report.
"""

import math
import re
from typing import Any

from income_api.dto.errors import ErrorCode
from income_api.exceptions import IncomeValidationError

# Optional whitespace, optional sign, then the leading run of ASCII digits
INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(raw: Any) -> int | None:
    """Parse a base-10 integer the lenient way query strings are usually read.

    Strings are parsed from their leading digits ("12abc" -> 12, "1.9" -> 1).
    JSON floats are truncated toward zero. Booleans and anything else that
    carries no leading integer give None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    if isinstance(raw, str):
        match = INT_PREFIX_PATTERN.match(raw)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Longer than the interpreter's int string conversion limit
            return None
    return None


def require_int(raw: Any, code: ErrorCode) -> int:
    value = parse_int(raw)
    if value is None:
        raise IncomeValidationError(code)
    return value


def require_id(raw: Any) -> str:
    if not isinstance(raw, str) or not raw:
        raise IncomeValidationError(ErrorCode.REQUIRE_ID)
    return raw


def require_str(raw: Any, code: ErrorCode) -> str:
    """Reject absent (None) and non-string values. Empty strings pass."""
    if not isinstance(raw, str):
        raise IncomeValidationError(code)
    return raw


def validate_timestamp(timestamp: int, now: int) -> int:
    if timestamp < 0 or timestamp > now:
        raise IncomeValidationError(ErrorCode.INVALID_TIMESTAMP)
    return timestamp
