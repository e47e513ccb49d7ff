"""Exceptions raised by validators and income stores."""

from income_api.dto.errors import ErrorCode


class IncomeValidationError(ValueError):
    """Raised when a request field fails validation.

    Attributes:
        code: The error code reported to the client
    """

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code.value)
        self.code = code


class IncomeNotFoundError(LookupError):
    """Raised when an income record cannot be located by id."""
