"""Custom exception classes for the query service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_TERM_SYNTAX,
    ERROR_CODE_UNKNOWN_TERM,
    ERROR_CODE_VALIDATION_FAILED,
)


class QueryServiceError(Exception):
    """
    Base exception for all query service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(QueryServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class TermSyntaxError(QueryServiceError):
    """Raised when a query term is malformed.

    Detected while compiling a query, never during evaluation. The whole
    query is expected to be rejected by the caller.
    """

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_TERM_SYNTAX,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnknownTermError(TermSyntaxError):
    """Raised when a term name has no registered parser."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNKNOWN_TERM,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
