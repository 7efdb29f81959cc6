"""Custom exception classes for the pagination package."""

from typing import Any

from lambda_pagination.utils.constants import (
    ERROR_CODE_INVALID_CONFIGURATION,
    ERROR_CODE_INVALID_PAGE,
    ERROR_CODE_INVALID_STRATEGY,
    ERROR_CODE_REPLY_NOT_SENT,
)


class PaginationError(Exception):
    """
    Base exception for all pagination errors.

    Malformed pagination query input is never reported through these
    classes; it silently resolves to the configured defaults. They cover
    misconfiguration and host integration mistakes only.
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


class ConfigurationError(PaginationError):
    """Raised when pagination settings cannot be read from the environment."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidStrategyError(PaginationError):
    """Raised when the plugin is given an object that is not a strategy."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_STRATEGY,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ReplyNotSentError(PaginationError):
    """Raised when a paginated handler returns without sending a reply."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_REPLY_NOT_SENT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidPageError(PaginationError):
    """Raised when a handler supplies a page without a usable count or items."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_PAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
