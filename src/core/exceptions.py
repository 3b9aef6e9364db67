"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes."""

    # Authorization errors (403)
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Server errors (500)
    INVALID_HEADER_SUMMARY = "INVALID_HEADER_SUMMARY"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user}",
            status_code=404,
            details={"user": user},
        )


class AccountLockedError(AppException):
    """Locked accounts may not perform mutating actions."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.ACCOUNT_LOCKED,
            message="This account is locked",
            status_code=403,
            details={"name": name},
        )


class InvalidHeaderSummaryError(AppException):
    """A header count source returned a value the summary cannot hold."""

    def __init__(self, field_name: str, value: int) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_HEADER_SUMMARY,
            message=f"Header count must be non-negative: {field_name}={value}",
            status_code=500,
            details={"field": field_name, "value": value},
        )
