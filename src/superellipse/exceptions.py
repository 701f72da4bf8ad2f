"""Exception hierarchy for the superellipse engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes used to categorize failures."""

    INVALID_DIMENSIONS = "E_INVALID_DIMENSIONS"
    INVALID_EXPONENT = "E_INVALID_EXPONENT"
    INVALID_SAMPLING = "E_INVALID_SAMPLING"
    INVALID_REQUEST = "E_INVALID_REQUEST"
    REQUEST_FILE = "E_REQUEST_FILE"
    UNKNOWN = "E_UNKNOWN"


class SuperellipseError(Exception):
    """Base exception for all superellipse errors."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if code is not None:
            self.code = code
        self.context = context or {}
        super().__init__(message)


class GeometryError(SuperellipseError):
    """Errors in geometric calculations."""

    pass


class InvalidGeometryError(GeometryError):
    """A dimension, exponent or sampling option is out of range.

    Raised synchronously before any point is computed, so callers never
    receive a partial or malformed path.
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        code: ErrorCode = ErrorCode.INVALID_DIMENSIONS,
        requirement: str = "must be a positive number",
    ) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"Invalid {parameter} {value!r}: {requirement}",
            code=code,
            context={"parameter": parameter, "value": value},
        )


class InvalidRequestError(SuperellipseError):
    """A path request is missing fields or names an unknown mode."""

    code = ErrorCode.INVALID_REQUEST

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid path request: {reason}")


class RequestFileError(SuperellipseError):
    """Error loading a batch request file."""

    code = ErrorCode.REQUEST_FILE

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Failed to load requests '{path}': {reason}",
            context={"path": path},
        )


@dataclass(frozen=True, slots=True)
class UserMessage:
    """Short user-facing message with a recovery hint."""

    message: str
    hint: str | None = None


_USER_MESSAGES: dict[ErrorCode, UserMessage] = {
    ErrorCode.INVALID_DIMENSIONS: UserMessage(
        "Width and height must be positive numbers",
        "Try values between 50 and 2000",
    ),
    ErrorCode.INVALID_EXPONENT: UserMessage(
        "Exponent must be a positive number",
        "Try values between 0.5 and 20",
    ),
    ErrorCode.INVALID_SAMPLING: UserMessage(
        "Steps must be a positive integer and precision a non-negative integer",
        "Try the defaults of 360 steps and precision 2",
    ),
    ErrorCode.INVALID_REQUEST: UserMessage(
        "Invalid path request",
        "Check the request mode and its exponent fields",
    ),
    ErrorCode.REQUEST_FILE: UserMessage(
        "Could not read the request file",
        "Check that the file exists and contains a JSON list",
    ),
    ErrorCode.UNKNOWN: UserMessage(
        "Something went wrong",
        "Try again with --log-level DEBUG for details",
    ),
}


def to_user_message(error: BaseException | str | None) -> UserMessage:
    """Convert any error to a user-friendly message.

    Args:
        error: Exception instance, plain message string, or anything else

    Returns:
        UserMessage with message and optional hint
    """
    if isinstance(error, SuperellipseError):
        return _USER_MESSAGES.get(error.code, _USER_MESSAGES[ErrorCode.UNKNOWN])

    if isinstance(error, Exception):
        return UserMessage(str(error) or "An error occurred", "Try again")

    if isinstance(error, str):
        return UserMessage(error, "Try again")

    return _USER_MESSAGES[ErrorCode.UNKNOWN]
