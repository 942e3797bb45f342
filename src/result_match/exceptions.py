"""Custom exceptions for result_match.

Failures carried inside a Result are data and are never raised. The exceptions
here cover contract violations: dispatching on a value that is not a Result,
and asking a Failure for its success value.
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    """Types of errors that can occur while consuming a Result."""

    MALFORMED_RESULT = "malformed_result"
    UNWRAP_FAILURE = "unwrap_failure"


class ResultError(Exception):
    """Base exception for all result_match errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class MalformedResultError(ResultError, TypeError):
    """Raised when a value handed to the dispatcher carries no known tag."""

    def __init__(self, obj: Any, tag: Any = None):
        message = f"Not a Result: {type(obj).__name__} has no recognised tag"
        super().__init__(
            message,
            ErrorType.MALFORMED_RESULT,
            {"tag": tag, "type": type(obj).__name__},
        )


class UnwrapError(ResultError, RuntimeError):
    """Raised when unwrap() is called on a Failure.

    Attributes:
        reason: The failure reason that was found instead of a value
    """

    def __init__(self, reason: Any):
        self.reason = reason
        super().__init__(
            f"Called unwrap() on Failure: {reason}",
            ErrorType.UNWRAP_FAILURE,
            {"reason": reason},
        )
