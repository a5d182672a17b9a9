"""Invalid argument exception.

ONLY argument validation errors - raised when a cache option value
violates its bound or has the wrong type.
"""

from typing import Any, Optional

from .base import RequestCacheError


class InvalidArgument(RequestCacheError, ValueError):
    """Cache option validation error.

    Raised synchronously by option setters and configuration loaders when:
    - A time-to-live that must be positive is zero or negative
    - A time-to-live that must be non-negative is negative
    - A value has the wrong type (e.g. a string where milliseconds are expected)
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        """Initialize invalid argument error.

        Args:
            field: Name of the option being set
            value: The rejected value
            reason: Human-readable reason for the rejection
            error_code: Optional machine-readable error code
            details: Optional additional error details
        """
        self.field = field
        self.value = value
        self.reason = reason

        super().__init__(
            f"{field} {reason}",
            error_code=error_code or "INVALID_ARGUMENT",
            details={"field": field, "value": repr(value), **(details or {})},
        )

    @classmethod
    def not_positive(cls, field: str, value: Any) -> "InvalidArgument":
        """Create exception for a value that must be greater than 0."""
        return cls(
            field=field,
            value=value,
            reason=f"must be greater than 0, got {value}",
            error_code="VALUE_NOT_POSITIVE",
        )

    @classmethod
    def negative(cls, field: str, value: Any) -> "InvalidArgument":
        """Create exception for a value that must be greater or equal to 0."""
        return cls(
            field=field,
            value=value,
            reason=f"must be greater or equal to 0, got {value}",
            error_code="VALUE_NEGATIVE",
        )

    @classmethod
    def wrong_type(cls, field: str, value: Any, expected: str) -> "InvalidArgument":
        """Create exception for a value of the wrong type."""
        return cls(
            field=field,
            value=value,
            reason=f"must be {expected}, got {type(value).__name__}",
            error_code="VALUE_WRONG_TYPE",
            details={"expected": expected},
        )
