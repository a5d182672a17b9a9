"""Null reference exception.

ONLY missing value errors - raised when a required cache option is None.
"""

from typing import Optional

from .base import RequestCacheError


class NullReference(RequestCacheError, TypeError):
    """Required cache option was supplied as None."""

    def __init__(self, field: str, error_code: Optional[str] = None):
        self.field = field

        super().__init__(
            f"{field} must not be None",
            error_code=error_code or "NULL_REFERENCE",
            details={"field": field},
        )

    @classmethod
    def for_field(cls, field: str) -> "NullReference":
        """Create exception for a missing option value."""
        return cls(field=field)
