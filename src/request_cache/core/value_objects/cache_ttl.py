"""Cache TTL value object.

ONLY TTL handling - millisecond time-to-live value object used for
write and access expiry of request cache entries.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..exceptions import InvalidArgument


@dataclass(frozen=True)
class CacheTTL:
    """Cache TTL (Time To Live) value object in milliseconds.

    A value of 0 means the TTL is disabled: entries relying on it never
    expire through it and callers fall back to another TTL.
    """

    millis: int

    DISABLED = 0

    # Common TTL durations (in milliseconds)
    ONE_SECOND = 1000
    ONE_MINUTE = 60 * 1000
    ONE_HOUR = 3600 * 1000

    def __post_init__(self):
        """Validate TTL value."""
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise InvalidArgument.wrong_type("millis", self.millis, "an integer")
        if self.millis < self.DISABLED:
            raise InvalidArgument.negative("millis", self.millis)

    @classmethod
    def disabled(cls) -> "CacheTTL":
        """Create a disabled TTL."""
        return cls(cls.DISABLED)

    @classmethod
    def from_seconds(cls, seconds: float) -> "CacheTTL":
        """Create TTL from seconds, truncated to whole milliseconds.

        Raises:
            InvalidArgument: If seconds is negative, or positive but below
                one millisecond (it would otherwise become a disabled TTL)
        """
        return cls._from_fractional_millis("seconds", seconds, seconds * 1000)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "CacheTTL":
        """Create TTL from timedelta, truncated to whole milliseconds."""
        return cls._from_fractional_millis("delta", delta, delta.total_seconds() * 1000)

    @classmethod
    def _from_fractional_millis(cls, field: str, value: object, millis: float) -> "CacheTTL":
        if millis < 0:
            raise InvalidArgument.negative(field, value)
        if 0 < millis < 1:
            raise InvalidArgument(
                field=field,
                value=value,
                reason=f"must be 0 or at least 1 millisecond, got {value}",
                error_code="VALUE_BELOW_RESOLUTION",
            )
        return cls(int(millis))

    def is_disabled(self) -> bool:
        return self.millis == self.DISABLED

    def to_timedelta(self) -> Optional[timedelta]:
        """Convert to timedelta, None if disabled."""
        if self.is_disabled():
            return None
        return timedelta(milliseconds=self.millis)

    def get_expiry_time(self, reference: datetime) -> Optional[datetime]:
        """Get absolute expiry time counted from reference, None if disabled."""
        delta = self.to_timedelta()
        if delta is None:
            return None
        return reference + delta

    def is_expired(self, reference: datetime, now: Optional[datetime] = None) -> bool:
        """Check if the TTL counted from reference has elapsed.

        A disabled TTL never expires. Naive datetimes are treated as UTC.
        """
        expiry_time = self.get_expiry_time(reference)
        if expiry_time is None:
            return False

        current = now or datetime.now(timezone.utc)
        if expiry_time.tzinfo is None:
            expiry_time = expiry_time.replace(tzinfo=timezone.utc)
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        return current >= expiry_time

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.is_disabled():
            return "disabled"

        if self.millis < 1000:
            return f"{self.millis}ms"
        elif self.millis < 60 * 1000:
            return f"{self.millis / 1000:g}s"
        elif self.millis < 3600 * 1000:
            return f"{self.millis // (60 * 1000)}m"
        else:
            return f"{self.millis // (3600 * 1000)}h"
