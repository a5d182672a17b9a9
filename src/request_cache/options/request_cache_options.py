"""Request cache options.

ONLY cache option holding - time-to-live values, eviction flags and the
cacheable status codes consumed by the request cache layer.

Options are meant to be configured once (typically at application startup)
and then handed to the cache read-only. Mutating an instance after it has
been published to concurrent request handlers is not supported; build a new
instance (or ``copy()``) and swap the reference instead.
"""

from typing import Any, Dict, FrozenSet, Iterable

from ..core.exceptions import InvalidArgument, NullReference


class RequestCacheOptions:
    """Options for caching HTTP requests.

    Every setter validates its argument, mutates exactly one field and
    returns the same instance so calls can be chained::

        options = (
            RequestCacheOptions()
            .set_expires_after_write(5000)
            .set_evict_before(True)
        )

    A setter that rejects its argument raises before touching any field.
    """

    DEFAULT_EXPIRES_AFTER_WRITE_MILLIS = 2000
    DEFAULT_EVICT_BEFORE = False
    DEFAULT_EVICT_ALL_BEFORE = False
    DEFAULT_EXPIRES_AFTER_ACCESS_MILLIS = 0
    DEFAULT_CACHED_STATUS_CODES: FrozenSet[int] = frozenset({200})

    def __init__(self):
        self._expires_after_write = self.DEFAULT_EXPIRES_AFTER_WRITE_MILLIS
        self._evict_before = self.DEFAULT_EVICT_BEFORE
        self._expires_after_access = self.DEFAULT_EXPIRES_AFTER_ACCESS_MILLIS
        self._evict_all_before = self.DEFAULT_EVICT_ALL_BEFORE
        self._cached_status_codes = self.DEFAULT_CACHED_STATUS_CODES

    def set_expires_after_write(self, value: int) -> "RequestCacheOptions":
        """Set the time to live after write for cache entries.

        This is the initial time to live. Accessing an entry does not reset
        it. Only applies to GET requests. Default is 2000 millis.

        Args:
            value: Time to live in milliseconds, must be greater than 0

        Returns:
            This instance, so calls can be chained

        Raises:
            InvalidArgument: If value is not an integer or is not positive
        """
        _require_int("expires_after_write", value)
        if value <= 0:
            raise InvalidArgument.not_positive("expires_after_write", value)
        self._expires_after_write = value
        return self

    def get_expires_after_write(self) -> int:
        return self._expires_after_write

    def set_evict_before(self, flag: bool) -> "RequestCacheOptions":
        """Evict the matching cache entry before issuing the request.

        Applies to every HTTP method, so a POST can be used to drop the
        cached GET for the same request.
        """
        _require_bool("evict_before", flag)
        self._evict_before = flag
        return self

    def get_evict_before(self) -> bool:
        return self._evict_before

    def set_expires_after_access(self, value: int) -> "RequestCacheOptions":
        """Set the sliding time to live reset on every cache hit.

        Default is 0 which disables sliding expiry, leaving entries to
        expire through ``expires_after_write`` only. Only applies to GET
        requests.

        Args:
            value: Time to live in milliseconds, must be greater or equal to 0

        Returns:
            This instance, so calls can be chained

        Raises:
            InvalidArgument: If value is not an integer or is negative
        """
        _require_int("expires_after_access", value)
        if value < 0:
            raise InvalidArgument.negative("expires_after_access", value)
        self._expires_after_access = value
        return self

    def get_expires_after_access(self) -> int:
        return self._expires_after_access

    def set_evict_all_before(self, flag: bool) -> "RequestCacheOptions":
        """Evict the whole cache before issuing the request (any HTTP method)."""
        _require_bool("evict_all_before", flag)
        self._evict_all_before = flag
        return self

    def get_evict_all_before(self) -> bool:
        return self._evict_all_before

    def set_cached_status_codes(self, codes: Iterable[int]) -> "RequestCacheOptions":
        """Define the response status codes which will be cached.

        Default is 200 only. Only applies to GET requests. The codes are
        copied, so mutating the passed collection afterwards has no effect.
        An empty collection is accepted and disables caching of responses.

        Raises:
            NullReference: If codes is None
            InvalidArgument: If codes is not iterable or holds non-integers
        """
        if codes is None:
            raise NullReference.for_field("cached_status_codes")
        if isinstance(codes, (str, bytes)):
            raise InvalidArgument.wrong_type("cached_status_codes", codes, "a collection of integers")
        try:
            frozen = frozenset(codes)
        except TypeError:
            raise InvalidArgument.wrong_type(
                "cached_status_codes", codes, "a collection of integers"
            ) from None

        for code in frozen:
            _require_int("cached_status_codes", code)

        self._cached_status_codes = frozen
        return self

    def get_cached_status_codes(self) -> FrozenSet[int]:
        """Return a read-only view of the cacheable status codes."""
        return self._cached_status_codes

    def is_expires_after_access_enabled(self) -> bool:
        return self._expires_after_access > 0

    def is_cached_status_code(self, status_code: int) -> bool:
        return status_code in self._cached_status_codes

    def copy(self) -> "RequestCacheOptions":
        """Create an independent instance with the same values."""
        clone = self.__class__()
        clone._expires_after_write = self._expires_after_write
        clone._evict_before = self._evict_before
        clone._expires_after_access = self._expires_after_access
        clone._evict_all_before = self._evict_all_before
        clone._cached_status_codes = self._cached_status_codes
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary.

        Status codes are emitted as a sorted list so the result can be
        dumped to JSON or YAML.
        """
        return {
            "expires_after_write": self._expires_after_write,
            "evict_before": self._evict_before,
            "expires_after_access": self._expires_after_access,
            "evict_all_before": self._evict_all_before,
            "cached_status_codes": sorted(self._cached_status_codes),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestCacheOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"RequestCacheOptions(expires_after_write={self._expires_after_write}, "
                f"evict_before={self._evict_before}, "
                f"expires_after_access={self._expires_after_access}, "
                f"evict_all_before={self._evict_all_before}, "
                f"cached_status_codes={sorted(self._cached_status_codes)})")


def _require_int(field: str, value: Any) -> None:
    # bool is an int subclass but never a valid duration or status code
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument.wrong_type(field, value, "an integer")


def _require_bool(field: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidArgument.wrong_type(field, value, "a boolean")
