"""HTTP method value object."""

from enum import Enum
from typing import Union

from ..exceptions import InvalidArgument


class HttpMethod(str, Enum):
    """HTTP methods a request cache can see."""
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: Union[str, "HttpMethod"]) -> "HttpMethod":
        """Parse a method name in any case."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidArgument.wrong_type("method", value, "a string")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidArgument(
                field="method",
                value=value,
                reason=f"is not a supported HTTP method: {value!r}",
                error_code="UNKNOWN_HTTP_METHOD",
            ) from None

    def is_read_only(self) -> bool:
        """Only GET responses are written to and served from the cache."""
        return self is HttpMethod.GET
