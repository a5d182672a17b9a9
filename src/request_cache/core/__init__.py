"""Core domain of request-cache: exceptions and value objects."""

from .exceptions import *
from .value_objects import *

__all__ = [
    # Exceptions
    "RequestCacheError",
    "InvalidArgument",
    "NullReference",

    # Value Objects
    "CacheTTL",
    "HttpMethod",
]
