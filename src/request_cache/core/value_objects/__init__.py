"""Request cache value objects."""

from .cache_ttl import CacheTTL
from .http_method import HttpMethod

__all__ = [
    "CacheTTL",
    "HttpMethod",
]
