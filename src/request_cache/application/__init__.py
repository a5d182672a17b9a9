"""Request cache application layer."""

from .request_cache_policy import RequestCachePolicy

__all__ = [
    "RequestCachePolicy",
]
