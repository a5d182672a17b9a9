"""Request cache options."""

from .request_cache_options import RequestCacheOptions

__all__ = [
    "RequestCacheOptions",
]
