"""Request cache configuration loading."""

from .options_schema import RequestCacheOptionsSchema
from .request_cache_config import (
    DEFAULT_ENVIRONMENT_PREFIX,
    RequestCacheConfig,
    create_request_cache_options,
)

__all__ = [
    "DEFAULT_ENVIRONMENT_PREFIX",
    "RequestCacheConfig",
    "RequestCacheOptionsSchema",
    "create_request_cache_options",
]
