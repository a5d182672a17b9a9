"""request-cache.

Options for caching HTTP requests: write and access time-to-live values,
eviction flags and cacheable status codes, plus the policy and
configuration loading used by a request cache.
"""

from .__version__ import __version__
from .core.exceptions import InvalidArgument, NullReference, RequestCacheError
from .core.value_objects import CacheTTL, HttpMethod
from .options import RequestCacheOptions
from .application import RequestCachePolicy
from .configuration import (
    RequestCacheConfig,
    RequestCacheOptionsSchema,
    create_request_cache_options,
)

__all__ = [
    "__version__",

    # Core
    "RequestCacheError",
    "InvalidArgument",
    "NullReference",
    "CacheTTL",
    "HttpMethod",

    # Options
    "RequestCacheOptions",

    # Application
    "RequestCachePolicy",

    # Configuration
    "RequestCacheConfig",
    "RequestCacheOptionsSchema",
    "create_request_cache_options",
]
