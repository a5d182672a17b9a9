"""Request cache exceptions.

One exception per file.
"""

from .base import RequestCacheError
from .invalid_argument import InvalidArgument
from .null_reference import NullReference

__all__ = [
    "RequestCacheError",
    "InvalidArgument",
    "NullReference",
]
