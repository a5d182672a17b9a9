"""Request cache policy.

ONLY cache decisions - answers the questions a request cache asks of its
options before and after issuing a request: what to evict, whether a
response may be stored, and which TTLs apply to the stored entry.
"""

import logging
from typing import Optional, Union

from ..core.value_objects import CacheTTL, HttpMethod
from ..options import RequestCacheOptions

logger = logging.getLogger(__name__)

MethodLike = Union[str, HttpMethod]


class RequestCachePolicy:
    """Read-only view of request cache options for the caching layer.

    The policy keeps a private copy of the options, so a creator that keeps
    mutating its instance does not change decisions of a live cache. To
    reconfigure, build a new policy and swap the reference.
    """

    def __init__(self, options: Optional[RequestCacheOptions] = None):
        self._options = (options or RequestCacheOptions()).copy()

    @property
    def options(self) -> RequestCacheOptions:
        """Copy of the options this policy decides from."""
        return self._options.copy()

    def should_evict_before(self, method: MethodLike) -> bool:
        """Whether the entry matching this request is evicted first (any method)."""
        http_method = HttpMethod.parse(method)
        evict = self._options.get_evict_before()
        if evict:
            logger.debug(f"Evicting cached entry before {http_method.value} request")
        return evict

    def should_evict_all_before(self, method: MethodLike) -> bool:
        """Whether the whole cache is evicted before this request (any method)."""
        http_method = HttpMethod.parse(method)
        evict_all = self._options.get_evict_all_before()
        if evict_all:
            logger.debug(f"Evicting whole cache before {http_method.value} request")
        return evict_all

    def is_cacheable(self, method: MethodLike, status_code: int) -> bool:
        """Whether a response may be stored in the cache."""
        http_method = HttpMethod.parse(method)
        if not http_method.is_read_only():
            return False

        cacheable = self._options.is_cached_status_code(status_code)
        if not cacheable:
            logger.debug(f"Not caching {http_method.value} response with status {status_code}")
        return cacheable

    def write_ttl(self, method: MethodLike) -> Optional[CacheTTL]:
        """TTL assigned when an entry is written, None for non-cached methods."""
        if not HttpMethod.parse(method).is_read_only():
            return None
        return CacheTTL(self._options.get_expires_after_write())

    def access_ttl(self, method: MethodLike) -> Optional[CacheTTL]:
        """Sliding TTL reset on every hit, None when disabled or not applicable."""
        if not HttpMethod.parse(method).is_read_only():
            return None
        if not self._options.is_expires_after_access_enabled():
            return None
        return CacheTTL(self._options.get_expires_after_access())

    def __repr__(self) -> str:
        return f"RequestCachePolicy({self._options!r})"
