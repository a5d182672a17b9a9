"""Request cache options schema.

ONLY payload validation - validates external configuration data
(dictionaries, YAML and JSON documents) before it becomes options.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from ..options import RequestCacheOptions


class RequestCacheOptionsSchema(BaseModel):
    """Schema for request cache options payloads."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "expires_after_write": 5000,
                "evict_before": False,
                "expires_after_access": 1000,
                "evict_all_before": False,
                "cached_status_codes": [200, 203, 404],
            }
        },
    )

    expires_after_write: StrictInt = Field(
        default=RequestCacheOptions.DEFAULT_EXPIRES_AFTER_WRITE_MILLIS,
        gt=0,
        description="Time to live after write in milliseconds (GET only)",
    )

    evict_before: StrictBool = Field(
        default=RequestCacheOptions.DEFAULT_EVICT_BEFORE,
        description="Evict the matching entry before the request",
    )

    expires_after_access: StrictInt = Field(
        default=RequestCacheOptions.DEFAULT_EXPIRES_AFTER_ACCESS_MILLIS,
        ge=0,
        description="Sliding time to live in milliseconds, 0 disables it (GET only)",
    )

    evict_all_before: StrictBool = Field(
        default=RequestCacheOptions.DEFAULT_EVICT_ALL_BEFORE,
        description="Evict the whole cache before the request",
    )

    cached_status_codes: List[StrictInt] = Field(
        default_factory=lambda: sorted(RequestCacheOptions.DEFAULT_CACHED_STATUS_CODES),
        description="Response status codes which will be cached (GET only)",
    )

    def to_options(self) -> RequestCacheOptions:
        """Convert to a request cache options instance."""
        return (
            RequestCacheOptions()
            .set_expires_after_write(self.expires_after_write)
            .set_evict_before(self.evict_before)
            .set_expires_after_access(self.expires_after_access)
            .set_evict_all_before(self.evict_all_before)
            .set_cached_status_codes(self.cached_status_codes)
        )

    @classmethod
    def from_options(cls, options: RequestCacheOptions) -> "RequestCacheOptionsSchema":
        return cls(**options.to_dict())

    def to_domain_data(self) -> Dict[str, Any]:
        return self.model_dump()
