"""Pytest configuration and fixtures for request-cache tests."""

import pytest

from request_cache import RequestCacheOptions, RequestCachePolicy

ENV_VARIABLES = [
    "REQUEST_CACHE_EXPIRES_AFTER_WRITE_MILLIS",
    "REQUEST_CACHE_EVICT_BEFORE",
    "REQUEST_CACHE_EXPIRES_AFTER_ACCESS_MILLIS",
    "REQUEST_CACHE_EVICT_ALL_BEFORE",
    "REQUEST_CACHE_CACHED_STATUS_CODES",
    "LOG_LEVEL",
    "LOG_VERBOSITY",
    "LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the host environment out of configuration tests."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_options():
    """Options with every field at its default."""
    return RequestCacheOptions()


@pytest.fixture
def custom_options():
    """Options with every field changed from its default."""
    return (
        RequestCacheOptions()
        .set_expires_after_write(5000)
        .set_evict_before(True)
        .set_expires_after_access(1500)
        .set_evict_all_before(True)
        .set_cached_status_codes({200, 203, 404})
    )


@pytest.fixture
def sample_policy(custom_options):
    """Policy built from custom options."""
    return RequestCachePolicy(custom_options)


@pytest.fixture
def custom_options_data():
    """Dictionary form of custom_options."""
    return {
        "expires_after_write": 5000,
        "evict_before": True,
        "expires_after_access": 1500,
        "evict_all_before": True,
        "cached_status_codes": [200, 203, 404],
    }
