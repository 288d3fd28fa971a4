"""
Test configuration and fixtures for recency tests.

Provides shared fixtures for:
- Small caches with an eviction recorder
- Environment variable management
- Resetting global configuration and metrics state
"""

from typing import Any, Dict, List, Tuple

import pytest

from recency import LRUCache


@pytest.fixture
def evicted() -> List[Tuple[Any, Any]]:
    """Provide a list that collects (key, value) pairs from on_evict."""
    return []


@pytest.fixture
def cache(evicted) -> LRUCache:
    """Provide a capacity-3 cache that records evictions.

    Returns:
        LRUCache wired to the `evicted` fixture.
    """
    return LRUCache(3, on_evict=lambda key, value: evicted.append((key, value)))


@pytest.fixture
def filled_cache(cache) -> LRUCache:
    """Provide the capacity-3 cache holding 1, 2, 3 with 3 most recent."""
    cache.put(1, "A")
    cache.put(2, "B")
    cache.put(3, "C")
    return cache


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Provide patched environment variables for tests.

    Returns:
        Dictionary of environment variables set.
    """
    env_vars = {
        "RECENCY_CAPACITY": "64",
        "RECENCY_TRACE": "true",
        "RECENCY_METRICS_ENABLED": "true",
        "RECENCY_METRICS_NAMESPACE": "test.metrics",
        "LOG_LEVEL": "ERROR",  # Suppress logs during tests
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global config and metrics collector between tests."""
    from recency.config import set_cache_config
    from recency.metrics import set_metrics_collector

    set_cache_config(None)
    set_metrics_collector(None)

    yield

    set_cache_config(None)
    set_metrics_collector(None)
