"""Tests for cache configuration module."""

import pytest

from recency.config import (
    DEFAULT_CAPACITY,
    CacheConfig,
    get_cache_config,
    set_cache_config,
)
from recency.core.exceptions import ConfigError


class TestCacheConfig:
    """Test CacheConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = CacheConfig()
        assert config.capacity == DEFAULT_CAPACITY == 128
        assert config.trace is False
        assert config.metrics_enabled is False
        assert config.metrics_namespace == "recency.metrics"

    def test_custom_values(self):
        """Test with custom values."""
        config = CacheConfig(capacity=5, trace=True, metrics_enabled=True)
        assert config.capacity == 5
        assert config.trace is True
        assert config.metrics_enabled is True


class TestFromEnv:
    """Test loading configuration from environment."""

    def test_from_env(self, mock_env_vars):
        config = CacheConfig.from_env()
        assert config.capacity == 64
        assert config.trace is True
        assert config.metrics_enabled is True
        assert config.metrics_namespace == "test.metrics"

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "RECENCY_CAPACITY",
            "RECENCY_TRACE",
            "RECENCY_METRICS_ENABLED",
            "RECENCY_METRICS_NAMESPACE",
        ):
            monkeypatch.delenv(name, raising=False)
        assert CacheConfig.from_env() == CacheConfig()

    def test_from_env_flag_variants(self, monkeypatch):
        monkeypatch.setenv("RECENCY_TRACE", "1")
        monkeypatch.setenv("RECENCY_METRICS_ENABLED", "no")
        config = CacheConfig.from_env()
        assert config.trace is True
        assert config.metrics_enabled is False

    def test_from_env_invalid_capacity(self, monkeypatch):
        monkeypatch.setenv("RECENCY_CAPACITY", "lots")
        with pytest.raises(ConfigError) as exc_info:
            CacheConfig.from_env()
        assert exc_info.value.value == "lots"


class TestGlobalConfig:
    """Test lazily-loaded global configuration."""

    def test_get_is_cached(self, mock_env_vars):
        first = get_cache_config()
        assert first.capacity == 64
        assert get_cache_config() is first

    def test_set_overrides(self):
        custom = CacheConfig(capacity=3)
        set_cache_config(custom)
        assert get_cache_config() is custom
