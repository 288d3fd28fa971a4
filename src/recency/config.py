"""Centralized configuration for cache construction."""

import os
from dataclasses import dataclass
from typing import Optional

from .core.exceptions import ConfigError

DEFAULT_CAPACITY = 128


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class CacheConfig:
    """Configuration for an LRU cache."""

    capacity: int = DEFAULT_CAPACITY
    trace: bool = False
    metrics_enabled: bool = False
    metrics_namespace: str = "recency.metrics"

    @classmethod
    def from_env(cls) -> "CacheConfig":
        """Load configuration from environment variables.

        Environment variables:
        - RECENCY_CAPACITY: Maximum resident entries (default: 128)
        - RECENCY_TRACE: Log every internal list operation (default: false)
        - RECENCY_METRICS_ENABLED: Emit cache metrics (default: false)
        - RECENCY_METRICS_NAMESPACE: Metrics namespace (default: recency.metrics)

        Returns:
            CacheConfig initialized from environment variables.

        Raises:
            ConfigError: If RECENCY_CAPACITY is not an integer.
        """
        raw_capacity = os.getenv("RECENCY_CAPACITY", str(DEFAULT_CAPACITY))
        try:
            capacity = int(raw_capacity)
        except ValueError as e:
            raise ConfigError(value=raw_capacity) from e

        return cls(
            capacity=capacity,
            trace=_env_flag("RECENCY_TRACE", "false"),
            metrics_enabled=_env_flag("RECENCY_METRICS_ENABLED", "false"),
            metrics_namespace=os.getenv(
                "RECENCY_METRICS_NAMESPACE", "recency.metrics"
            ),
        )


# Global default configuration
_config: Optional[CacheConfig] = None


def get_cache_config() -> CacheConfig:
    """Get global cache configuration (lazy-loaded).

    Returns:
        CacheConfig instance initialized from environment.
    """
    global _config
    if _config is None:
        _config = CacheConfig.from_env()
    return _config


def set_cache_config(config: Optional[CacheConfig]) -> None:
    """Set global cache configuration (for testing).

    Args:
        config: CacheConfig to set as global, or None to reload from env.
    """
    global _config
    _config = config
