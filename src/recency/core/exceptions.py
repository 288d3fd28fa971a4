"""Custom exceptions for recency.

Provides clear, actionable error messages for configuration failures.
Lookups that miss are a normal outcome and never raise.
"""

from typing import Any, Optional


class RecencyError(Exception):
    """Base exception for recency errors."""

    pass


class ConfigError(RecencyError, ValueError):
    """Raised when a cache is constructed with an unusable configuration.

    Capacity must be a positive integer. This is reported at construction
    time and is never retried.
    """

    def __init__(self, message: Optional[str] = None, value: Any = None):
        """Initialize with optional custom message.

        Args:
            message: Optional custom error message. If not provided, uses default.
            value: The rejected capacity value, included in the default message.
        """
        self.value = value
        if message is None:
            message = self._default_message(value)
        super().__init__(message)

    @staticmethod
    def _default_message(value: Any) -> str:
        """Generate default error message describing accepted capacities.

        Returns:
            Formatted error message with actionable steps.
        """
        return f"""Cache capacity must be a positive integer, got {value!r}.

Set a capacity using one of these methods:

  1. Constructor argument:
     LRUCache(capacity=128)

  2. Environment variable (used by CacheConfig.from_env):
     export RECENCY_CAPACITY=128"""
