# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

from .config import CacheConfig, get_cache_config, set_cache_config  # noqa: E402
from .core.cache import CacheStats, LRUCache  # noqa: E402
from .core.exceptions import ConfigError, RecencyError  # noqa: E402

__all__ = [
    "CacheConfig",
    "CacheStats",
    "ConfigError",
    "LRUCache",
    "RecencyError",
    "get_cache_config",
    "set_cache_config",
]
