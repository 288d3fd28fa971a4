from .arena import Entry, EntryArena
from .cache import CacheStats, LRUCache
from .directory import Directory
from .exceptions import ConfigError, RecencyError
from .recency_list import RecencyList

__all__ = [
    "CacheStats",
    "ConfigError",
    "Directory",
    "Entry",
    "EntryArena",
    "LRUCache",
    "RecencyError",
    "RecencyList",
]
