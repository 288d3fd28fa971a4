"""
Thread-safe, fixed-capacity LRU cache.

Entries live in an index-linked arena (see ``arena``), a ``Directory`` maps
keys to arena slots, and a ``RecencyList`` orders the slots from most to least
recently touched. A single lock guards every structural mutation together with
its paired directory update. ``get`` checks the directory before taking the
lock, so misses never contend with writers, and re-checks after acquiring it
because a concurrent ``put`` may have evicted the key in between.
"""

import logging
import threading
from dataclasses import asdict, dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from ..metrics import CacheMetrics, MetricsCollector
from .arena import EntryArena
from .directory import Directory
from .exceptions import ConfigError
from .recency_list import RecencyList, trace_log

if TYPE_CHECKING:
    from ..config import CacheConfig

log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")

EvictionCallback = Callable[[Any, Any], None]

_MISSING = object()


@dataclass
class CacheStats:
    """Point-in-time counters for a cache instance."""

    capacity: int
    size: int = 0
    hits: int = 0
    misses: int = 0
    inserts: int = 0
    updates: int = 0
    evictions: int = 0
    removals: int = 0

    @property
    def hit_ratio(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["hit_ratio"] = self.hit_ratio
        return data


class LRUCache(Generic[K, V]):
    """
    A Least Recently Used (LRU) cache with O(1) lookup, insert, update and eviction.

    Args:
        capacity: Maximum number of resident entries; must be a positive integer
        on_evict: Optional callable invoked as ``on_evict(key, value)`` for each
            capacity eviction, after the cache lock is released
        trace: Log every lookup and list operation at DEBUG on ``recency.trace``
        name: Label used in log lines and metrics
        metrics: Optional MetricsCollector (uses the global collector if not provided)

    Raises:
        ConfigError: If capacity is not a positive integer
    """

    def __init__(
        self,
        capacity: int,
        on_evict: Optional[EvictionCallback] = None,
        trace: bool = False,
        name: str = "default",
        metrics: Optional[MetricsCollector] = None,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigError(value=capacity)

        self.capacity = capacity
        self.name = name
        self.on_evict = on_evict
        self._arena: EntryArena[K, V] = EntryArena()
        self._directory: Directory[K] = Directory()
        self._list: RecencyList[K, V] = RecencyList(self._arena, trace=trace)
        self._lock = threading.Lock()
        self._stats_lock = threading.Lock()
        self._stats = CacheStats(capacity=capacity)
        self._metrics = CacheMetrics(name, metrics)

        log.debug(f"LRUCache {name!r} created with capacity {capacity}")

    @classmethod
    def from_config(
        cls,
        config: "CacheConfig",
        on_evict: Optional[EvictionCallback] = None,
        name: str = "default",
    ) -> "LRUCache[K, V]":
        """Build a cache from a CacheConfig.

        Args:
            config: Capacity, trace and metrics settings
            on_evict: Optional eviction callback
            name: Label used in log lines and metrics

        Returns:
            New LRUCache instance.
        """
        collector = MetricsCollector(
            namespace=config.metrics_namespace, enabled=config.metrics_enabled
        )
        return cls(
            config.capacity,
            on_evict=on_evict,
            trace=config.trace,
            name=name,
            metrics=collector,
        )

    @property
    def trace(self) -> bool:
        return self._list.trace

    @trace.setter
    def trace(self, enabled: bool) -> None:
        self._list.trace = enabled

    def get(self, key: K, default: Union[V, T, None] = None) -> Union[V, T, None]:
        """Return the value for key and mark it most recently used.

        Returns ``default`` on a miss, including when the key was evicted by a
        concurrent ``put`` between the lookup and acquiring the lock.
        """
        if self.trace:
            trace_log.debug(f"Get {key!r}")

        if self._directory.lookup(key) is None:
            self._record_lookup(hit=False)
            return default

        with self._lock:
            # Re-check: the key may have been evicted since the unguarded lookup
            index = self._directory.lookup(key)
            hit = index is not None
            if hit:
                self._list.move_to_head(index)
                value = self._arena[index].value

        self._record_lookup(hit=hit)
        return value if hit else default

    def put(self, key: K, value: V) -> None:
        """Insert or update key, evicting the least recently used entry if full."""
        if self.trace:
            trace_log.debug(f"Put {key!r} : {value!r}")

        evicted: Optional[Tuple[K, V]] = None
        with self._lock:
            index = self._directory.lookup(key)
            if index is not None:
                self._arena[index].value = value
                self._list.move_to_head(index)
                updated = True
            else:
                # Evict before inserting so unlocked readers of the directory
                # never see more than capacity keys
                if len(self._list) >= self.capacity:
                    lru = self._list.evict_tail()
                    entry = self._arena[lru]
                    evicted = (entry.key, entry.value)
                    self._directory.remove(entry.key)
                    self._arena.release(lru)

                index = self._arena.allocate(key, value)
                self._list.insert_at_head(index)
                self._directory.insert(key, index)
                updated = False
            size = len(self._list)

        with self._stats_lock:
            if updated:
                self._stats.updates += 1
            else:
                self._stats.inserts += 1
            if evicted is not None:
                self._stats.evictions += 1

        if self._metrics.enabled:
            self._metrics.size(size, self.capacity)

        if evicted is not None:
            log.debug(f"LRUCache {self.name!r} evicted {evicted[0]!r}")
            if self._metrics.enabled:
                self._metrics.eviction()
            if self.on_evict is not None:
                self.on_evict(*evicted)

    def remove(self, key: K) -> bool:
        """Drop key from the cache without counting it as an eviction.

        Returns:
            True if the key was resident.
        """
        with self._lock:
            index = self._directory.remove(key)
            if index is None:
                return False
            self._list.unlink(index)
            self._arena.release(index)

        with self._stats_lock:
            self._stats.removals += 1
        return True

    def peek(self, key: K, default: Union[V, T, None] = None) -> Union[V, T, None]:
        """Return the value for key without changing its recency."""
        with self._lock:
            index = self._directory.lookup(key)
            if index is None:
                return default
            return self._arena[index].value

    def clear(self) -> None:
        """Remove all entries. The eviction callback is not invoked."""
        with self._lock:
            self._directory.clear()
            self._arena.clear()
            self._list.reset()

    def size(self) -> int:
        """Return the resident count. Unguarded, so it may be momentarily stale."""
        return len(self._directory)

    def keys(self) -> List[K]:
        """Keys ordered from most to least recently used."""
        with self._lock:
            return [self._arena[index].key for index in self._list]

    def items(self) -> List[Tuple[K, V]]:
        """(key, value) pairs ordered from most to least recently used."""
        with self._lock:
            return [
                (self._arena[index].key, self._arena[index].value)
                for index in self._list
            ]

    def stats(self) -> CacheStats:
        """Return a snapshot of hit, miss and eviction counters."""
        with self._stats_lock:
            snapshot = CacheStats(**asdict(self._stats))
        snapshot.size = self.size()
        return snapshot

    def _record_lookup(self, hit: bool) -> None:
        with self._stats_lock:
            if hit:
                self._stats.hits += 1
            else:
                self._stats.misses += 1

        if self._metrics.enabled:
            if hit:
                self._metrics.hit()
            else:
                self._metrics.miss()

    def __contains__(self, key: object) -> bool:
        """Check membership without touching recency."""
        return key in self._directory

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, key: K) -> V:
        """Get item using bracket notation, moving it to most recent if found."""
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        with self._lock:
            head = self._list.peek_head()
            tail = self._list.peek_tail()
            head_entry = self._arena[head] if head is not None else None
            tail_entry = self._arena[tail] if tail is not None else None
            size = len(self._list)
        return (
            f"LRUCache[name={self.name!r}, head={head_entry}, tail={tail_entry}, "
            f"size={size}, capacity={self.capacity}]"
        )
