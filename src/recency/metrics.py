"""Cache counters and gauges emitted as structured log records.

Each metric becomes one INFO record on the ``recency.metrics`` logger, with
the metric itself attached under ``record.metric`` so a JSON formatter or log
shipper can pick it up without parsing the message.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class MetricType(Enum):
    COUNTER = "counter"
    GAUGE = "gauge"


@dataclass
class Metric:
    """One emitted measurement."""

    metric_type: MetricType
    metric_name: str
    value: float
    labels: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MetricsCollector:
    """Turns measurements into log records; a disabled collector drops them.

    Args:
        namespace: Attached to every record as ``record.namespace``
        enabled: When False, ``counter`` and ``gauge`` return immediately
    """

    def __init__(self, namespace: str = "recency.metrics", enabled: bool = True):
        self.namespace = namespace
        self.enabled = enabled

    def counter(
        self,
        name: str,
        value: float = 1.0,
        labels: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record an increment of ``value`` to a cumulative counter."""
        self._record(MetricType.COUNTER, name, value, labels)

    def gauge(
        self,
        name: str,
        value: float,
        labels: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record the current level of something, such as resident entries."""
        self._record(MetricType.GAUGE, name, value, labels)

    def _record(
        self,
        metric_type: MetricType,
        name: str,
        value: float,
        labels: Optional[Dict[str, Any]],
    ) -> None:
        if not self.enabled:
            return

        metric = Metric(metric_type, name, float(value), labels or {})
        logger.info(
            f"[METRIC] {metric.metric_name}={metric.value}",
            extra={"namespace": self.namespace, "metric": metric.to_dict()},
        )


_collector: Optional[MetricsCollector] = None


def get_metrics_collector(
    namespace: str = "recency.metrics", enabled: bool = False
) -> MetricsCollector:
    """Return the process-wide collector, creating a disabled one on first use.

    Caches built without an explicit collector share this one, so enabling it
    turns on metrics for all of them.
    """
    global _collector
    if _collector is None:
        _collector = MetricsCollector(namespace=namespace, enabled=enabled)
    return _collector


def set_metrics_collector(collector: Optional[MetricsCollector]) -> None:
    """Replace the process-wide collector; None resets it (used by tests)."""
    global _collector
    _collector = collector


class CacheMetrics:
    """Names and labels for one cache's lookups, evictions and occupancy.

    Every metric carries ``{"cache": cache_name}`` so several caches can
    share a collector.
    """

    def __init__(
        self, cache_name: str, collector: Optional[MetricsCollector] = None
    ):
        self.cache_name = cache_name
        self.collector = collector or get_metrics_collector()

    @property
    def enabled(self) -> bool:
        return self.collector.enabled

    def _labels(self, **extra: Any) -> Dict[str, Any]:
        return {"cache": self.cache_name, **extra}

    def hit(self) -> None:
        self.collector.counter("cache_hits", labels=self._labels())

    def miss(self) -> None:
        self.collector.counter("cache_misses", labels=self._labels())

    def eviction(self, count: int = 1) -> None:
        self.collector.counter(
            "cache_evictions", value=count, labels=self._labels()
        )

    def size(self, size: int, capacity: int) -> None:
        """Report resident entries, labelled with the configured capacity."""
        self.collector.gauge(
            "cache_size", value=size, labels=self._labels(capacity=capacity)
        )
