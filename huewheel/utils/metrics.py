"""
HueWheel Metrics Collection
In-process counters and per-scheme latency windows for the palette service.
"""
import time
from collections import Counter, defaultdict, deque
from threading import Lock
from typing import Any, Deque, Dict, Optional

from huewheel.config import config

UNKNOWN_SCHEME = "unknown"


def _quantile(ordered, q: float) -> float:
    """Nearest-rank quantile of an already sorted sequence."""
    index = int(q * (len(ordered) - 1) + 0.5)
    return ordered[index]


class MetricsCollector:
    """
    Request counters plus a bounded latency window per scheme.

    Each window keeps only the most recent ``window`` durations, so memory
    and the cost of a summary stay constant however many requests are served.
    """

    def __init__(self, window: Optional[int] = None):
        self.window = window or config.METRICS_WINDOW
        self._lock = Lock()
        self._counters: Counter = Counter()
        self._latency: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=self.window))
        self._started_at = time.time()

    def record_request(self, operation: str):
        with self._lock:
            self._counters[f"{operation}_requests_total"] += 1

    def record_fallback(self, kind: str):
        """Count a silent fallback (invalid_hex, unknown_scheme)."""
        with self._lock:
            self._counters[f"palette_fallback_total_{kind}"] += 1

    def record_failure(self, kind: str):
        with self._lock:
            self._counters[f"palette_failed_total_{kind}"] += 1

    def record_palette(self, scheme: Optional[str], duration_ms: float):
        """
        Record a generated palette.

        Args:
            scheme: Resolved scheme value, or None when the scheme was unknown
            duration_ms: Time spent producing the palette
        """
        key = scheme or UNKNOWN_SCHEME
        with self._lock:
            if scheme is not None:
                self._counters[f"palette_scheme_total_{scheme}"] += 1
            self._latency[key].append(duration_ms)

    def get_counters(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)

    def window_size(self, scheme: str) -> int:
        """Number of durations currently held for a scheme."""
        with self._lock:
            return len(self._latency.get(scheme, ()))

    def get_scheme_latency(self) -> Dict[str, Dict[str, float]]:
        """Latency statistics over each scheme's current window."""
        with self._lock:
            snapshot = {scheme: sorted(window) for scheme, window in self._latency.items() if window}

        return {
            scheme: {
                "count": len(ordered),
                "mean": sum(ordered) / len(ordered),
                "p50": _quantile(ordered, 0.50),
                "p95": _quantile(ordered, 0.95),
                "max": ordered[-1],
            }
            for scheme, ordered in snapshot.items()
        }

    def get_summary(self) -> Dict[str, Any]:
        return {
            "uptime_seconds": time.time() - self._started_at,
            "window": self.window,
            "counters": self.get_counters(),
            "scheme_latency_ms": self.get_scheme_latency(),
        }

    def reset(self):
        """Drop all counters and windows (for testing)."""
        with self._lock:
            self._counters.clear()
            self._latency.clear()
            self._started_at = time.time()


_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Return the process-wide collector, creating it on first use."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    get_metrics().reset()
