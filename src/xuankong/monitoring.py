#!/usr/bin/env python3
"""
Monitoring hooks for chart computation
In-process timers, domain event counters and feature flags, surfaced by
the /api/v1/health/metrics endpoint
"""

import threading
import time

from collections import deque
from collections.abc import Callable
from functools import wraps
from typing import Any

# Recent durations kept per operation for the p95 estimate
SAMPLE_WINDOW = 256

# ============================================================================
# PER-OPERATION STATS
# ============================================================================


class OperationStats:
    """Running totals plus a bounded window of recent durations"""

    __slots__ = ("count", "errors", "total_time", "min_time", "max_time", "last_time", "_recent")

    def __init__(self):
        self.count = 0
        self.errors = 0
        self.total_time = 0.0
        self.min_time = float("inf")
        self.max_time = 0.0
        self.last_time = 0.0
        self._recent: deque[float] = deque(maxlen=SAMPLE_WINDOW)

    def add(self, duration: float, error: bool) -> None:
        self.count += 1
        self.errors += int(error)
        self.total_time += duration
        self.last_time = duration
        if duration < self.min_time:
            self.min_time = duration
        if duration > self.max_time:
            self.max_time = duration
        self._recent.append(duration)

    def p95(self) -> float:
        if not self._recent:
            return 0.0
        ordered = sorted(self._recent)
        return ordered[min(len(ordered) - 1, int(0.95 * len(ordered)))]

    def snapshot(self) -> dict[str, Any]:
        n = self.count
        return {
            "count": n,
            "errors": self.errors,
            "error_rate": self.errors / n if n else 0,
            "total_time": self.total_time,
            "avg_time": self.total_time / n if n else 0.0,
            "min_time": self.min_time if n else 0,
            "max_time": self.max_time,
            "last_time": self.last_time,
            "p95_time": self.p95(),
        }


# ============================================================================
# COLLECTOR
# ============================================================================


class MetricsCollector:
    """Thread-safe store for timings, events (void facing, gate found) and flags"""

    def __init__(self):
        self._lock = threading.Lock()
        self._ops: dict[str, OperationStats] = {}
        self._events: dict[str, int] = {}
        self._flags: dict[str, bool] = {}
        self._started = time.time()

    def record_timing(self, name: str, duration: float, error: bool = False):
        with self._lock:
            self._ops.setdefault(name, OperationStats()).add(duration, error)

    def record_event(self, name: str):
        with self._lock:
            self._events[name] = self._events.get(name, 0) + 1

    def set_feature_flag(self, name: str, enabled: bool):
        with self._lock:
            self._flags[name] = enabled

    def get_metrics(self) -> dict[str, Any]:
        with self._lock:
            return {
                "uptime_seconds": time.time() - self._started,
                "metrics": {name: stats.snapshot() for name, stats in self._ops.items()},
                "events": dict(self._events),
                "feature_flags": dict(self._flags),
            }

    def reset(self):
        """Drop timings and events; feature flags reflect config and are kept."""
        with self._lock:
            self._ops.clear()
            self._events.clear()
            self._started = time.time()


_collector = MetricsCollector()

# ============================================================================
# INSTRUMENTATION
# ============================================================================


def timed(name: str | None = None):
    """Record wall time and failures of every call under `name`.

    Usage:
        @timed("build_boards")
        def build_boards(...):
            ...
    """

    def decorator(func: Callable) -> Callable:
        label = name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        def wrapper(*args, **kwargs):
            with Timer(label):
                return func(*args, **kwargs)

        return wrapper

    return decorator


class Timer:
    """Context manager recording one timing; an exception counts as an error"""

    def __init__(self, name: str):
        self.name = name
        self._t0 = 0.0

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _collector.record_timing(self.name, time.perf_counter() - self._t0, exc_type is not None)
        return False


# ============================================================================
# MODULE-LEVEL API
# ============================================================================


def record_timing(name: str, duration: float, error: bool = False):
    _collector.record_timing(name, duration, error)


def record_event(name: str):
    _collector.record_event(name)


def get_metrics() -> dict[str, Any]:
    return _collector.get_metrics()


def set_feature_flag(name: str, enabled: bool):
    _collector.set_feature_flag(name, enabled)
