"""
Prometheus metrics for the chart service.

- xk_charts_total{facing_kind} - Charts built, by facing classification
- xk_alternate_boards_total - Alternate boards computed for void facings
- xk_gates_total{kind} - Thành Môn gates found
- xk_annual_lookups_total{direction} - Annual star lookups
- xk_chart_compute_seconds - Chart computation latency
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram, Info

from xuankong.core_types import BoardResult

# ===========================
# CHART METRICS
# ===========================

xk_charts_total = Counter(
    "xk_charts_total",
    "Flying Star charts built",
    ["facing_kind"],  # chinh, kiem, tieu-khong-vong, dai-khong-vong
)

xk_alternate_boards_total = Counter(
    "xk_alternate_boards_total", "Alternate boards computed for void-line facings"
)

xk_gates_total = Counter(
    "xk_gates_total",
    "Thành Môn gates found",
    ["kind"],  # chinh, phu
)

xk_annual_lookups_total = Counter(
    "xk_annual_lookups_total", "Annual star lookups", ["direction"]
)

xk_chart_compute_seconds = Histogram(
    "xk_chart_compute_seconds",
    "Chart computation latency",
    buckets=(0.0001, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, float("inf")),
)

xk_service_info = Info("xk_service", "Flying Star service information")

# ===========================
# METRIC COLLECTION HELPERS
# ===========================


class ChartMetricsCollector:
    """Helper to record chart outcomes."""

    def record_chart(self, result: BoardResult, duration_seconds: float):
        xk_charts_total.labels(facing_kind=result.facing.kind.value).inc()
        xk_chart_compute_seconds.observe(duration_seconds)
        if result.alt is not None:
            xk_alternate_boards_total.inc()
        if result.gate is not None:
            xk_gates_total.labels(kind=result.gate.kind.value).inc()

    def record_annual_lookup(self, direction: str):
        xk_annual_lookups_total.labels(direction=direction).inc()


# Global metrics collector instance
chart_metrics = ChartMetricsCollector()


def initialize_service_metrics(version: str) -> None:
    """Publish static service information."""
    xk_service_info.info({"version": version, "service": "xuankong_flying_star"})
