"""
Chart Configuration
Frozen configuration for direction classification and optional chart layers,
with env overrides
"""

from __future__ import annotations

import logging
import os

from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _f(name: str, default: float) -> float:
    """Parse float from environment variable."""
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _b(name: str, default: bool) -> bool:
    """Parse bool from environment variable."""
    v = os.getenv(name)
    return default if v is None else v.lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ChartConfig:
    """
    Frozen configuration for chart construction.

    Thresholds are absolute distances (degrees) from a mountain center:
    up to orthodox_max_deg is an orthodox reading, from void_min_deg on a
    void line, anything between is a seam-line reading.
    """

    orthodox_max_deg: float = _f("XK_ORTHODOX_MAX_DEG", 3.0)
    void_min_deg: float = _f("XK_VOID_MIN_DEG", 7.0)

    # Optional chart layers
    enable_alternate_board: bool = _b("XK_ENABLE_ALT_BOARD", True)
    enable_gate_detection: bool = _b("XK_ENABLE_GATES", True)

    def validate(self) -> bool:
        """Validate configuration consistency."""
        if not (0.0 < self.orthodox_max_deg < self.void_min_deg):
            return False
        # A reading can never be further than half a mountain from its center
        if self.void_min_deg > 7.5:
            return False
        return True


# Global singleton instance
_CONFIG: ChartConfig | None = None


def get_chart_config() -> ChartConfig:
    """Get or create the global chart configuration."""
    global _CONFIG
    if _CONFIG is None:
        cfg = ChartConfig()
        if not cfg.validate():
            raise ValueError("Invalid chart configuration")
        _CONFIG = cfg
    return _CONFIG


def initialize_chart_config() -> None:
    """Initialize and validate chart configuration at startup."""
    config = get_chart_config()
    logger.info(
        "Chart config initialized: orthodox<=%.2f void>=%.2f alt=%s gates=%s",
        config.orthodox_max_deg,
        config.void_min_deg,
        config.enable_alternate_board,
        config.enable_gate_detection,
    )
