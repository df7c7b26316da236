#!/usr/bin/env python3
"""
Chart facade - entry points used by the API layer
No domain logic, just orchestration
"""

from __future__ import annotations

import logging

from constants.stars import VOID_WARNING
from xuankong.alternate import resolve_alternate
from xuankong.annual import calculate_flying_star
from xuankong.chart_config import ChartConfig, get_chart_config
from xuankong.classifier import classify_direction
from xuankong.compass import normalize_angle
from xuankong.composer import build_set, earth_grid
from xuankong.core_types import BoardResult
from xuankong.gates import compute_thanh_mon
from xuankong.monitoring import Timer, record_event, timed
from xuankong.period import compute_period

# Initialize module logger
logger = logging.getLogger(__name__)

__all__ = ["build_boards", "calculate_flying_star"]

# ============================================================================
# MAIN API FUNCTIONS
# ============================================================================


@timed("build_boards")
def build_boards(year: int, facing_degrees: float, config: ChartConfig | None = None) -> BoardResult:
    """Build the complete Flying Star chart for a building.

    Args:
        year: Construction (or re-roofing) year; any integer
        facing_degrees: Facing bearing in degrees; normalized modulo 360
        config: Classification thresholds and optional layers

    Returns:
        BoardResult with primary boards, optional alternate boards and gate
    """
    cfg = config or get_chart_config()
    deg = normalize_angle(facing_degrees)

    period_info = compute_period(year)
    facing = classify_direction(deg, cfg)
    sitting = classify_direction(deg + 180.0, cfg)
    earth = earth_grid()

    primary = build_set(period_info, facing, sitting, earth)

    alt = None
    if facing.kind.is_void:
        record_event(f"facing.{facing.kind.value}")
        if cfg.enable_alternate_board:
            with Timer("alternate_board"):
                alt = resolve_alternate(period_info, deg, facing, sitting, earth)

    gate = None
    if cfg.enable_gate_detection:
        gate = compute_thanh_mon(facing, period_info.period, primary.boards)
        if gate is not None:
            record_event("gate_found")

    logger.debug(
        "Chart %d/%.4f: period %d facing %s (%s)",
        year,
        deg,
        period_info.period,
        facing.mountain.key,
        facing.kind.value,
    )

    return BoardResult(
        period_info=period_info,
        facing_degrees=deg,
        facing=facing,
        sitting=sitting,
        non_void_type=facing.kind,
        warning=VOID_WARNING if facing.kind.is_void else None,
        boards=primary.boards,
        earth_grid=earth,
        cell_meta=primary.cell_meta,
        alt=alt,
        gate=gate,
    )
