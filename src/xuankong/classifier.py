#!/usr/bin/env python3
"""
Compass classifier
Maps a facing angle to one of the 24 mountains and grades how precisely it
sits on that mountain: orthodox (chính), seam-line (kiêm) or void (không vong).
"""

from __future__ import annotations

import logging

from constants.mountains import DEFAULT_MOUNTAIN, MOUNTAINS
from xuankong.chart_config import ChartConfig, get_chart_config
from xuankong.compass import circular_distance, in_wrap_range, nearest_anchor_distance, normalize_angle
from xuankong.core_types import DirectionInfo, DirectionKind, Mountain

logger = logging.getLogger(__name__)

# Mountain boundaries (small void) and octant boundaries (large void)
SMALL_VOID_ANCHORS: tuple[float, ...] = tuple(7.5 + 15.0 * k for k in range(24))
LARGE_VOID_ANCHORS: tuple[float, ...] = tuple(22.5 + 45.0 * k for k in range(8))


def find_mountain_by_degrees(deg: float) -> Mountain:
    """Mountain whose [start, end) sector contains the angle."""
    a = normalize_angle(deg)
    for m in MOUNTAINS:
        if in_wrap_range(a, m.start, m.end):
            return m
    logger.debug("No mountain sector contains %.6f, using %s", a, DEFAULT_MOUNTAIN.key)
    return DEFAULT_MOUNTAIN


def void_kind(deg: float) -> DirectionKind:
    """Small or large void, by the nearer anchor family (ties go large)."""
    d_small = nearest_anchor_distance(deg, SMALL_VOID_ANCHORS)
    d_large = nearest_anchor_distance(deg, LARGE_VOID_ANCHORS)
    return DirectionKind.LARGE_VOID if d_large <= d_small else DirectionKind.SMALL_VOID


def classify_direction(deg: float, config: ChartConfig | None = None) -> DirectionInfo:
    """Classify a compass reading.

    Args:
        deg: Compass bearing in degrees, any real value
        config: Thresholds; defaults to the global chart config

    Returns:
        DirectionInfo with the containing mountain, the kind and the
        absolute distance from the mountain center
    """
    cfg = config or get_chart_config()
    a = normalize_angle(deg)
    mountain = find_mountain_by_degrees(a)
    delta = circular_distance(a, mountain.center)

    if delta <= cfg.orthodox_max_deg:
        kind = DirectionKind.ORTHODOX
    elif delta < cfg.void_min_deg:
        kind = DirectionKind.SEAM
    else:
        kind = void_kind(a)

    logger.debug("classify %.4f -> %s %s (delta=%.4f)", a, mountain.key, kind.value, delta)
    return DirectionInfo(mountain=mountain, kind=kind, delta=delta)
