#!/usr/bin/env python3
"""
Compass geometry helpers used across the chart modules.

All angle arithmetic (normalization, wrap-aware containment, circular
distance) lives here so every component agrees on boundary handling.
"""

from __future__ import annotations

from collections.abc import Iterable

FULL_CIRCLE = 360.0

# Decimal places kept after normalization; equivalent bearings compare equal
ANGLE_PRECISION = 9


def normalize_angle(deg: float) -> float:
    """Normalize an angle in degrees to [0, 360).

    Handles negative inputs robustly. The result is rounded to
    ANGLE_PRECISION places so D and D + 360k normalize to the same float.
    """
    if deg is None:
        return 0.0
    x = round(float(deg) % FULL_CIRCLE, ANGLE_PRECISION)
    # -1e-18 % 360 and 359.9999999999 both land on exactly 360.0
    return 0.0 if x >= FULL_CIRCLE else x


def in_wrap_range(angle: float, start: float, end: float) -> bool:
    """True if angle lies in [start, end), wrapping past 360 when start > end."""
    a = normalize_angle(angle)
    s = normalize_angle(start)
    e = normalize_angle(end)
    if s <= e:
        return s <= a < e
    return a >= s or a < e


def circular_distance(a: float, b: float) -> float:
    """Shortest angular distance between two bearings, in [0, 180]."""
    d = abs(normalize_angle(a) - normalize_angle(b))
    return min(d, FULL_CIRCLE - d)


def nearest_anchor_distance(angle: float, anchors: Iterable[float]) -> float:
    """Circular distance from angle to the closest anchor."""
    return min(circular_distance(angle, anchor) for anchor in anchors)
