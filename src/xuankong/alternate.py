"""
Alternate board for void-line facings.

A facing on a void line is read a second time on the nearest neighbouring
mountain, treated as orthodox, so both charts can be compared.
"""

from __future__ import annotations

import logging

from constants.mountains import neighbours
from xuankong.compass import circular_distance
from xuankong.composer import build_set
from xuankong.core_types import (
    AlternateBoard,
    BoardGrid,
    DirectionInfo,
    DirectionKind,
    Mountain,
    PeriodInfo,
)

logger = logging.getLogger(__name__)


def nearest_neighbour(mountain: Mountain, deg: float) -> Mountain:
    """Ring neighbour whose center is closer to deg; ties pick the previous one."""
    prev, nxt = neighbours(mountain)
    if circular_distance(deg, nxt.center) < circular_distance(deg, prev.center):
        return nxt
    return prev


def resolve_alternate(
    period_info: PeriodInfo,
    facing_degrees: float,
    facing: DirectionInfo,
    sitting: DirectionInfo,
    earth: BoardGrid | None = None,
) -> AlternateBoard | None:
    """Second chart on the adjacent mountains; None unless the facing is void."""
    if not facing.kind.is_void:
        return None

    alt_facing = DirectionInfo(
        mountain=nearest_neighbour(facing.mountain, facing_degrees),
        kind=DirectionKind.ORTHODOX,
        delta=0.0,
    )
    alt_sitting = DirectionInfo(
        mountain=nearest_neighbour(sitting.mountain, facing_degrees + 180.0),
        kind=DirectionKind.ORTHODOX,
        delta=0.0,
    )
    logger.info(
        "Void facing on %s: alternate board %s/%s",
        facing.mountain.key,
        alt_facing.mountain.key,
        alt_sitting.mountain.key,
    )

    composed = build_set(period_info, alt_facing, alt_sitting, earth)
    return AlternateBoard(
        facing=alt_facing,
        sitting=alt_sitting,
        boards=composed.boards,
        cell_meta=composed.cell_meta,
    )
