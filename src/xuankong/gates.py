"""
Thành Môn (city gate) detection
Checks the two palaces beside the facing palace for one whose own flight
brings the period star back onto itself.
"""

from __future__ import annotations

import logging

from constants.mountains import first_mountain_in_octant
from constants.palaces import EARTH_PALACE_NUMBER, OCTANT_RING, PALACE_COORDS
from constants.stars import RIVER_DIAGRAM_PAIRS, pair_key
from xuankong.core_types import BoardSet, DirectionInfo, GateKind, GateResult, Octant
from xuankong.star_flight import determine_spin, fly

logger = logging.getLogger(__name__)


def adjacent_octants(octant: Octant) -> tuple[Octant, Octant]:
    """(left, right) neighbours of an octant in the ring."""
    if octant not in OCTANT_RING:
        return Octant.EAST, Octant.WEST
    idx = OCTANT_RING.index(octant)
    n = len(OCTANT_RING)
    return OCTANT_RING[(idx - 1) % n], OCTANT_RING[(idx + 1) % n]


def gate_kind(candidate: Octant, facing: Octant) -> GateKind:
    """Orthodox when the two earth numbers form a River Diagram pair."""
    key = pair_key(EARTH_PALACE_NUMBER[candidate.value], EARTH_PALACE_NUMBER[facing.value])
    return GateKind.ORTHODOX if key in RIVER_DIAGRAM_PAIRS else GateKind.AUXILIARY


def gate_note(period: int, octant: Octant, kind: GateKind) -> str:
    detail = "Hà Đồ cặp với hướng chính" if kind == GateKind.ORTHODOX else "phụ"
    return f"Vượng tinh {period} đáo cung thành môn {octant.value} ({detail})"


def compute_thanh_mon(facing: DirectionInfo, period: int, boards: BoardSet) -> GateResult | None:
    """First adjacent palace (left before right) that qualifies as a gate, or None."""
    facing_octant = facing.mountain.octant
    for candidate in adjacent_octants(facing_octant):
        coord = PALACE_COORDS[candidate.value]
        seed = boards.van[coord.row][coord.col]
        spin = determine_spin(first_mountain_in_octant(candidate), seed)
        landed = fly(seed, spin)[coord.row][coord.col]
        if landed != period:
            continue

        kind = gate_kind(candidate, facing_octant)
        logger.debug("Gate at %s (%s) for period %d", candidate.value, kind.value, period)
        return GateResult(
            position=candidate,
            kind=kind,
            palace=candidate,
            note=gate_note(period, candidate, kind),
        )
    return None
