#!/usr/bin/env python3
"""
Per-palace analysis: star phase relative to the period, Five Element
classification, Son/Huong elemental relation and star-pair patterns.
"""

from __future__ import annotations

from constants.palaces import OCTANT_LABELS
from constants.stars import CONTROLS, ELEMENT_BY_STAR, GENERATES, PAIR_LABELS, pair_key
from xuankong.core_types import CellMeta, Coord, Element, ElementRelation, Phase

# ============================================================================
# PHASE
# ============================================================================


def phase_of_star(period: int, star: int) -> Phase:
    """Phase (vượng/sinh/tiến/thoái/tử) of a star in the given period."""
    next_star = 1 if period == 9 else period + 1
    next_next = period - 7 if period >= 8 else period + 2
    prev_star = 9 if period == 1 else period - 1

    if star == period:
        return Phase.PROSPEROUS
    if star == next_star:
        return Phase.GENERATING
    if star == next_next:
        return Phase.ADVANCING
    if star == prev_star:
        return Phase.DECLINING
    return Phase.DEAD


# ============================================================================
# FIVE ELEMENTS
# ============================================================================


def element_of(star: int) -> Element | None:
    return ELEMENT_BY_STAR.get(star)


def element_relation(a: Element | None, b: Element | None) -> ElementRelation | None:
    """Relation of element a towards element b; None if either is unknown."""
    if a is None or b is None:
        return None
    if GENERATES[a] == b:
        return ElementRelation.GENERATES
    if GENERATES[b] == a:
        return ElementRelation.GENERATED_BY
    if CONTROLS[a] == b:
        return ElementRelation.CONTROLS
    if CONTROLS[b] == a:
        return ElementRelation.CONTROLLED_BY
    return ElementRelation.NEUTRAL


# ============================================================================
# STAR PAIRS
# ============================================================================


def detect_pairs(son: int, huong: int) -> tuple[str, ...]:
    """Pattern label for an unordered Son/Huong pair.

    The table is keyed by the pair itself, so a cell carries at most one label.
    """
    label = PAIR_LABELS.get(pair_key(son, huong))
    return (label,) if label else ()


# ============================================================================
# CELL ASSEMBLY
# ============================================================================


def build_cell_meta(
    key: str,
    coord: Coord,
    period: int,
    son: int,
    huong: int,
    van: int,
    earth: int,
) -> CellMeta:
    son_element = element_of(son)
    huong_element = element_of(huong)
    return CellMeta(
        key=key,
        label=OCTANT_LABELS.get(key, key),
        coord=coord,
        son=son,
        huong=huong,
        van=van,
        earth=earth,
        son_phase=phase_of_star(period, son),
        huong_phase=phase_of_star(period, huong),
        son_element=son_element,
        huong_element=huong_element,
        van_element=element_of(van),
        earth_element=element_of(earth),
        relation=element_relation(son_element, huong_element),
        pairs=detect_pairs(son, huong),
    )
