#!/usr/bin/env python3
"""
Board composer
Builds the Period (Vận), Facing (Hướng) and Sitting (Sơn) grids for a
classified facing/sitting pair and annotates every outer palace.
"""

from __future__ import annotations

import logging

from constants.palaces import CENTER, EARTH_PALACE_NUMBER, PALACE_COORDS
from constants.stars import SUBSTITUTE_STAR
from xuankong.cell_analysis import build_cell_meta
from xuankong.core_types import (
    BoardGrid,
    BoardSet,
    CellMeta,
    ComposedBoards,
    Coord,
    DirectionInfo,
    DirectionKind,
    Octant,
    PeriodInfo,
    Spin,
)
from xuankong.star_flight import determine_spin, fly

logger = logging.getLogger(__name__)


def earth_grid() -> BoardGrid:
    """Lo Shu earth numbers laid out on the 3x3 board."""
    grid = [[0, 0, 0] for _ in range(3)]
    for key, coord in PALACE_COORDS.items():
        grid[coord.row][coord.col] = EARTH_PALACE_NUMBER[key]
    return tuple(tuple(row) for row in grid)  # type: ignore[return-value]


def palace_coord(octant: Octant | str, fallback: Octant) -> Coord:
    key = octant.value if isinstance(octant, Octant) else octant
    return PALACE_COORDS.get(key, PALACE_COORDS[fallback.value])


def apply_the_quai(direction: DirectionInfo, raw_seed: int) -> int:
    """Thế Quái: seam-line readings on listed mountains fly a replacement star."""
    if direction.kind != DirectionKind.SEAM:
        return raw_seed
    substitute = SUBSTITUTE_STAR.get(direction.mountain.key)
    if substitute is None:
        return raw_seed
    logger.info(
        "Thế Quái on %s: star %d replaced by %d", direction.mountain.key, raw_seed, substitute
    )
    return substitute


def _cells(period: int, boards: BoardSet, earth: BoardGrid) -> tuple[CellMeta, ...]:
    cells = []
    for key, coord in PALACE_COORDS.items():
        if key == CENTER:
            continue
        r, c = coord.row, coord.col
        cells.append(
            build_cell_meta(
                key,
                coord,
                period,
                son=boards.son[r][c],
                huong=boards.huong[r][c],
                van=boards.van[r][c],
                earth=earth[r][c],
            )
        )
    return tuple(cells)


def build_set(
    period_info: PeriodInfo,
    facing: DirectionInfo,
    sitting: DirectionInfo,
    earth: BoardGrid | None = None,
) -> ComposedBoards:
    """Compose the three grids and the per-palace analysis.

    Spin always follows the raw Period-grid seed, even when Thế Quái
    changes the star that is actually flown.
    """
    earth = earth or earth_grid()
    van = fly(period_info.period, Spin.FORWARD)

    f = palace_coord(facing.mountain.octant, Octant.NORTH)
    s = palace_coord(sitting.mountain.octant, Octant.SOUTH)
    facing_raw = van[f.row][f.col]
    sitting_raw = van[s.row][s.col]

    facing_seed = apply_the_quai(facing, facing_raw)
    sitting_seed = apply_the_quai(sitting, sitting_raw)
    facing_spin = determine_spin(facing.mountain, facing_raw)
    sitting_spin = determine_spin(sitting.mountain, sitting_raw)

    boards = BoardSet(
        van=van,
        huong=fly(facing_seed, facing_spin),
        son=fly(sitting_seed, sitting_spin),
    )
    logger.debug(
        "Composed period %d: huong %d/%s son %d/%s",
        period_info.period,
        facing_seed,
        facing_spin.value,
        sitting_seed,
        sitting_spin.value,
    )
    return ComposedBoards(boards=boards, cell_meta=_cells(period_info.period, boards, earth))
