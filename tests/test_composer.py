from __future__ import annotations

from constants.mountains import mountain_by_key
from xuankong.classifier import classify_direction
from xuankong.composer import apply_the_quai, build_set, earth_grid
from xuankong.core_types import DirectionInfo, DirectionKind, Phase, Spin
from xuankong.period import compute_period
from xuankong.star_flight import fly


def _direction(key: str, kind: DirectionKind, delta: float = 0.0) -> DirectionInfo:
    return DirectionInfo(mountain=mountain_by_key(key), kind=kind, delta=delta)


def test_earth_grid_is_lo_shu():
    assert earth_grid() == ((6, 1, 8), (7, 5, 3), (2, 9, 4))


def test_orthodox_north_facing_period_nine(default_config):
    composed = build_set(
        compute_period(2024),
        classify_direction(0, default_config),
        classify_direction(180, default_config),
    )
    boards = composed.boards
    assert boards.van == ((8, 7, 6), (1, 9, 5), (2, 3, 4))
    # Van north = 7 on Tý (heaven line, odd) flies in reverse
    assert boards.huong == ((8, 9, 1), (6, 7, 2), (5, 4, 3))
    # Van south = 3 on Ngọ (heaven line, odd) flies in reverse
    assert boards.son == ((4, 5, 6), (2, 3, 7), (1, 9, 8))


def test_cell_meta_covers_outer_palaces_in_board_order(default_config):
    composed = build_set(
        compute_period(2024),
        classify_direction(0, default_config),
        classify_direction(180, default_config),
    )
    keys = [c.key for c in composed.cell_meta]
    assert keys == ["tay-bac", "bac", "dong-bac", "tay", "dong", "tay-nam", "nam", "dong-nam"]

    north = composed.cell_meta[1]
    assert (north.son, north.huong, north.van, north.earth) == (5, 9, 7, 1)
    assert north.huong_phase == Phase.PROSPEROUS
    for cell in composed.cell_meta:
        assert cell.van == composed.boards.van[cell.coord.row][cell.coord.col]


def test_the_quai_only_applies_to_seam_readings_on_listed_mountains():
    assert apply_the_quai(_direction("mao", DirectionKind.SEAM, 5.0), 5) == 2
    assert apply_the_quai(_direction("ti", DirectionKind.SEAM, 4.0), 3) == 6
    assert apply_the_quai(_direction("mao", DirectionKind.ORTHODOX), 5) == 5
    assert apply_the_quai(_direction("mao", DirectionKind.SMALL_VOID, 7.0), 5) == 5
    # Dậu is not in the replacement table
    assert apply_the_quai(_direction("dau", DirectionKind.SEAM, 5.0), 1) == 1


def test_seam_facing_flies_substituted_star(default_config):
    facing = classify_direction(95, default_config)
    sitting = classify_direction(275, default_config)
    assert (facing.mountain.key, facing.kind) == ("mao", DirectionKind.SEAM)
    assert (sitting.mountain.key, sitting.kind) == ("dau", DirectionKind.SEAM)

    boards = build_set(compute_period(2024), facing, sitting).boards
    # Raw east star is 5, replaced by 2
    assert boards.huong[1][1] == 2
    assert boards.huong == ((3, 4, 5), (1, 2, 6), (9, 8, 7))
    # Dậu keeps its raw west star
    assert boards.son[1][1] == 1
    assert boards.son == ((2, 3, 4), (9, 1, 5), (8, 7, 6))


def test_spin_follows_the_raw_star(default_config):
    facing = classify_direction(95, default_config)
    sitting = classify_direction(275, default_config)
    boards = build_set(compute_period(2024), facing, sitting).boards
    # Raw 5 is odd on a heaven-line mountain, so reverse, even though 2 is flown
    assert boards.huong == fly(2, Spin.REVERSE)
    assert boards.huong != fly(2, Spin.FORWARD)


def test_orthodox_facing_on_listed_mountain_keeps_raw_star(default_config):
    boards = build_set(
        compute_period(2024),
        classify_direction(90, default_config),
        classify_direction(270, default_config),
    ).boards
    assert boards.huong[1][1] == 5
