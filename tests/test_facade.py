from __future__ import annotations

import pytest

from constants.stars import VOID_WARNING
from xuankong.chart_config import ChartConfig
from xuankong.core_types import DirectionKind, Octant
from xuankong.facade import build_boards, calculate_flying_star
from xuankong.monitoring import get_metrics


def test_north_facing_2024(default_config):
    result = build_boards(2024, 0, default_config)
    assert result.period_info.period == 9
    assert result.facing.mountain.key == "ty"
    assert result.sitting.mountain.key == "ngo"
    assert result.boards.van[1][1] == 9
    assert result.non_void_type == DirectionKind.ORTHODOX
    assert result.warning is None
    assert not result.is_void
    assert result.alt is None
    assert result.gate is not None and result.gate.position == Octant.NORTHWEST
    assert len(result.cell_meta) == 8
    assert result.earth_grid == ((6, 1, 8), (7, 5, 3), (2, 9, 4))


def test_south_facing_1984(default_config):
    result = build_boards(1984, 180, default_config)
    assert result.period_info.period == 7
    assert (result.period_info.start_year, result.period_info.end_year) == (1984, 2003)
    assert result.facing.mountain.key == "ngo"
    assert result.sitting.mountain.key == "ty"


def test_void_facing_carries_warning_and_alternate(default_config):
    result = build_boards(2024, 22.5, default_config)
    assert result.is_void
    assert result.non_void_type == DirectionKind.LARGE_VOID
    assert result.warning == VOID_WARNING
    assert result.alt is not None
    assert result.alt.facing.mountain.key == "quy"
    assert result.alt.boards == build_boards(2024, 0, default_config).boards


@pytest.mark.parametrize("deg", [10, 22.5, 95, 97, 200.25, 0.1, 137.3, 93.00000000000001])
@pytest.mark.parametrize("turns", [-2, 1, 3])
def test_full_turns_give_identical_charts(deg, turns, default_config):
    base = build_boards(2024, deg, default_config)
    assert build_boards(2024, deg + 360 * turns, default_config) == base


def test_threshold_kind_is_stable_across_full_turns(default_config):
    # 3 degrees from Mão is the last orthodox reading
    deg = 93.00000000000001
    base = build_boards(2024, deg, default_config)
    assert base.facing.kind == DirectionKind.ORTHODOX
    assert base.facing.delta == 3.0
    for shifted in (deg - 360, deg + 360, deg + 720):
        result = build_boards(2024, shifted, default_config)
        assert result.facing.kind == base.facing.kind
        assert result.boards == base.boards


def test_non_representable_bearing_keeps_its_value(default_config):
    assert build_boards(2024, 360.1, default_config).facing_degrees == 0.1
    assert build_boards(2024, 360.1, default_config) == build_boards(2024, 0.1, default_config)


def test_facing_degrees_are_normalized(default_config):
    assert build_boards(2024, -90, default_config).facing_degrees == 270.0
    assert build_boards(2024, -90, default_config).facing.mountain.key == "dau"


def test_years_180_apart_give_identical_boards(default_config):
    a = build_boards(1850, 135, default_config)
    b = build_boards(2030, 135, default_config)
    assert a.boards == b.boards
    assert a.cell_meta == b.cell_meta


def test_optional_layers_can_be_disabled():
    no_alt = ChartConfig(enable_alternate_board=False)
    assert build_boards(2024, 22.5, no_alt).alt is None
    assert build_boards(2024, 22.5, no_alt).warning == VOID_WARNING

    no_gates = ChartConfig(enable_gate_detection=False)
    assert build_boards(2024, 0, no_gates).gate is None


def test_to_dict_shape(default_config):
    data = build_boards(2024, 22.5, default_config).to_dict()
    assert data["is_void"] is True
    assert data["non_void_type"] == "dai-khong-vong"
    assert data["facing"]["mountain"]["key"] == "suu"
    assert len(data["cell_meta"]) == 8
    assert data["alt"]["facing"]["kind"] == "chinh"
    assert data["boards"]["van"] == [[8, 7, 6], [1, 9, 5], [2, 3, 4]]


def test_build_boards_is_timed(default_config):
    build_boards(2024, 0, default_config)
    stats = get_metrics()["metrics"]["build_boards"]
    assert stats["count"] >= 1
    assert stats["errors"] == 0


def test_annual_entry_point_is_exposed():
    result = calculate_flying_star(2024, "nam")
    assert result.period == 9
    assert result.annual_star == 5
