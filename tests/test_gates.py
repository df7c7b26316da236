from __future__ import annotations

import pytest

from xuankong.chart_config import ChartConfig
from xuankong.classifier import classify_direction
from xuankong.composer import build_set
from xuankong.core_types import GateKind, Octant
from xuankong.gates import adjacent_octants, compute_thanh_mon, gate_kind
from xuankong.period import compute_period

CFG = ChartConfig(orthodox_max_deg=3.0, void_min_deg=7.0)


def _gate(year: int, deg: float):
    period = compute_period(year)
    facing = classify_direction(deg, CFG)
    sitting = classify_direction(deg + 180, CFG)
    boards = build_set(period, facing, sitting).boards
    return compute_thanh_mon(facing, period.period, boards)


def test_adjacent_octants():
    assert adjacent_octants(Octant.NORTH) == (Octant.NORTHWEST, Octant.NORTHEAST)
    assert adjacent_octants(Octant.NORTHWEST) == (Octant.WEST, Octant.NORTH)
    assert adjacent_octants(Octant.EAST) == (Octant.NORTHEAST, Octant.SOUTHEAST)


def test_gate_kind_uses_river_diagram_pairs():
    assert gate_kind(Octant.NORTHWEST, Octant.NORTH) == GateKind.ORTHODOX  # 6-1
    assert gate_kind(Octant.SOUTHEAST, Octant.SOUTH) == GateKind.ORTHODOX  # 4-9
    assert gate_kind(Octant.NORTH, Octant.NORTHEAST) == GateKind.AUXILIARY  # 1-8


def test_left_candidate_found_first():
    gate = _gate(2024, 0)
    assert gate is not None
    assert gate.position == Octant.NORTHWEST
    assert gate.palace == Octant.NORTHWEST
    assert gate.kind == GateKind.ORTHODOX
    assert gate.note == "Vượng tinh 9 đáo cung thành môn tay-bac (Hà Đồ cặp với hướng chính)"


def test_right_candidate_when_left_fails():
    # Period 8, facing north-west: west fails, north qualifies
    gate = _gate(2010, 315)
    assert gate is not None
    assert gate.position == Octant.NORTH
    assert gate.kind == GateKind.ORTHODOX


def test_auxiliary_gate():
    gate = _gate(2010, 45)
    assert gate is not None
    assert gate.position == Octant.NORTH
    assert gate.kind == GateKind.AUXILIARY
    assert gate.note.endswith("(phụ)")


@pytest.mark.parametrize("deg", [45, 135, 225, 315])
def test_no_gate_for_diagonal_facings_in_period_nine(deg):
    assert _gate(2024, deg) is None


@pytest.mark.parametrize("deg", [0, 90, 180, 270])
def test_cardinal_facings_in_period_nine_have_a_gate(deg):
    gate = _gate(2024, deg)
    assert gate is not None
    assert gate.to_dict()["kind"] == "chinh"
