from __future__ import annotations

import pytest

from xuankong.compass import (
    circular_distance,
    in_wrap_range,
    nearest_anchor_distance,
    normalize_angle,
)


@pytest.mark.parametrize(
    "deg,expected",
    [
        (0, 0.0),
        (359.5, 359.5),
        (360, 0.0),
        (720, 0.0),
        (370.5, 10.5),
        (-90, 270.0),
        (-720, 0.0),
    ],
)
def test_normalize_angle(deg, expected):
    assert normalize_angle(deg) == expected


def test_normalize_angle_never_returns_full_circle():
    assert 0.0 <= normalize_angle(-1e-18) < 360.0
    assert normalize_angle(None) == 0.0


def test_in_wrap_range_plain_interval():
    assert in_wrap_range(10, 0, 20)
    assert in_wrap_range(0, 0, 20)
    assert not in_wrap_range(20, 0, 20)
    assert not in_wrap_range(25, 0, 20)


def test_in_wrap_range_across_north():
    assert in_wrap_range(352.5, 352.5, 7.5)
    assert in_wrap_range(0, 352.5, 7.5)
    assert in_wrap_range(7.4, 352.5, 7.5)
    assert not in_wrap_range(7.5, 352.5, 7.5)
    assert not in_wrap_range(180, 352.5, 7.5)
    # Unnormalized input is accepted
    assert in_wrap_range(-3, 352.5, 7.5)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (350, 10, 20.0),
        (10, 350, 20.0),
        (0, 180, 180.0),
        (-10, 10, 20.0),
        (90, 90, 0.0),
        (720, 15, 15.0),
    ],
)
def test_circular_distance(a, b, expected):
    assert circular_distance(a, b) == expected


def test_nearest_anchor_distance():
    assert nearest_anchor_distance(20, [22.5, 67.5]) == 2.5
    assert nearest_anchor_distance(355, [7.5, 337.5]) == 12.5


@pytest.mark.parametrize("deg", [0.1, 137.3, 93.00000000000001, 359.99999999999])
@pytest.mark.parametrize("turns", [-3, -1, 1, 2, 5])
def test_normalize_angle_is_stable_across_full_turns(deg, turns):
    assert normalize_angle(deg + 360 * turns) == normalize_angle(deg)


def test_normalize_angle_snaps_near_full_circle_to_zero():
    assert normalize_angle(359.99999999999) == 0.0
    assert normalize_angle(360.1) == 0.1
