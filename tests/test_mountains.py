from __future__ import annotations

from constants.mountains import (
    DEFAULT_MOUNTAIN,
    MOUNTAINS,
    first_mountain_in_octant,
    mountain_by_key,
    mountain_index,
    mountains_in_octant,
    neighbours,
)
from xuankong.compass import in_wrap_range
from xuankong.core_types import Octant, YuanLong


def test_every_tenth_of_a_degree_lies_in_exactly_one_mountain():
    for i in range(3600):
        angle = i / 10
        hits = [m.key for m in MOUNTAINS if in_wrap_range(angle, m.start, m.end)]
        assert len(hits) == 1, f"{angle}: {hits}"


def test_octants_partition_the_circle():
    for i in range(3600):
        angle = i / 10
        octants = {m.octant for m in MOUNTAINS if in_wrap_range(angle, m.start, m.end)}
        assert len(octants) == 1


def test_sector_bounds():
    ty = mountain_by_key("ty")
    assert ty.center == 0.0
    assert ty.start == 352.5
    assert ty.end == 7.5
    mao = mountain_by_key("mao")
    assert (mao.start, mao.center, mao.end) == (82.5, 90.0, 97.5)


def test_lookup_by_key():
    assert mountain_by_key("ngo").label == "Ngọ"
    assert mountain_by_key("unknown") is None
    assert mountain_index("nham") == 0
    assert mountain_index("unknown") == -1


def test_octant_membership():
    keys = [m.key for m in mountains_in_octant(Octant.NORTH)]
    assert keys == ["nham", "ty", "quy"]
    assert [m.key for m in mountains_in_octant(Octant.NORTHWEST)] == ["tuat", "can-desc", "hoi"]


def test_first_mountain_of_each_octant_is_earth_line():
    for octant in Octant:
        assert first_mountain_in_octant(octant).yuan == YuanLong.EARTH
    assert first_mountain_in_octant(Octant.NORTHWEST).key == "tuat"


def test_neighbours_wrap_around_the_ring():
    prev, nxt = neighbours(mountain_by_key("nham"))
    assert (prev.key, nxt.key) == ("hoi", "ty")
    prev, nxt = neighbours(mountain_by_key("hoi"))
    assert (prev.key, nxt.key) == ("can-desc", "nham")


def test_default_mountain_is_ty():
    assert DEFAULT_MOUNTAIN.key == "ty"
