"""
The 24 Mountains (Nhị Thập Tứ Sơn)
Fixed compass sectors of 15° each, listed clockwise from Nhâm (345°)
"""

from xuankong.compass import normalize_angle
from xuankong.core_types import Mountain, Octant, YinYang, YuanLong

MOUNTAIN_HALF_WIDTH = 7.5

# (key, label, center, octant, yuan, yin_yang)
# Order matters: the first mountain of each octant is its earth-line mountain.
_MOUNTAIN_SEEDS: tuple[tuple[str, str, float, Octant, YuanLong, YinYang], ...] = (
    ("nham", "Nhâm", 345, Octant.NORTH, YuanLong.EARTH, YinYang.YANG),
    ("ty", "Tý", 0, Octant.NORTH, YuanLong.HEAVEN, YinYang.YIN),
    ("quy", "Quý", 15, Octant.NORTH, YuanLong.MAN, YinYang.YIN),
    ("suu", "Sửu", 30, Octant.NORTHEAST, YuanLong.EARTH, YinYang.YIN),
    ("can", "Cấn", 45, Octant.NORTHEAST, YuanLong.HEAVEN, YinYang.YANG),
    ("dan", "Dần", 60, Octant.NORTHEAST, YuanLong.MAN, YinYang.YANG),
    ("giap", "Giáp", 75, Octant.EAST, YuanLong.EARTH, YinYang.YANG),
    ("mao", "Mão", 90, Octant.EAST, YuanLong.HEAVEN, YinYang.YIN),
    ("at", "Ất", 105, Octant.EAST, YuanLong.MAN, YinYang.YIN),
    ("thin", "Thìn", 120, Octant.SOUTHEAST, YuanLong.EARTH, YinYang.YIN),
    ("ton", "Tốn", 135, Octant.SOUTHEAST, YuanLong.HEAVEN, YinYang.YANG),
    ("ti", "Tỵ", 150, Octant.SOUTHEAST, YuanLong.MAN, YinYang.YANG),
    ("binh", "Bính", 165, Octant.SOUTH, YuanLong.EARTH, YinYang.YANG),
    ("ngo", "Ngọ", 180, Octant.SOUTH, YuanLong.HEAVEN, YinYang.YIN),
    ("dinh", "Đinh", 195, Octant.SOUTH, YuanLong.MAN, YinYang.YIN),
    ("mui", "Mùi", 210, Octant.SOUTHWEST, YuanLong.EARTH, YinYang.YIN),
    ("khon", "Khôn", 225, Octant.SOUTHWEST, YuanLong.HEAVEN, YinYang.YANG),
    ("than", "Thân", 240, Octant.SOUTHWEST, YuanLong.MAN, YinYang.YANG),
    ("canh", "Canh", 255, Octant.WEST, YuanLong.EARTH, YinYang.YANG),
    ("dau", "Dậu", 270, Octant.WEST, YuanLong.HEAVEN, YinYang.YIN),
    ("tan", "Tân", 285, Octant.WEST, YuanLong.MAN, YinYang.YIN),
    ("tuat", "Tuất", 300, Octant.NORTHWEST, YuanLong.EARTH, YinYang.YIN),
    ("can-desc", "Càn", 315, Octant.NORTHWEST, YuanLong.HEAVEN, YinYang.YANG),
    ("hoi", "Hợi", 330, Octant.NORTHWEST, YuanLong.MAN, YinYang.YANG),
)

MOUNTAINS: tuple[Mountain, ...] = tuple(
    Mountain(
        key=key,
        label=label,
        center=float(center),
        start=normalize_angle(center - MOUNTAIN_HALF_WIDTH),
        end=normalize_angle(center + MOUNTAIN_HALF_WIDTH),
        octant=octant,
        yuan=yuan,
        yin_yang=yin_yang,
    )
    for key, label, center, octant, yuan, yin_yang in _MOUNTAIN_SEEDS
)

# Used when no sector matches (floating-point guard only)
DEFAULT_MOUNTAIN: Mountain = MOUNTAINS[1]


def mountain_index(key: str) -> int:
    """Position of a mountain in the clockwise ring, -1 if unknown."""
    for i, m in enumerate(MOUNTAINS):
        if m.key == key:
            return i
    return -1


def mountain_by_key(key: str) -> Mountain | None:
    idx = mountain_index(key)
    return MOUNTAINS[idx] if idx >= 0 else None


def mountains_in_octant(octant: Octant) -> tuple[Mountain, ...]:
    return tuple(m for m in MOUNTAINS if m.octant == octant)


def first_mountain_in_octant(octant: Octant) -> Mountain:
    """Earth-line mountain of an octant (first in table order)."""
    for m in MOUNTAINS:
        if m.octant == octant:
            return m
    return MOUNTAINS[0]


def neighbours(mountain: Mountain) -> tuple[Mountain, Mountain]:
    """(previous, next) mountains in the clockwise ring."""
    idx = mountain_index(mountain.key)
    n = len(MOUNTAINS)
    return MOUNTAINS[(idx - 1) % n], MOUNTAINS[(idx + 1) % n]


# Table consistency
assert len(MOUNTAINS) == 24, "Must have exactly 24 mountains"
assert len({m.key for m in MOUNTAINS}) == 24, "Mountain keys must be unique"
assert sorted(m.center for m in MOUNTAINS) == [15.0 * i for i in range(24)], "Centers must be 0, 15, ..., 345"
assert all(len(mountains_in_octant(o)) == 3 for o in Octant), "Each octant holds 3 mountains"
