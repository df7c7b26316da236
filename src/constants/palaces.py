"""
Nine-palace (Cửu Cung) layout constants.

The 3x3 board is drawn with north on top:

    NW  N  NE
    W   C  E
    SW  S  SE
"""

from xuankong.core_types import Coord, Octant

CENTER = "trung"
CENTER_COORD = Coord(1, 1)

# Palace key -> board coordinate. Iteration order is the cell output order.
PALACE_COORDS: dict[str, Coord] = {
    Octant.NORTHWEST.value: Coord(0, 0),
    Octant.NORTH.value: Coord(0, 1),
    Octant.NORTHEAST.value: Coord(0, 2),
    Octant.WEST.value: Coord(1, 0),
    CENTER: CENTER_COORD,
    Octant.EAST.value: Coord(1, 2),
    Octant.SOUTHWEST.value: Coord(2, 0),
    Octant.SOUTH.value: Coord(2, 1),
    Octant.SOUTHEAST.value: Coord(2, 2),
}

# Lo Shu earth numbers (Địa bàn)
EARTH_PALACE_NUMBER: dict[str, int] = {
    Octant.NORTHWEST.value: 6,
    Octant.NORTH.value: 1,
    Octant.NORTHEAST.value: 8,
    Octant.WEST.value: 7,
    CENTER: 5,
    Octant.EAST.value: 3,
    Octant.SOUTHWEST.value: 2,
    Octant.SOUTH.value: 9,
    Octant.SOUTHEAST.value: 4,
}

# Forward (thuận) flight path around the center; reversed for nghịch
FLY_ORDER_FORWARD: tuple[Coord, ...] = (
    Coord(0, 0),  # Tây Bắc
    Coord(0, 1),  # Bắc
    Coord(0, 2),  # Đông Bắc
    Coord(1, 2),  # Đông
    Coord(2, 2),  # Đông Nam
    Coord(2, 1),  # Nam
    Coord(2, 0),  # Tây Nam
    Coord(1, 0),  # Tây
)

# Clockwise ring used for gate adjacency
OCTANT_RING: tuple[Octant, ...] = (
    Octant.NORTH,
    Octant.NORTHEAST,
    Octant.EAST,
    Octant.SOUTHEAST,
    Octant.SOUTH,
    Octant.SOUTHWEST,
    Octant.WEST,
    Octant.NORTHWEST,
)

OCTANT_LABELS: dict[str, str] = {
    Octant.NORTH.value: "Bắc",
    Octant.NORTHEAST.value: "Đông Bắc",
    Octant.EAST.value: "Đông",
    Octant.SOUTHEAST.value: "Đông Nam",
    Octant.SOUTH.value: "Nam",
    Octant.SOUTHWEST.value: "Tây Nam",
    Octant.WEST.value: "Tây",
    Octant.NORTHWEST.value: "Tây Bắc",
    CENTER: "Trung Cung",
}

assert len(FLY_ORDER_FORWARD) == 8 and CENTER_COORD not in FLY_ORDER_FORWARD
assert sorted(EARTH_PALACE_NUMBER.values()) == list(range(1, 10)), "Lo Shu must be a permutation of 1-9"
assert set(PALACE_COORDS) == set(EARTH_PALACE_NUMBER) == set(OCTANT_LABELS)
