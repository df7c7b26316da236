"""
Star flight (phi tinh)
Places a seed star in the center palace and flies the remaining eight stars
around the Lo Shu path, forward (thuận) or reverse (nghịch).
"""

from constants.palaces import CENTER_COORD, FLY_ORDER_FORWARD
from xuankong.core_types import BoardGrid, Mountain, Spin, YuanLong


def _prev_star(n: int) -> int:
    return 9 if n == 1 else n - 1


def fly(seed: int, spin: Spin) -> BoardGrid:
    """Fly a 3x3 grid from a seed. The result is a permutation of 1..9."""
    grid = [[0, 0, 0] for _ in range(3)]
    grid[CENTER_COORD.row][CENTER_COORD.col] = seed

    order = FLY_ORDER_FORWARD if spin == Spin.FORWARD else tuple(reversed(FLY_ORDER_FORWARD))
    n = seed
    for coord in order:
        n = _prev_star(n)
        grid[coord.row][coord.col] = n

    return tuple(tuple(row) for row in grid)  # type: ignore[return-value]


def determine_spin(mountain: Mountain, seed: int) -> Spin:
    """Flight direction for a seed placed on a mountain.

    Heaven and man lines fly forward on even seeds; the earth line is inverted.
    """
    even = seed % 2 == 0
    if mountain.yuan == YuanLong.EARTH:
        return Spin.REVERSE if even else Spin.FORWARD
    return Spin.FORWARD if even else Spin.REVERSE
