"""
Annual star (Niên tinh) lookup with static advice text.
"""

from constants.annual_advice import DIRECTION_ADVICE, STAR_MEANINGS
from xuankong.core_types import FlyingStarResult
from xuankong.period import compute_period


def compute_annual_star(year: int) -> int:
    """Annual star index for the year, cycling 1..9 (2024 -> 5)."""
    return (year - 4) % 9 + 1


def calculate_flying_star(year: int, direction: str) -> FlyingStarResult:
    """Period, annual star and advice for one of the 8 octant keys.

    Unknown direction keys yield empty advice.
    """
    star = compute_annual_star(year)
    return FlyingStarResult(
        period=compute_period(year).period,
        annual_star=star,
        direction_advice=DIRECTION_ADVICE.get(direction, ""),
        star_meaning=STAR_MEANINGS.get(star, ""),
    )
