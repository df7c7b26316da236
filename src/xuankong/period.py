"""
Period (Vận) calculation.
Twenty-year periods cycling 1..9, anchored at 1864 (start of Vận 1, Thượng Nguyên).
"""

from xuankong.core_types import PeriodInfo

PERIOD_ANCHOR_YEAR = 1864
PERIOD_LENGTH_YEARS = 20
PERIODS_PER_CYCLE = 9


def compute_period(year: int) -> PeriodInfo:
    """Period containing the given year; any integer year is accepted."""
    idx = (year - PERIOD_ANCHOR_YEAR) // PERIOD_LENGTH_YEARS
    start = PERIOD_ANCHOR_YEAR + PERIOD_LENGTH_YEARS * idx
    return PeriodInfo(
        period=idx % PERIODS_PER_CYCLE + 1,
        start_year=start,
        end_year=start + PERIOD_LENGTH_YEARS - 1,
    )
