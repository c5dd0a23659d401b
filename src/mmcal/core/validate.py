"""
Opt-in range checks for calendar input.

The conversion engines accept any numbers and let out-of-range components
flow through the arithmetic. Callers that want bad input rejected instead
run it through these checks first (the API does so with strict=True).
"""

from __future__ import annotations

from mmcal.core.config import DEFAULT_CLOCK, ClockConfig
from mmcal.core.errors import InvalidDateError
from mmcal.core.types import CalendarType, YearType
from mmcal.engines.clock import jd_to_western, western_to_jd
from mmcal.engines.myanmar import jdn_to_myanmar, month_length, myanmar_to_jdn
from mmcal.engines.watat import year_info


def check_western(
    y: int,
    m: int,
    d: int,
    h: float = 12,
    n: float = 0,
    s: float = 0,
    config: ClockConfig = DEFAULT_CLOCK,
) -> None:
    """Raise InvalidDateError unless (y, m, d, h, n, s) names a real date-time under config."""
    if not 1 <= m <= 12:
        raise InvalidDateError(f"month {m} out of range 1..12")
    if not 0 <= h <= 23:
        raise InvalidDateError(f"hour {h} out of range 0..23")
    if not 0 <= n <= 59:
        raise InvalidDateError(f"minute {n} out of range 0..59")
    if not 0 <= s < 61:
        raise InvalidDateError(f"second {s} out of range 0..60")
    if d < 1:
        raise InvalidDateError(f"day {d} out of range")

    # Day overflow and the days dropped at the Gregorian switch both fail to round-trip.
    jd = western_to_jd(y, m, d, 12, 0, 0, config.calendar_type, config.gregorian_start)
    w = jd_to_western(jd, config.calendar_type, config.gregorian_start)
    if (w.year, w.month, w.day) != (y, m, d):
        raise InvalidDateError(f"{y:04d}-{m:02d}-{d:02d} does not exist in the {CalendarType(config.calendar_type).name.lower()} calendar")


def check_myanmar(my: int, mm: int, md: int) -> None:
    """Raise InvalidDateError unless (my, mm, md) names a real Myanmar date."""
    if not 0 <= mm <= 14:
        raise InvalidDateError(f"month {mm} out of range 0..14")
    myt = year_info(my).year_type
    if mm == 0 and myt == YearType.COMMON:
        raise InvalidDateError(f"ME {my} is a common year and has no First Waso")
    mml = month_length(mm, int(myt))
    if not 1 <= md <= mml:
        raise InvalidDateError(f"day {md} out of range 1..{mml}")

    back = jdn_to_myanmar(myanmar_to_jdn(my, mm, md))
    if (back.year, back.month, back.day) != (my, mm, md):
        raise InvalidDateError(f"ME {my} month {mm} day {md} falls outside the year")
