"""
mmcal.engines.clock
-------------------
Western calendar clock. Converts between real-valued Julian dates and
Western date-times under the British (hybrid), Gregorian and Julian rules.

Julian dates are counted from noon: the integer part of a JD changes at
12:00, so a civil day runs from JD n - 0.5 to n + 0.5 and its JDN is n.
Nothing here validates its inputs; out-of-range months or days simply
propagate through the arithmetic.
"""

from __future__ import annotations

import math
from datetime import date

from mmcal.core.config import GREGORIAN_START_BRITISH
from mmcal.core.time import round_half_up
from mmcal.core.types import CalendarType, WesternDateTime


def time_to_day_fraction(h: float, n: float, s: float) -> float:
    """Time of day to a fraction of a day counted from 12 noon."""
    return (h - 12) / 24 + n / 1440 + s / 86400


def western_to_jd(
    y: int,
    m: int,
    d: int,
    h: float = 12,
    n: float = 0,
    s: float = 0,
    calendar_type: int = CalendarType.BRITISH,
    gregorian_start: int = GREGORIAN_START_BRITISH,
) -> float:
    """
    Western date-time to Julian date.

    British dates are first read as Gregorian; anything that lands before
    the Gregorian start is re-read as Julian, and a Julian reading that
    overshoots into the gap is pinned to the start day itself.
    """
    # Shift so the year starts in March; Feb 29 becomes the last day.
    a = (14 - m) // 12
    y = y + 4800 - a
    m = m + 12 * a - 3
    base = d + (153 * m + 2) // 5 + 365 * y + y // 4

    if calendar_type == CalendarType.GREGORIAN:
        jd = base - y // 100 + y // 400 - 32045
    elif calendar_type == CalendarType.JULIAN:
        jd = base - 32083
    else:
        jd = base - y // 100 + y // 400 - 32045
        if jd < gregorian_start:
            jd = base - 32083
            if jd > gregorian_start:
                jd = gregorian_start
    return jd + time_to_day_fraction(h, n, s)


def jd_to_western(
    jd: float,
    calendar_type: int = CalendarType.BRITISH,
    gregorian_start: int = GREGORIAN_START_BRITISH,
) -> WesternDateTime:
    """Julian date to Western date-time; the fraction of the day becomes h:m:s."""
    j = math.floor(jd + 0.5)
    jf = jd + 0.5 - j

    if calendar_type == CalendarType.JULIAN or (
        calendar_type == CalendarType.BRITISH and jd < gregorian_start
    ):
        b = j + 1524
        c = math.floor((b - 122.1) / 365.25)
        f = math.floor(365.25 * c)
        e = math.floor((b - f) / 30.6001)
        m = e - 13 if e > 13 else e - 1
        d = b - f - math.floor(30.6001 * e)
        y = c - 4715 if m < 3 else c - 4716
    else:
        j -= 1721119
        y = (4 * j - 1) // 146097
        j = 4 * j - 1 - 146097 * y
        d = j // 4
        j = (4 * d + 3) // 1461
        d = 4 * d + 3 - 1461 * j
        d = (d + 4) // 4
        m = (5 * d - 3) // 153
        d = 5 * d - 3 - 153 * m
        d = (d + 5) // 5
        y = 100 * y + j
        if m < 10:
            m += 3
        else:
            m -= 9
            y += 1

    jf *= 24
    h = math.floor(jf)
    jf = (jf - h) * 60
    n = math.floor(jf)
    s = (jf - n) * 60
    return WesternDateTime(year=y, month=m, day=d, hour=h, minute=n, second=s)


def date_to_jdn(
    d: date,
    calendar_type: int = CalendarType.BRITISH,
    gregorian_start: int = GREGORIAN_START_BRITISH,
) -> int:
    """JDN of a datetime.date whose fields are read under the given calendar."""
    return round_half_up(western_to_jd(d.year, d.month, d.day, 12, 0, 0, calendar_type, gregorian_start))


def western_month_length(
    y: int,
    m: int,
    calendar_type: int = CalendarType.BRITISH,
    gregorian_start: int = GREGORIAN_START_BRITISH,
) -> int:
    """Days in Western month m of year y (19 for September 1752 in the British calendar)."""
    y2, m2 = y, m + 1
    if m2 > 12:
        y2 += 1
        m2 %= 12
    j1 = western_to_jd(y, m, 1, 12, 0, 0, calendar_type, gregorian_start)
    j2 = western_to_jd(y2, m2, 1, 12, 0, 0, calendar_type, gregorian_start)
    return round(j2 - j1)


def weekday(jdn: int) -> int:
    """Weekday of a JDN: 0=Saturday, 1=Sunday, ..., 6=Friday."""
    return (jdn + 2) % 7
