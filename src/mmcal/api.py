from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import List, Sequence, Union

from .attributes import astro as _astro
from .attributes.registry import compute_attributes
from .core.config import DEFAULT_CLOCK, ClockConfig
from .core.time import round_half_up
from .core.types import AstroFlagSet, DayInfo, MoonPhase, MyanmarDate, ThingyanWindow, WesternDateTime
from .core.validate import check_myanmar, check_western
from .engines import holidays as _holidays
from .engines import thingyan as _thingyan
from .engines.clock import date_to_jdn, jd_to_western, weekday, western_to_jd
from .engines.myanmar import fortnight_day, jdn_to_myanmar, moon_phase, myanmar_to_jdn
from .format import format_myanmar, format_western, parse_datetime

__all__ = [
    "western_to_julian",
    "julian_to_western",
    "julian_to_myanmar",
    "myanmar_to_julian",
    "astro_days",
    "astro_flags",
    "holidays",
    "holidays_alt",
    "festival_window",
    "day_info",
    "format_western",
    "format_myanmar",
    "parse_datetime",
]


def western_to_julian(
    y: int,
    m: int,
    d: int,
    h: float = 12,
    n: float = 0,
    s: float = 0,
    *,
    config: ClockConfig = DEFAULT_CLOCK,
    strict: bool = False,
) -> float:
    """Julian date of a Western date-time. Out-of-range fields are accepted unless strict."""
    if strict:
        check_western(y, m, d, h, n, s, config)
    return western_to_jd(y, m, d, h, n, s, config.calendar_type, config.gregorian_start)


def julian_to_western(jd: float, *, config: ClockConfig = DEFAULT_CLOCK) -> WesternDateTime:
    return jd_to_western(jd, config.calendar_type, config.gregorian_start)


def julian_to_myanmar(jdn: float) -> MyanmarDate:
    return jdn_to_myanmar(jdn)


def myanmar_to_julian(my: int, mm: int, md: int, *, strict: bool = False) -> int:
    """JDN of a Myanmar date. Out-of-range fields are accepted unless strict."""
    if strict:
        check_myanmar(my, mm, md)
    return myanmar_to_jdn(my, mm, md)


def astro_days(jdn: float) -> List[str]:
    return _astro.astro_days(jdn)


def astro_flags(jdn: float) -> AstroFlagSet:
    return _astro.astro_flags(jdn)


def holidays(jdn: float) -> List[str]:
    return _holidays.public_holidays(jdn)


def holidays_alt(jdn: float) -> List[str]:
    return _holidays.other_holidays(jdn)


def festival_window(my: int) -> ThingyanWindow:
    return _thingyan.festival_window(my)


def day_info(
    when: Union[date, float, int],
    *,
    attributes: Sequence[str] = (),
    config: ClockConfig = DEFAULT_CLOCK,
) -> DayInfo:
    """
    Both calendars for one civil day, given a datetime.date or a JDN/JD.

    attributes names extra fields from the attribute registry; an unknown
    name raises KeyError.
    """
    if isinstance(when, date):
        jdn = date_to_jdn(when, config.calendar_type, config.gregorian_start)
    else:
        jdn = round_half_up(when)
    mdate = jdn_to_myanmar(jdn)
    info = DayInfo(
        jdn=jdn,
        weekday=weekday(jdn),
        western=jd_to_western(jdn, config.calendar_type, config.gregorian_start),
        myanmar=mdate,
        moon_phase=MoonPhase(moon_phase(mdate.day, mdate.month, int(mdate.year_type))),
        fortnight_day=fortnight_day(mdate.day),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
