"""
mmcal.engines.holidays
----------------------
Public and other holidays of Myanmar.

Each list is built group by group (Thingyan, Western calendar, Myanmar
calendar, substitutes). Within a group the rules are tried in order and the
first match wins, so a group contributes at most one name; the groups
themselves never short-circuit each other. Year gates are literal: a rule
checked before its first year simply does not match.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import List

from mmcal.core.config import THINGYAN_START
from mmcal.core.time import round_half_up
from mmcal.core.types import CalendarType, MoonPhase
from mmcal.engines.clock import jd_to_western, western_to_jd
from mmcal.engines.myanmar import jdn_to_myanmar, moon_phase
from mmcal.engines.thingyan import transition_moments

# Government-declared days off, 2019 to 2021.
SUBSTITUTE_HOLIDAYS = (
    # 2019
    2458768, 2458772, 2458785, 2458800,
    # 2020
    2458855, 2458918, 2458950, 2459051, 2459062, 2459152, 2459156, 2459167,
    2459181, 2459184,
    # 2021
    2459300, 2459303, 2459323, 2459324, 2459335, 2459548, 2459573,
)


def easter_jdn(y: int) -> int:
    """JDN of (Gregorian) Easter Sunday in year y, Meeus/Jones/Butcher."""
    a = y % 19
    b = y // 100
    c = y % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    q = h + l - 7 * m + 114
    p = q % 31 + 1
    n = q // 31
    return round_half_up(western_to_jd(y, n, p, 12, 0, 0, CalendarType.GREGORIAN))


def _is_substitute(jdn: int) -> bool:
    i = bisect_left(SUBSTITUTE_HOLIDAYS, jdn)
    return i < len(SUBSTITUTE_HOLIDAYS) and SUBSTITUTE_HOLIDAYS[i] == jdn


def _thingyan_holidays(jdn: int, my: int) -> List[str]:
    """my is the year the festival leads into (late months count as the new year)."""
    ja, jk = transition_moments(my)
    atn = round_half_up(ja)
    akn = round_half_up(jk)

    hs: List[str] = []
    if jdn == atn + 1:
        hs.append("Myanmar New Year's Day")
    if my < THINGYAN_START:
        return hs

    if jdn == atn:
        hs.append("Thingyan Atat")
    elif akn < jdn < atn:
        hs.append("Thingyan Akyat")
    elif jdn == akn:
        hs.append("Thingyan Akya")
    elif jdn == akn - 1:
        hs.append("Thingyan Akyo")
    elif 1369 <= my < 1379 and (jdn == akn - 2 or atn + 2 <= jdn <= akn + 7):
        hs.append("Holiday")
    elif 1384 <= my <= 1385 and akn - 5 <= jdn <= akn - 2:
        hs.append("Holiday")
    elif my >= 1386 and atn + 2 <= jdn <= akn + 7:
        hs.append("Holiday")
    return hs


def _western_public(gy: int, gm: int, gd: int) -> List[str]:
    if 2018 <= gy <= 2021 and (gm, gd) == (1, 1):
        return ["New Year's Day"]
    if gy >= 1948 and (gm, gd) == (1, 4):
        return ["Independence Day"]
    if gy >= 1947 and (gm, gd) == (2, 12):
        return ["Union Day"]
    if gy >= 1958 and (gm, gd) == (3, 2):
        return ["Peasants' Day"]
    if gy >= 1945 and (gm, gd) == (3, 27):
        return ["Resistance Day"]
    if gy >= 1923 and (gm, gd) == (5, 1):
        return ["Labour Day"]
    if gy >= 1947 and (gm, gd) == (7, 19):
        return ["Martyrs' Day"]
    if gy >= 1752 and (gm, gd) == (12, 25):
        return ["Christmas Day"]
    if gy == 2017 and (gm, gd) == (12, 30):
        return ["Holiday"]
    if 2017 <= gy <= 2021 and (gm, gd) == (12, 31):
        return ["Holiday"]
    return []


def _myanmar_public(my: int, mm: int, md: int, mp: int) -> List[str]:
    full = mp == MoonPhase.FULL_MOON
    if mm == 2 and full:
        return ["Buddha Day"]
    if mm == 4 and full:
        return ["Start of Buddhist Lent"]
    if mm == 7 and full:
        return ["End of Buddhist Lent"]
    if my >= 1379 and mm == 7 and md in (14, 16):
        return ["Holiday"]
    if mm == 8 and full:
        return ["Tazaungdaing"]
    if my >= 1379 and mm == 8 and md == 14:
        return ["Holiday"]
    if my >= 1282 and mm == 8 and md == 25:
        return ["National Day"]
    if mm == 10 and md == 1:
        return ["Karen New Year's Day"]
    if mm == 12 and full:
        return ["Tabaung Pwe"]
    return []


def public_holidays(jdn: float) -> List[str]:
    """Public holidays of the day jdn, in group order."""
    jdn = round_half_up(jdn)
    d = jdn_to_myanmar(jdn)
    mp = moon_phase(d.day, d.month, int(d.year_type))
    w = jd_to_western(jdn)

    hs = _thingyan_holidays(jdn, d.year + d.month // 13)
    hs += _western_public(w.year, w.month, w.day)
    hs += _myanmar_public(d.year, d.month, d.day, mp)
    if 2018 < w.year < 2022 and _is_substitute(jdn):
        hs.append("Holiday")
    return hs


def _western_other(jdn: int, gy: int, gm: int, gd: int) -> List[str]:
    hs: List[str] = []
    if gy <= 2017 and (gm, gd) == (1, 1):
        hs.append("New Year's Day")
    elif gy >= 1915 and (gm, gd) == (2, 13):
        hs.append("G. Aung San BD")
    elif gy >= 1969 and (gm, gd) == (2, 14):
        hs.append("Valentines Day")
    elif gy >= 1970 and (gm, gd) == (4, 22):
        hs.append("Earth Day")
    elif gy >= 1392 and (gm, gd) == (4, 1):
        hs.append("April Fools' Day")
    elif gy >= 1948 and (gm, gd) == (5, 8):
        hs.append("Red Cross Day")
    elif gy >= 1994 and (gm, gd) == (10, 5):
        hs.append("World Teachers' Day")
    elif gy >= 1947 and (gm, gd) == (10, 24):
        hs.append("United Nations Day")
    elif gy >= 1753 and (gm, gd) == (10, 31):
        hs.append("Halloween")

    doe = easter_jdn(gy)
    if gy >= 1876 and jdn == doe:
        hs.append("Easter")
    elif gy >= 1876 and jdn == doe - 2:
        hs.append("Good Friday")
    return hs


def _myanmar_other(my: int, mm: int, md: int, mp: int) -> List[str]:
    full = mp == MoonPhase.FULL_MOON
    if my >= 1309 and mm == 11 and md == 16:
        return ["'Mon' National Day"]
    if mm == 9 and md == 1:
        hs = ["Shan New Year's Day"]
        if my >= 1306:
            hs.append("Authors' Day")
        return hs
    if mm == 3 and full:
        return ["Mahathamaya Day"]
    if mm == 6 and full:
        return ["Garudhamma Day"]
    if my >= 1356 and mm == 10 and full:
        return ["Mothers' Day"]
    if my >= 1370 and mm == 12 and full:
        return ["Fathers' Day"]
    if mm == 5 and full:
        return ["Metta Day"]
    if mm == 5 and md == 10:
        return ["Taungpyone Pwe"]
    if mm == 5 and md == 23:
        return ["Yadanagu Pwe"]
    return []


def other_holidays(jdn: float) -> List[str]:
    """Observances outside the public-holiday list, Easter and Good Friday included."""
    jdn = round_half_up(jdn)
    d = jdn_to_myanmar(jdn)
    mp = moon_phase(d.day, d.month, int(d.year_type))
    w = jd_to_western(jdn)
    return _western_other(jdn, w.year, w.month, w.day) + _myanmar_other(d.year, d.month, d.day, mp)
