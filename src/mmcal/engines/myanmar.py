"""
mmcal.engines.myanmar
---------------------
Julian Day Number <-> Myanmar calendar date.

Every year is laid out from its first day of Tagu. Months alternate 29/30
days starting with a 29-day Tagu; watat years insert a 30-day First Waso
(month 0) before Waso and big watat years add a day to Nayon. Days that
fall after Tabaung but before the next solar new year belong to the
"late" months, Late Tagu (13) and Late Kason (14), of the old year.
"""

from __future__ import annotations

import math
from typing import Tuple

from mmcal.core.config import MYANMAR_EPOCH, SOLAR_YEAR
from mmcal.core.time import round_half_up
from mmcal.core.types import MyanmarDate
from mmcal.engines.watat import year_info

MONTH_NAMES: Tuple[str, ...] = (
    "First Waso", "Tagu", "Kason", "Nayon", "Waso", "Wagaung", "Tawthalin",
    "Thadingyut", "Tazaungmon", "Nadaw", "Pyatho", "Tabodwe", "Tabaung",
    "Late Tagu", "Late Kason",
)

MOON_PHASE_NAMES: Tuple[str, ...] = ("Waxing", "Full Moon", "Waning", "New Moon")

YEAR_TYPE_NAMES: Tuple[str, ...] = ("common", "little watat", "big watat")

YEAR_NAMES: Tuple[str, ...] = (
    "Hpusha", "Magha", "Phalguni", "Chitra", "Visakha", "Jyeshtha",
    "Ashadha", "Sravana", "Bhadrapaha", "Asvini", "Krittika", "Mrigasiras",
)


def myanmar_year_of(jdn: int) -> int:
    """Myanmar (solar) year in which the day jdn falls."""
    return math.floor((jdn - 0.5 - MYANMAR_EPOCH) / SOLAR_YEAR)


def jdn_to_myanmar(jdn: float) -> MyanmarDate:
    jdn = round_half_up(jdn)
    my = myanmar_year_of(jdn)
    yo = year_info(my)
    myt = int(yo.year_type)

    dd = jdn - yo.tagu_start + 1   # day count from 1 Tagu
    b = myt // 2                   # 1 in big watat years
    c = 1 // (myt + 1)             # 1 in common years
    myl = 354 + (1 - c) * 30 + b

    mmt = (dd - 1) // myl          # 1 for the late months
    dd -= mmt * myl

    a = (dd + 423) // 512          # past Nayon
    mm = math.floor((dd - b * a + c * a * 30 + 29.26) / 29.544)
    e = (mm + 12) // 16
    f = (mm + 11) // 16
    md = dd - math.floor(29.544 * mm - 29.26) - b * e + c * f * 30
    mm += f * 3 - e * 4 + 12 * mmt

    return MyanmarDate(year=my, month=mm, day=md, year_type=yo.year_type)


def myanmar_to_jdn(my: int, mm: int, md: int) -> int:
    yo = year_info(my)
    myt = int(yo.year_type)

    mmt = mm // 13
    mm = mm % 13 + mmt             # fold late months onto Tagu/Kason
    b = myt // 2
    c = 1 - (myt + 1) // 2
    mm += 4 - ((mm + 15) // 16) * 4 + (mm + 12) // 16

    dd = (
        md
        + math.floor(29.544 * mm - 29.26)
        - c * ((mm + 11) // 16) * 30
        + b * ((mm + 12) // 16)
    )
    myl = 354 + (1 - c) * 30 + b
    dd += mmt * myl
    return dd + yo.tagu_start - 1


def month_length(mm: int, myt: int) -> int:
    """29 or 30; Nayon gains a day in big watat years."""
    mml = 30 - mm % 2
    if mm == 3:
        mml += myt // 2
    return mml


def year_length(myt: int) -> int:
    """354, 384 or 385 days."""
    return 354 + (1 - 1 // (myt + 1)) * 30 + myt // 2


def moon_phase(md: int, mm: int, myt: int) -> int:
    """A MoonPhase value: 0 waxing, 1 full moon, 2 waning, 3 new moon."""
    mml = month_length(mm, myt)
    return (md + 1) // 16 + md // 16 + md // mml


def fortnight_day(md: int) -> int:
    """Day within the waxing or waning fortnight, 1..15."""
    return md - 15 * (md // 16)


def day_of_month(mf: int, mp: int, mm: int, myt: int) -> int:
    """Inverse of (fortnight_day, moon_phase): full moon is 15, new moon the last day."""
    mml = month_length(mm, myt)
    m1 = mp % 2
    m2 = mp // 2
    return m1 * (15 + m2 * (mml - 15)) + (1 - m1) * (mf + 15 * m2)


def sasana_year(my: int, mm: int, md: int) -> int:
    """Buddhist era year; it turns over the day after the full moon of Kason."""
    offset = 1181 if mm == 1 or (mm == 2 and md < 16) else 1182
    return my + offset


def year_name(my: int) -> str:
    return YEAR_NAMES[my % 12]


def month_name(mm: int, myt: int) -> str:
    name = MONTH_NAMES[mm]
    if mm == 4 and myt > 0:
        name = "Second " + name
    return name
