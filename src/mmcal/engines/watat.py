"""
mmcal.engines.watat
-------------------
Intercalation ("watat") of the Myanmar calendar.

A Myanmar year is common (354 days), little watat (an extra 30-day Waso,
384 days) or big watat (little watat plus an extra day in Nayon, 385 days).
From the second era on, a year is watat when the lunar excess days
accumulated by its solar year reach a threshold set by the era; the
first era follows the 19-year metonic cycle instead.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from mmcal.core.config import LUNAR_MONTH, MYANMAR_EPOCH, SOLAR_YEAR
from mmcal.core.time import round_half_up
from mmcal.core.types import MyanmarYearInfo, WatatResult, YearType
from mmcal.engines.era import era_constants

log = logging.getLogger(__name__)

# Excess of a twelfth of a solar year over one lunar month.
_MONTH_EXCESS = SOLAR_YEAR / 12 - LUNAR_MONTH

# At most this many preceding years are searched for the previous watat year.
MAX_WATAT_LOOKBACK = 3


def excess_days(my: int) -> float:
    """Lunar excess days at the start of Myanmar year my, before the era threshold shift."""
    return math.fmod(SOLAR_YEAR * (my + 3739), LUNAR_MONTH)


def check_watat(my: int) -> WatatResult:
    """Watat status of year my and the JDN of its full moon of (second) Waso."""
    c = era_constants(my)

    threshold = _MONTH_EXCESS * (12 - c.excess_day_months)
    ed = excess_days(my)
    if ed < threshold:
        ed += LUNAR_MONTH

    fm = round_half_up(SOLAR_YEAR * my + MYANMAR_EPOCH - ed + 4.5 * LUNAR_MONTH + c.watat_offset)

    if c.era_id >= 2:
        watat = ed >= LUNAR_MONTH - _MONTH_EXCESS * c.excess_day_months
    else:
        # Metonic cycle: watat when (7 my + 2) mod 19 is 12..18,
        # i.e. remainders 2, 5, 7, 10, 13, 15, 18 of my mod 19.
        watat = ((my * 7 + 2) % 19) // 12 == 1

    return WatatResult(is_watat=watat != c.watat_exception, full_moon=fm)


@lru_cache(maxsize=1024)
def year_info(my: int) -> MyanmarYearInfo:
    """
    Year type, first day of Tagu and full moon of Waso for Myanmar year my.

    The year is anchored on the nearest preceding watat year, looked for at
    most MAX_WATAT_LOOKBACK years back. When none is found in that span the
    last year checked is used as the anchor anyway.
    """
    this = check_watat(my)

    yd = 0
    while True:
        yd += 1
        prev = check_watat(my - yd)
        if prev.is_watat or yd >= MAX_WATAT_LOOKBACK:
            break
    if not prev.is_watat:
        log.debug("no watat year within %d years before ME %d; anchoring on ME %d", yd, my, my - yd)

    discrepancy = False
    if this.is_watat:
        nd = (this.full_moon - prev.full_moon) % 354
        year_type = YearType(min(nd // 31 + 1, YearType.BIG_WATAT))
        full_moon = this.full_moon
        if nd != 30 and nd != 31:
            discrepancy = True
            log.debug("watat discrepancy in ME %d: full moons %d days apart (mod 354)", my, nd)
    else:
        year_type = YearType.COMMON
        full_moon = prev.full_moon + 354 * yd

    tagu_start = prev.full_moon + 354 * yd - 102
    return MyanmarYearInfo(
        year_type=year_type,
        tagu_start=tagu_start,
        full_moon=full_moon,
        discrepancy=discrepancy,
    )
