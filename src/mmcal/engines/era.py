"""
mmcal.engines.era
-----------------
Era-dependent constants of the Myanmar calendar.

Five eras, each with its own watat offset and excess-day rule:

    era   years (ME)     system
    1.1   .. 797         Makaranta 1
    1.2   798 .. 1099    Makaranta 2
    1.3   1100 .. 1216   Thandeikta
    2     1217 .. 1311   British colonial period
    3     1312 ..        after independence

Each era also carries two sorted exception tables taken from historical
records: full-moon offset corrections keyed by year, and the years whose
watat status is flipped.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from mmcal.core.types import MyanmarYearConstants


@dataclass(frozen=True)
class Era:
    start: int  # first Myanmar year of the era
    era_id: float
    watat_offset: float
    excess_day_months: int
    full_moon_exceptions: Tuple[Tuple[int, int], ...]
    watat_exceptions: Tuple[int, ...]


# Newest first; the first era whose start is <= my applies.
ERAS: Tuple[Era, ...] = (
    Era(1312, 3, -0.5, 8,
        full_moon_exceptions=((1377, 1),),
        watat_exceptions=(1344, 1345)),
    Era(1217, 2, -1.0, 4,
        full_moon_exceptions=((1234, 1), (1261, -1)),
        watat_exceptions=(1263, 1264)),
    Era(1100, 1.3, -0.85, -1,
        full_moon_exceptions=((1120, 1), (1126, -1), (1150, 1), (1172, -1), (1207, 1)),
        watat_exceptions=(1201, 1202)),
    Era(798, 1.2, -1.1, -1,
        full_moon_exceptions=(
            (813, -1), (849, -1), (851, -1), (854, -1), (927, -1), (933, -1), (936, -1),
            (938, -1), (949, -1), (952, -1), (963, -1), (968, -1), (1039, -1),
        ),
        watat_exceptions=()),
    Era(-10**9, 1.1, -1.1, -1,
        full_moon_exceptions=(
            (205, 1), (246, 1), (471, 1), (572, -1), (651, 1),
            (653, 2), (656, 1), (672, 1), (729, 1), (767, -1),
        ),
        watat_exceptions=()),
)


def _search(key: int, keys: Sequence[int]) -> int:
    """Index of key in the sorted sequence, or -1 if absent."""
    i = bisect_left(keys, key)
    if i < len(keys) and keys[i] == key:
        return i
    return -1


def era_for_year(my: int) -> Era:
    for era in ERAS:
        if my >= era.start:
            return era
    return ERAS[-1]


def full_moon_correction(my: int, era: Optional[Era] = None) -> int:
    era = era or era_for_year(my)
    table = era.full_moon_exceptions
    i = _search(my, [k for k, _ in table])
    return table[i][1] if i >= 0 else 0


def era_constants(my: int) -> MyanmarYearConstants:
    """Calendar constants for Myanmar year my, with both exception tables applied."""
    era = era_for_year(my)
    return MyanmarYearConstants(
        era_id=era.era_id,
        watat_offset=era.watat_offset + full_moon_correction(my, era),
        excess_day_months=era.excess_day_months,
        watat_exception=_search(my, era.watat_exceptions) >= 0,
    )
