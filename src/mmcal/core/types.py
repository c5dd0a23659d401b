from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple


class CalendarType(IntEnum):
    BRITISH = 0     # Julian before the Gregorian start JDN, Gregorian after
    GREGORIAN = 1
    JULIAN = 2


class YearType(IntEnum):
    COMMON = 0
    LITTLE_WATAT = 1
    BIG_WATAT = 2


class MoonPhase(IntEnum):
    WAXING = 0
    FULL_MOON = 1
    WANING = 2
    NEW_MOON = 3


@dataclass(frozen=True)
class WesternDateTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float  # sub-second precision retained

    def as_tuple(self) -> Tuple[int, int, int, int, int, float]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)


@dataclass(frozen=True)
class MyanmarYearConstants:
    era_id: float             # 1.1, 1.2, 1.3, 2 or 3
    watat_offset: float
    excess_day_months: int    # -1: use the metonic cycle instead
    watat_exception: bool


@dataclass(frozen=True)
class WatatResult:
    is_watat: bool
    full_moon: int  # JDN of the full moon of (second) Waso


@dataclass(frozen=True)
class MyanmarYearInfo:
    year_type: YearType
    tagu_start: int     # JDN of the first day of Tagu
    full_moon: int      # JDN of the full moon of (second) Waso
    discrepancy: bool   # watat full moons not 30 or 31 days apart (mod 354)


@dataclass(frozen=True)
class MyanmarDate:
    """
    Month numbering: Tagu=1 .. Tabaung=12, First Waso=0 (watat years only),
    Late Tagu=13, Late Kason=14.
    """
    year: int
    month: int
    day: int
    year_type: YearType

    @property
    def is_late_month(self) -> bool:
        return self.month >= 13


@dataclass(frozen=True)
class AstroFlagSet:
    sabbath: str
    yatyaza: str
    pyathada: str
    nagahle: str
    mahabote: str
    nakhat: str
    thamanyo: bool
    amyeittasote: bool
    warameittugyi: bool
    warameittunge: bool
    yatpote: bool
    thamaphyu: bool
    nagapor: bool
    yatyotema: bool
    mahayatkyan: bool
    shanyat: bool


@dataclass(frozen=True)
class ThingyanWindow:
    year_from: int
    year_to: int
    atat_time: float    # JD
    akya_time: float    # JD
    akyo_day: int
    akya_day: int
    akyat_day: int
    akyat_day2: Optional[int]
    atat_day: int
    new_year_day: int

    def western(self, field: str) -> "WesternDateTime":
        """
        Western date-time of one field ("akya_time", "new_year_day", ...) in the
        British calendar. The moments are already Myanmar local time; day fields
        render at noon.
        """
        from mmcal.engines.clock import jd_to_western

        value = getattr(self, field)
        if value is None:
            raise ValueError(f"{field} is not set for ME {self.year_to}")
        return jd_to_western(value)


@dataclass(frozen=True)
class DayInfo:
    jdn: int
    weekday: int  # 0=Saturday .. 6=Friday
    western: WesternDateTime
    myanmar: MyanmarDate
    moon_phase: MoonPhase
    fortnight_day: int
    attributes: Optional[Dict[str, Any]] = None
