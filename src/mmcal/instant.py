"""
mmcal.instant
-------------
MyanmarDateTime: one instant (a UTC Julian date) seen through a clock
configuration.

Instances are immutable; "setters" return a new instance. Western fields
are read in the configured timezone and calendar, Myanmar fields from the
local day number jdnl.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional

from .attributes import astro as _astro
from .core.config import DEFAULT_CLOCK, ClockConfig
from .core.errors import DateParseError
from .core.time import jd_now, jd_to_unix, local_tz_offset, round_half_up, unix_to_jd
from .core.types import MyanmarDate, WesternDateTime, YearType
from .core.validate import check_myanmar, check_western
from .engines.clock import date_to_jdn, jd_to_western, time_to_day_fraction, weekday, western_month_length, western_to_jd
from .engines.holidays import other_holidays, public_holidays
from .engines.myanmar import (
    fortnight_day,
    jdn_to_myanmar,
    month_length,
    moon_phase,
    myanmar_to_jdn,
    sasana_year,
    year_name,
)
from .format import (
    DEFAULT_MYANMAR_FORMAT,
    DEFAULT_WESTERN_FORMAT,
    format_myanmar,
    format_western,
    parse_datetime,
)


@dataclass(frozen=True)
class MyanmarDateTime:
    jd: float  # UTC
    config: ClockConfig = DEFAULT_CLOCK

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def from_jd(cls, jd: float, config: ClockConfig = DEFAULT_CLOCK) -> "MyanmarDateTime":
        return cls(float(jd), config)

    @classmethod
    def from_western(
        cls,
        y: int,
        m: int,
        d: int,
        h: float = 12,
        n: float = 0,
        s: float = 0,
        config: ClockConfig = DEFAULT_CLOCK,
        strict: bool = False,
    ) -> "MyanmarDateTime":
        """Local Western date-time in config's timezone and calendar."""
        if strict:
            check_western(y, m, d, h, n, s, config)
        jd = western_to_jd(y, m, d, h, n, s, config.calendar_type, config.gregorian_start)
        return cls(jd - config.tz_offset / 24.0, config)

    @classmethod
    def from_date(cls, d: date, config: ClockConfig = DEFAULT_CLOCK) -> "MyanmarDateTime":
        """Local noon of a datetime.date, its fields read in config's calendar."""
        return cls(date_to_jdn(d, config.calendar_type, config.gregorian_start) - config.tz_offset / 24.0, config)

    @classmethod
    def from_myanmar(
        cls,
        my: int,
        mm: int,
        md: int,
        h: float = 12,
        n: float = 0,
        s: float = 0,
        config: ClockConfig = DEFAULT_CLOCK,
        strict: bool = False,
    ) -> "MyanmarDateTime":
        """Local time of day on Myanmar date (my, mm, md)."""
        if strict:
            check_myanmar(my, mm, md)
        jd = myanmar_to_jdn(my, mm, md) + time_to_day_fraction(h, n, s)
        return cls(jd - config.tz_offset / 24.0, config)

    @classmethod
    def from_string(
        cls,
        text: str,
        config: ClockConfig = DEFAULT_CLOCK,
        strict: bool = False,
    ) -> "MyanmarDateTime":
        """Parse a local date-time string; raises DateParseError if it cannot be read."""
        jd = parse_datetime(text, config.tz_offset, config, strict=strict)
        if jd < 0:
            raise DateParseError(f"cannot parse date-time {text!r}")
        return cls(jd, config)

    @classmethod
    def from_unix(cls, ut: float, config: ClockConfig = DEFAULT_CLOCK) -> "MyanmarDateTime":
        return cls(unix_to_jd(ut), config)

    @classmethod
    def now(cls, config: Optional[ClockConfig] = None) -> "MyanmarDateTime":
        """Current instant; without a config the host's timezone is used."""
        if config is None:
            config = DEFAULT_CLOCK.with_timezone(local_tz_offset())
        return cls(jd_now(), config)

    # ---------------------------------------------------------
    # Replacement
    # ---------------------------------------------------------

    def with_jd(self, jd: float) -> "MyanmarDateTime":
        return replace(self, jd=float(jd))

    def with_timezone(self, tz_offset: float) -> "MyanmarDateTime":
        return replace(self, config=self.config.with_timezone(tz_offset))

    def with_calendar(self, calendar_type: int, gregorian_start: Optional[float] = None) -> "MyanmarDateTime":
        return replace(self, config=self.config.with_calendar(calendar_type, gregorian_start))

    # ---------------------------------------------------------
    # Julian
    # ---------------------------------------------------------

    @property
    def tz_offset(self) -> float:
        return self.config.tz_offset

    @property
    def jdl(self) -> float:
        return self.jd + self.config.tz_offset / 24.0

    @property
    def jdn(self) -> int:
        return round_half_up(self.jd)

    @property
    def jdnl(self) -> int:
        return round_half_up(self.jdl)

    # ---------------------------------------------------------
    # Western
    # ---------------------------------------------------------

    @property
    def western(self) -> WesternDateTime:
        return jd_to_western(self.jdl, self.config.calendar_type, self.config.gregorian_start)

    @property
    def year(self) -> int:
        return self.western.year

    @property
    def month(self) -> int:
        return self.western.month

    @property
    def day(self) -> int:
        return self.western.day

    @property
    def hour(self) -> int:
        return self.western.hour

    @property
    def minute(self) -> int:
        return self.western.minute

    @property
    def second(self) -> int:
        return math.floor(self.western.second)

    @property
    def millisecond(self) -> int:
        s = self.western.second
        return math.floor((s - math.floor(s)) * 1000)

    @property
    def weekday(self) -> int:
        """0=Saturday .. 6=Friday."""
        return weekday(self.jdnl)

    @property
    def unix_time(self) -> float:
        return jd_to_unix(self.jd)

    @property
    def western_month_length(self) -> int:
        w = self.western
        return western_month_length(w.year, w.month, self.config.calendar_type, self.config.gregorian_start)

    # ---------------------------------------------------------
    # Myanmar
    # ---------------------------------------------------------

    @property
    def myanmar(self) -> MyanmarDate:
        return jdn_to_myanmar(self.jdnl)

    @property
    def year_type(self) -> YearType:
        return self.myanmar.year_type

    @property
    def moon_phase(self) -> int:
        d = self.myanmar
        return moon_phase(d.day, d.month, int(d.year_type))

    @property
    def fortnight_day(self) -> int:
        return fortnight_day(self.myanmar.day)

    @property
    def myanmar_month_length(self) -> int:
        d = self.myanmar
        return month_length(d.month, int(d.year_type))

    @property
    def sasana_year(self) -> int:
        d = self.myanmar
        return sasana_year(d.year, d.month, d.day)

    @property
    def year_name(self) -> str:
        return year_name(self.myanmar.year)

    # ---------------------------------------------------------
    # Astrological days and holidays
    # ---------------------------------------------------------

    @property
    def sabbath(self) -> str:
        return _astro.astro_flags(self.jdnl).sabbath

    @property
    def yatyaza(self) -> str:
        return _astro.astro_flags(self.jdnl).yatyaza

    @property
    def pyathada(self) -> str:
        return _astro.astro_flags(self.jdnl).pyathada

    @property
    def nagahle(self) -> str:
        return _astro.NAGAHLE_NAMES[_astro.nagahle(self.myanmar.month)]

    @property
    def mahabote(self) -> str:
        return _astro.MAHABOTE_NAMES[_astro.mahabote(self.myanmar.year, self.weekday)]

    @property
    def nakhat(self) -> str:
        return _astro.NAKHAT_NAMES[_astro.nakhat(self.myanmar.year)]

    @property
    def astro_days(self) -> List[str]:
        return _astro.astro_days(self.jdnl)

    @property
    def holidays(self) -> List[str]:
        return public_holidays(self.jdnl)

    @property
    def holidays_alt(self) -> List[str]:
        return other_holidays(self.jdnl)

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def to_string(self, fs: str = DEFAULT_WESTERN_FORMAT) -> str:
        return format_western(self.jd, fs, self.config.tz_offset, self.config)

    def to_myanmar_string(self, fs: str = DEFAULT_MYANMAR_FORMAT) -> str:
        return format_myanmar(self.jd, fs, self.config.tz_offset)

    def __str__(self) -> str:
        return f"{self.to_string()} | {self.to_myanmar_string()}"
