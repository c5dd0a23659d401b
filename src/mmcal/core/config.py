from __future__ import annotations
from dataclasses import dataclass, replace

from .types import CalendarType

# Solar year and lunar month in days, as exact ratios of the same numerator.
SOLAR_YEAR = 1577917828 / 4320000      # 365.2587565
LUNAR_MONTH = 1577917828 / 53433336    # 29.53058795

# JD of the beginning of Myanmar year 0 (local Myanmar time).
MYANMAR_EPOCH = 1954168.050623

# 1752-09-14, first Gregorian day of the British calendar.
GREGORIAN_START_BRITISH = 2361222

THIRD_ERA_START = 1312  # Myanmar year of independence; Akya offset changes here
THINGYAN_START = 1100   # first Myanmar year with Thingyan holidays

MMT_OFFSET = 6.5  # Myanmar Standard Time, hours east of UTC


@dataclass(frozen=True)
class ClockConfig:
    """
    Western-side settings shared by every conversion of one date-time.

    tz_offset is in hours east of UTC and only affects "local" accessors and
    rendering; stored Julian dates are always UTC.
    """
    calendar_type: CalendarType = CalendarType.BRITISH
    gregorian_start: int = GREGORIAN_START_BRITISH
    tz_offset: float = 0.0

    def with_timezone(self, tz_offset: float) -> "ClockConfig":
        return replace(self, tz_offset=float(tz_offset))

    def with_calendar(self, calendar_type: int, gregorian_start: float | None = None) -> "ClockConfig":
        ct = CalendarType(round(calendar_type % 3))
        sg = self.gregorian_start if gregorian_start is None else round(gregorian_start)
        return replace(self, calendar_type=ct, gregorian_start=sg)


DEFAULT_CLOCK = ClockConfig()
MYANMAR_CLOCK = ClockConfig(tz_offset=MMT_OFFSET)
