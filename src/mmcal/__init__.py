"""mmcal public API.

Conversions between Julian dates, Western dates and the Myanmar calendar,
plus astrological days, holidays and the Thingyan festival window.
"""

# Initialize attribute registry on import
from . import attributes as _attributes  # noqa: F401

from .api import (
    western_to_julian,
    julian_to_western,
    julian_to_myanmar,
    myanmar_to_julian,
    astro_days,
    astro_flags,
    holidays,
    holidays_alt,
    festival_window,
    day_info,
    format_western,
    format_myanmar,
    parse_datetime,
)
from .core.config import ClockConfig, DEFAULT_CLOCK, MYANMAR_CLOCK
from .core.errors import MmcalError, InvalidDateError, DateParseError
from .core.types import CalendarType, MyanmarDate, ThingyanWindow, WesternDateTime, YearType
from .instant import MyanmarDateTime

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
    "ClockConfig",
    "DEFAULT_CLOCK",
    "MYANMAR_CLOCK",
    "MmcalError",
    "InvalidDateError",
    "DateParseError",
    "CalendarType",
    "MyanmarDate",
    "ThingyanWindow",
    "WesternDateTime",
    "YearType",
    "MyanmarDateTime",
]
