"""
mmcal.format
------------
Token-substitution rendering of Western and Myanmar dates, and the
digits-only date-time parser.

Tokens are replaced one after another in a fixed order, longest form of
each field first, so "%yyyy" is consumed before "%yy" and "%y" see it.
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Tuple

from mmcal.core.config import DEFAULT_CLOCK, ClockConfig
from mmcal.core.errors import DateParseError, InvalidDateError
from mmcal.core.time import round_half_up
from mmcal.core.validate import check_western
from mmcal.engines.clock import jd_to_western, weekday, western_to_jd
from mmcal.engines.myanmar import (
    MOON_PHASE_NAMES,
    fortnight_day,
    jdn_to_myanmar,
    month_name,
    moon_phase,
    sasana_year,
)

log = logging.getLogger(__name__)

DEFAULT_WESTERN_FORMAT = "%Www %y-%mm-%dd %HH:%nn:%ss %zz"
DEFAULT_MYANMAR_FORMAT = "&y &M &P &ff"

WEEKDAY_NAMES: Tuple[str, ...] = (
    "Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
)
WESTERN_MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

_NON_DIGITS = re.compile(r"\D")


def _pad(value: int, width: int) -> str:
    """Zero-pad on the left and keep the last width characters; a minus sign survives for short years."""
    return ("0" * width + str(value))[-width:]


def _substitute(fs: str, pairs: List[Tuple[str, str]]) -> str:
    for token, value in pairs:
        fs = fs.replace(token, value)
    return fs


def format_timezone(tz: float) -> str:
    """"+06:30" style offset; whole hours render as "+08"."""
    sign = "-" if tz < 0 else "+"
    tz = abs(tz)
    hours = math.floor(tz)
    out = f"{sign}{hours:02d}"
    minutes = round_half_up((tz - hours) * 60.0)
    if minutes > 0:
        out += f":{minutes:02d}"
    return out


def format_western(
    jd: float,
    fs: str = DEFAULT_WESTERN_FORMAT,
    tz: float = 0.0,
    config: ClockConfig = DEFAULT_CLOCK,
) -> str:
    """
    Render UTC Julian date jd as local time tz hours east of UTC.

    Tokens: %yyyy %yy %y (year), %MMM %Mmm %M (month name), %mm %m (month),
    %dd %d (day), %HH %H (24-hour), %hh %h (12-hour), %AA %aa (AM/PM),
    %nn %n (minute), %ss %s (second), %lll %l (millisecond),
    %WWW %Www %W (weekday name), %w (0=Saturday), %zz (offset).
    Seconds and milliseconds are truncated, never rounded up to 60 or 1000.
    """
    jd += tz / 24.0
    dt = jd_to_western(jd, config.calendar_type, config.gregorian_start)
    s = math.floor(dt.second)
    ms = math.floor((dt.second - s) * 1000)
    wd = weekday(math.floor(jd + 0.5))
    h12 = dt.hour % 12 or 12
    month = WESTERN_MONTH_NAMES[dt.month - 1]
    wday = WEEKDAY_NAMES[wd]

    return _substitute(fs, [
        ("%yyyy", _pad(dt.year, 4)),
        ("%yy", _pad(int(math.fmod(dt.year, 100)), 2)),
        ("%y", str(dt.year)),
        ("%MMM", month[:3].upper()),
        ("%Mmm", month[:3]),
        ("%mm", f"{dt.month:02d}"),
        ("%M", month),
        ("%m", str(dt.month)),
        ("%dd", f"{dt.day:02d}"),
        ("%d", str(dt.day)),
        ("%HH", f"{dt.hour:02d}"),
        ("%H", str(dt.hour)),
        ("%hh", f"{h12:02d}"),
        ("%h", str(h12)),
        ("%AA", "AM" if dt.hour < 12 else "PM"),
        ("%aa", "am" if dt.hour < 12 else "pm"),
        ("%nn", f"{dt.minute:02d}"),
        ("%n", str(dt.minute)),
        ("%ss", f"{s:02d}"),
        ("%s", str(s)),
        ("%lll", f"{ms:03d}"),
        ("%l", str(ms)),
        ("%WWW", wday[:3].upper()),
        ("%Www", wday[:3]),
        ("%W", wday),
        ("%w", str(wd)),
        ("%zz", format_timezone(tz)),
    ])


def format_myanmar(jd: float, fs: str = DEFAULT_MYANMAR_FORMAT, tz: float = 0.0) -> str:
    """
    Render the Myanmar date of UTC Julian date jd, taken tz hours east of UTC.

    Tokens: &yyyy &y (Myanmar year), &YYYY (Sasana year), &mm &m (month
    number), &M (month name), &P (moon phase), &dd &d (day of month),
    &ff &f (fortnight day).
    """
    jdn = round_half_up(jd + tz / 24.0)
    d = jdn_to_myanmar(jdn)
    myt = int(d.year_type)
    mp = moon_phase(d.day, d.month, myt)
    mf = fortnight_day(d.day)

    return _substitute(fs, [
        ("&yyyy", _pad(d.year, 4)),
        ("&YYYY", _pad(sasana_year(d.year, d.month, d.day), 4)),
        ("&y", str(d.year)),
        ("&mm", f"{d.month:02d}"),
        ("&M", month_name(d.month, myt)),
        ("&m", str(d.month)),
        ("&P", MOON_PHASE_NAMES[mp]),
        ("&dd", f"{d.day:02d}"),
        ("&d", str(d.day)),
        ("&ff", f"{mf:02d}"),
        ("&f", str(mf)),
    ])


def parse_datetime(
    text: str,
    tz: float = 0.0,
    config: ClockConfig = DEFAULT_CLOCK,
    strict: bool = False,
) -> float:
    """
    UTC Julian date of a local date-time string, tz hours east of UTC.

    Only the digits of text are read, so "2024-04-17 06:30:00",
    "20240417063000" and "2024/04/17" are all accepted. Eight digits give
    the date at 12:00, fourteen add hh:nn:ss and seventeen add
    milliseconds. Any other digit count yields -1.0, or raises
    DateParseError when strict.
    """
    digits = _NON_DIGITS.sub("", text)
    if len(digits) not in (8, 14, 17):
        log.debug("cannot parse %r: %d digits", text, len(digits))
        if strict:
            raise DateParseError(f"cannot parse date-time {text!r}")
        return -1.0

    y, m, d = int(digits[0:4]), int(digits[4:6]), int(digits[6:8])
    h, n, s = 12, 0, 0.0
    if len(digits) >= 14:
        h, n, s = int(digits[8:10]), int(digits[10:12]), float(digits[12:14])
        if len(digits) == 17:
            s += int(digits[14:17]) / 1000.0

    if strict:
        try:
            check_western(y, m, d, h, n, s, config)
        except InvalidDateError as e:
            raise DateParseError(f"cannot parse date-time {text!r}: {e}") from e

    return western_to_jd(y, m, d, h, n, s, config.calendar_type, config.gregorian_start) - tz / 24.0
