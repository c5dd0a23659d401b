from __future__ import annotations
import math
import time as _time
from datetime import datetime

UNIX_EPOCH_JD = 2440587.5


def unix_to_jd(ut: float) -> float:
    """Seconds since 1970-01-01 00:00:00 UTC to Julian date."""
    return UNIX_EPOCH_JD + ut / 86400.0

def jd_to_unix(jd: float) -> float:
    """Julian date to Unix time, with the half-second bias used for display rounding."""
    return (jd - UNIX_EPOCH_JD) * 86400.0 + 0.5

def jd_now() -> float:
    """Current time as a UTC Julian date (host clock)."""
    return unix_to_jd(_time.time())

def local_tz_offset() -> float:
    """Offset of the host's local time from UTC, in hours (east positive)."""
    off = datetime.now().astimezone().utcoffset()
    return off.total_seconds() / 3600.0 if off is not None else 0.0

def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up (JD n - 0.5 belongs to day n)."""
    return math.floor(x + 0.5)
