# tests/test_clock.py

import pytest
import random
from datetime import date

from mmcal.core.config import GREGORIAN_START_BRITISH
from mmcal.core.time import jd_to_unix, round_half_up, unix_to_jd
from mmcal.core.types import CalendarType
from mmcal.engines.clock import (
    date_to_jdn,
    jd_to_western,
    time_to_day_fraction,
    weekday,
    western_month_length,
    western_to_jd,
)


def _seconds_of_day(w):
    return w.hour * 3600 + w.minute * 60 + w.second


def test_known_epochs():
    assert western_to_jd(2000, 1, 1) == 2451545.0
    assert western_to_jd(2024, 4, 17) == 2460418.0
    assert western_to_jd(2024, 1, 1) == 2460311.0
    # midnight starts the civil day half a day before the JDN
    assert western_to_jd(2024, 4, 17, 0, 0, 0) == 2460417.5


def test_gregorian_reform_dates():
    assert western_to_jd(1582, 10, 15, calendar_type=CalendarType.GREGORIAN) == 2299161.0
    assert western_to_jd(1582, 10, 4, calendar_type=CalendarType.JULIAN) == 2299160.0


def test_british_switch_1752():
    assert western_to_jd(1752, 9, 2) == 2361221.0
    assert western_to_jd(1752, 9, 14) == 2361222.0
    # days dropped at the switch are pinned to the first Gregorian day
    assert western_to_jd(1752, 9, 10, calendar_type=CalendarType.BRITISH) == 2361222.0

    w = jd_to_western(2361221)
    assert (w.year, w.month, w.day) == (1752, 9, 2)
    w = jd_to_western(2361222)
    assert (w.year, w.month, w.day) == (1752, 9, 14)


def test_jd_to_western_noon():
    w = jd_to_western(2460418.0)
    assert w.as_tuple()[:5] == (2024, 4, 17, 12, 0)
    assert w.second == pytest.approx(0.0, abs=1e-6)


def test_month_length():
    assert western_month_length(1752, 9) == 19
    assert western_month_length(2024, 2) == 29
    assert western_month_length(2023, 2) == 28
    assert western_month_length(2024, 12) == 31
    assert western_month_length(1900, 2, CalendarType.GREGORIAN) == 28
    assert western_month_length(1900, 2, CalendarType.JULIAN) == 29


def test_weekday():
    # 2024-04-17 was a Wednesday; 0=Saturday
    assert weekday(2460418) == 4
    # 2000-01-01 was a Saturday
    assert weekday(2451545) == 0


def test_time_to_day_fraction():
    assert time_to_day_fraction(12, 0, 0) == 0.0
    assert time_to_day_fraction(0, 0, 0) == -0.5
    assert time_to_day_fraction(18, 30, 0) == pytest.approx(0.5 / 24 * 13)


@pytest.mark.parametrize("ct", [CalendarType.BRITISH, CalendarType.GREGORIAN, CalendarType.JULIAN])
def test_western_roundtrip(ct):
    random.seed(42)
    for _ in range(2000):
        jdn = random.randint(2200000, 2500000)
        if ct == CalendarType.BRITISH and jdn == GREGORIAN_START_BRITISH:
            continue  # morning of the switch day still reads as Julian
        h, n, s = random.randint(1, 22), random.randint(0, 59), random.randint(0, 59) + 0.25
        w0 = jd_to_western(jdn, ct)
        jd = western_to_jd(w0.year, w0.month, w0.day, h, n, s, ct)
        w = jd_to_western(jd, ct)
        assert (w.year, w.month, w.day) == (w0.year, w0.month, w0.day)
        assert _seconds_of_day(w) == pytest.approx(h * 3600 + n * 60 + s, abs=1e-3)


def test_date_to_jdn_reads_fields_in_calendar():
    assert date_to_jdn(date(2024, 4, 17)) == 2460418
    # Julian 1700-01-01 is Gregorian 1700-01-11
    assert date_to_jdn(date(1700, 1, 1)) - date_to_jdn(date(1700, 1, 1), CalendarType.GREGORIAN) == 10

    random.seed(42)
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, date(2500, 12, 31).toordinal()))
        for ct in CalendarType:
            if ct == CalendarType.BRITISH and date(1752, 9, 3) <= d <= date(1752, 9, 13):
                continue
            w = jd_to_western(date_to_jdn(d, ct), ct)
            assert (w.year, w.month, w.day) == (d.year, d.month, d.day)


def test_unix_time():
    assert unix_to_jd(0) == 2440587.5
    assert jd_to_unix(2440587.5) == 0.5
    assert unix_to_jd(86400) == 2440588.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(2460417.5) == 2460418
    assert round_half_up(2460418.49) == 2460418
