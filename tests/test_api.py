# tests/test_api.py

from datetime import date

import pytest

import mmcal
from mmcal.attributes.registry import available_attributes
from mmcal.core.types import MoonPhase


def test_public_surface():
    for name in mmcal.__all__:
        assert hasattr(mmcal, name), name


def test_western_julian_round_trip():
    jd = mmcal.western_to_julian(2024, 4, 17, 6, 30, 15)
    w = mmcal.julian_to_western(jd)
    assert (w.year, w.month, w.day, w.hour, w.minute) == (2024, 4, 17, 6, 30)
    assert w.second == pytest.approx(15, abs=1e-3)


def test_strict_western():
    assert mmcal.western_to_julian(2024, 2, 30) == mmcal.western_to_julian(2024, 3, 1)
    with pytest.raises(mmcal.InvalidDateError):
        mmcal.western_to_julian(2024, 2, 30, strict=True)


def test_myanmar_round_trip():
    d = mmcal.julian_to_myanmar(2460418)
    assert (d.year, d.month, d.day) == (1386, 1, 9)
    assert mmcal.myanmar_to_julian(1386, 1, 9) == 2460418
    with pytest.raises(mmcal.InvalidDateError):
        mmcal.myanmar_to_julian(1386, 1, 30, strict=True)


def test_astro_and_holidays():
    assert mmcal.astro_days(2460418.4) == mmcal.astro_days(2460418)
    assert mmcal.astro_flags(2460453).sabbath == "Sabbath"
    assert mmcal.holidays(2460418) == ["Myanmar New Year's Day"]
    assert mmcal.holidays_alt(2460401) == ["Easter"]


def test_festival_window():
    w = mmcal.festival_window(1386)
    assert (w.year_from, w.year_to) == (1385, 1386)
    assert w.new_year_day == 2460418


def test_day_info():
    info = mmcal.day_info(date(2024, 4, 17))
    assert info.jdn == 2460418
    assert info.weekday == 4
    assert (info.western.year, info.western.month, info.western.day) == (2024, 4, 17)
    assert (info.myanmar.year, info.myanmar.month, info.myanmar.day) == (1386, 1, 9)
    assert info.moon_phase == MoonPhase.WAXING
    assert info.fortnight_day == 9
    assert info.attributes is None
    assert mmcal.day_info(2460418.3) == info


def test_day_info_attributes():
    info = mmcal.day_info(2460418, attributes=("holidays", "sasana_year", "thingyan"))
    assert info.attributes["holidays"] == ["Myanmar New Year's Day"]
    assert info.attributes["sasana_year"] == 2567
    assert info.attributes["thingyan"].year_to == 1386


def test_late_tagu_leads_into_next_festival():
    info = mmcal.day_info(2460414, attributes=("thingyan",))
    assert info.myanmar.month == 13
    assert info.attributes["thingyan"].year_to == 1386


def test_every_registered_attribute_runs():
    names = available_attributes()
    assert {"sabbath", "yatyaza", "holidays", "astro", "thingyan"} <= set(names)
    info = mmcal.day_info(2460453, attributes=names)
    assert set(info.attributes) == set(names)
    assert info.attributes["sabbath"] == "Sabbath"


def test_unknown_attribute():
    with pytest.raises(KeyError):
        mmcal.day_info(2460418, attributes=("no_such_attribute",))


def test_day_info_reads_old_dates_in_british_calendar():
    info = mmcal.day_info(date(1700, 1, 1))
    assert (info.western.year, info.western.month, info.western.day) == (1700, 1, 1)
    gregorian = mmcal.DEFAULT_CLOCK.with_calendar(mmcal.CalendarType.GREGORIAN)
    g = mmcal.day_info(date(1700, 1, 1), config=gregorian)
    assert (g.western.year, g.western.month, g.western.day) == (1700, 1, 1)
    assert info.jdn - g.jdn == 10
