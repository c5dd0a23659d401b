# tests/test_myanmar.py

import random

import pytest

from mmcal.core.types import MoonPhase, YearType
from mmcal.engines.myanmar import (
    day_of_month,
    fortnight_day,
    jdn_to_myanmar,
    month_length,
    month_name,
    moon_phase,
    myanmar_to_jdn,
    sasana_year,
    year_length,
    year_name,
)


def test_new_year_1386():
    d = jdn_to_myanmar(2460418)  # 2024-04-17
    assert (d.year, d.month, d.day) == (1386, 1, 9)
    assert d.year_type == YearType.COMMON
    assert myanmar_to_jdn(1386, 1, 1) == 2460410


def test_late_tagu():
    d = jdn_to_myanmar(2460414)  # 2024-04-13
    assert (d.year, d.month, d.day) == (1385, 13, 5)
    assert d.is_late_month
    assert d.year_type == YearType.BIG_WATAT
    assert myanmar_to_jdn(1385, 13, 5) == 2460414


def test_known_dates_1385():
    d = jdn_to_myanmar(2460314)  # 2024-01-04
    assert (d.year, d.month, d.day) == (1385, 9, 23)
    d = jdn_to_myanmar(2460401)  # 2024-03-31
    assert (d.year, d.month, d.day) == (1385, 12, 22)


def test_buddha_day_2024():
    assert myanmar_to_jdn(1386, 2, 15) == 2460453  # 2024-05-22
    assert moon_phase(15, 2, 0) == MoonPhase.FULL_MOON


def test_accepts_real_jd():
    assert jdn_to_myanmar(2460417.6) == jdn_to_myanmar(2460418)
    assert jdn_to_myanmar(2460418.4) == jdn_to_myanmar(2460418)


def test_myanmar_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(2000000, 2600000)
        d = jdn_to_myanmar(jdn)
        assert myanmar_to_jdn(d.year, d.month, d.day) == jdn


def test_ranges():
    random.seed(7)
    for _ in range(2000):
        jdn = random.randint(2433500, 2600000)
        d = jdn_to_myanmar(jdn)
        myt = int(d.year_type)
        assert 0 <= d.month <= 14
        assert month_length(d.month, myt) in (29, 30)
        assert 1 <= d.day <= month_length(d.month, myt)
        assert moon_phase(d.day, d.month, myt) in (0, 1, 2, 3)
        assert 1 <= fortnight_day(d.day) <= 15


def test_month_length():
    assert month_length(1, 0) == 29
    assert month_length(2, 0) == 30
    assert month_length(3, 0) == 29
    assert month_length(3, 2) == 30
    assert month_length(0, 1) == 30


def test_year_length():
    assert [year_length(t) for t in (0, 1, 2)] == [354, 384, 385]


def test_moon_phase():
    assert [moon_phase(md, 1, 0) for md in (1, 14, 15, 16, 28, 29)] == [0, 0, 1, 2, 2, 3]
    assert moon_phase(29, 2, 0) == MoonPhase.WANING
    assert moon_phase(30, 2, 0) == MoonPhase.NEW_MOON


def test_day_of_month_inverts_phase():
    for mm, myt in ((1, 0), (2, 0), (3, 2)):
        for md in range(1, month_length(mm, myt) + 1):
            mp = moon_phase(md, mm, myt)
            assert day_of_month(fortnight_day(md), mp, mm, myt) == md


def test_sasana_year():
    assert sasana_year(1386, 1, 9) == 2567
    assert sasana_year(1386, 2, 15) == 2567
    assert sasana_year(1386, 2, 16) == 2568
    assert sasana_year(1386, 9, 1) == 2568


def test_names():
    assert year_name(1386) == "Ashadha"
    assert month_name(4, 0) == "Waso"
    assert month_name(4, 1) == "Second Waso"
    assert month_name(0, 1) == "First Waso"
    assert month_name(13, 0) == "Late Tagu"
    assert month_name(14, 2) == "Late Kason"


def test_tagu_1_can_precede_new_year():
    # 1 Tagu 1385 fell before the solar new year, inside Late Tagu of 1384
    jdn = myanmar_to_jdn(1385, 1, 1)
    d = jdn_to_myanmar(jdn)
    assert (d.year, d.month, d.day) == (1384, 13, 1)
    assert myanmar_to_jdn(1384, 13, 1) == jdn


# Full moon of (second) Waso around each era boundary: (jdn, year, year type)
ERA_BOUNDARY_WASO = [
    (2245381, 797, YearType.LITTLE_WATAT),
    (2245735, 798, YearType.COMMON),
    (2355678, 1099, YearType.COMMON),
    (2356032, 1100, YearType.COMMON),
    (2398409, 1216, YearType.COMMON),
    (2398793, 1217, YearType.LITTLE_WATAT),
    (2433107, 1311, YearType.COMMON),
    (2433492, 1312, YearType.BIG_WATAT),
]


@pytest.mark.parametrize("jdn, my, myt", ERA_BOUNDARY_WASO)
def test_waso_full_moon_across_eras(jdn, my, myt):
    d = jdn_to_myanmar(jdn)
    assert (d.year, d.month, d.day, d.year_type) == (my, 4, 15, myt)
    assert myanmar_to_jdn(my, 4, 15) == jdn
    assert moon_phase(d.day, d.month, int(d.year_type)) == MoonPhase.FULL_MOON


@pytest.mark.parametrize(
    "my, tagu_start",
    [(797, 2245249), (798, 2245633), (1099, 2355576), (1100, 2355930),
     (1216, 2398307), (1217, 2398661), (1311, 2433005), (1312, 2433359)],
)
def test_first_of_tagu_across_eras(my, tagu_start):
    assert myanmar_to_jdn(my, 1, 1) == tagu_start


def test_late_months_before_era_boundaries():
    # Tagu 1 of 1100 and of 1312 both fall before their new year
    d = jdn_to_myanmar(2355930)
    assert (d.year, d.month, d.day, d.year_type) == (1099, 13, 1, YearType.COMMON)
    d = jdn_to_myanmar(2433359)
    assert (d.year, d.month, d.day, d.year_type) == (1311, 13, 1, YearType.COMMON)
    d = jdn_to_myanmar(2433387)
    assert (d.year, d.month, d.day) == (1311, 13, 29)
    # Atat day of 1312 is already Late Kason 1311
    d = jdn_to_myanmar(2433388)
    assert (d.year, d.month, d.day) == (1311, 14, 1)
    assert myanmar_to_jdn(1311, 14, 1) == 2433388
    assert jdn_to_myanmar(2433389).year == 1312
