# tests/test_era.py

import pytest

from mmcal.engines.era import ERAS, era_constants, era_for_year, full_moon_correction


def test_third_era():
    c = era_constants(1312)
    assert (c.era_id, c.watat_offset, c.excess_day_months, c.watat_exception) == (3, -0.5, 8, False)
    assert era_constants(1386).era_id == 3


def test_third_era_exceptions():
    assert era_constants(1377).watat_offset == pytest.approx(0.5)
    assert era_constants(1344).watat_exception
    assert era_constants(1345).watat_exception
    assert not era_constants(1346).watat_exception


def test_second_era():
    c = era_constants(1311)
    assert (c.era_id, c.watat_offset, c.excess_day_months) == (2, -1.0, 4)
    assert era_constants(1217).era_id == 2
    assert era_constants(1234).watat_offset == pytest.approx(0.0)
    assert era_constants(1261).watat_offset == pytest.approx(-2.0)


def test_first_era_subdivisions():
    c = era_constants(1216)
    assert (c.era_id, c.watat_offset, c.excess_day_months) == (1.3, -0.85, -1)
    assert era_constants(1120).watat_offset == pytest.approx(0.15)
    assert era_constants(1201).watat_exception

    c = era_constants(1099)
    assert (c.era_id, c.watat_offset) == (1.2, -1.1)
    assert era_constants(813).watat_offset == pytest.approx(-2.1)

    assert era_constants(797).era_id == 1.1
    assert era_constants(653).watat_offset == pytest.approx(0.9)
    assert era_constants(-100).era_id == 1.1


def test_exception_lookup_is_exact():
    assert full_moon_correction(1377) == 1
    assert full_moon_correction(1376) == 0
    assert full_moon_correction(1378) == 0


def test_era_table_sorted():
    starts = [e.start for e in ERAS]
    assert starts == sorted(starts, reverse=True)
    for e in ERAS:
        keys = [k for k, _ in e.full_moon_exceptions]
        assert keys == sorted(keys)
        assert list(e.watat_exceptions) == sorted(e.watat_exceptions)
        assert era_for_year(e.start) is e
