# tests/test_holidays.py

import pytest

from mmcal.engines.clock import western_to_jd
from mmcal.engines.holidays import SUBSTITUTE_HOLIDAYS, easter_jdn, other_holidays, public_holidays
from mmcal.engines.myanmar import myanmar_to_jdn


def test_thingyan_2024():
    assert public_holidays(2460414) == ["Thingyan Akyo"]
    assert public_holidays(2460415) == ["Thingyan Akya"]
    assert public_holidays(2460416) == ["Thingyan Akyat"]
    assert public_holidays(2460417) == ["Thingyan Atat"]
    assert public_holidays(2460418) == ["Myanmar New Year's Day"]


def test_new_year_extension_from_1386():
    for jdn in range(2460419, 2460423):
        assert public_holidays(jdn) == ["Holiday"]
    assert public_holidays(2460423) == []


def test_extension_1384_1385():
    # four days before Akyo in 2023 (Akya on 2023-04-14)
    for jdn in range(2460044, 2460048):
        assert public_holidays(jdn) == ["Holiday"]
    assert public_holidays(2460043) == []


def test_fixed_western_holidays():
    assert public_holidays(2460314) == ["Independence Day"]
    assert "Independence Day" not in public_holidays(western_to_jd(1947, 1, 4))
    assert "Martyrs' Day" in public_holidays(western_to_jd(2024, 7, 19))
    assert "Christmas Day" in public_holidays(western_to_jd(2024, 12, 25))


def test_myanmar_holidays():
    assert public_holidays(2460453) == ["Buddha Day"]
    assert "Tazaungdaing" in public_holidays(myanmar_to_jdn(1386, 8, 15))
    assert "National Day" in public_holidays(myanmar_to_jdn(1386, 8, 25))
    assert "Karen New Year's Day" in public_holidays(myanmar_to_jdn(1386, 10, 1))


def test_substitute_holidays():
    assert list(SUBSTITUTE_HOLIDAYS) == sorted(SUBSTITUTE_HOLIDAYS)
    for jdn in SUBSTITUTE_HOLIDAYS:
        assert "Holiday" in public_holidays(jdn)


def test_easter():
    assert easter_jdn(2024) == 2460401  # 2024-03-31
    assert easter_jdn(2019) == 2458595  # 2019-04-21
    assert easter_jdn(2000) == 2451658  # 2000-04-23


def test_other_holidays():
    assert other_holidays(2460401) == ["Easter"]
    assert other_holidays(2460399) == ["Good Friday"]
    assert "Easter" not in other_holidays(easter_jdn(1800))
    assert other_holidays(2460314) == []


def test_nadaw_1_yields_two_names():
    assert other_holidays(myanmar_to_jdn(1385, 9, 1)) == ["Shan New Year's Day", "Authors' Day"]


@pytest.mark.parametrize("jdn", [2460314, 2460401, 2460418, 2460453])
def test_deterministic(jdn):
    assert public_holidays(jdn) == public_holidays(jdn)
    assert other_holidays(jdn) == other_holidays(jdn)


def test_extension_1369_1378():
    # ME 1370: akya on 2454570, atat on 2454573
    assert public_holidays(2454568) == ["Holiday"]
    assert public_holidays(2454569) == ["Thingyan Akyo"]
    assert public_holidays(2454570) == ["Thingyan Akya"]
    assert public_holidays(2454573) == ["Thingyan Atat"]
    assert public_holidays(2454574) == ["Myanmar New Year's Day"]
    for jdn in range(2454575, 2454578):
        assert public_holidays(jdn) == ["Holiday"]
    assert public_holidays(2454578) == []
