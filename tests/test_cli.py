# tests/test_cli.py

from mmcal.cli import main


def test_bare_date(capsys):
    assert main(["2024-04-17"]) == 0
    out = capsys.readouterr().out
    assert "Wed 2024-04-17 | 1386 Tagu Waxing 9" in out


def test_day_with_attribute(capsys):
    assert main(["day", "2024-04-17", "--attr", "holidays"]) == 0
    out = capsys.readouterr().out
    assert "Myanmar New Year's Day" in out


def test_day_strict_rejects(capsys):
    assert main(["day", "2024-02-30", "--strict"]) == 2
    assert "error" in capsys.readouterr().err


def test_thingyan(capsys):
    assert main(["thingyan", "1386"]) == 0
    out = capsys.readouterr().out
    assert "Thingyan ME 1385 -> 1386" in out
    assert "Sun 2024-04-14 00:24:44" in out
    assert "Tue 2024-04-16 04:29:25" in out
    assert "Thu 2024-04-18" not in out
    assert "New Year Day  Wed 2024-04-17" in out


def test_month_calendar(capsys):
    assert main(["month", "--myanmar", "1386", "2"]) == 0
    out = capsys.readouterr().out
    assert "Kason" in out


def test_diag_thingyan_table(capsys):
    assert main(["diag", "thingyan-table", "--from-year", "1386", "--to-year", "1386"]) == 0
    out = capsys.readouterr().out
    assert "2024-04-17" in out
    assert "00:24" in out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "50", "--seed", "7"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
