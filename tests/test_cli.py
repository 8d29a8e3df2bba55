# tests/test_cli.py

import calendar
from unittest.mock import patch

import pytest

import astrocal
from astrocal import cli


def test_month_and_year(capsys):
    assert cli.main(["2", "2026"]) == 0
    assert capsys.readouterr().out == astrocal.format_month(2026, 2)


def test_month_monday_start(capsys):
    assert cli.main(["-s", "2", "2026"]) == 0
    assert capsys.readouterr().out == astrocal.format_month(2026, 2, start=1)


def test_whole_year(capsys):
    assert cli.main(["-c", "2025"]) == 0
    assert capsys.readouterr().out == astrocal.format_year(2025, ncols=4)


def test_negative_year_is_positional(capsys):
    assert cli.main(["-44"]) == 0
    assert capsys.readouterr().out == astrocal.format_year(-44)


def test_current_month(capsys):
    with patch("time.time", return_value=calendar.timegm((2026, 2, 1, 8, 0, 0))):
        assert cli.main([]) == 0
    assert capsys.readouterr().out == astrocal.format_month(2026, 2)


def test_bad_month_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["13", "2025"])
    assert "month" in str(exc.value.code)


def test_too_many_arguments():
    with pytest.raises(SystemExit) as exc:
        cli.main(["1", "2", "2025"])
    assert exc.value.code == 2


def test_easter(capsys):
    assert cli.main(["easter", "2025", "--to", "2026"]) == 0
    assert capsys.readouterr().out == "2025-04-20\n2026-04-05\n"


def test_easter_rejects_julian_years():
    with pytest.raises(SystemExit):
        cli.main(["easter", "1500"])


def test_jd(capsys):
    assert cli.main(["jd", "2000-01-01", "12:00"]) == 0
    out = capsys.readouterr().out
    assert "JD       = 2451545.000000" in out
    assert "Weekday  = Saturday" in out
    assert "Calendar = Gregorian" in out


def test_jd_reform_gap(capsys):
    assert cli.main(["jd", "1582-10-10"]) == 0
    assert "Calendar = none (1582 reform gap)" in capsys.readouterr().out


def test_jd_bc_date(capsys):
    assert cli.main(["jd", "--", "-43-03-15"]) == 0
    out = capsys.readouterr().out
    assert "Date     = 0044-03-15 BC 00:00:00" in out
    assert "Calendar = Julian" in out


def test_unix(capsys):
    assert cli.main(["unix", "1672531199"]) == 0
    assert capsys.readouterr().out == "2022-12-31 23:59:59\n"


def test_diag_easter_table(capsys):
    assert cli.main(["diag", "easter-table", "--from-year", "2025", "--to-year", "2026"]) == 0
    out = capsys.readouterr().out
    assert "2025 04-20" in out
    assert "March: 0   April: 2" in out


def test_diag_help(capsys):
    assert cli.main(["diag", "-h"]) == 0
    out = capsys.readouterr().out
    assert "easter-table" in out and "round-trip" in out


def test_diag_tool_help_reaches_tool():
    with pytest.raises(SystemExit) as exc:
        cli.main(["diag", "round-trip", "-h"])
    assert exc.value.code == 0


def test_top_level_help_lists_cal_form(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-h"])
    assert exc.value.code == 0
    out = " ".join(capsys.readouterr().out.split())
    assert "astrocal [-c] [-s] [[MONTH] YEAR]" in out
    assert "starts the week on Monday" in out
    assert "diag" in out
