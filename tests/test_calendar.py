# tests/test_calendar.py

import pytest

from astrocal import CalendarArgumentError
from astrocal import calendar as cal


FEB_2026 = (
    "\n"
    "-- February 2026 ---\n"
    "Su Mo Tu We Th Fr Sa \n"
    " 1  2  3  4  5  6  7 \n"
    " 8  9 10 11 12 13 14 \n"
    "15 16 17 18 19 20 21 \n"
    "22 23 24 25 26 27 28 \n"
    + " " * 21 + "\n"
    + " " * 21 + "\n"
    "\n"
)


def test_week_header():
    assert cal.week_header(0) == "Su Mo Tu We Th Fr Sa "
    assert cal.week_header(1) == "Mo Tu We Th Fr Sa Su "
    assert cal.week_header(6) == "Sa Su Mo Tu We Th Fr "


def test_month_grid_places_first_day():
    # 2025-01-01 was a Wednesday
    cells = cal.month_grid(2025, 1, start=0)
    assert len(cells) == 42
    assert cells[:4] == [0, 0, 0, 1]
    assert cells[3 + 30] == 31
    assert cells[3 + 31:] == [0] * (42 - 34)

    cells = cal.month_grid(2025, 1, start=1)
    assert cells[:3] == [0, 0, 1]


def test_month_grid_six_weeks():
    # 31-day month starting on Saturday fills the 6th row
    cells = cal.month_grid(2025, 3, start=0)
    assert cells[6] == 1
    assert cells[36] == 31


def test_center_str():
    assert cal.center_str("January", 20, "-") == "----- January ------"
    assert cal.center_str("2025", 20, "=") == "======= 2025 ======="


def test_format_month():
    assert cal.format_month(2026, 2) == FEB_2026


def test_format_month_monday_start():
    out = cal.format_month(2026, 2, start=1)
    lines = out.split("\n")
    assert lines[2] == "Mo Tu We Th Fr Sa Su "
    assert lines[3] == " " * 18 + " 1 "


def test_format_year_layout():
    out = cal.format_year(2025)
    lines = out.splitlines()
    assert len(lines) == 3 + 4 * 8
    assert lines[1] == "=" * 31 + " 2025 " + "=" * 31
    assert lines[3].startswith("----- January ------    ")
    assert "February" in lines[3] and "March" in lines[3]
    assert lines[4] == ("Su Mo Tu We Th Fr Sa " + "   ") * 3


def test_format_year_four_columns():
    lines = cal.format_year(2025, ncols=4).splitlines()
    assert len(lines) == 3 + 3 * 8
    assert len(lines[1]) == 21 * 4 + 3 * 3 - 1
    assert "April" in lines[3]


def test_format_year_uneven_rows():
    lines = cal.format_year(2025, ncols=5).splitlines()
    assert len(lines) == 3 + 3 * 8
    # last row holds November and December only
    assert lines[3 + 16 + 1] == ("Su Mo Tu We Th Fr Sa " + "   ") * 2


@pytest.mark.parametrize("month", [0, 13])
def test_bad_month(month):
    with pytest.raises(CalendarArgumentError):
        cal.format_month(2025, month)


def test_bad_start_and_columns():
    with pytest.raises(CalendarArgumentError):
        cal.month_grid(2025, 1, start=7)
    with pytest.raises(CalendarArgumentError):
        cal.format_year(2025, ncols=0)
    with pytest.raises(ValueError):
        cal.format_year(2025, start=-1)
