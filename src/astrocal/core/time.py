from __future__ import annotations

import math

from .types import AstroDate


# ============================================================
# Calendar system
# ============================================================
#
# The day following 1582-10-04 (Thursday, Julian) was 1582-10-15 (Friday,
# Gregorian). Dates 1582-10-05..14 never occurred and belong to neither.

def in_julian_calendar(d: AstroDate) -> bool:
    """True if the date is before 1582 October 5."""
    return (d.year < 1582 or
            (d.year == 1582 and (d.month < 10 or (d.month == 10 and d.day < 5))))


def in_gregorian_calendar(d: AstroDate) -> bool:
    """True if the date is after 1582 October 14."""
    return (d.year > 1582 or
            (d.year == 1582 and (d.month > 10 or (d.month == 10 and d.day > 14))))


# ============================================================
# Julian Day
# ============================================================

def to_julian_day(d: AstroDate) -> float:
    """
    Julian Day of a civil date and time (Meeus, Astronomical Algorithms, ch. 7).

    JD 0.0 = -4712 January 1 at noon (Julian calendar).
    Gregorian correction is applied only to dates in the Gregorian calendar;
    dates inside the 1582 gap get none.
    """
    yr = float(d.year)
    mo = float(d.month)
    dy = d.day + d.hour / 24 + d.minute / 1440 + d.second / 86400

    if d.month <= 2:
        yr -= 1
        mo += 12

    B = 0.0
    if in_gregorian_calendar(d):
        A = math.trunc(yr / 100)  # century
        B = 2 - A + math.trunc(A / 4)

    return (math.trunc(365.25 * (yr + 4716))
            + math.trunc(30.6001 * (mo + 1))
            + dy
            + B
            - 1524.5)


def day_of_week(d: AstroDate) -> int:
    """0 = Sunday, 1 = Monday, ..., 6 = Saturday."""
    # JD counts from noon; +1.5 moves the day boundary to midnight with Sunday = 0
    return math.floor(to_julian_day(d) + 1.5) % 7
