from __future__ import annotations

import time

from .types import AstroDate

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

UNIX_EPOCH_YEAR = 1970

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Leap years and month lengths
# ============================================================

def is_leap_year(year: int) -> bool:
    """
    Julian rule up to and including 1582, Gregorian rule afterwards.
    """
    if year <= 1582:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _DAYS_PER_MONTH[month - 1]


# ============================================================
# Unix time <-> AstroDate
# ============================================================

def from_unix_time(ts: int) -> AstroDate:
    """
    Unix time (seconds since 1970-01-01 00:00:00) -> AstroDate.

    Only ts >= 0 is supported; earlier instants give undefined results.
    """
    ndays = ts // SECONDS_PER_DAY + 1  # days since epoch, counting today
    secs_today = ts % SECONDS_PER_DAY

    hour, rest = divmod(secs_today, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)

    year = UNIX_EPOCH_YEAR
    while ndays > days_in_year(year):
        ndays -= days_in_year(year)
        year += 1

    month = 1
    while ndays > days_in_month(year, month):
        ndays -= days_in_month(year, month)
        month += 1

    return AstroDate(year, month, ndays, hour=hour, minute=minute, second=second)


def to_unix_time(d: AstroDate) -> int:
    """
    AstroDate -> Unix time. Inverse of from_unix_time for dates on/after 1970-01-01.
    The UTC offset field is ignored.
    """
    ndays = sum(days_in_year(y) for y in range(UNIX_EPOCH_YEAR, d.year))
    ndays += sum(days_in_month(d.year, m) for m in range(1, d.month))
    ndays += d.day - 1
    return (ndays * SECONDS_PER_DAY
            + d.hour * SECONDS_PER_HOUR
            + d.minute * SECONDS_PER_MINUTE
            + d.second)


def now() -> AstroDate:
    """Current UTC wall-clock time, to the second."""
    return from_unix_time(int(time.time()))
