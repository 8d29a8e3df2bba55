from __future__ import annotations

from .types import AstroDate


def easter_date(year: int) -> AstroDate:
    """
    Date of Easter Sunday (anonymous Gregorian algorithm, Meeus p. 67).

    Valid only for Gregorian years (after 1582).
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    x = h + l - 7 * m + 114
    return AstroDate(year, x // 31, x % 31 + 1)
