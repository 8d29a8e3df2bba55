"""astrocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.types import AstroDate
from .core.time import (
    in_julian_calendar,
    in_gregorian_calendar,
    to_julian_day,
    day_of_week,
)
from .core.civil import (
    is_leap_year,
    days_in_year,
    days_in_month,
    from_unix_time,
    to_unix_time,
    now,
)
from .core.easter import easter_date
from .core.errors import AstrocalError, CalendarArgumentError
from .calendar import format_month, format_year

__all__ = [
    "AstroDate",
    "in_julian_calendar",
    "in_gregorian_calendar",
    "to_julian_day",
    "day_of_week",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "from_unix_time",
    "to_unix_time",
    "now",
    "easter_date",
    "AstrocalError",
    "CalendarArgumentError",
    "format_month",
    "format_year",
]
