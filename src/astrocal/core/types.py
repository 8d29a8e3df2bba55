from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AstroDate:
    """
    Civil date and time of day.

    Years use astronomical numbering: 1 = 1 AD, 0 = 1 BC, -1 = 2 BC, ...
    Values are trusted as given; a day past the end of its month is not rejected.
    """
    year: int
    month: int          # 1 = Jan, ..., 12 = Dec
    day: int            # 1..31
    hour: int = 0
    minute: int = 0
    second: int = 0
    utc_offset_hours: int = 0  # informational, never applied

    def format_date(self) -> str:
        """
        "YYYY-MM-DD" for AD years, "YYYY-MM-DD BC" for year <= 0.
        """
        if self.year > 0:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{-self.year + 1:04d}-{self.month:02d}-{self.day:02d} BC"

    def format_time(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def format_datetime(self) -> str:
        return f"{self.format_date()} {self.format_time()}"

    def __str__(self) -> str:
        return self.format_datetime()
