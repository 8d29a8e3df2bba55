from __future__ import annotations

from typing import List

from .core.civil import days_in_month
from .core.errors import CalendarArgumentError
from .core.time import day_of_week
from .core.types import AstroDate

DAY_NAMES = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# A 31-day month starting on the last day of the week spans 6 rows.
WEEKS_PER_PAGE = 6
CELLS_PER_PAGE = WEEKS_PER_PAGE * 7
MONTH_WIDTH = 3 * 7  # 3 chars per day
GAP = "   "


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise CalendarArgumentError(f"month must be in 1..12, got {month}")


def _check_start(start: int) -> None:
    if not 0 <= start <= 6:
        raise CalendarArgumentError(f"week start must be in 0..6 (0 = Sunday), got {start}")


def week_header(start: int = 0) -> str:
    _check_start(start)
    return "".join(DAY_NAMES[(start + i) % 7] + " " for i in range(7))


def month_grid(year: int, month: int, start: int = 0) -> List[int]:
    """
    Day numbers of a month laid out in 6 weeks x 7 columns; 0 marks an empty cell.

    start: first column of the week, 0 = Sunday, ..., 6 = Saturday.
    """
    _check_month(month)
    _check_start(start)
    first = (day_of_week(AstroDate(year, month, 1)) - start) % 7
    cells = [0] * CELLS_PER_PAGE
    for i in range(days_in_month(year, month)):
        cells[first + i] = i + 1
    return cells


def center_str(text: str, width: int, fill: str) -> str:
    """Center text in width with fill characters, keeping one space on each side."""
    left = (width - len(text)) // 2
    right = width - len(text) - left
    return fill * (left - 1) + " " + text + " " + fill * (right - 1)


def _week_cells(cells: List[int], w: int) -> str:
    return "".join(f"{d:2d} " if d else "   " for d in cells[w * 7:(w + 1) * 7])


def format_month(year: int, month: int, start: int = 0) -> str:
    cells = month_grid(year, month, start)
    title = f" {MONTH_NAMES[month - 1]} {year} "
    lines = [f"{title:-^20}", week_header(start)]
    lines += [_week_cells(cells, w) for w in range(WEEKS_PER_PAGE)]
    return "\n" + "\n".join(lines) + "\n\n"


def format_year(year: int, start: int = 0, ncols: int = 3) -> str:
    """
    All twelve months of a year, ncols months side by side.
    """
    _check_start(start)
    if not 1 <= ncols <= 12:
        raise CalendarArgumentError(f"number of columns must be in 1..12, got {ncols}")

    grids = [month_grid(year, m, start) for m in range(1, 13)]
    week = week_header(start)
    nrows = -(-12 // ncols)
    width = MONTH_WIDTH * ncols + (ncols - 1) * len(GAP) - 1

    out = ["\n", center_str(str(year), width, "="), "\n\n"]
    for r in range(nrows):
        months = range(r * ncols, min(r * ncols + ncols, 12))
        for m in months:
            out.append(center_str(MONTH_NAMES[m], MONTH_WIDTH - 1, "-") + " " + GAP)
        out.append("\n")
        for _ in months:
            out.append(week + GAP)
        out.append("\n")
        for w in range(WEEKS_PER_PAGE):
            for m in months:
                out.append(_week_cells(grids[m], w) + GAP)
            out.append("\n")
    return "".join(out)
