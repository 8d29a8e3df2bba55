from __future__ import annotations

import argparse
from collections import Counter
from typing import List

import astrocal
from astrocal.core.types import AstroDate


def mmdd(d: AstroDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def easter_dates(from_year: int, to_year: int) -> List[AstroDate]:
    return [astrocal.easter_date(y) for y in range(from_year, to_year + 1)]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of Easter Sunday dates.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--cols", type=int, default=5, help="Years per table row (default: 5).")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table cells (default: mmdd).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 <= 1582:
        raise SystemExit("--from-year must be > 1582 (Gregorian calendar)")
    if args.cols < 1:
        raise SystemExit("--cols must be >= 1")

    def fmt(d: AstroDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.format_date()

    dates = easter_dates(Y0, Y1)

    cells = [f"{d.year:>5} {fmt(d)}" for d in dates]
    for i in range(0, len(cells), args.cols):
        print("   ".join(cells[i : i + args.cols]))

    # every result must be a Sunday in March/April
    bad = [d for d in dates if astrocal.day_of_week(d) != 0 or d.month not in (3, 4)]
    for d in bad:
        print(f"NOT A SPRING SUNDAY: {d.format_date()}")

    by_month = Counter(d.month for d in dates)
    earliest = min(dates, key=lambda d: (d.month, d.day))
    latest = max(dates, key=lambda d: (d.month, d.day))
    print()
    print(f"March: {by_month[3]}   April: {by_month[4]}")
    print(f"Earliest: {earliest.format_date()}   Latest: {latest.format_date()}")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
