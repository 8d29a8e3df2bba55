from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect

import astrocal
from astrocal.core.types import AstroDate


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

_SUBCOMMANDS = ("easter", "jd", "unix", "diag")

_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def _parse_ymd(s: str) -> AstroDate:
    m = _DATE_RE.match(s)
    if not m:
        raise SystemExit(f"Invalid date: {s} (expected YYYY-MM-DD)")
    y, mo, d = map(int, m.groups())
    return AstroDate(y, mo, d)


def _parse_hms(s: str) -> tuple[int, int, int]:
    m = _TIME_RE.match(s)
    if not m:
        raise SystemExit(f"Invalid time: {s} (expected HH:MM[:SS])")
    h, mi, sec = m.groups()
    return int(h), int(mi), int(sec or 0)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_cal(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="astrocal",
        description="Print the current month, a whole year (YEAR) or one month (MONTH YEAR).",
    )
    p.add_argument("-c", dest="ncols", action="store_const", const=4, default=3,
                   help="print the year in 4 columns instead of 3")
    p.add_argument("-s", dest="start", action="store_const", const=1, default=0,
                   help="start the week on Monday")
    p.add_argument("args", nargs="*", type=int, metavar="N", help="[MONTH] YEAR")
    args = p.parse_args(argv)

    if len(args.args) > 2:
        p.error("too many arguments")

    try:
        if len(args.args) == 2:
            month, year = args.args
            print(astrocal.format_month(year, month, args.start), end="")
        elif len(args.args) == 1:
            print(astrocal.format_year(args.args[0], args.start, args.ncols), end="")
        else:
            today = astrocal.now()
            print(astrocal.format_month(today.year, today.month, args.start), end="")
    except astrocal.CalendarArgumentError as e:
        raise SystemExit(str(e)) from e
    return 0


def cmd_easter(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="astrocal easter", description="Date of Easter Sunday (Gregorian years only).")
    p.add_argument("year", type=int)
    p.add_argument("--to", type=int, default=None, help="last year of a range (inclusive)")
    args = p.parse_args(argv)

    last = args.year if args.to is None else args.to
    if last < args.year:
        raise SystemExit("--to must be >= year")
    if args.year <= 1582:
        raise SystemExit("Easter dates are only computed for years after 1582")

    for y in range(args.year, last + 1):
        print(astrocal.easter_date(y).format_date())
    return 0


def cmd_jd(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="astrocal jd",
        description="Julian Day, weekday and calendar system of a civil date. Use `--` before BC dates.",
    )
    p.add_argument("date", help="YYYY-MM-DD (astronomical year numbering)")
    p.add_argument("time", nargs="?", default="00:00:00", help="HH:MM[:SS], default midnight")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    h, mi, s = _parse_hms(args.time)
    d = AstroDate(d.year, d.month, d.day, hour=h, minute=mi, second=s)

    if astrocal.in_julian_calendar(d):
        system = "Julian"
    elif astrocal.in_gregorian_calendar(d):
        system = "Gregorian"
    else:
        system = "none (1582 reform gap)"

    print(f"Date     = {d}")
    print(f"JD       = {astrocal.to_julian_day(d):.6f}")
    print(f"Weekday  = {_WEEKDAYS[astrocal.day_of_week(d)]}")
    print(f"Calendar = {system}")
    return 0


def cmd_unix(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="astrocal unix", description="Convert Unix time (seconds, >= 0) to a UTC date.")
    p.add_argument("seconds", type=int)
    args = p.parse_args(argv)

    if args.seconds < 0:
        raise SystemExit("Unix time before 1970 is not supported")
    print(astrocal.from_unix_time(args.seconds))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Classic `cal` form: `astrocal [-c] [-s] [[MONTH] YEAR]`
    if not argv or argv[0] not in _SUBCOMMANDS + ("-h", "--help"):
        return cmd_cal(argv)

    # these parse their own arguments
    if argv[0] == "easter":
        return cmd_easter(argv[1:])

    if argv[0] == "jd":
        return cmd_jd(argv[1:])

    if argv[0] == "unix":
        return cmd_unix(argv[1:])

    p = argparse.ArgumentParser(
        prog="astrocal",
        description=(
            "Astronomical calendar toolkit CLI. "
            "Without a subcommand, astrocal [-c] [-s] [[MONTH] YEAR] prints the current month, "
            "a whole year (YEAR) or one month (MONTH YEAR); "
            "-c prints the year in 4 columns instead of 3, -s starts the week on Monday."
        ),
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("easter", help="Date of Easter Sunday for a year or a range of years")
    sub.add_parser("jd", help="Julian Day and weekday of a civil date")
    sub.add_parser("unix", help="Convert Unix time to a UTC date")

    p_diag = sub.add_parser("diag", help="Diagnostics tools", add_help=False)
    p_diag.add_argument(
        "tool",
        choices=["easter-table", "easter-scatter", "round-trip"],
        help="Which diagnostic to run",
    )

    # the tool modules parse their own -h
    if argv[0] == "diag" and argv[1:2] in (["-h"], ["--help"]):
        p_diag.print_help()
        return 0

    args, rest = p.parse_known_args(argv)

    if args.cmd == "diag":
        tool_map = {
            "easter-table": "astrocal.diagnostics.easter_table",
            "easter-scatter": "astrocal.diagnostics.easter_scatter",
            "round-trip": "astrocal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
