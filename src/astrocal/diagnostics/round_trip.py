from __future__ import annotations

import argparse
import random
from datetime import datetime, timezone

import astrocal


def check_timestamp(ts: int) -> list[str]:
    """Return a list of problems found for one Unix timestamp (empty if none)."""
    problems = []
    d = astrocal.from_unix_time(ts)

    ref = datetime.fromtimestamp(ts, tz=timezone.utc)
    got = (d.year, d.month, d.day, d.hour, d.minute, d.second)
    want = (ref.year, ref.month, ref.day, ref.hour, ref.minute, ref.second)
    if got != want:
        problems.append(f"from_unix_time({ts}) = {d}, datetime says {ref:%Y-%m-%d %H:%M:%S}")

    back = astrocal.to_unix_time(d)
    if back != ts:
        problems.append(f"to_unix_time({d}) = {back}, expected {ts}")
    return problems


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: Unix time -> AstroDate -> Unix time.")
    p.add_argument("--N", type=int, default=20000, help="Number of random timestamps.")
    p.add_argument("--max-ts", type=int, default=4102444799, help="Largest timestamp (default: 2099-12-31 23:59:59).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.max_ts < 0:
        raise SystemExit("--max-ts must be >= 0")

    random.seed(args.seed)
    failures = 0
    for _ in range(args.N):
        ts = random.randint(0, args.max_ts)
        for msg in check_timestamp(ts):
            failures += 1
            print("FAIL", msg)
        if failures >= args.max_failures:
            break

    if failures == 0:
        print(f"All {args.N} round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
