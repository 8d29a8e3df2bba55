#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import astrocal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "astrocal[diagnostics]"') from e


def days_after_march_21(year: int) -> int:
    """Easter Sunday as days after March 21 (March 22 = 1, April 25 = 35)."""
    d = astrocal.easter_date(year)
    return d.day - 21 if d.month == 3 else d.day + 10


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.array([days_after_march_21(int(Y)) for Y in years], dtype=float)
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter Sunday dates over a range of years.")
    p.add_argument("--start-year", type=int, default=1583)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.start_year <= 1582:
        raise SystemExit("--start-year must be > 1582 (Gregorian calendar)")
    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y = build_series(np, args.start_year, args.end_year)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.45)

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="tab:red", linewidth=1.8)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after March 21")
    ax.set_yticks([1, 11, 21, 31, 35])
    ax.set_yticklabels(["Mar 22", "Apr 1", "Apr 11", "Apr 21", "Apr 25"])
    ax.set_title("Easter Sunday (anonymous Gregorian algorithm)")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
