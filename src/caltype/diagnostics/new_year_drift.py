#!/usr/bin/env python3
"""Where in the Gregorian year does day 1/1 of another calendar fall?

For a lunar calendar such as the Hijri one the new year walks backwards through
the Gregorian year by about 11 days per year; a solar calendar stays put.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caltype
from caltype.core.time import gregorian_to_jdn


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caltype[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caltype[diagnostics]"') from e


def new_year_day_of_year(name: str, year: int) -> Tuple[int, int]:
    """(gregorian year, gregorian day-of-year) of day 1 of month 1 of `year`."""
    g = caltype.resolve(name).convert_to_gregorian(year, 1, 1)
    doy = gregorian_to_jdn(g.year, g.month, g.day) - gregorian_to_jdn(g.year, 1, 1) + 1
    return g.year, doy


def build_series(np, name: str, start_year: int, end_year: int):
    years = np.arange(start_year, end_year + 1, dtype=int)
    gy = np.empty_like(years, dtype=int)
    doy = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        gy[i], doy[i] = new_year_day_of_year(name, int(Y))
    return gy, doy


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of a calendar's new year against the Gregorian day of year.")
    p.add_argument("--calendar", default="hijri")
    p.add_argument("--start-year", type=int, default=None, help="First year in the calendar's own numbering.")
    p.add_argument("--end-year", type=int, default=None, help="Last year in the calendar's own numbering.")
    p.add_argument("--outbase", default="new_year_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    cal = caltype.resolve(args.calendar)
    Y0 = cal.min_year() if args.start_year is None else args.start_year
    Y1 = cal.max_year() if args.end_year is None else args.end_year
    if Y1 < Y0:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.calendar, Y0, Y1)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=12, c="tab:blue", alpha=0.6, linewidths=0.0)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title(f"Start of the {cal.name()} year ({Y0}..{Y1})")

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
