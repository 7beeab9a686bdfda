from __future__ import annotations

import argparse

import caltype
from caltype.core.engine import CalendarType


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def dow_header(cal: CalendarType, w: int = 6) -> str:
    return " ".join(wd.shortname[:w].ljust(w) for wd in cal.ordered_weekdays())


def month_grid(cal: CalendarType, Y: int, M: int) -> list[list[tuple[str, str]]]:
    """Weeks of (day label, gregorian mm-dd) cells, padded to full weeks."""
    n = cal.weekdays_per_week()
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(cal.first_column(Y, M))]
    for d in range(1, cal.days_in_month(Y, M) + 1):
        g = cal.convert_to_gregorian(Y, M, d)
        wk.append(cell(f"{d:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == n:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < n:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def render_month(cal: CalendarType, Y: int, M: int) -> str:
    header = dow_header(cal)
    name = cal.month_names()[M - 1]
    lines = [f"{cal.name()} {name} {Y}", header, "-" * len(header)]
    for wk in month_grid(cal, Y, M):
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print one month of a calendar as a week grid, with the Gregorian date under each day."
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="gregorian", help="Registered calendar name (default: gregorian)")
    p.add_argument("--startwday", type=int, default=None, help="First weekday column (index into the weekday names)")
    args = p.parse_args(argv)

    cal = caltype.resolve(args.calendar)
    if args.startwday is not None:
        cal = cal.with_starting_weekday(args.startwday)

    print(render_month(cal, args.year, args.month))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
