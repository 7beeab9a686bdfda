from __future__ import annotations

import argparse
import random
from typing import List, Optional, Tuple

import caltype
from caltype.core.engine import CalendarType


def parse_calendars(s: str) -> List[str]:
    # "gregorian,hijri" -> ["gregorian", "hijri"]
    return [x.strip() for x in s.split(",") if x.strip()]


def random_date(cal: CalendarType, y0: int, y1: int) -> Tuple[int, int, int, int, int]:
    y = random.randint(y0, y1)
    m = random.randint(1, cal.months_in_year(y))
    d = random.randint(1, cal.days_in_month(y, m))
    return y, m, d, random.randint(0, 23), random.randint(0, 59)


def roundtrip_test(
    name: str,
    N: int,
    seed: int,
    *,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    max_failures: int,
) -> int:
    """
    For N random dates: canonical round trip, gregorian round trip, and the
    weekday step from the previous day. Returns the number of failures.
    """
    random.seed(seed)
    cal = caltype.resolve(name)
    y0 = cal.min_year() if start_year is None else start_year
    y1 = cal.max_year() if end_year is None else end_year
    failures = 0

    for _ in range(N):
        t = random_date(cal, y0, y1)
        y, m, d, hh, mi = t
        problems = []

        ts = cal.to_canonical(y, m, d, hh, mi, timezone=0)
        back = cal.from_canonical(ts, 0)
        if (back.year, back.month, back.day, back.hour, back.minute) != t:
            problems.append(f"canonical: {ts} -> {back}")

        g = cal.convert_to_gregorian(y, m, d, hh, mi)
        c = cal.convert_from_gregorian(g.year, g.month, g.day, g.hour, g.minute)
        if (c.year, c.month, c.day, c.hour, c.minute) != t:
            problems.append(f"gregorian: {g} -> {c}")

        py, pm = (y, m) if d > 1 else cal.previous_month(y, m)
        pd = d - 1 if d > 1 else cal.days_in_month(py, pm)
        n = cal.weekdays_per_week()
        if (cal.weekday_index(py, pm, pd) + 1) % n != cal.weekday_index(y, m, d):
            problems.append(f"weekday: ({py},{pm},{pd}) does not precede ({y},{m},{d})")

        if problems:
            failures += 1
            print("\nFAIL")
            print("calendar:", name)
            print("date:", t)
            for p in problems:
                print("  ", p)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: calendar date -> instant -> calendar date.")
    p.add_argument("--calendars", type=str, default="",
                   help="Comma-separated calendar list (default: all registered).")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=None, help="First year (default: calendar min year).")
    p.add_argument("--end-year", type=int, default=None, help="Last year (default: calendar max year).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    names = parse_calendars(args.calendars) if args.calendars else caltype.list_calendars()

    if args.start_year is not None and args.end_year is not None and args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    total_fail = 0
    for name in names:
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(
            name,
            N=args.N,
            seed=args.seed,
            start_year=args.start_year,
            end_year=args.end_year,
            max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
