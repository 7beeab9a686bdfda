from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .config import Settings, parse_zone
from .core.errors import CaltypeError

DEFAULT_FORMAT = "%A, %d %B %Y, %I:%M %p"


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


def _settings(args: argparse.Namespace) -> Settings:
    s = Settings.from_env()
    if args.calendar is not None:
        s = s.tweak(calendar=args.calendar)
    if args.user_tz is not None:
        s = s.tweak(user_timezone=parse_zone(args.user_tz))
    return s


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default=None, help="Registered calendar name (default: $CALTYPE_CALENDAR or gregorian)")
    p.add_argument("--tz", default=None, help="Offset in hours, zone name, or 99 for the user zone (default: 99)")
    p.add_argument("--user-tz", default=None, help="Zone the user-zone sentinel stands for (default: $CALTYPE_USER_TIMEZONE or UTC)")


def cmd_list(argv: list[str]) -> int:
    import caltype

    p = argparse.ArgumentParser(prog="caltype list", description="List registered calendars")
    p.parse_args(argv)
    for name in caltype.list_calendars():
        print(name)
    return 0


def cmd_shape(argv: list[str]) -> int:
    import caltype

    p = argparse.ArgumentParser(prog="caltype shape", description="Print the shape of a calendar")
    p.add_argument("calendar", nargs="?", default="gregorian")
    args = p.parse_args(argv)

    info = caltype.calendar_info(args.calendar)
    for key, value in info.items():
        if isinstance(value, list):
            value = ", ".join(value)
        print(f"{key:20s} {value}")
    return 0


def cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="caltype show", description="Canonical instant -> date in a calendar")
    p.add_argument("instant", type=int, help="Seconds since 1970-01-01 UTC")
    p.add_argument("--format", default=DEFAULT_FORMAT, help=f"strftime-style pattern (default: {DEFAULT_FORMAT!r})")
    p.add_argument("--keep-zeros", action="store_true", help="Keep leading zeros of %%d and %%I")
    _add_common(p)
    args = p.parse_args(argv)

    s = _settings(args)
    cal = s.calendar_type()
    tz = parse_zone(args.tz) if args.tz is not None else s.timezone
    trim = not args.keep_zeros
    print(cal.format(args.instant, args.format, tz, trim, trim, resolver=s.resolver()))
    return 0


def cmd_convert(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="caltype convert", description="Date in a calendar -> canonical instant")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("hour", type=int, nargs="?", default=0)
    p.add_argument("minute", type=int, nargs="?", default=0)
    _add_common(p)
    args = p.parse_args(argv)

    s = _settings(args)
    cal = s.calendar_type()
    tz = parse_zone(args.tz) if args.tz is not None else s.timezone
    instant = cal.to_canonical(args.year, args.month, args.day, args.hour, args.minute, timezone=tz, resolver=s.resolver())
    g = cal.convert_to_gregorian(args.year, args.month, args.day, args.hour, args.minute)
    print(f"instant   {instant}")
    print(f"gregorian {g.year:04d}-{g.month:02d}-{g.day:02d} {g.hour:02d}:{g.minute:02d}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="caltype", description="Calendar system toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("shape", help="Print the shape of a calendar")
    sub.add_parser("show", help="Canonical instant -> date in a calendar")
    sub.add_parser("convert", help="Date in a calendar -> canonical instant")
    sub.add_parser("month", help="Print a month grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "list":
            return cmd_list(rest)

        if args.cmd == "shape":
            return cmd_shape(rest)

        if args.cmd == "show":
            return cmd_show(rest)

        if args.cmd == "convert":
            return cmd_convert(rest)

        if args.cmd == "month":
            return _run_module_main("caltype.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "caltype.diagnostics.round_trip",
                "new-year-drift": "caltype.diagnostics.new_year_drift",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CaltypeError as e:
        print(f"caltype: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
