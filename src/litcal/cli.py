from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


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


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, level))


def cmd_day(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal day", description="Gregorian date -> liturgical day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="dominican")
    p.add_argument("--debug", action="store_true", help="also print the precedence explanation")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    args = p.parse_args(argv)
    _configure_logging(args.log_level)

    service = litcal.build_service(args.calendar)
    try:
        day = service.get_liturgical_day(args.date, attributes=tuple(args.attr))
    except litcal.LitcalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"{day.iso}  {day.season.name} ({day.season.color.value})  {day.week.display_label}")
    print(f"  liturgical year {day.liturgical_year}")
    if day.is_ferial:
        print("  (ferial)")
    for c in day.celebrations:
        print(f"  {c.rank.label:<17} {c.origin.value:<9} {c.name}")
    for k, v in (day.attributes or {}).items():
        print(f"  {k} = {v}")
    if args.debug:
        print(service.explain(day.date))
    return 0


def cmd_search(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal search", description="Find dates of celebrations by name")
    p.add_argument("text", help="case-insensitive substring of the celebration name")
    p.add_argument("--year", type=int, default=None)
    p.add_argument("--calendar", default="dominican")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    args = p.parse_args(argv)
    _configure_logging(args.log_level)

    service = litcal.build_service(args.calendar)
    try:
        found = list(service.find_dates_by_celebration_name(args.text, year=args.year))
    except litcal.LitcalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for d, c in found:
        print(f"{d.isoformat()}  {c.rank.label:<17} {c.name}")
    if not found:
        print("no matches")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Backward compatibility: `litcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="litcal", description="Liturgical calendar toolkit CLI.")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian date -> liturgical day")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--calendar", default="dominican")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("search", help="Find dates of celebrations by name")

    # diagnostics
    sub.add_parser("month", help="Print a liturgical month grid (diagnostics)")
    sub.add_parser("easter-table", help="Print Easter and movable dates table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["season-coverage", "easter-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.log_level)

    if args.cmd == "day":
        day_argv = [args.date, "--log-level", args.log_level]
        if args.calendar != "dominican":
            day_argv += ["--calendar", args.calendar]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "search":
        return cmd_search(["--log-level", args.log_level] + rest)

    if args.cmd == "month":
        return _run_module_main("litcal.diagnostics.pretty_month", rest)

    if args.cmd == "easter-table":
        return _run_module_main("litcal.diagnostics.easter_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "season-coverage": "litcal.diagnostics.season_coverage",
            "easter-scatter": "litcal.diagnostics.easter_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
