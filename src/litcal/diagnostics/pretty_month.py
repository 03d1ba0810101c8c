from __future__ import annotations

from datetime import date
import argparse

import litcal
from litcal.core.types import LiturgicalDay

RANK_CODES = {1: "S", 2: "F", 3: "M", 4: "m"}


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def day_code(day: LiturgicalDay) -> str:
    """Rank of the primary celebration plus the season color, e.g. "S:w" or "-:g"."""
    c = day.primary
    rank = RANK_CODES.get(int(c.rank), "-") if c is not None else "-"
    return f"{rank}:{day.season.color.value[0]}"


def month_weeks(days: list[LiturgicalDay]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = days[0].date.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for day in days:
        wk.append(cell(f"{day.date.day:2d}", day_code(day)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def gregorian_month_calendar(service: litcal.LiturgicalCalendarService, gy: int, gm: int) -> None:
    days = service.calendar_month(gy, gm)
    title = f"{service.spec.name} liturgical month  {gy}-{gm:02d}"
    print_grid(title, month_weeks(days))
    for day in days:
        if day.primary is not None:
            print(f"  {day.iso}  {day.primary.rank.label:<17} {day.primary.name}")
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid with primary rank and season color per day."
    )
    p.add_argument("--calendar", default="dominican", help="dominican|dominican-transferred|roman")
    p.add_argument("year", nargs="?", type=int, help="Gregorian year (default: current)")
    p.add_argument("month", nargs="?", type=int, help="Gregorian month 1..12 (default: current)")
    args = p.parse_args(argv)

    today = date.today()
    gy = args.year if args.year is not None else today.year
    gm = args.month if args.month is not None else today.month

    service = litcal.build_service(args.calendar)
    try:
        gregorian_month_calendar(service, gy, gm)
    except litcal.LitcalError as e:
        raise SystemExit(f"error: {e}") from e
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
