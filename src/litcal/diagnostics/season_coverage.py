"""
litcal.diagnostics.season_coverage
----------------------------------
Sweeps a range of liturgical years and checks that the six season segments
tile each year exactly: non-empty, contiguous, in order, and spanning the
Advent-to-Advent bounds.
"""

from __future__ import annotations

import argparse
from collections import Counter
from datetime import timedelta
from typing import List, Optional

import litcal

ONE_DAY = timedelta(days=1)


def check_year(service: litcal.LiturgicalCalendarService, liturgical_year: int) -> List[str]:
    problems: List[str] = []
    spans = service.segments(liturgical_year)
    start, end = service.liturgical_year_bounds(liturgical_year)

    if spans[0].start != start:
        problems.append(f"{liturgical_year}: first segment starts {spans[0].start}, expected {start}")
    if spans[-1].end != end:
        problems.append(f"{liturgical_year}: last segment ends {spans[-1].end}, expected {end}")

    for i, s in enumerate(spans):
        if s.season.ordinal_index != i:
            problems.append(f"{liturgical_year}: segment {i} is {s.season.name} (index {s.season.ordinal_index})")
        if s.end < s.start:
            problems.append(f"{liturgical_year}: {s.season.name} is empty ({s.start} .. {s.end})")
        if i and spans[i - 1].end + ONE_DAY != s.start:
            problems.append(
                f"{liturgical_year}: gap/overlap between {spans[i - 1].season.name} "
                f"({spans[i - 1].end}) and {s.season.name} ({s.start})"
            )
    return problems


def season_lengths(service: litcal.LiturgicalCalendarService, y0: int, y1: int) -> Counter:
    """Total days per season index over a range of liturgical years."""
    out: Counter = Counter()
    for y in range(y0, y1 + 1):
        for s in service.segments(y):
            out[s.season.ordinal_index] += s.days
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check season segment coverage over a range of liturgical years.")
    p.add_argument("--from-year", type=int, default=1900)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--calendar", default="dominican")
    p.add_argument("--verbose", action="store_true", help="Print per-season day totals.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    service = litcal.build_service(args.calendar)
    problems: List[str] = []
    for y in range(args.from_year, args.to_year + 1):
        problems.extend(check_year(service, y))

    n = args.to_year - args.from_year + 1
    if problems:
        for msg in problems:
            print(msg)
        print(f"FAIL: {len(problems)} problem(s) in {n} liturgical years")
        return 1

    print(f"OK: {n} liturgical years ({args.from_year}..{args.to_year}) fully covered")
    if args.verbose:
        totals = season_lengths(service, args.from_year, args.to_year)
        for idx in sorted(totals):
            kind = list(litcal.SeasonKind)[idx]
            print(f"  {kind.name:<17} {totals[idx] / n:7.2f} days/year")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
