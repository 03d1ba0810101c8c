from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import litcal


DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("Ash Wed", "ash_wednesday"),
    ("Easter", "easter_sunday"),
    ("Ascension", "ascension"),
    ("Pentecost", "pentecost"),
    ("Corpus", "corpus_christi"),
    ("Advent I", "advent_first_sunday"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse observance columns from CLI.
    Example:
      --columns "Easter=easter_sunday,Whit=pentecost"
    Bare keys are used as their own header:
      --columns "easter_sunday,trinity_sunday"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, key = it.split("=", 1)
            out.append((name.strip(), key.strip()))
        else:
            out.append((it, it))
    return out


def table_rows(service, y0: int, y1: int, columns: List[Tuple[str, str]]) -> List[Tuple[int, List[date]]]:
    rows = []
    for y in range(y0, y1 + 1):
        obs = service.movable_feasts(y).observances
        missing = [key for _, key in columns if key not in obs]
        if missing:
            raise KeyError(f"Unknown observance(s) {missing}. Available: {sorted(obs)}")
        rows.append((y, [obs[key] for _, key in columns]))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Easter and related movable dates for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--calendar", default="dominican")
    p.add_argument("--columns", type=str, default="", help='Comma list like "Easter=easter_sunday,Whit=pentecost".')
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd",
                   help="Display format in table columns (default: mmdd).")
    args = p.parse_args(argv)

    columns = parse_columns(args.columns) if args.columns else DEFAULT_COLUMNS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    service = litcal.build_service(args.calendar)
    rows = table_rows(service, Y0, Y1, columns)

    headers = ["Year"] + [name for name, _ in columns]
    width = 10 if args.dates == "iso" else 5
    colw = [5] + [max(width, len(h)) for h in headers[1:]]
    print("  ".join(h.ljust(w) for h, w in zip(headers, colw)))
    print("  ".join("-" * w for w in colw))
    for y, ds in rows:
        cells = [str(y)] + [fmt(d) for d in ds]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
