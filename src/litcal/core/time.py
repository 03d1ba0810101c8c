from __future__ import annotations
import re
from datetime import date, datetime, timedelta
from typing import Any, Iterator

from .errors import InvalidDateError

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_MMDD_RE = re.compile(r"^(\d{2})-(\d{2})$")

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def parse_ymd(s: str) -> date:
    """Parse a strict YYYY-MM-DD string."""
    m = _ISO_RE.match(s.strip())
    if m is None:
        raise InvalidDateError(f"Expected YYYY-MM-DD, got {s!r}")
    y, mo, d = (int(g) for g in m.groups())
    try:
        return date(y, mo, d)
    except ValueError as e:
        raise InvalidDateError(f"Not a calendar date: {s!r} ({e})") from e


def to_date(value: Any) -> date:
    """Coerce a date, datetime or ISO string into a plain date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_ymd(value)
    raise InvalidDateError(f"Cannot interpret {value!r} as a calendar date")


def iso_key(d: date) -> str:
    return d.isoformat()


def month_day_key(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def is_valid_month_day(key: str) -> bool:
    """True for any MM-DD that exists in some year (Feb 29 included)."""
    m = _MMDD_RE.match(key)
    if m is None:
        return False
    mo, d = int(m.group(1)), int(m.group(2))
    try:
        date(2000, mo, d)  # leap year, so 02-29 is accepted
    except ValueError:
        return False
    return True


def is_sunday(d: date) -> bool:
    return d.weekday() == 6


def sunday_on_or_before(d: date) -> date:
    # weekday(): Mon=0..Sun=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def sunday_after(d: date) -> date:
    """First Sunday strictly after d."""
    return d + timedelta(days=6 - d.weekday() or 7)


def sundays_between(start: date, end: date) -> int:
    """Number of Sundays in the half-open interval (start, end]."""
    if end <= start:
        return 0
    return (end - sunday_on_or_before(start)).days // 7


def days(start: date, end: date) -> Iterator[date]:
    """Inclusive date range."""
    d = start
    one = timedelta(days=1)
    while d <= end:
        yield d
        d += one


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
