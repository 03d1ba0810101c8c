"""
litcal.engines.computus
-----------------------
Date of Easter Sunday in the Gregorian calendar.

Uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher). Integer
arithmetic only, so the result is exact for every supported year.
"""

from __future__ import annotations

from datetime import date

from litcal.core.errors import UnsupportedYearError

# First full year of the Gregorian reform; date() caps the upper end.
GREGORIAN_MIN_YEAR = 1583
GREGORIAN_MAX_YEAR = 9999


def compute_easter(year: int) -> date:
    """Return the date of Easter Sunday for the given Gregorian year."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise UnsupportedYearError(f"Year must be an integer, got {year!r}")
    if not (GREGORIAN_MIN_YEAR <= year <= GREGORIAN_MAX_YEAR):
        raise UnsupportedYearError(
            f"Year {year} is outside the Gregorian computus range "
            f"{GREGORIAN_MIN_YEAR}..{GREGORIAN_MAX_YEAR}"
        )
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)
