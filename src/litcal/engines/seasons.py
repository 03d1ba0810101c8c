"""
litcal.engines.seasons
----------------------
Season and week resolution.

A liturgical year Y runs from the First Sunday of Advent of Y-1 up to the
day before the First Sunday of Advent of Y, and is cut into six contiguous
segments:

    Advent | Christmas | Ordinary Time I | Lent | Easter | Ordinary Time II

Weeks begin on Sunday.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Dict, List, Tuple

from litcal.core.time import ordinal, sunday_on_or_before, sundays_between
from litcal.core.types import (
    LiturgicalWeek,
    MovableFeasts,
    Season,
    SeasonKind,
    SeasonSpan,
)
from litcal.engines.interfaces import FeastsProvider
from litcal.engines.movable import advent_first_sunday

ONE_DAY = timedelta(days=1)

# Ordinary Time ends with the week of Christ the King.
LAST_ORDINARY_WEEK = 34


def _label(season: Season, n: int) -> str:
    return f"{ordinal(n)} Week of {season.name}"


def _advent_week(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    n = (d - span.start).days // 7 + 1
    return LiturgicalWeek(n, _label(span.season, n))


def _christmas_week(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    n = 1 + sundays_between(span.start, d)
    octave_end = span.start + timedelta(days=7)
    if d <= octave_end:
        return LiturgicalWeek(n, "Octave of Christmas")
    return LiturgicalWeek(n, "Christmas Season")


def _ordinary_week(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    n = 1 + sundays_between(span.start, d)
    return LiturgicalWeek(n, _label(span.season, n))


def _ordinary_week_continuous(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    weeks_to_end = (feasts.christ_the_king - sunday_on_or_before(d)).days // 7
    n = LAST_ORDINARY_WEEK - weeks_to_end
    return LiturgicalWeek(n, _label(span.season, n))


def _lent_week(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    sundays = sundays_between(span.start, d)
    n = max(1, sundays)
    if d == span.start:
        return LiturgicalWeek(n, "Ash Wednesday")
    if sundays == 0:
        return LiturgicalWeek(n, "Days after Ash Wednesday")
    if d >= feasts.palm_sunday:
        return LiturgicalWeek(n, "Holy Week")
    return LiturgicalWeek(n, _label(span.season, n))


def _easter_week(d: date, span: SeasonSpan, feasts: MovableFeasts) -> LiturgicalWeek:
    easter = feasts.easter_sunday
    if d < easter:
        return LiturgicalWeek(0, "Easter Triduum")
    since = (d - easter).days
    n = since // 7 + 1
    if d == feasts.pentecost:
        return LiturgicalWeek(n, "Pentecost Sunday")
    if since <= 7:
        return LiturgicalWeek(n, "Octave of Easter")
    return LiturgicalWeek(n, _label(span.season, n))


WeekFn = Callable[[date, SeasonSpan, MovableFeasts], LiturgicalWeek]

_WEEK_FNS: Dict[SeasonKind, WeekFn] = {
    SeasonKind.ADVENT: _advent_week,
    SeasonKind.CHRISTMAS: _christmas_week,
    SeasonKind.ORDINARY_TIME_I: _ordinary_week,
    SeasonKind.LENT: _lent_week,
    SeasonKind.EASTER: _easter_week,
    SeasonKind.ORDINARY_TIME_II: _ordinary_week,
}


class SeasonResolver:
    """
    Resolves dates to (Season, LiturgicalWeek). Movable tables come from
    `feasts_for`, so callers decide how (and whether) they are cached.
    """
    def __init__(self, feasts_for: FeastsProvider, *, ordinary_time_numbering: str = "reset"):
        if ordinary_time_numbering not in ("reset", "continuous"):
            raise ValueError("ordinary_time_numbering must be 'reset' or 'continuous'")
        self.feasts_for = feasts_for
        self.ordinary_time_numbering = ordinary_time_numbering
        self._week_fns = dict(_WEEK_FNS)
        if ordinary_time_numbering == "continuous":
            self._week_fns[SeasonKind.ORDINARY_TIME_II] = _ordinary_week_continuous

    def liturgical_year(self, d: date) -> int:
        return d.year + 1 if d >= advent_first_sunday(d.year) else d.year

    def bounds(self, liturgical_year: int) -> Tuple[date, date]:
        start = advent_first_sunday(liturgical_year - 1)
        end = advent_first_sunday(liturgical_year) - ONE_DAY
        return start, end

    def segments(self, liturgical_year: int) -> List[SeasonSpan]:
        f = self.feasts_for(liturgical_year)
        start, end = self.bounds(liturgical_year)
        christmas = date(liturgical_year - 1, 12, 25)
        return [
            SeasonSpan(SeasonKind.ADVENT.season, start, christmas - ONE_DAY),
            SeasonSpan(SeasonKind.CHRISTMAS.season, christmas, f.baptism_of_the_lord),
            SeasonSpan(SeasonKind.ORDINARY_TIME_I.season, f.baptism_of_the_lord + ONE_DAY, f.ash_wednesday - ONE_DAY),
            SeasonSpan(SeasonKind.LENT.season, f.ash_wednesday, f.holy_thursday),
            SeasonSpan(SeasonKind.EASTER.season, f.good_friday, f.pentecost),
            SeasonSpan(SeasonKind.ORDINARY_TIME_II.season, f.pentecost + ONE_DAY, end),
        ]

    def span(self, d: date) -> SeasonSpan:
        for s in self.segments(self.liturgical_year(d)):
            if d in s:
                return s
        raise RuntimeError(f"No season segment contains {d}")  # segments are exhaustive

    def resolve(self, d: date) -> Tuple[Season, LiturgicalWeek]:
        lit_year = self.liturgical_year(d)
        feasts = self.feasts_for(lit_year)
        span = self.span(d)
        week = self._week_fns[span.season.kind](d, span, feasts)
        return span.season, week


def resolve_season(
    d: date,
    feasts_for: FeastsProvider,
    *,
    ordinary_time_numbering: str = "reset",
) -> Tuple[Season, LiturgicalWeek]:
    return SeasonResolver(feasts_for, ordinary_time_numbering=ordinary_time_numbering).resolve(d)
