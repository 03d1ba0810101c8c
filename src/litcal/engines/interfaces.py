"""
litcal.engines.interfaces
-------------------------
Boundaries between the static tables (fixed registry), the per-year derived
tables (movable feasts) and the per-date resolvers (season, precedence).

Every date passed across these seams is a plain `datetime.date`.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterator, Protocol, Sequence, Tuple

from litcal.core.types import (
    Celebration,
    FixedCelebration,
    LiturgicalWeek,
    MovableFeasts,
    Season,
    SeasonSpan,
)

# year -> movable table for that Gregorian year
FeastsProvider = Callable[[int], MovableFeasts]


class FixedCelebrationSource(Protocol):
    """Static month-day keyed celebrations for one or more calendars."""

    def lookup_fixed(self, month_day: str) -> Tuple[Celebration, ...]:
        """
        Returns every celebration pinned to "MM-DD".
        Returns:
            () -> no fixed celebration on that day.
            (c,) or more -> universal and proper entries may coincide.
        """
        ...

    def get(self, celebration_id: str) -> Celebration:
        ...

    def __iter__(self) -> Iterator[FixedCelebration]:
        ...


class SeasonResolverProtocol(Protocol):
    """Maps a date onto the six segments of its liturgical year."""

    def liturgical_year(self, d: date) -> int:
        """The year in which the liturgical year containing d ends."""
        ...

    def bounds(self, liturgical_year: int) -> Tuple[date, date]:
        """First and last day (inclusive) of the liturgical year."""
        ...

    def segments(self, liturgical_year: int) -> Sequence[SeasonSpan]:
        ...

    def span(self, d: date) -> SeasonSpan:
        ...

    def resolve(self, d: date) -> Tuple[Season, LiturgicalWeek]:
        ...
