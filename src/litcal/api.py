"""
litcal.api
----------
LiturgicalCalendarService: the façade that ties the computus, movable table,
season resolver and precedence resolver together and memoizes per-date
results.

Services are built explicitly (see `litcal.bootstrap.build_service`) and
passed to whoever needs them.
"""

from __future__ import annotations

import calendar as pycal
import heapq
import logging
import threading
from dataclasses import asdict, replace
from datetime import date, timedelta
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .attributes import standard as _standard  # noqa: F401  (registers built-in attributes)
from .attributes.registry import compute_attributes
from .core.errors import InvalidDateError, UnsupportedYearError
from .core.time import days as iter_days, iso_key, month_day_key, to_date
from .core.types import (
    CacheInfo,
    Celebration,
    LiturgicalDay,
    MovableCelebration,
    MovableFeasts,
    Season,
    SeasonSpan,
)
from .engines.movable import movable_feasts_for_year
from .engines.precedence import precedence_key, resolve_celebrations
from .engines.interfaces import SeasonResolverProtocol
from .engines.registry import FixedCelebrationRegistry, validate_movable
from .engines.seasons import SeasonResolver
from .engines.specs import CalendarSpec

logger = logging.getLogger(__name__)

DatedCelebration = Tuple[date, Celebration]


class CelebrationSearch:
    """
    Lazy, restartable search over one year's celebrations.

    Each iteration walks the fixed registry and the movable table of `year`
    again, yielding (date, Celebration) pairs in date order whose name
    contains `query` (case-insensitive).
    """

    def __init__(self, service: "LiturgicalCalendarService", query: str, year: int):
        self.service = service
        self.query = query
        self.year = year
        self._needle = query.casefold()

    def __iter__(self) -> Iterator[DatedCelebration]:
        for d, c in heapq.merge(self._fixed(), self._movable(), key=lambda pair: pair[0]):
            if self._needle in c.name.casefold():
                yield d, c

    def __repr__(self) -> str:
        return f"CelebrationSearch(query={self.query!r}, year={self.year})"

    def _fixed(self) -> Iterator[DatedCelebration]:
        leap = pycal.isleap(self.year)
        for rec in self.service.registry:
            if rec.month_day == "02-29" and not leap:
                continue
            month, day = (int(x) for x in rec.month_day.split("-"))
            yield date(self.year, month, day), rec.celebration

    def _movable(self) -> Iterator[DatedCelebration]:
        feasts = self.service.movable_feasts(self.year)
        dated = [(feasts.observances[m.observance], m.celebration) for m in self.service.movable]
        yield from sorted(dated, key=lambda pair: pair[0])


class LiturgicalCalendarService:
    def __init__(
        self,
        spec: CalendarSpec,
        registry: FixedCelebrationRegistry,
        movable: Sequence[MovableCelebration],
    ):
        self.spec = spec
        self.registry = registry
        self.movable = validate_movable(movable, registry)
        self.seasons: SeasonResolverProtocol = SeasonResolver(
            self._feasts_for,
            ordinary_time_numbering=spec.ordinary_time_numbering,
        )
        self._days: Dict[str, LiturgicalDay] = {}
        self._feasts: Dict[int, MovableFeasts] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # year-level tables
    # ------------------------------------------------------------------

    def _check_year(self, year: Any, *, upper: Optional[int] = None) -> int:
        hi = self.spec.max_year if upper is None else upper
        if isinstance(year, bool) or not isinstance(year, int):
            raise UnsupportedYearError(f"Year must be an integer, got {year!r}")
        if not self.spec.min_year <= year <= hi:
            raise UnsupportedYearError(f"Year {year} outside supported range {self.spec.min_year}..{hi}")
        return year

    def _check_liturgical_year(self, liturgical_year: Any) -> int:
        # Dates after Advent of max_year belong to liturgical year max_year + 1.
        return self._check_year(liturgical_year, upper=self.spec.max_year + 1)

    def _feasts_for(self, year: int) -> MovableFeasts:
        # Unchecked: the season window of late December needs year + 1.
        f = self._feasts.get(year)
        if f is None:
            f = movable_feasts_for_year(year, rules=self.spec.movable_rules)
            with self._lock:
                f = self._feasts.setdefault(year, f)
        return f

    def movable_feasts(self, year: int) -> MovableFeasts:
        return self._feasts_for(self._check_year(year))

    def easter(self, year: int) -> date:
        return self.movable_feasts(year).easter_sunday

    def segments(self, liturgical_year: int) -> Tuple[SeasonSpan, ...]:
        return tuple(self.seasons.segments(self._check_liturgical_year(liturgical_year)))

    def liturgical_year_bounds(self, liturgical_year: int) -> Tuple[date, date]:
        return self.seasons.bounds(self._check_liturgical_year(liturgical_year))

    # ------------------------------------------------------------------
    # per-date
    # ------------------------------------------------------------------

    def _compute_day(self, d: date) -> LiturgicalDay:
        self._check_year(d.year)
        season, week = self.seasons.resolve(d)
        celebrations = resolve_celebrations(d, self.registry, self.movable, self._feasts_for(d.year))
        return LiturgicalDay(
            date=d,
            season=season,
            week=week,
            day_of_week=d.weekday(),
            celebrations=celebrations,
            liturgical_year=self.seasons.liturgical_year(d),
        )

    def get_liturgical_day(self, value: Any, *, attributes: Sequence[str] = ()) -> LiturgicalDay:
        d = to_date(value)
        key = iso_key(d)
        day = self._days.get(key)
        if day is None:
            logger.debug("Cache miss for %s", key)
            day = self._compute_day(d)
            with self._lock:
                day = self._days.setdefault(key, day)
                self._misses += 1
        else:
            with self._lock:
                self._hits += 1

        if attributes:
            day = replace(day, attributes=compute_attributes(day, attributes))
        return day

    def season_for(self, value: Any) -> Season:
        return self.get_liturgical_day(value).season

    def celebrations_for(self, value: Any) -> Tuple[Celebration, ...]:
        return self.get_liturgical_day(value).celebrations

    def is_feast_day(self, value: Any) -> bool:
        return not self.get_liturgical_day(value).is_ferial

    # ------------------------------------------------------------------
    # ranges
    # ------------------------------------------------------------------

    def calendar_range(self, start: Any, end: Any) -> List[LiturgicalDay]:
        d0, d1 = to_date(start), to_date(end)
        if d1 < d0:
            raise InvalidDateError(f"Range end {d1} precedes start {d0}")
        return [self.get_liturgical_day(d) for d in iter_days(d0, d1)]

    def calendar_month(self, year: int, month: int) -> List[LiturgicalDay]:
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Month must be 1..12, got {month}")
        self._check_year(year)
        last = pycal.monthrange(year, month)[1]
        return self.calendar_range(date(year, month, 1), date(year, month, last))

    def calendar_year(self, year: int) -> List[LiturgicalDay]:
        self._check_year(year)
        return self.calendar_range(date(year, 1, 1), date(year, 12, 31))

    def celebrations_in_range(self, start: Any, end: Any) -> List[DatedCelebration]:
        return [(day.date, c) for day in self.calendar_range(start, end) for c in day.celebrations]

    def upcoming_celebrations(self, start: Any = None, days: int = 30) -> List[DatedCelebration]:
        d0 = date.today() if start is None else to_date(start)
        if days < 1:
            return []
        return self.celebrations_in_range(d0, d0 + timedelta(days=days - 1))

    def next_celebration(self, start: Any = None, *, horizon: int = 366) -> Optional[DatedCelebration]:
        """First celebration on or after start, within horizon days."""
        d0 = date.today() if start is None else to_date(start)
        for i in range(horizon):
            day = self.get_liturgical_day(d0 + timedelta(days=i))
            if day.primary is not None:
                return day.date, day.primary
        return None

    # ------------------------------------------------------------------
    # celebrations and search
    # ------------------------------------------------------------------

    def find_dates_by_celebration_name(self, query: str, *, year: Optional[int] = None) -> CelebrationSearch:
        y = date.today().year if year is None else year
        self._check_year(y)
        return CelebrationSearch(self, query, y)

    def all_celebrations(self) -> Tuple[Celebration, ...]:
        return tuple(rec.celebration for rec in self.registry) + tuple(m.celebration for m in self.movable)

    def order_celebrations(self) -> Tuple[Celebration, ...]:
        return tuple(c for c in self.all_celebrations() if c.is_order_member)

    def celebration_by_id(self, celebration_id: str) -> Celebration:
        if celebration_id in self.registry:
            return self.registry.get(celebration_id)
        for m in self.movable:
            if m.celebration.id == celebration_id:
                return m.celebration
        raise KeyError(f"Unknown celebration '{celebration_id}'")

    # ------------------------------------------------------------------
    # cache and introspection
    # ------------------------------------------------------------------

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._days))

    def clear_cache(self) -> None:
        with self._lock:
            self._days.clear()
            self._feasts.clear()
            self._hits = 0
            self._misses = 0

    def info(self) -> Dict[str, Any]:
        return {
            "spec": asdict(self.spec),
            "fixed_celebrations": len(self.registry),
            "movable_celebrations": len(self.movable),
            "order_celebrations": len(self.order_celebrations()),
        }

    def explain(self, value: Any) -> Dict[str, Any]:
        d = to_date(value)
        day = self.get_liturgical_day(d)
        span = self.seasons.span(d)
        feasts = self._feasts_for(d.year)
        return {
            "date": day.iso,
            "liturgical_year": day.liturgical_year,
            "season": {
                "name": day.season.name,
                "index": day.season.ordinal_index,
                "start": span.start.isoformat(),
                "end": span.end.isoformat(),
            },
            "week": {"number": day.week.number, "label": day.week.display_label},
            "month_day": month_day_key(d),
            "fixed": [c.id for c in self.registry.lookup_fixed(month_day_key(d))],
            "observances": list(feasts.on(d)),
            "ranking": [
                {"id": c.id, "rank": c.rank.label, "origin": c.origin.value, "key": precedence_key(c)}
                for c in day.celebrations
            ],
        }
