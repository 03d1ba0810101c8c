"""
litcal.engines.registry
-----------------------
Fixed-date celebrations of the universal and proper calendars, indexed by
"MM-DD". Built once from the declarative tables and validated on the way in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from litcal.core.errors import CalendarDataIntegrityError
from litcal.core.time import is_valid_month_day
from litcal.core.types import (
    CalendarOrigin,
    Celebration,
    CelebrationRank,
    FixedCelebration,
    MovableCelebration,
)
from litcal.engines.movable import OBSERVANCE_KEYS

logger = logging.getLogger(__name__)


def _fail(msg: str) -> None:
    logger.error("Calendar data integrity: %s", msg)
    raise CalendarDataIntegrityError(msg)


def _shares_calendar(a: CalendarOrigin, b: CalendarOrigin) -> bool:
    return a is b or CalendarOrigin.BOTH in (a, b)


@dataclass
class FixedCelebrationRegistry:
    _by_month_day: Dict[str, Tuple[Celebration, ...]]
    _by_id: Dict[str, FixedCelebration]

    @classmethod
    def from_records(cls, records: Iterable[FixedCelebration]) -> "FixedCelebrationRegistry":
        by_md: Dict[str, List[Celebration]] = {}
        by_id: Dict[str, FixedCelebration] = {}

        for rec in records:
            c = rec.celebration
            if not is_valid_month_day(rec.month_day):
                _fail(f"'{c.id}' has invalid month-day '{rec.month_day}'")
            if c.rank is CelebrationRank.FERIAL:
                _fail(f"'{c.id}' on {rec.month_day} is ranked Ferial; fixed entries must be celebrations")
            if c.id in by_id:
                _fail(f"duplicate celebration id '{c.id}' ({by_id[c.id].month_day} and {rec.month_day})")

            if c.rank.is_obligatory:
                for other in by_md.get(rec.month_day, []):
                    if _shares_calendar(other.origin, c.origin) and other.rank.is_obligatory:
                        _fail(
                            f"{rec.month_day}: '{other.id}' and '{c.id}' are both obligatory "
                            f"in the {c.origin.value} calendar"
                        )

            by_md.setdefault(rec.month_day, []).append(c)
            by_id[c.id] = rec

        return cls(
            _by_month_day={k: tuple(v) for k, v in sorted(by_md.items())},
            _by_id=by_id,
        )

    def lookup_fixed(self, month_day: str) -> Tuple[Celebration, ...]:
        return self._by_month_day.get(month_day, ())

    def get(self, celebration_id: str) -> Celebration:
        if celebration_id not in self._by_id:
            raise KeyError(f"Unknown celebration '{celebration_id}'")
        return self._by_id[celebration_id].celebration

    def month_day_of(self, celebration_id: str) -> str:
        if celebration_id not in self._by_id:
            raise KeyError(f"Unknown celebration '{celebration_id}'")
        return self._by_id[celebration_id].month_day

    def ids(self) -> List[str]:
        return sorted(self._by_id)

    def __iter__(self) -> Iterator[FixedCelebration]:
        for md, items in self._by_month_day.items():
            for c in items:
                yield FixedCelebration(month_day=md, celebration=c)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, celebration_id: object) -> bool:
        return celebration_id in self._by_id


def validate_movable(
    movable: Sequence[MovableCelebration],
    registry: FixedCelebrationRegistry,
) -> Tuple[MovableCelebration, ...]:
    """Check movable records against the observance table and the fixed ids."""
    seen: Dict[str, str] = {}
    for rec in movable:
        c = rec.celebration
        if rec.observance not in OBSERVANCE_KEYS:
            _fail(f"movable '{c.id}' references unknown observance '{rec.observance}'")
        if c.id in registry or c.id in seen:
            _fail(f"duplicate celebration id '{c.id}' in movable table")
        seen[c.id] = rec.observance
    return tuple(movable)


def select_calendars(
    records: Iterable[FixedCelebration], *, include_proper: bool
) -> Iterator[FixedCelebration]:
    """Drop order-proper entries when only the universal calendar is wanted."""
    for rec in records:
        if include_proper or rec.celebration.origin is not CalendarOrigin.PROPER:
            yield rec
