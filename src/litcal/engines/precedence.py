"""
litcal.engines.precedence
-------------------------
Collects every celebration falling on a date and orders them.

Ordering is rank first (Solemnity > Feast > Memorial > Optional Memorial),
then calendar origin (the order's proper calendar before the universal one).
Nothing is dropped: consumers decide what to show.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from litcal.core.time import month_day_key
from litcal.core.types import (
    CalendarOrigin,
    Celebration,
    LiturgicalColor,
    MovableCelebration,
    MovableFeasts,
)
from litcal.engines.interfaces import FixedCelebrationSource

ORIGIN_PRECEDENCE: Dict[CalendarOrigin, int] = {
    CalendarOrigin.PROPER: 0,
    CalendarOrigin.BOTH: 1,
    CalendarOrigin.UNIVERSAL: 2,
}


def precedence_key(c: Celebration) -> Tuple[int, int]:
    return (int(c.rank), ORIGIN_PRECEDENCE[c.origin])


def compare_celebrations(a: Celebration, b: Celebration) -> int:
    """<0 if a takes precedence over b, >0 if b does, 0 if they tie."""
    ka, kb = precedence_key(a), precedence_key(b)
    return (ka > kb) - (ka < kb)


def movable_on(
    d: date,
    movable: Sequence[MovableCelebration],
    feasts: MovableFeasts,
) -> List[Celebration]:
    keys = set(feasts.on(d))
    if not keys:
        return []
    return [m.celebration for m in movable if m.observance in keys]


def resolve_celebrations(
    d: date,
    fixed: FixedCelebrationSource,
    movable: Sequence[MovableCelebration],
    feasts: MovableFeasts,
) -> Tuple[Celebration, ...]:
    """
    All celebrations of d, highest precedence first.

    `feasts` must be the movable table of d.year. Entries sharing an id are
    reduced to their first occurrence (fixed before movable).
    """
    seen = set()
    merged: List[Celebration] = []
    for c in list(fixed.lookup_fixed(month_day_key(d))) + movable_on(d, movable, feasts):
        if c.id in seen:
            continue
        seen.add(c.id)
        merged.append(c)
    # sorted() is stable: equal keys keep table order
    return tuple(sorted(merged, key=precedence_key))


def filter_celebrations(
    items: Iterable[Celebration],
    *,
    order_member: Optional[bool] = None,
    doctor: Optional[bool] = None,
    color: Optional[LiturgicalColor] = None,
) -> Tuple[Celebration, ...]:
    """Consumer-side filtering; None leaves a criterion unconstrained."""
    out = []
    for c in items:
        if order_member is not None and c.is_order_member != order_member:
            continue
        if doctor is not None and c.is_doctor != doctor:
            continue
        if color is not None and c.color is not color:
            continue
        out.append(c)
    return tuple(out)
