"""
litcal.calendars.records
------------------------
Small constructors used by the declarative tables. Text fields are
normalized to tuples of paragraphs so the tables can be written naturally.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple, Union

from litcal.core.types import (
    CalendarOrigin,
    Celebration,
    CelebrationRank,
    FixedCelebration,
    LiturgicalColor,
    MovableCelebration,
)

Text = Union[None, str, Sequence[str]]


def paragraphs(value: Text) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(value)


def celebration(
    id: str,
    name: str,
    rank: CelebrationRank,
    color: LiturgicalColor,
    origin: CalendarOrigin,
    *,
    order_member: bool = False,
    doctor: bool = False,
    description: Text = None,
    biography: Text = None,
    patronage: Optional[str] = None,
    born: Optional[int] = None,
    died: Optional[int] = None,
    prayers: Text = None,
    works: Text = None,
) -> Celebration:
    return Celebration(
        id=id,
        name=name,
        rank=rank,
        color=color,
        origin=origin,
        is_order_member=order_member,
        is_doctor=doctor,
        description=paragraphs(description),
        biography=paragraphs(biography),
        patronage=patronage,
        birth_year=born,
        death_year=died,
        prayers=paragraphs(prayers),
        related_works=paragraphs(works),
    )


def fixed(month_day: str, *args: Any, **kwargs: Any) -> FixedCelebration:
    return FixedCelebration(month_day=month_day, celebration=celebration(*args, **kwargs))


def movable(observance: str, *args: Any, **kwargs: Any) -> MovableCelebration:
    return MovableCelebration(observance=observance, celebration=celebration(*args, **kwargs))
