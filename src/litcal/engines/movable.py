"""
litcal.engines.movable
----------------------
Movable-feast table. Derives every Easter-relative observance of a year from
the Easter date, plus the observances that are tied to Christmas and the
Sundays around it (Epiphany, Baptism of the Lord, Holy Family, Advent).

All Easter offsets live in the tables below; nothing else in the package
adds day counts to Easter.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import Dict, FrozenSet

from litcal.core.time import is_sunday, sunday_after
from litcal.core.types import MovableFeasts
from litcal.engines.computus import compute_easter

# Days from Easter Sunday (negative = before).
EASTER_OFFSETS: Dict[str, int] = {
    "ash_wednesday": -46,
    "laetare_sunday": -21,
    "palm_sunday": -7,
    "holy_monday": -6,
    "holy_tuesday": -5,
    "holy_wednesday": -4,
    "holy_thursday": -3,
    "good_friday": -2,
    "holy_saturday": -1,
    "easter_sunday": 0,
    "easter_monday": 1,
    "easter_tuesday": 2,
    "easter_wednesday": 3,
    "easter_thursday": 4,
    "easter_friday": 5,
    "easter_saturday": 6,
    "divine_mercy_sunday": 7,
    "ascension": 39,
    "pentecost": 49,
    "mary_mother_of_the_church": 50,
    "trinity_sunday": 56,
    "corpus_christi": 60,
    "sacred_heart": 68,
    "immaculate_heart": 69,
}

# Replacement offsets where the solemnity is transferred to the next Sunday.
SUNDAY_TRANSFER_OFFSETS: Dict[str, int] = {
    "ascension": 42,
    "corpus_christi": 63,
}

# Observances anchored on Christmas / Epiphany / Advent rather than Easter.
CALENDAR_OBSERVANCES = (
    "epiphany",
    "baptism_of_the_lord",
    "holy_family",
    "christ_the_king",
    "advent_first_sunday",
    "gaudete_sunday",
)

OBSERVANCE_KEYS: FrozenSet[str] = frozenset(EASTER_OFFSETS) | frozenset(CALENDAR_OBSERVANCES)

ADVENT_SUNDAYS = 4
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class MovableRules:
    epiphany_on_sunday: bool = True
    ascension_on_sunday: bool = False
    corpus_christi_on_sunday: bool = False

    def offsets(self) -> Dict[str, int]:
        out = dict(EASTER_OFFSETS)
        if self.ascension_on_sunday:
            out["ascension"] = SUNDAY_TRANSFER_OFFSETS["ascension"]
        if self.corpus_christi_on_sunday:
            out["corpus_christi"] = SUNDAY_TRANSFER_OFFSETS["corpus_christi"]
        return out


def advent_first_sunday(year: int) -> date:
    """Fourth Sunday before Christmas (always Nov 27 .. Dec 3)."""
    christmas = date(year, 12, 25)
    # Sunday before Christmas, never Christmas itself.
    back = (christmas.weekday() + 1) % DAYS_PER_WEEK or DAYS_PER_WEEK
    fourth_advent = christmas - timedelta(days=back)
    return fourth_advent - timedelta(weeks=ADVENT_SUNDAYS - 1)


def epiphany(year: int, *, on_sunday: bool = True) -> date:
    """January 6, or the Sunday between January 2 and 8."""
    if not on_sunday:
        return date(year, 1, 6)
    jan2 = date(year, 1, 2)
    return jan2 + timedelta(days=(6 - jan2.weekday()) % DAYS_PER_WEEK)


def baptism_of_the_lord(year: int, *, on_sunday: bool = True) -> date:
    """Sunday after Epiphany; the Monday after when a Sunday Epiphany falls on Jan 7 or 8."""
    epi = epiphany(year, on_sunday=on_sunday)
    if on_sunday and epi.day in (7, 8):
        return epi + timedelta(days=1)
    return sunday_after(epi)


def holy_family(year: int) -> date:
    """Sunday within the Christmas octave, or December 30 when Christmas is a Sunday."""
    christmas = date(year, 12, 25)
    if is_sunday(christmas):
        return date(year, 12, 30)
    return sunday_after(christmas)


def derive_movable_feasts(easter: date, *, rules: MovableRules = MovableRules()) -> MovableFeasts:
    """Build the movable table for easter.year."""
    year = easter.year
    obs: Dict[str, date] = {
        key: easter + timedelta(days=off) for key, off in rules.offsets().items()
    }

    advent1 = advent_first_sunday(year)
    obs["epiphany"] = epiphany(year, on_sunday=rules.epiphany_on_sunday)
    obs["baptism_of_the_lord"] = baptism_of_the_lord(year, on_sunday=rules.epiphany_on_sunday)
    obs["holy_family"] = holy_family(year)
    obs["advent_first_sunday"] = advent1
    obs["christ_the_king"] = advent1 - timedelta(weeks=1)
    obs["gaudete_sunday"] = advent1 + timedelta(weeks=2)

    return MovableFeasts(
        year=year,
        easter_sunday=obs["easter_sunday"],
        ash_wednesday=obs["ash_wednesday"],
        palm_sunday=obs["palm_sunday"],
        holy_thursday=obs["holy_thursday"],
        good_friday=obs["good_friday"],
        ascension=obs["ascension"],
        pentecost=obs["pentecost"],
        trinity_sunday=obs["trinity_sunday"],
        corpus_christi=obs["corpus_christi"],
        epiphany=obs["epiphany"],
        baptism_of_the_lord=obs["baptism_of_the_lord"],
        christ_the_king=obs["christ_the_king"],
        advent_first_sunday=advent1,
        observances=MappingProxyType(dict(sorted(obs.items(), key=lambda kv: kv[1]))),
    )


def movable_feasts_for_year(year: int, *, rules: MovableRules = MovableRules()) -> MovableFeasts:
    return derive_movable_feasts(compute_easter(year), rules=rules)
