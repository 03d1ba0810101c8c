from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple


class CelebrationRank(IntEnum):
    """Liturgical rank. Lower value = higher precedence."""
    SOLEMNITY = 1
    FEAST = 2
    MEMORIAL = 3
    OPTIONAL_MEMORIAL = 4
    FERIAL = 5

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_obligatory(self) -> bool:
        return self <= CelebrationRank.MEMORIAL


class CalendarOrigin(Enum):
    UNIVERSAL = "universal"
    PROPER = "proper"
    BOTH = "both"


class LiturgicalColor(Enum):
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    VIOLET = "violet"
    ROSE = "rose"
    BLACK = "black"


class SeasonKind(Enum):
    # value: (display name, color, ordinal index in liturgical-year order)
    ADVENT = ("Advent", LiturgicalColor.VIOLET, 0)
    CHRISTMAS = ("Christmas", LiturgicalColor.WHITE, 1)
    ORDINARY_TIME_I = ("Ordinary Time", LiturgicalColor.GREEN, 2)
    LENT = ("Lent", LiturgicalColor.VIOLET, 3)
    EASTER = ("Easter", LiturgicalColor.WHITE, 4)
    ORDINARY_TIME_II = ("Ordinary Time", LiturgicalColor.GREEN, 5)

    @property
    def season(self) -> "Season":
        name, color, idx = self.value
        return Season(name=name, color=color, ordinal_index=idx)


@dataclass(frozen=True)
class Season:
    name: str
    color: LiturgicalColor
    ordinal_index: int

    @property
    def kind(self) -> SeasonKind:
        return list(SeasonKind)[self.ordinal_index]


@dataclass(frozen=True)
class LiturgicalWeek:
    number: int
    display_label: str


@dataclass(frozen=True)
class Celebration:
    id: str
    name: str
    rank: CelebrationRank
    color: LiturgicalColor
    origin: CalendarOrigin
    is_order_member: bool = False
    is_doctor: bool = False
    description: Tuple[str, ...] = ()
    biography: Tuple[str, ...] = ()
    patronage: Optional[str] = None
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    prayers: Tuple[str, ...] = ()
    related_works: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FixedCelebration:
    month_day: str  # "MM-DD"
    celebration: Celebration


@dataclass(frozen=True)
class MovableCelebration:
    observance: str  # key into MovableFeasts.observances
    celebration: Celebration


@dataclass(frozen=True)
class MovableFeasts:
    """Derived movable table of one Gregorian year."""
    year: int
    easter_sunday: date
    ash_wednesday: date
    palm_sunday: date
    holy_thursday: date
    good_friday: date
    ascension: date
    pentecost: date
    trinity_sunday: date
    corpus_christi: date
    epiphany: date
    baptism_of_the_lord: date
    christ_the_king: date
    advent_first_sunday: date
    observances: Mapping[str, date]

    @property
    def christmas_season_end(self) -> date:
        return self.baptism_of_the_lord

    def on(self, d: date) -> Tuple[str, ...]:
        return tuple(k for k, v in self.observances.items() if v == d)


@dataclass(frozen=True)
class SeasonSpan:
    season: Season
    start: date
    end: date  # inclusive

    def __contains__(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class LiturgicalDay:
    date: date
    season: Season
    week: LiturgicalWeek
    day_of_week: int  # 0=Mon..6=Sun
    celebrations: Tuple[Celebration, ...]
    liturgical_year: int
    attributes: Optional[Dict[str, Any]] = None

    @property
    def primary(self) -> Optional[Celebration]:
        return self.celebrations[0] if self.celebrations else None

    @property
    def is_ferial(self) -> bool:
        return not self.celebrations

    @property
    def iso(self) -> str:
        return self.date.isoformat()


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int
