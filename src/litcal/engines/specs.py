"""
litcal.engines.specs
--------------------
Named calendar configurations. A spec is pure data; the bootstrap turns it
into a live service.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Literal

from litcal.engines.computus import GREGORIAN_MIN_YEAR, GREGORIAN_MAX_YEAR
from litcal.engines.movable import MovableRules

OTNumbering = Literal["reset", "continuous"]


@dataclass(frozen=True)
class CalendarSpec:
    name: str
    include_proper: bool = True
    epiphany_on_sunday: bool = True
    ascension_on_sunday: bool = False
    corpus_christi_on_sunday: bool = False
    ordinary_time_numbering: OTNumbering = "reset"
    min_year: int = GREGORIAN_MIN_YEAR
    # Dates late in max_year still need max_year + 1 for their window.
    max_year: int = GREGORIAN_MAX_YEAR - 1

    def __post_init__(self):
        if self.ordinary_time_numbering not in ("reset", "continuous"):
            raise ValueError("ordinary_time_numbering must be 'reset' or 'continuous'")
        if self.min_year < GREGORIAN_MIN_YEAR:
            raise ValueError(f"min_year must be >= {GREGORIAN_MIN_YEAR}")
        if self.max_year > GREGORIAN_MAX_YEAR - 1:
            raise ValueError(f"max_year must be <= {GREGORIAN_MAX_YEAR - 1}")
        if self.min_year > self.max_year:
            raise ValueError("min_year must not exceed max_year")

    @property
    def movable_rules(self) -> MovableRules:
        return MovableRules(
            epiphany_on_sunday=self.epiphany_on_sunday,
            ascension_on_sunday=self.ascension_on_sunday,
            corpus_christi_on_sunday=self.corpus_christi_on_sunday,
        )

    @staticmethod
    def like(name: str) -> "CalendarSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown calendar spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


DEFAULT_SPEC = "dominican"

ALL_SPECS: Dict[str, CalendarSpec] = {
    # Universal + Order of Preachers; Ascension and Corpus Christi on Thursday.
    "dominican": CalendarSpec(name="dominican"),
    # Same calendars, with Ascension and Corpus Christi moved to Sunday.
    "dominican-transferred": CalendarSpec(
        name="dominican-transferred",
        ascension_on_sunday=True,
        corpus_christi_on_sunday=True,
    ),
    # General Roman Calendar only.
    "roman": CalendarSpec(name="roman", include_proper=False),
}
