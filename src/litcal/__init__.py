"""litcal public API.

Keep this surface small: build a service once and pass it around.
"""

from .api import CelebrationSearch, LiturgicalCalendarService
from .bootstrap import build_registry, build_service
from .core.errors import (
    CalendarDataIntegrityError,
    InvalidDateError,
    LitcalError,
    UnsupportedYearError,
)
from .core.types import (
    CalendarOrigin,
    Celebration,
    CelebrationRank,
    LiturgicalColor,
    LiturgicalDay,
    LiturgicalWeek,
    Season,
    SeasonKind,
)
from .engines.computus import compute_easter
from .engines.precedence import compare_celebrations, filter_celebrations
from .engines.specs import ALL_SPECS, CalendarSpec

__all__ = [
    "build_service",
    "build_registry",
    "LiturgicalCalendarService",
    "CelebrationSearch",
    "CalendarSpec",
    "ALL_SPECS",
    "compute_easter",
    "compare_celebrations",
    "filter_celebrations",
    "Celebration",
    "CelebrationRank",
    "CalendarOrigin",
    "LiturgicalColor",
    "LiturgicalDay",
    "LiturgicalWeek",
    "Season",
    "SeasonKind",
    "LitcalError",
    "InvalidDateError",
    "UnsupportedYearError",
    "CalendarDataIntegrityError",
]
