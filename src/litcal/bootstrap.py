from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from litcal.api import LiturgicalCalendarService
from litcal.calendars.movable import MOVABLE_CELEBRATIONS
from litcal.calendars.proper import PROPER_FIXED
from litcal.calendars.universal import UNIVERSAL_FIXED
from litcal.core.types import FixedCelebration, MovableCelebration
from litcal.engines.registry import FixedCelebrationRegistry, select_calendars
from litcal.engines.specs import DEFAULT_SPEC, CalendarSpec

logger = logging.getLogger(__name__)


def _resolve_spec(spec: Union[str, CalendarSpec]) -> CalendarSpec:
    return CalendarSpec.like(spec) if isinstance(spec, str) else spec


def build_registry(
    spec: Union[str, CalendarSpec] = DEFAULT_SPEC,
    *,
    fixed: Optional[Iterable[FixedCelebration]] = None,
) -> FixedCelebrationRegistry:
    spec = _resolve_spec(spec)
    records = list(UNIVERSAL_FIXED) + list(PROPER_FIXED) if fixed is None else list(fixed)
    return FixedCelebrationRegistry.from_records(
        select_calendars(records, include_proper=spec.include_proper)
    )


def build_service(
    spec: Union[str, CalendarSpec] = DEFAULT_SPEC,
    *,
    fixed: Optional[Iterable[FixedCelebration]] = None,
    movable: Optional[Sequence[MovableCelebration]] = None,
) -> LiturgicalCalendarService:
    spec = _resolve_spec(spec)
    registry = build_registry(spec, fixed=fixed)
    service = LiturgicalCalendarService(
        spec,
        registry,
        MOVABLE_CELEBRATIONS if movable is None else movable,
    )
    logger.info(
        "Built '%s' calendar: %d fixed, %d movable celebrations",
        spec.name, len(registry), len(service.movable),
    )
    return service
