"""Wire a CutoffEngine from application settings."""

from __future__ import annotations

import logging

from cutoff_checker.business_calendar.business_days import BusinessDayEvaluator
from cutoff_checker.business_calendar.holidays import HolidayCalendar
from cutoff_checker.core.config import AppSettings
from cutoff_checker.engine.cutoff_engine import CutoffEngine
from cutoff_checker.persistence import create_persistence

logger = logging.getLogger(__name__)


def create_engine(settings: AppSettings | None = None) -> CutoffEngine:
    """Load the cutoff table once and build the engine around it."""
    if settings is None:
        settings = AppSettings()

    source, cache = create_persistence(settings)
    cutoffs = source.load()
    calendar = HolidayCalendar(cache=cache, cache_ttl=settings.calendar.cache_ttl)

    logger.info(
        "Cutoff engine ready: %d cutoffs from %s source, %s holiday cache",
        len(cutoffs), settings.source.backend, settings.calendar.cache_backend,
    )
    return CutoffEngine(
        cutoffs,
        BusinessDayEvaluator(calendar),
        accept_meridiem_times=settings.accept_meridiem_times,
    )
