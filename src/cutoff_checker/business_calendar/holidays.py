"""US federal holidays, observed.

Holidays are stored as rules mapping a year to a date: fixed calendar dates
shift off weekends (Saturday to the preceding Friday, Sunday to the following
Monday), while nth-weekday holidays always land on a weekday already.

New Year's Day is the one rule that can cross a year boundary. When Jan 1 of
year Y is a Saturday it is observed on Dec 31 of Y-1, and that date is part
of Y's observed set.
"""

from __future__ import annotations

import calendar
import json
import logging
from datetime import date, timedelta
from typing import NamedTuple

from cutoff_checker.core.exceptions import CacheError
from cutoff_checker.core.protocols import ICacheBackend
from cutoff_checker.models.holiday import Holiday

logger = logging.getLogger(__name__)

MONDAY, THURSDAY, SATURDAY, SUNDAY = 0, 3, 5, 6
LAST = -1


class FixedDateRule(NamedTuple):
    name: str
    month: int
    day: int
    first_year: int = 1


class WeekdayRule(NamedTuple):
    name: str
    month: int
    weekday: int
    n: int  # 1-based occurrence, or LAST


FIXED_DATE_RULES: tuple[FixedDateRule, ...] = (
    FixedDateRule("New Year's Day", 1, 1),
    FixedDateRule("Juneteenth National Independence Day", 6, 19, first_year=2021),
    FixedDateRule("Independence Day", 7, 4),
    FixedDateRule("Veterans Day", 11, 11),
    FixedDateRule("Christmas Day", 12, 25),
)

WEEKDAY_RULES: tuple[WeekdayRule, ...] = (
    WeekdayRule("Martin Luther King Jr. Day", 1, MONDAY, 3),
    WeekdayRule("Washington's Birthday", 2, MONDAY, 3),
    WeekdayRule("Memorial Day", 5, MONDAY, LAST),
    WeekdayRule("Labor Day", 9, MONDAY, 1),
    WeekdayRule("Columbus Day", 10, MONDAY, 2),
    WeekdayRule("Thanksgiving Day", 11, THURSDAY, 4),
)


def observed_date(actual: date) -> date:
    """Shift a fixed-date holiday off the weekend."""
    if actual.weekday() == SATURDAY:
        return actual - timedelta(days=1)
    if actual.weekday() == SUNDAY:
        return actual + timedelta(days=1)
    return actual


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """Return the ``n``-th ``weekday`` of the month (``n=LAST`` for the last one)."""
    if n == LAST:
        last_day = calendar.monthrange(year, month)[1]
        last = date(year, month, last_day)
        return last - timedelta(days=(last.weekday() - weekday) % 7)
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + (n - 1) * 7)


class HolidayCalendar:
    """Computes and memoizes observed federal holidays per year.

    An optional shared cache (Redis in production) is consulted before
    computing a year and written after. Cache failures only cost a
    recomputation.
    """

    CACHE_KEY = "holidays:{year}"

    def __init__(self, cache: ICacheBackend | None = None, cache_ttl: int = 86400) -> None:
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._memo: dict[int, frozenset[date]] = {}

    def holidays(self, year: int) -> list[Holiday]:
        """Named holidays for ``year``, sorted by observed date."""
        found: list[Holiday] = []
        for rule in FIXED_DATE_RULES:
            if year < rule.first_year:
                continue
            actual = date(year, rule.month, rule.day)
            found.append(Holiday(name=rule.name, actual=actual, observed=observed_date(actual)))
        for rule in WEEKDAY_RULES:
            actual = nth_weekday(year, rule.month, rule.weekday, rule.n)
            found.append(Holiday(name=rule.name, actual=actual, observed=actual))
        return sorted(found, key=lambda h: h.observed)

    def observed_holidays(self, year: int) -> frozenset[date]:
        """Set of observed holiday dates attributed to ``year``.

        May contain Dec 31 of ``year - 1`` (see module docstring).
        """
        if year in self._memo:
            return self._memo[year]

        observed = self._read_cache(year)
        if observed is None:
            observed = frozenset(h.observed for h in self.holidays(year))
            self._write_cache(year, observed)

        self._memo[year] = observed
        return observed

    # ---- shared cache ----

    def _read_cache(self, year: int) -> frozenset[date] | None:
        if self._cache is None:
            return None
        key = self.CACHE_KEY.format(year=year)
        try:
            raw = self._cache.get(key)
        except CacheError as exc:
            logger.warning("Holiday cache read failed for %s, recomputing: %s", year, exc)
            return None
        if raw is None:
            return None
        try:
            return frozenset(date.fromisoformat(d) for d in json.loads(raw))
        except (TypeError, ValueError) as exc:
            logger.warning("Discarding malformed holiday cache entry %s: %s", key, exc)
            return None

    def _write_cache(self, year: int, observed: frozenset[date]) -> None:
        if self._cache is None:
            return
        key = self.CACHE_KEY.format(year=year)
        payload = json.dumps(sorted(d.isoformat() for d in observed))
        try:
            self._cache.setex(key, self._cache_ttl, payload)
        except CacheError as exc:
            logger.warning("Holiday cache write failed for %s: %s", year, exc)
