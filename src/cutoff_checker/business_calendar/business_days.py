"""Business-day evaluation in Eastern Time."""

from __future__ import annotations

from datetime import date, timedelta

from cutoff_checker.core.protocols import IHolidayCalendar
from cutoff_checker.models.decision import BusinessDayCheck, ReasonCode

WEEKEND = "Weekend"
FEDERAL_HOLIDAY = "US federal holiday (observed)"
BUSINESS_DAY = "Business day"

_ONE_DAY = timedelta(days=1)


class BusinessDayEvaluator:
    """A business day is a weekday that is not an observed federal holiday."""

    def __init__(self, calendar: IHolidayCalendar) -> None:
        self._calendar = calendar

    @property
    def calendar(self) -> IHolidayCalendar:
        return self._calendar

    def is_business_day(self, day: date) -> BusinessDayCheck:
        if day.weekday() >= 5:
            return BusinessDayCheck(ok=False, reason=WEEKEND, reason_code=ReasonCode.WEEKEND)

        holidays = self._calendar.observed_holidays(day.year)
        # Dec 31 is New Year's observed day when next Jan 1 is a Saturday
        if day.month == 12 and day.day == 31:
            holidays = holidays | self._calendar.observed_holidays(day.year + 1)

        if day in holidays:
            return BusinessDayCheck(ok=False, reason=FEDERAL_HOLIDAY, reason_code=ReasonCode.HOLIDAY)
        return BusinessDayCheck(ok=True, reason=BUSINESS_DAY)

    def next_business_day(self, day: date) -> date:
        """First business day strictly after ``day``."""
        candidate = day + _ONE_DAY
        while not self.is_business_day(candidate).ok:
            candidate += _ONE_DAY
        return candidate
