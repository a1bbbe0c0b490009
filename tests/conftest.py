"""Shared fixtures: engine wired to the built-in cutoff table."""

from __future__ import annotations

import pytest

from cutoff_checker.business_calendar.business_days import BusinessDayEvaluator
from cutoff_checker.business_calendar.holidays import HolidayCalendar
from cutoff_checker.engine.cutoff_engine import CutoffEngine
from cutoff_checker.persistence.memory_backend import StaticCutoffSource


@pytest.fixture
def calendar():
    return HolidayCalendar()


@pytest.fixture
def evaluator(calendar):
    return BusinessDayEvaluator(calendar)


@pytest.fixture
def cutoff_table():
    return StaticCutoffSource().load()


@pytest.fixture
def engine(cutoff_table, evaluator):
    return CutoffEngine(cutoff_table, evaluator)
