"""Cutoff check, catalogue, and holiday endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Path, Request

from cutoff_checker.api.schemas import (
    CatalogueEntry,
    CheckResponse,
    DefaultsResponse,
    HolidayEntry,
    HolidaysResponse,
)
from cutoff_checker.business_calendar.holidays import HolidayCalendar
from cutoff_checker.engine.cutoff_engine import CutoffEngine

router = APIRouter(tags=["cutoffs"])


def get_engine(request: Request) -> CutoffEngine:
    return request.app.state.engine


def get_calendar(request: Request) -> HolidayCalendar:
    return request.app.state.calendar


@router.get("/banks")
def list_banks(engine: CutoffEngine = Depends(get_engine)) -> list[CatalogueEntry]:
    return [CatalogueEntry(id=b.bank_id, name=b.name) for b in engine.cutoffs.banks]


@router.get("/rails")
def list_rails(engine: CutoffEngine = Depends(get_engine)) -> list[CatalogueEntry]:
    return [CatalogueEntry(id=r.rail_id, name=r.name) for r in engine.cutoffs.rails]


@router.get("/defaults")
def defaults(request: Request) -> DefaultsResponse:
    """Current Eastern-Time date and time, only for pre-populating inputs."""
    tz_name = request.app.state.settings.calendar.timezone
    now = datetime.now(ZoneInfo(tz_name))
    return DefaultsResponse(date=now.strftime("%Y-%m-%d"), time=now.strftime("%H:%M"), timezone=tz_name)


@router.get("/holidays/{year}")
def list_holidays(
    year: int = Path(ge=1900, le=2200),
    calendar: HolidayCalendar = Depends(get_calendar),
) -> HolidaysResponse:
    return HolidaysResponse(
        year=year,
        holidays=[
            HolidayEntry(name=h.name, actual=h.actual, observed=h.observed)
            for h in calendar.holidays(year)
        ],
    )


@router.get("/check")
def check(
    bank: Optional[str] = None,
    rail: Optional[str] = None,
    date: Optional[str] = None,
    time: Optional[str] = None,
    engine: CutoffEngine = Depends(get_engine),
) -> CheckResponse:
    """Run a cutoff check. Bad input comes back as a tagged error, not an HTTP error."""
    result = engine.check(bank, rail, date, time)
    if not result.ok:
        return CheckResponse.from_error(result.error)
    decision = result.decision
    return CheckResponse.from_decision(
        decision,
        bank_name=engine.cutoffs.bank_name(decision.bank_id),
        rail_name=engine.cutoffs.rail_name(decision.rail_id),
    )
