"""Response bodies for the HTTP presentation layer."""

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

from cutoff_checker.models.decision import CheckError, Decision

ET_NOTE = "(All cutoffs are treated as Eastern Time.)"


def format_date_long(d: date) -> str:
    """``Tuesday, March 11, 2025``"""
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


class CatalogueEntry(BaseModel):
    id: str
    name: str


class DefaultsResponse(BaseModel):
    """Current Eastern-Time date/time for pre-filling the form."""

    date: str
    time: str
    timezone: str


class HolidayEntry(BaseModel):
    name: str
    actual: date
    observed: date


class HolidaysResponse(BaseModel):
    year: int
    holidays: list[HolidayEntry]


class CheckResponse(BaseModel):
    """Tagged check result plus display strings."""

    status: Literal["ok", "error"]
    decision: Optional[Decision] = None
    error: Optional[CheckError] = None
    headline: str
    summary: str
    explanation: str

    @classmethod
    def from_decision(cls, decision: Decision, bank_name: str, rail_name: str) -> CheckResponse:
        return cls(
            status="ok",
            decision=decision,
            headline="Likely processes today" if decision.is_today else "Likely next business day",
            summary=(
                f"Result: {rail_name} at {bank_name} should process on "
                f"{format_date_long(decision.processes_on)}."
            ),
            explanation=f"{decision.reason_detail} {ET_NOTE}",
        )

    @classmethod
    def from_error(cls, error: CheckError) -> CheckResponse:
        headlines = {
            "missing_input": "Missing input",
            "invalid_time": "Invalid time",
            "invalid_date": "Invalid date",
            "unknown_cutoff": "No cutoff data",
        }
        return cls(
            status="error",
            error=error,
            headline=headlines.get(error.kind, "Invalid input"),
            summary=error.message,
            explanation=error.hint,
        )
