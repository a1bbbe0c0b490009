"""Decision and check-result models returned to the presentation layer."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Literal, Optional

from pydantic import BaseModel


class ReasonCode(StrEnum):
    BEFORE_CUTOFF = "BEFORE_CUTOFF"
    AFTER_CUTOFF = "AFTER_CUTOFF"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"


class ErrorKind(StrEnum):
    MISSING_INPUT = "missing_input"
    INVALID_TIME = "invalid_time"
    INVALID_DATE = "invalid_date"
    UNKNOWN_CUTOFF = "unknown_cutoff"


class BusinessDayCheck(BaseModel):
    """Outcome of testing a single calendar date."""

    model_config = {"frozen": True}

    ok: bool
    reason: str
    reason_code: Optional[ReasonCode] = None  # None when ok


class Decision(BaseModel):
    """Which date a submission processes on, and why."""

    model_config = {"frozen": True}

    bank_id: str
    rail_id: str
    requested_date: date
    submitted_minutes: int
    cutoff_minutes: int
    processes_on: date
    is_today: bool
    reason_code: ReasonCode
    reason_detail: str


class CheckError(BaseModel):
    """Tagged error returned instead of a decision."""

    model_config = {"frozen": True}

    kind: ErrorKind
    message: str
    hint: str = ""


class CheckResult(BaseModel):
    """Either a decision or an error, never both."""

    model_config = {"frozen": True}

    status: Literal["ok", "error"]
    decision: Optional[Decision] = None
    error: Optional[CheckError] = None

    @classmethod
    def success(cls, decision: Decision) -> CheckResult:
        return cls(status="ok", decision=decision)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, hint: str = "") -> CheckResult:
        return cls(status="error", error=CheckError(kind=kind, message=message, hint=hint))

    @property
    def ok(self) -> bool:
        return self.status == "ok"
