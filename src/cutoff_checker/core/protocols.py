"""Protocol interfaces for the cutoff checker's pluggable seams.

Structural typing only: backends need no common base class and are easy to
swap for in-memory fakes in tests.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cutoff_checker.models.cutoff import CutoffTable
    from cutoff_checker.models.holiday import Holiday


# ---------------------------------------------------------------------------
# Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Cutoff Source
# ---------------------------------------------------------------------------

@runtime_checkable
class ICutoffSource(Protocol):
    """Supplies the immutable bank/rail cutoff table at startup."""

    def load(self) -> CutoffTable: ...


# ---------------------------------------------------------------------------
# Holiday Calendar
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayCalendar(Protocol):
    """Observed-holiday lookup consumed by the business-day evaluator."""

    def holidays(self, year: int) -> list[Holiday]: ...

    def observed_holidays(self, year: int) -> frozenset[date]: ...
