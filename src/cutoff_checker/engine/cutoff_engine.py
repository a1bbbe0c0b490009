"""CutoffEngine: decides which business day a submission processes on.

All cutoffs and submission times are Eastern Time by convention. The engine
performs no timezone conversion; callers supply Eastern-Time values.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from cutoff_checker.business_calendar.business_days import BusinessDayEvaluator
from cutoff_checker.core.exceptions import InputError, InvalidTimeError, MissingInputError
from cutoff_checker.core.types import BankId, Minutes, RailId
from cutoff_checker.models.cutoff import CutoffTable
from cutoff_checker.models.decision import CheckResult, Decision, ErrorKind, ReasonCode
from cutoff_checker.parsing.time_parser import MINUTES_PER_DAY, parse_date, parse_time

logger = logging.getLogger(__name__)


class CutoffEngine:
    """Pure decision function over an injected cutoff table and calendar."""

    def __init__(
        self,
        cutoffs: CutoffTable,
        evaluator: BusinessDayEvaluator,
        *,
        accept_meridiem_times: bool = False,
    ) -> None:
        self._cutoffs = cutoffs
        self._evaluator = evaluator
        self._accept_meridiem = accept_meridiem_times

    @property
    def cutoffs(self) -> CutoffTable:
        return self._cutoffs

    @property
    def evaluator(self) -> BusinessDayEvaluator:
        return self._evaluator

    def decide(self, bank_id: BankId, rail_id: RailId, on_date: date, time_minutes: Minutes) -> Decision:
        """Decide the processing date for an already-parsed submission.

        Raises:
            InvalidTimeError: time_minutes outside 0..1439.
            UnknownCutoffError: no cutoff for (bank_id, rail_id).
        """
        if not 0 <= time_minutes < MINUTES_PER_DAY:
            raise InvalidTimeError(str(time_minutes))
        cutoff = self._cutoffs.get(bank_id, rail_id)
        check = self._evaluator.is_business_day(on_date)
        before_cutoff = time_minutes < cutoff.cutoff_minutes  # at cutoff = missed

        if not check.ok:
            processes_on = self._evaluator.next_business_day(on_date)
            reason_code = check.reason_code
            detail = f"{check.reason}. Transfers generally process on the next business day."
        elif not before_cutoff:
            processes_on = self._evaluator.next_business_day(on_date)
            reason_code = ReasonCode.AFTER_CUTOFF
            detail = f"Time is after the cutoff ({cutoff.cutoff_label} ET) for this selection."
        else:
            processes_on = on_date
            reason_code = ReasonCode.BEFORE_CUTOFF
            detail = (
                f"Time is before the cutoff ({cutoff.cutoff_label} ET) "
                "and the date is a business day."
            )

        decision = Decision(
            bank_id=bank_id,
            rail_id=rail_id,
            requested_date=on_date,
            submitted_minutes=time_minutes,
            cutoff_minutes=cutoff.cutoff_minutes,
            processes_on=processes_on,
            is_today=processes_on == on_date,
            reason_code=reason_code,
            reason_detail=detail,
        )
        logger.debug(
            "decide %s/%s %s minute=%d -> %s (%s)",
            bank_id, rail_id, on_date, time_minutes,
            processes_on, reason_code,
        )
        return decision

    def check(
        self,
        bank_id: Optional[str],
        rail_id: Optional[str],
        date_str: Optional[str],
        time_str: Optional[str],
    ) -> CheckResult:
        """Validate raw form input and decide, reporting bad input as a tagged error.

        Validation order: missing fields, time format, cutoff lookup, date.
        Nothing is decided unless every input is valid.
        """
        try:
            missing = [
                name
                for name, value in (
                    ("bank", bank_id), ("rail", rail_id), ("date", date_str), ("time", time_str),
                )
                if value is None or not value.strip()
            ]
            if missing:
                raise MissingInputError(missing)

            minutes = parse_time(time_str, allow_meridiem=self._accept_meridiem)
            bank_id, rail_id = bank_id.strip(), rail_id.strip()
            self._cutoffs.get(bank_id, rail_id)
            on_date = parse_date(date_str)
        except InputError as exc:
            logger.info("Rejected check input (%s): %s", exc.kind, exc)
            return CheckResult.failure(ErrorKind(exc.kind), str(exc), exc.hint)

        return CheckResult.success(self.decide(bank_id, rail_id, on_date, minutes))
