"""Strict parsing of submission times and dates.

Times are minutes since midnight, Eastern Time by convention. The canonical
format is 24-hour ``HH:MM``. A 12-hour ``4:30 PM`` style can be enabled per
call; either way a value that does not parse raises instead of being passed
through.
"""

from __future__ import annotations

import re
from datetime import MAXYEAR, date

from cutoff_checker.core.exceptions import InvalidDateError, InvalidTimeError

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$", re.ASCII)
_MERIDIEM = re.compile(
    r"^(0?[1-9]|1[0-2])(?::([0-5]\d))?\s*([ap])\.?\s*m\.?$",
    re.IGNORECASE | re.ASCII,
)
_YMD = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)

MINUTES_PER_DAY = 24 * 60


def parse_time(value: str, *, allow_meridiem: bool = False) -> int:
    """Return minutes since midnight for ``value``.

    Raises:
        InvalidTimeError: ``value`` is not ``HH:MM`` (or, with
            ``allow_meridiem``, not a 12-hour time either).
    """
    text = value.strip()

    m = _HHMM.match(text)
    if m:
        return int(m.group(1)) * 60 + int(m.group(2))

    if allow_meridiem:
        m = _MERIDIEM.match(text)
        if m:
            hour = int(m.group(1)) % 12  # 12 AM -> 0, 12 PM -> 12 after offset
            if m.group(3).lower() == "p":
                hour += 12
            return hour * 60 + int(m.group(2) or 0)

    raise InvalidTimeError(value)


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight as ``HH:MM``."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"minutes out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date.

    Raises:
        InvalidDateError: wrong shape, or not a real date (e.g. 2025-02-30).
    """
    m = _YMD.match(value.strip())
    if not m:
        raise InvalidDateError(value)
    try:
        parsed = date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as exc:
        raise InvalidDateError(value) from exc
    # a next business day must still be representable
    if parsed.year >= MAXYEAR:
        raise InvalidDateError(value)
    return parsed
