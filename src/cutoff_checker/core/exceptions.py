"""Cutoff checker exception hierarchy."""

from __future__ import annotations


class CutoffCheckerError(Exception):
    """Base exception for all cutoff checker errors."""


class InputError(CutoffCheckerError):
    """A caller-supplied value cannot be evaluated.

    Subclasses are reported back to the caller as a tagged result rather
    than propagated.
    """

    kind: str = "invalid_input"
    hint: str = ""


class MissingInputError(InputError):
    """One or more required fields are absent or blank."""

    kind = "missing_input"
    hint = "All fields are required for a deterministic result."

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required input: {', '.join(fields)}")


class InvalidTimeError(InputError):
    """Time string does not match the accepted format."""

    kind = "invalid_time"
    hint = "Example: 14:35 (which means 2:35 PM ET)."

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid time {value!r}: enter time in HH:MM (24-hour) format")


class InvalidDateError(InputError):
    """Date string is not a real YYYY-MM-DD calendar date."""

    kind = "invalid_date"
    hint = "Example: 2025-03-11."

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}: enter date as YYYY-MM-DD")


class UnknownCutoffError(InputError):
    """No cutoff data exists for the bank/rail combination."""

    kind = "unknown_cutoff"
    hint = "Pick a different bank or transfer type."

    def __init__(self, bank_id: str, rail_id: str) -> None:
        self.bank_id = bank_id
        self.rail_id = rail_id
        super().__init__(f"No cutoff data for bank={bank_id!r}, rail={rail_id!r}")


class CutoffSourceError(CutoffCheckerError):
    """Cutoff table could not be loaded or is malformed."""


class CacheError(CutoffCheckerError):
    """Redis cache operation failed."""
