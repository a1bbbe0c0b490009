"""Tests for time and date parsing."""

from __future__ import annotations

from datetime import date

import pytest

from cutoff_checker.core.exceptions import InputError, InvalidDateError, InvalidTimeError
from cutoff_checker.parsing.time_parser import format_minutes, parse_date, parse_time


class TestParseTimeStrict:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("00:00", 0), ("09:05", 545), ("16:00", 960), ("16:45", 1005), ("23:59", 1439)],
    )
    def test_accepts_24_hour(self, value, expected):
        assert parse_time(value) == expected

    def test_trims_whitespace(self):
        assert parse_time("  14:35 ") == 875

    @pytest.mark.parametrize(
        "value",
        ["24:00", "9:00", "12:60", "1600", "", "16:00:00", "ab:cd", "4:30 PM", "-1:00"],
    )
    def test_rejects_everything_else(self, value):
        with pytest.raises(InvalidTimeError) as exc_info:
            parse_time(value)
        assert exc_info.value.value == value

    def test_invalid_time_is_an_input_error(self):
        assert issubclass(InvalidTimeError, InputError)

    @pytest.mark.parametrize("value", ["1\u0665:00", "\uff11\uff16:00", "16:\u0663\u0660"])
    def test_rejects_non_ascii_digits(self, value):
        with pytest.raises(InvalidTimeError):
            parse_time(value)


class TestParseTimeMeridiem:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("4:30 PM", 990),
            ("4pm", 960),
            ("12:05 a.m.", 5),
            ("12 PM", 720),
            ("12:00 am", 0),
            ("11:59 PM", 1439),
            ("9:15AM", 555),
        ],
    )
    def test_accepts_12_hour_when_enabled(self, value, expected):
        assert parse_time(value, allow_meridiem=True) == expected

    def test_24_hour_still_accepted(self):
        assert parse_time("16:00", allow_meridiem=True) == 960

    @pytest.mark.parametrize("value", ["13:00 PM", "0:30 am", "4:3 pm", "noon", "4:30 PX"])
    def test_unparseable_raises_instead_of_passing_through(self, value):
        with pytest.raises(InvalidTimeError):
            parse_time(value, allow_meridiem=True)

    @pytest.mark.parametrize("value", ["\u0664 PM", "4:\u0663\u0660 pm"])
    def test_rejects_non_ascii_digits(self, value):
        with pytest.raises(InvalidTimeError):
            parse_time(value, allow_meridiem=True)


class TestFormatMinutes:
    def test_zero_pads(self):
        assert format_minutes(0) == "00:00"
        assert format_minutes(545) == "09:05"

    def test_inverse_of_parse(self):
        assert format_minutes(parse_time("16:45")) == "16:45"

    @pytest.mark.parametrize("minutes", [-1, 1440])
    def test_out_of_range(self, minutes):
        with pytest.raises(ValueError):
            format_minutes(minutes)


class TestParseDate:
    def test_parses_iso_date(self):
        assert parse_date("2025-03-11") == date(2025, 3, 11)

    @pytest.mark.parametrize(
        "value", ["2025-02-30", "2025-3-11", "03/11/2025", "20250311", "", "9999-12-31"],
    )
    def test_rejects_bad_dates(self, value):
        with pytest.raises(InvalidDateError):
            parse_date(value)

    @pytest.mark.parametrize("value", ["\uff12\uff10\uff12\uff15-03-11", "2025-\u0660\u0663-11"])
    def test_rejects_non_ascii_digits(self, value):
        with pytest.raises(InvalidDateError):
            parse_date(value)
