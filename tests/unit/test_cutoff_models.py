"""Tests for cutoff models and the immutable cutoff table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cutoff_checker.core.exceptions import CutoffSourceError, UnknownCutoffError
from cutoff_checker.models.cutoff import Bank, BankRailCutoff, CutoffTable, Rail


class TestBankRailCutoff:
    def test_from_hhmm(self):
        cutoff = BankRailCutoff.from_hhmm("tdus", "wire", "16:30")
        assert cutoff.cutoff_minutes == 990
        assert cutoff.cutoff_label == "16:30"

    @pytest.mark.parametrize("minutes", [-1, 1440])
    def test_rejects_out_of_range(self, minutes):
        with pytest.raises(ValidationError):
            BankRailCutoff(bank_id="x", rail_id="y", cutoff_minutes=minutes)

    def test_immutable(self):
        cutoff = BankRailCutoff(bank_id="x", rail_id="y", cutoff_minutes=600)
        with pytest.raises(ValidationError):
            cutoff.cutoff_minutes = 700


class TestCutoffTable:
    def test_reference_table(self, cutoff_table):
        assert len(cutoff_table) == 30
        assert ("chase", "ach_sameday") in cutoff_table
        assert cutoff_table.get("chase", "ach_sameday").cutoff_label == "16:45"
        assert [b.bank_id for b in cutoff_table.banks][:2] == ["chase", "boa"]
        assert [r.rail_id for r in cutoff_table.rails] == ["ach_standard", "ach_sameday", "wire"]

    def test_every_reference_cutoff_is_a_valid_minute(self, cutoff_table):
        assert all(0 <= c.cutoff_minutes <= 1439 for c in cutoff_table)

    def test_unknown_pair(self, cutoff_table):
        with pytest.raises(UnknownCutoffError) as exc_info:
            cutoff_table.get("chase", "crypto")
        assert exc_info.value.rail_id == "crypto"

    def test_duplicate_pair_rejected(self):
        dup = BankRailCutoff(bank_id="a", rail_id="b", cutoff_minutes=1)
        with pytest.raises(CutoffSourceError):
            CutoffTable([dup, dup])

    def test_display_names(self):
        table = CutoffTable(
            [BankRailCutoff(bank_id="a", rail_id="b", cutoff_minutes=1)],
            banks=[Bank(bank_id="a", name="Alpha Bank")],
            rails=[Rail(rail_id="z", name="Zeta")],
        )
        assert table.bank_name("a") == "Alpha Bank"
        assert table.rail_name("b") == "b"  # not in catalogue, falls back to id
        assert table.bank_name("missing") == "Selected bank"
        assert table.rail_name("missing") == "Selected transfer"
