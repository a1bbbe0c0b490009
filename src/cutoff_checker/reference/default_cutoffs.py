"""Built-in bank/rail cutoff reference table.

Cutoffs are Eastern Time, 24h ``HH:MM``. They are common, conservative
cutoffs for consumer/SMB online submission; individual products and channels
at a bank can differ.
"""

from __future__ import annotations

from cutoff_checker.models.cutoff import Bank, Rail

BANKS: tuple[Bank, ...] = (
    Bank(bank_id="chase", name="Chase"),
    Bank(bank_id="boa", name="Bank of America"),
    Bank(bank_id="wells", name="Wells Fargo"),
    Bank(bank_id="citi", name="Citi"),
    Bank(bank_id="usbank", name="U.S. Bank"),
    Bank(bank_id="pnc", name="PNC"),
    Bank(bank_id="capitalone", name="Capital One"),
    Bank(bank_id="tdus", name="TD Bank (US)"),
    Bank(bank_id="truist", name="Truist"),
    Bank(bank_id="ally", name="Ally Bank"),
)

RAILS: tuple[Rail, ...] = (
    Rail(rail_id="ach_standard", name="ACH (Standard)"),
    Rail(rail_id="ach_sameday", name="ACH (Same Day)"),
    Rail(rail_id="wire", name="Wire (Domestic)"),
)

DEFAULT_CUTOFFS: dict[str, dict[str, str]] = {
    "chase": {"ach_standard": "16:00", "ach_sameday": "16:45", "wire": "16:00"},
    "boa": {"ach_standard": "17:00", "ach_sameday": "17:00", "wire": "17:00"},
    "wells": {"ach_standard": "17:00", "ach_sameday": "17:00", "wire": "17:00"},
    "citi": {"ach_standard": "18:00", "ach_sameday": "18:00", "wire": "18:00"},
    "usbank": {"ach_standard": "18:00", "ach_sameday": "18:00", "wire": "17:00"},
    "pnc": {"ach_standard": "18:00", "ach_sameday": "18:00", "wire": "17:00"},
    "capitalone": {"ach_standard": "17:00", "ach_sameday": "17:00", "wire": "16:00"},
    "tdus": {"ach_standard": "17:00", "ach_sameday": "17:00", "wire": "16:30"},
    "truist": {"ach_standard": "19:00", "ach_sameday": "19:00", "wire": "17:00"},
    "ally": {"ach_standard": "19:00", "ach_sameday": "19:00", "wire": "16:00"},
}
