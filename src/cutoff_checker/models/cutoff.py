"""Bank, rail, and cutoff models loaded once at startup."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from pydantic import BaseModel, Field

from cutoff_checker.core.exceptions import CutoffSourceError, UnknownCutoffError
from cutoff_checker.core.types import BankId, RailId
from cutoff_checker.parsing.time_parser import format_minutes, parse_time


class Bank(BaseModel):
    """A bank offered in the picker."""

    model_config = {"frozen": True}

    bank_id: str
    name: str


class Rail(BaseModel):
    """A transfer rail (ACH Standard, ACH Same Day, Wire)."""

    model_config = {"frozen": True}

    rail_id: str
    name: str


class BankRailCutoff(BaseModel):
    """Latest Eastern-Time submission minute for same-day processing."""

    model_config = {"frozen": True}

    bank_id: str
    rail_id: str
    cutoff_minutes: int = Field(ge=0, le=1439)

    @classmethod
    def from_hhmm(cls, bank_id: str, rail_id: str, cutoff: str) -> BankRailCutoff:
        return cls(bank_id=bank_id, rail_id=rail_id, cutoff_minutes=parse_time(cutoff))

    @property
    def cutoff_label(self) -> str:
        return format_minutes(self.cutoff_minutes)


class CutoffTable:
    """Immutable ``(bank_id, rail_id) -> BankRailCutoff`` lookup.

    Also carries the bank and rail catalogue so the presentation layer can
    show display names. Banks or rails referenced by a cutoff but missing from
    the catalogue fall back to their id as the display name.
    """

    def __init__(
        self,
        cutoffs: Iterable[BankRailCutoff],
        banks: Iterable[Bank] = (),
        rails: Iterable[Rail] = (),
    ) -> None:
        entries: dict[tuple[BankId, RailId], BankRailCutoff] = {}
        for cutoff in cutoffs:
            key = (cutoff.bank_id, cutoff.rail_id)
            if key in entries:
                raise CutoffSourceError(
                    f"Duplicate cutoff for bank={cutoff.bank_id!r}, rail={cutoff.rail_id!r}"
                )
            entries[key] = cutoff
        self._entries = MappingProxyType(entries)

        bank_names = {b.bank_id: b for b in banks}
        rail_names = {r.rail_id: r for r in rails}
        for bank_id, rail_id in entries:
            bank_names.setdefault(bank_id, Bank(bank_id=bank_id, name=bank_id))
            rail_names.setdefault(rail_id, Rail(rail_id=rail_id, name=rail_id))
        self._banks = MappingProxyType(bank_names)
        self._rails = MappingProxyType(rail_names)

    def get(self, bank_id: BankId, rail_id: RailId) -> BankRailCutoff:
        try:
            return self._entries[(bank_id, rail_id)]
        except KeyError:
            raise UnknownCutoffError(bank_id, rail_id) from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[BankRailCutoff]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def banks(self) -> tuple[Bank, ...]:
        return tuple(self._banks.values())

    @property
    def rails(self) -> tuple[Rail, ...]:
        return tuple(self._rails.values())

    def bank_name(self, bank_id: str) -> str:
        bank = self._banks.get(bank_id)
        return bank.name if bank else "Selected bank"

    def rail_name(self, rail_id: str) -> str:
        rail = self._rails.get(rail_id)
        return rail.name if rail else "Selected transfer"
