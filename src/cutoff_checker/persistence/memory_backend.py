"""In-memory backends: the built-in cutoff table and a dict-backed cache."""

from __future__ import annotations

from typing import Iterable, Mapping

from pydantic import ValidationError

from cutoff_checker.core.exceptions import CutoffSourceError, InvalidTimeError
from cutoff_checker.models.cutoff import Bank, BankRailCutoff, CutoffTable, Rail
from cutoff_checker.reference.default_cutoffs import BANKS, DEFAULT_CUTOFFS, RAILS


class StaticCutoffSource:
    """ICutoffSource over a nested ``{bank_id: {rail_id: "HH:MM"}}`` mapping."""

    def __init__(
        self,
        cutoffs: Mapping[str, Mapping[str, str]] | None = None,
        banks: Iterable[Bank] | None = None,
        rails: Iterable[Rail] | None = None,
    ) -> None:
        self._cutoffs = DEFAULT_CUTOFFS if cutoffs is None else cutoffs
        self._banks = BANKS if banks is None else tuple(banks)
        self._rails = RAILS if rails is None else tuple(rails)

    def load(self) -> CutoffTable:
        entries: list[BankRailCutoff] = []
        for bank_id, rails in self._cutoffs.items():
            for rail_id, cutoff in rails.items():
                try:
                    entries.append(BankRailCutoff.from_hhmm(bank_id, rail_id, cutoff))
                except (InvalidTimeError, ValidationError) as exc:
                    raise CutoffSourceError(
                        f"Bad cutoff {cutoff!r} for bank={bank_id!r}, rail={rail_id!r}"
                    ) from exc
        return CutoffTable(entries, banks=self._banks, rails=self._rails)


class MemoryCacheBackend:
    """Dict-backed ICacheBackend; TTLs are accepted and ignored."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
