"""DynamoDB backend implementing ICutoffSource.

One item per bank/rail pair::

    {"PK": "BANK#chase", "SK": "RAIL#ach_standard", "cutoff": "16:00",
     "bank_name": "Chase", "rail_name": "ACH (Standard)"}

The whole table is scanned once at startup; decisions never hit DynamoDB.
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from cutoff_checker.core.exceptions import CutoffSourceError, InvalidTimeError
from cutoff_checker.core.types import JsonDict
from cutoff_checker.models.cutoff import Bank, BankRailCutoff, CutoffTable, Rail

logger = logging.getLogger(__name__)

BANK_PREFIX = "BANK#"
RAIL_PREFIX = "RAIL#"


def _strip_prefix(value: str, prefix: str) -> str:
    if not value.startswith(prefix):
        raise CutoffSourceError(f"Expected key starting with {prefix!r}, got {value!r}")
    return value[len(prefix):]


class DynamoDBCutoffSource:
    """Production ICutoffSource backed by a single DynamoDB table."""

    def __init__(self, table_name: str = "cutoff-checker-bank-cutoffs", table_suffix: str = "",
                 region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _scan_all(self) -> list[JsonDict]:
        tbl = self._ddb.Table(self._table_name)
        items: list[JsonDict] = []
        kwargs: JsonDict = {}
        try:
            while True:
                resp = tbl.scan(**kwargs)
                items.extend(resp.get("Items", []))
                if "LastEvaluatedKey" not in resp:
                    break
                kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]
        except (ClientError, BotoCoreError) as exc:
            raise CutoffSourceError(f"DynamoDB scan of {self._table_name!r} failed: {exc}") from exc
        return items

    def load(self) -> CutoffTable:
        items = sorted(self._scan_all(), key=lambda i: (i.get("PK", ""), i.get("SK", "")))
        if not items:
            raise CutoffSourceError(f"Cutoff table {self._table_name!r} is empty")

        entries: list[BankRailCutoff] = []
        banks: dict[str, Bank] = {}
        rails: dict[str, Rail] = {}
        for item in items:
            try:
                bank_id = _strip_prefix(item["PK"], BANK_PREFIX)
                rail_id = _strip_prefix(item["SK"], RAIL_PREFIX)
                entries.append(BankRailCutoff.from_hhmm(bank_id, rail_id, item["cutoff"]))
            except (KeyError, InvalidTimeError, ValidationError) as exc:
                raise CutoffSourceError(f"Malformed cutoff item {item!r}: {exc}") from exc
            banks.setdefault(bank_id, Bank(bank_id=bank_id, name=item.get("bank_name") or bank_id))
            rails.setdefault(rail_id, Rail(rail_id=rail_id, name=item.get("rail_name") or rail_id))

        logger.info("Loaded %d cutoffs from %s", len(entries), self._table_name)
        return CutoffTable(entries, banks=banks.values(), rails=rails.values())
