"""Create the bank cutoff DynamoDB table and seed it with the reference cutoffs.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from cutoff_checker.persistence.dynamodb_backend import BANK_PREFIX, RAIL_PREFIX
from cutoff_checker.reference.default_cutoffs import BANKS, DEFAULT_CUTOFFS, RAILS

TABLE_NAME = "cutoff-checker-bank-cutoffs"


def create_table(ddb: Any, table_name: str = TABLE_NAME, suffix: str = "") -> bool:
    """Create the cutoff table. Returns False if it already exists."""
    client = ddb.meta.client
    full_name = f"{table_name}{suffix}"
    if full_name in client.list_tables().get("TableNames", []):
        print(f"  Table {full_name} already exists, skipping")
        return False
    client.create_table(
        TableName=full_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {full_name}")
    return True


def build_items() -> list[dict[str, str]]:
    """One item per bank/rail pair in the reference table."""
    bank_names = {b.bank_id: b.name for b in BANKS}
    rail_names = {r.rail_id: r.name for r in RAILS}
    return [
        {
            "PK": f"{BANK_PREFIX}{bank_id}",
            "SK": f"{RAIL_PREFIX}{rail_id}",
            "cutoff": cutoff,
            "bank_name": bank_names.get(bank_id, bank_id),
            "rail_name": rail_names.get(rail_id, rail_id),
        }
        for bank_id, rails in DEFAULT_CUTOFFS.items()
        for rail_id, cutoff in rails.items()
    ]


def seed_cutoffs(ddb: Any, table_name: str = TABLE_NAME, suffix: str = "") -> int:
    """Write the reference cutoffs. Re-running overwrites items in place."""
    items = build_items()
    tbl = ddb.Table(f"{table_name}{suffix}")
    with tbl.batch_writer() as batch:
        for item in items:
            batch.put_item(Item=item)
    print(f"  Seeded {len(items)} bank/rail cutoffs")
    return len(items)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the bank cutoff DynamoDB table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-name", default=TABLE_NAME, help="Base table name")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating table...")
    create_table(ddb, table_name=args.table_name, suffix=args.table_suffix)

    print("Seeding cutoffs...")
    seed_cutoffs(ddb, table_name=args.table_name, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
