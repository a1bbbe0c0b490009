"""Tests for the DynamoDB seed script."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from seed_dynamodb import build_items, create_table, seed_cutoffs


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


class TestCreateTable:
    def test_creates_table(self, ddb):
        assert create_table(ddb, suffix="-test") is True
        tables = boto3.client("dynamodb", region_name="us-east-1").list_tables()["TableNames"]
        assert tables == ["cutoff-checker-bank-cutoffs-test"]

    def test_idempotent_skips_existing(self, ddb):
        create_table(ddb, suffix="-test")
        assert create_table(ddb, suffix="-test") is False


class TestSeedCutoffs:
    def test_one_item_per_bank_rail_pair(self):
        items = build_items()
        assert len(items) == 30
        assert {"PK": "BANK#chase", "SK": "RAIL#ach_sameday", "cutoff": "16:45",
                "bank_name": "Chase", "rail_name": "ACH (Same Day)"} in items

    def test_seeds_table(self, ddb):
        create_table(ddb, suffix="-test")
        assert seed_cutoffs(ddb, suffix="-test") == 30
        assert ddb.Table("cutoff-checker-bank-cutoffs-test").scan()["Count"] == 30

    def test_reseeding_overwrites(self, ddb):
        create_table(ddb, suffix="-test")
        seed_cutoffs(ddb, suffix="-test")
        seed_cutoffs(ddb, suffix="-test")
        assert ddb.Table("cutoff-checker-bank-cutoffs-test").scan()["Count"] == 30
