"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class CalendarConfig(BaseSettings):
    """Holiday calendar and clock configuration."""

    model_config = {"env_prefix": "CUTOFF_CALENDAR_"}

    timezone: str = "America/New_York"
    cache_backend: Literal["memory", "redis"] = "memory"
    cache_ttl: int = 86400  # holiday sets never change for a given year


class CutoffSourceConfig(BaseSettings):
    """Where the bank/rail cutoff table is loaded from at startup."""

    model_config = {"env_prefix": "CUTOFF_SOURCE_"}

    backend: Literal["static", "dynamodb"] = "static"


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "CUTOFF_DYNAMO_"}

    table_name: str = "cutoff-checker-bank-cutoffs"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "CUTOFF_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "cutoff-checker:"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CUTOFF_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    accept_meridiem_times: bool = False

    calendar: CalendarConfig = CalendarConfig()
    source: CutoffSourceConfig = CutoffSourceConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
    redis: RedisConfig = RedisConfig()
