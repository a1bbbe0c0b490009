"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from cutoff_checker.core.config import AppSettings
from cutoff_checker.core.protocols import ICacheBackend, ICutoffSource
from cutoff_checker.persistence.dynamodb_backend import DynamoDBCutoffSource
from cutoff_checker.persistence.memory_backend import MemoryCacheBackend, StaticCutoffSource
from cutoff_checker.persistence.redis_backend import RedisCacheBackend


def create_persistence(settings: AppSettings | None = None) -> tuple[ICutoffSource, ICacheBackend]:
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (cutoff_source, holiday_cache).
    """
    if settings is None:
        settings = AppSettings()

    if settings.source.backend == "dynamodb":
        source: ICutoffSource = DynamoDBCutoffSource(
            table_name=settings.dynamodb.table_name,
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )
    else:
        source = StaticCutoffSource()

    if settings.calendar.cache_backend == "redis":
        cache: ICacheBackend = RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
        )
    else:
        cache = MemoryCacheBackend()

    return source, cache
