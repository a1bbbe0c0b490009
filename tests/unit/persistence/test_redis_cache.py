"""Unit tests for RedisCacheBackend using fakeredis."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import fakeredis
import pytest

from cutoff_checker.business_calendar.holidays import HolidayCalendar
from cutoff_checker.core.exceptions import CacheError
from cutoff_checker.persistence.redis_backend import RedisCacheBackend


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


def _backend(server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=server, decode_responses=True)):
        return RedisCacheBackend(host="localhost", port=6379, db=0, key_prefix="test:")


@pytest.fixture
def backend(fake_server):
    return _backend(fake_server)


class TestGetSetDelete:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("nonexistent") is None

    def test_roundtrip(self, backend):
        backend.setex("k", 60, "v")
        assert backend.get("k") == "v"

    def test_keys_are_prefixed(self, backend):
        backend.setex("holidays:2025", 60, "[]")
        assert backend._client.get("test:holidays:2025") == "[]"
        assert backend._client.ttl("test:holidays:2025") > 0

    def test_delete(self, backend):
        backend.setex("del_me", 60, "val")
        backend.delete("del_me")
        assert backend.get("del_me") is None

    def test_delete_missing_is_noop(self, backend):
        backend.delete("never_existed")


class TestErrorWrapping:
    def test_get_wraps_redis_error(self):
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._key_prefix = ""
        b._client = None  # AttributeError -> CacheError
        with pytest.raises(CacheError):
            b.get("k")

    def test_setex_wraps_redis_error(self):
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._key_prefix = ""
        b._client = None
        with pytest.raises(CacheError):
            b.setex("k", 1, "v")


class TestSharedHolidayCache:
    def test_second_calendar_reads_first_calendars_entry(self, fake_server):
        first = HolidayCalendar(cache=_backend(fake_server))
        computed = first.observed_holidays(2022)

        shared = _backend(fake_server)
        assert shared.get("holidays:2022") is not None
        second = HolidayCalendar(cache=shared)
        assert second.observed_holidays(2022) == computed
        assert date(2021, 12, 31) in second.observed_holidays(2022)
