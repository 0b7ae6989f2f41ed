"""EdgeCache unit tests with a mocked Redis client."""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from isp_translator.infrastructure.cache import EdgeCache, edge_translation_key

KEY = "755698b2245108943deeee514fe8c0ed"


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def edge(redis_client: AsyncMock) -> EdgeCache:
    return EdgeCache(redis_client=redis_client, ttl_seconds=3600)


class TestKeys:
    def test_edge_translation_key(self) -> None:
        assert edge_translation_key(KEY) == f"edge:translation:{KEY}"

    def test_rejects_separator(self) -> None:
        with pytest.raises(ValueError):
            edge_translation_key("a:b")

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            edge_translation_key("")


async def test_probe_hit_decodes_json(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = json.dumps("中国电信", ensure_ascii=False)
    assert await edge.probe(KEY) == "中国电信"
    redis_client.get.assert_awaited_once_with(f"edge:translation:{KEY}")


async def test_probe_miss(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = None
    assert await edge.probe(KEY) is None


async def test_probe_invalid_json_is_miss(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = "{not json"
    assert await edge.probe(KEY) is None


async def test_probe_non_string_value_is_miss(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = json.dumps({"translated": "x"})
    assert await edge.probe(KEY) is None


async def test_probe_redis_error_is_miss(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.side_effect = redis.ResponseError("WRONGTYPE")
    assert await edge.probe(KEY) is None


async def test_store_uses_setex_with_ttl(edge: EdgeCache, redis_client: AsyncMock) -> None:
    assert await edge.store(KEY, "中国电信") is True
    redis_client.setex.assert_awaited_once_with(
        f"edge:translation:{KEY}", 3600, '"中国电信"'
    )


async def test_store_redis_error_returns_false(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.setex.side_effect = redis.ResponseError("OOM")
    assert await edge.store(KEY, "x") is False


async def test_delete(edge: EdgeCache, redis_client: AsyncMock) -> None:
    assert await edge.delete(KEY) is True
    redis_client.delete.assert_awaited_once_with(f"edge:translation:{KEY}")


async def test_unconnected_cache_is_inert() -> None:
    edge = EdgeCache(ttl_seconds=60)
    assert edge.is_available() is False
    assert await edge.probe(KEY) is None
    assert await edge.store(KEY, "x") is False
    assert await edge.delete(KEY) is False


async def test_disconnect_closes_client(edge: EdgeCache, redis_client: AsyncMock) -> None:
    assert edge.is_available() is True
    await edge.disconnect()
    redis_client.aclose.assert_awaited_once()
    assert edge.is_available() is False


def test_default_ttl_is_one_year(redis_client: AsyncMock) -> None:
    assert EdgeCache(redis_client=redis_client).ttl_seconds == 31_536_000


class _ClientFactory:
    """Replaces redis.Redis: hands out prepared clients in order."""

    def __init__(self, *clients: AsyncMock) -> None:
        self.clients = list(clients)
        self.created = 0

    def __call__(self, **kwargs) -> AsyncMock:
        self.created += 1
        return self.clients.pop(0)


def _failing_ping_client() -> AsyncMock:
    client = AsyncMock()

    async def ping() -> None:
        await asyncio.sleep(0)
        raise redis.ConnectionError("connection refused")

    client.ping.side_effect = ping
    return client


def _dropped_connection_client() -> AsyncMock:
    client = AsyncMock()

    async def fail(*args) -> None:
        await asyncio.sleep(0)
        raise redis.ConnectionError("connection reset")

    client.get.side_effect = fail
    client.setex.side_effect = fail
    return client


async def test_probe_reconnects_after_connection_error(monkeypatch) -> None:
    stale = _dropped_connection_client()
    fresh = AsyncMock()
    fresh.get.return_value = json.dumps("中国电信", ensure_ascii=False)
    monkeypatch.setattr(redis, "Redis", _ClientFactory(fresh))
    edge = EdgeCache(redis_client=stale, ttl_seconds=60)

    assert await edge.probe(KEY) == "中国电信"
    stale.aclose.assert_awaited_once()
    assert edge.redis is fresh
    assert edge.is_available() is True


async def test_store_reconnects_after_connection_error(monkeypatch) -> None:
    stale = _dropped_connection_client()
    fresh = AsyncMock()
    monkeypatch.setattr(redis, "Redis", _ClientFactory(fresh))
    edge = EdgeCache(redis_client=stale, ttl_seconds=60)

    assert await edge.store(KEY, "x") is True
    fresh.setex.assert_awaited_once_with(f"edge:translation:{KEY}", 60, '"x"')


async def test_failed_reconnect_reads_as_miss(monkeypatch) -> None:
    monkeypatch.setattr(redis, "Redis", _ClientFactory(_failing_ping_client()))
    edge = EdgeCache(redis_client=_dropped_connection_client(), ttl_seconds=60)

    assert await edge.probe(KEY) is None
    assert edge.is_available() is False


async def test_concurrent_probes_during_reconnect_never_raise(monkeypatch) -> None:
    """Two probes losing the same connection share one reconnect attempt."""
    factory = _ClientFactory(_failing_ping_client(), AsyncMock())
    monkeypatch.setattr(redis, "Redis", factory)
    edge = EdgeCache(redis_client=_dropped_connection_client(), ttl_seconds=60)

    results = await asyncio.gather(
        edge.probe(KEY), edge.probe(KEY), return_exceptions=True
    )

    assert results == [None, None]
    assert factory.created == 1


async def test_concurrent_stores_during_reconnect_never_raise(monkeypatch) -> None:
    factory = _ClientFactory(_failing_ping_client(), AsyncMock())
    monkeypatch.setattr(redis, "Redis", factory)
    edge = EdgeCache(redis_client=_dropped_connection_client(), ttl_seconds=60)

    results = await asyncio.gather(
        edge.store(KEY, "a"), edge.store(KEY, "b"), return_exceptions=True
    )

    assert results == [False, False]


async def test_unexpected_errors_are_absorbed(edge: EdgeCache, redis_client: AsyncMock) -> None:
    redis_client.get.side_effect = AttributeError("boom")
    redis_client.setex.side_effect = RuntimeError("boom")
    assert await edge.probe(KEY) is None
    assert await edge.store(KEY, "x") is False


async def test_ensure_connected_throttles_attempts(monkeypatch) -> None:
    good = AsyncMock()
    factory = _ClientFactory(_failing_ping_client(), good)
    monkeypatch.setattr(redis, "Redis", factory)
    edge = EdgeCache(ttl_seconds=60, reconnect_interval_seconds=30)

    await edge.connect()
    assert edge.is_available() is False
    assert await edge.ensure_connected() is False
    assert factory.created == 1

    edge.reconnect_interval_seconds = 0
    assert await edge.ensure_connected() is True
    assert edge.redis is good
    assert factory.created == 2


async def test_ensure_connected_when_already_available(edge: EdgeCache) -> None:
    assert await edge.ensure_connected() is True
