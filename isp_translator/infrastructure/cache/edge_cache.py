"""Redis-backed edge cache: the advisory fast tier in front of the persistent store.

Provides async probe/store with TTL. Values are JSON-encoded translated
strings under keys built by isp_translator.infrastructure.cache.keys.

Best effort only: no read-after-write guarantee is made, and every Redis or
decoding error is logged and reported as a miss (probe) or as an unachieved
write (store). Nothing here raises to the caller.

A lost connection is retried once inline; after that, ensure_connected()
brings the tier back, at most once per edge_reconnect_interval_seconds.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time

import redis.asyncio as redis

from isp_translator.core.config import get_settings
from isp_translator.infrastructure.cache.keys import edge_translation_key

logger = logging.getLogger(__name__)


class EdgeCache:
    """Async Redis edge cache (IEdgeCache).

    Uses isp_translator.core.config for connection settings and TTL. Call
    connect() at startup and disconnect() at shutdown.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        ttl_seconds: int | None = None,
        reconnect_interval_seconds: float | None = None,
    ) -> None:
        """Initialize edge cache.

        Args:
            redis_client: Optional Redis client for testing or DI (treated as connected).
            ttl_seconds: Entry TTL; defaults to settings.edge_cache_ttl_seconds.
            reconnect_interval_seconds: Minimum gap between connection attempts;
                defaults to settings.edge_reconnect_interval_seconds.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self.ttl_seconds = ttl_seconds or self.settings.edge_cache_ttl_seconds
        self.reconnect_interval_seconds = (
            reconnect_interval_seconds
            if reconnect_interval_seconds is not None
            else self.settings.edge_reconnect_interval_seconds
        )
        self._connected = redis_client is not None
        self._last_connect_attempt: float | None = None
        self._connect_lock = asyncio.Lock()

    def _new_client(self) -> redis.Redis:
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

    @staticmethod
    async def _close_quietly(client: redis.Redis) -> None:
        try:
            await client.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing Redis connection")

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        self._last_connect_attempt = time.monotonic()
        client = self._new_client()
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(
                "Redis connection failed: %s. Edge cache disabled.",
                e,
            )
            await self._close_quietly(client)
            return
        if self.redis is not None:
            # Another caller connected while this ping was in flight.
            await self._close_quietly(client)
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Edge cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            client = self.redis
            self.redis = None
            self._connected = False
            await client.aclose()
            logger.info("Edge cache disconnected")

    async def _reconnect(self, stale: redis.Redis) -> redis.Redis | None:
        """Replace a client that raised a connection error. Returns the client to retry with, or None."""
        async with self._connect_lock:
            if self.redis is not stale:
                # Already replaced (or dropped) by a concurrent caller.
                return self.redis
            self.redis = None
            self._connected = False
            await self._close_quietly(stale)
            await self.connect()
            return self.redis

    def _connect_throttled(self) -> bool:
        if self._last_connect_attempt is None:
            return False
        elapsed = time.monotonic() - self._last_connect_attempt
        return elapsed < self.reconnect_interval_seconds

    async def ensure_connected(self) -> bool:
        """Return True if usable, reconnecting first when the last attempt is old enough."""
        if self.is_available():
            return True
        async with self._connect_lock:
            if self.is_available():
                return True
            if self._connect_throttled():
                return False
            await self.connect()
        return self.is_available()

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def probe(self, cache_key: str) -> str | None:
        """Return the cached translation or None if missing/unavailable.

        Args:
            cache_key: Derived cache key (digest).

        Returns:
            Translated text or None.
        """
        try:
            return await self._probe(cache_key)
        except Exception:
            logger.exception("Unexpected edge probe error for key %s", cache_key)
            return None

    async def _probe(self, cache_key: str) -> str | None:
        client = self.redis
        if not self.is_available() or client is None:
            return None
        key = edge_translation_key(cache_key)
        try:
            value = await client.get(key)
        except (redis.ConnectionError, redis.TimeoutError):
            client = await self._reconnect(client)
            if client is None:
                logger.warning("Edge probe unavailable for key %s (Redis disconnected)", key)
                return None
            try:
                value = await client.get(key)
            except redis.RedisError:
                logger.exception("Edge probe error for key %s after reconnect", key)
                return None
        except redis.RedisError:
            logger.exception("Edge probe error for key %s", key)
            return None
        return self._decode(key, value)

    def _decode(self, key: str, value: str | None) -> str | None:
        if value is None:
            logger.debug("Edge MISS: %s", key)
            return None
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("Edge value for key %s is not valid JSON; treating as miss", key)
            return None
        if not isinstance(decoded, str):
            logger.warning("Edge value for key %s is not a string; treating as miss", key)
            return None
        return decoded

    async def store(self, cache_key: str, value: str) -> bool:
        """Store translation with TTL (SETEX resets any previous TTL). Returns True on success.

        Args:
            cache_key: Derived cache key (digest).
            value: Translated text (already within the length bound).

        Returns:
            True if stored, False otherwise.
        """
        try:
            return await self._store(cache_key, value)
        except Exception:
            logger.exception("Unexpected edge store error for key %s", cache_key)
            return False

    async def _store(self, cache_key: str, value: str) -> bool:
        client = self.redis
        if not self.is_available() or client is None:
            return False
        key = edge_translation_key(cache_key)
        serialized = json.dumps(value, ensure_ascii=False)
        try:
            await client.setex(key, self.ttl_seconds, serialized)
            logger.debug("Edge SET: %s (TTL: %ss)", key, self.ttl_seconds)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            client = await self._reconnect(client)
            if client is None:
                logger.warning("Edge store unavailable for key %s (Redis disconnected)", key)
                return False
            try:
                await client.setex(key, self.ttl_seconds, serialized)
                return True
            except redis.RedisError:
                logger.exception("Edge store error for key %s after reconnect", key)
                return False
        except redis.RedisError:
            logger.exception("Edge store error for key %s", key)
            return False

    async def delete(self, cache_key: str) -> bool:
        """Remove a translation from the edge tier. Returns True if the call succeeded."""
        client = self.redis
        if not self.is_available() or client is None:
            return False
        key = edge_translation_key(cache_key)
        try:
            await client.delete(key)
            logger.debug("Edge DELETE: %s", key)
            return True
        except redis.RedisError:
            logger.exception("Edge delete error for key %s", key)
            return False
