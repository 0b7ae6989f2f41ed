"""Pytest configuration and fixtures for isp_translator.

Environment is set before isp_translator.main is imported so Settings
validation passes without a .env file. HTTP tests run against the ASGI app
with the store, edge cache and provider replaced through
app.dependency_overrides; no Redis, database or network is needed.
"""

import os

os.environ.setdefault("API_TOKEN", "test-api-token")
os.environ.setdefault("AI_API_URL", "https://ai.example.test/v1")
os.environ.setdefault("AI_API_TOKEN", "test-ai-token")
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from isp_translator.api.v1.dependencies import (  # noqa: E402
    get_edge_cache,
    get_transformation_provider,
    get_translation_store,
)
from isp_translator.application.dtos.translation import TranslationEntry  # noqa: E402
from isp_translator.domain.exceptions import StoreWriteError  # noqa: E402
from isp_translator.main import app  # noqa: E402

TEST_API_TOKEN = os.environ["API_TOKEN"]


class FakeStore:
    """In-memory translation store with the repository's semantics (unique keys)."""

    def __init__(self) -> None:
        self.rows: dict[str, TranslationEntry] = {}
        self.get_calls: list[str] = []
        self.put_calls: list[tuple[str, str]] = []
        self.read_error: Exception | None = None

    async def get(self, cache_key: str) -> TranslationEntry | None:
        self.get_calls.append(cache_key)
        if self.read_error is not None:
            raise self.read_error
        return self.rows.get(cache_key)

    async def put(self, cache_key: str, translated_text: str) -> None:
        self.put_calls.append((cache_key, translated_text))
        if cache_key in self.rows:
            raise StoreWriteError(cache_key, "UNIQUE constraint failed", duplicate=True)
        self.rows[cache_key] = TranslationEntry(
            cache_key=cache_key,
            translated_text=translated_text,
            created_at=datetime.now(timezone.utc),
        )

    async def list_recent(self, limit: int = 100) -> list[TranslationEntry]:
        entries = sorted(
            self.rows.values(), key=lambda e: e.created_at or datetime.min, reverse=True
        )
        return entries[:limit]

    async def delete(self, cache_key: str) -> bool:
        return self.rows.pop(cache_key, None) is not None

    async def update(self, cache_key: str, translated_text: str) -> bool:
        entry = self.rows.get(cache_key)
        if entry is None:
            return False
        self.rows[cache_key] = TranslationEntry(
            cache_key=cache_key,
            translated_text=translated_text,
            created_at=entry.created_at,
        )
        return True

    async def clear(self) -> int:
        deleted = len(self.rows)
        self.rows.clear()
        return deleted


class FakeEdge:
    """In-memory edge cache. available=False makes every call a miss / failed write."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.available = True
        self.probe_calls: list[str] = []
        self.store_calls: list[tuple[str, str]] = []
        self.deleted: list[str] = []

    def is_available(self) -> bool:
        return self.available

    async def probe(self, cache_key: str) -> str | None:
        self.probe_calls.append(cache_key)
        if not self.available:
            return None
        return self.values.get(cache_key)

    async def store(self, cache_key: str, value: str) -> bool:
        self.store_calls.append((cache_key, value))
        if not self.available:
            return False
        self.values[cache_key] = value
        return True

    async def delete(self, cache_key: str) -> bool:
        self.deleted.append(cache_key)
        self.values.pop(cache_key, None)
        return True


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def fake_edge() -> FakeEdge:
    return FakeEdge()


@pytest.fixture
def fake_provider() -> AsyncMock:
    """Provider mock; set return_value / side_effect per test."""
    provider = AsyncMock()
    provider.transform = AsyncMock(return_value="中国电信")
    return provider


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the raw API token (no Bearer prefix)."""
    return {"Authorization": TEST_API_TOKEN}


@pytest.fixture
async def client(fake_store: FakeStore, fake_edge: FakeEdge, fake_provider: AsyncMock) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with in-memory tiers."""
    app.dependency_overrides[get_translation_store] = lambda: fake_store
    app.dependency_overrides[get_edge_cache] = lambda: fake_edge
    app.dependency_overrides[get_transformation_provider] = lambda: fake_provider
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.background_tasks.drain(timeout=5)
    app.dependency_overrides.clear()


async def drain_background() -> None:
    """Wait for write-back tasks scheduled by the last request(s)."""
    await app.state.background_tasks.drain(timeout=5)
