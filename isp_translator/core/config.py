"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (API_TOKEN, AI_API_URL) are validated
at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (api_token, ai_api_url).
    """

    # App
    app_name: str = "isp-translator"
    app_version: str = "1.0.0"
    debug: bool = False

    # Client auth: the Authorization header must equal this value exactly.
    api_token: SecretStr = SecretStr("")

    # Transformation provider (OpenAI-compatible chat completions API)
    ai_api_url: str = ""
    ai_api_token: SecretStr = SecretStr("")
    ai_model: str = "deepseek-ai/DeepSeek-V3.2-Exp"
    ai_timeout_seconds: float = 30.0

    # Persistent store: postgresql+asyncpg://... in production, sqlite+aiosqlite://... locally
    database_url: str = "sqlite+aiosqlite:///./translations.db"
    database_echo: bool = False
    # Create tables at startup (local/dev); production uses Alembic migrations.
    database_auto_create: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Edge cache (Redis)
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    edge_cache_ttl_seconds: int = 31_536_000  # one year
    # Minimum gap between attempts to bring a lost Redis connection back.
    edge_reconnect_interval_seconds: float = 30.0

    # Dev-only cache browsing/editing endpoints
    cache_admin_enabled: bool = False

    # CORS
    allowed_origins: str = "*"

    # Rate limiting (SlowAPI, in-memory per process)
    rate_limit_enabled: bool = True

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Write-back tasks still running at shutdown get this long before being abandoned.
    background_drain_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env.

        - API_TOKEN: shared secret clients send in the Authorization header.
        - AI_API_URL: base URL of the chat completions provider.
        """
        if not self.api_token.get_secret_value():
            raise ValueError(
                "API_TOKEN is required. Generate with: openssl rand -hex 32."
            )
        if not self.ai_api_url:
            raise ValueError(
                "AI_API_URL is required (e.g. https://api.siliconflow.cn/v1)."
            )
        if self.edge_cache_ttl_seconds < 1:
            raise ValueError("EDGE_CACHE_TTL_SECONDS must be a positive number of seconds")
        return self

    @property
    def is_sqlite(self) -> bool:
        """True when the persistent store is a SQLite file or in-memory database."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
