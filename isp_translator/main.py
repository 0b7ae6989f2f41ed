"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See isp_translator.core.lifespan and
isp_translator.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from isp_translator.api.v1 import api_router
from isp_translator.core.config import get_settings
from isp_translator.core.exception_handlers import register_exception_handlers
from isp_translator.core.lifespan import create_lifespan
from isp_translator.core.limiter import limiter
from isp_translator.infrastructure.background import BackgroundTaskRegistry
from isp_translator.middleware import RequestIDMiddleware, TimeoutMiddleware
from isp_translator.pages import render_root_page
from isp_translator.shared.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # Registry exists before startup so write-backs scheduled without a lifespan still run.
    app.state.background_tasks = BackgroundTaskRegistry()
    app.state.edge_cache = None

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    allow_methods = ["POST", "OPTIONS"]
    if settings.cache_admin_enabled:
        allow_methods.insert(0, "GET")

    # Middleware: first added = innermost. Order seen by a request: timeout → request ID → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=allow_methods,
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["X-Cache-Status", settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse)
    def root() -> HTMLResponse:
        """Demo page: a small form that calls the translate API."""
        return HTMLResponse(content=render_root_page(settings.app_name, settings.cache_admin_enabled))

    return app


app = create_app()
