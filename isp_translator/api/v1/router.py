"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from isp_translator.api.v1.dependencies (no manual
repo/service construction).
"""

from fastapi import APIRouter

from isp_translator.api.v1.endpoints import cache_admin, health, translate

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(translate.router, prefix="/translate", tags=["translate"])
api_router.include_router(cache_admin.router, prefix="/cache", tags=["cache-admin"])
