"""API v1."""

from isp_translator.api.v1.router import api_router

__all__ = ["api_router"]
