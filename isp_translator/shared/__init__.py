"""Shared cross-cutting helpers: request context and logging. No business logic."""

from isp_translator.shared.context import (
    get_request_id,
    reset_request_id,
    set_request_id,
)
from isp_translator.shared.logging import RequestIDFilter, setup_logging

__all__ = [
    "RequestIDFilter",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "setup_logging",
]
