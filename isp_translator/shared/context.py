"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request ID).
Tasks created with asyncio.create_task copy the current context, so
background write-back jobs keep the ID of the request that scheduled them.

Usage:
    token = set_request_id("abc123")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> Token[str | None]:
    """Set the current request ID. Returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request ID that was current before set_request_id."""
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID (None outside a request)."""
    return _request_id.get()
