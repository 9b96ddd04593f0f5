"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request ID), so
log records emitted while serving a request can be correlated.

Usage:
    token = set_request_id("3f2c...")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request ID for the current context; returns a token for reset."""
    return _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the request ID of the current context, or None outside a request."""
    return _request_id.get()


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request ID that was current before set_request_id."""
    _request_id.reset(token)
