"""Request context using contextvars.

Holds the request ID for the current request so log records and detached
tasks can carry it without threading it through every call.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request ID for the current context. Returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the request ID of the current context, or None outside a request."""
    return _request_id.get()
