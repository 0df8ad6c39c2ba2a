"""
Request correlation IDs.

Each HTTP request gets an ID (taken from X-Correlation-ID or freshly
generated) that follows it through awaits via a ContextVar, so log lines
from the agent and the providers can be tied back to one request.

Dependencies: contextvars, uuid
System role: Request tracing
"""

import uuid
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("sales_coach_correlation_id", default="")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind an ID to the current context, generating one when not given; returns it."""
    value = correlation_id or new_correlation_id()
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """Current request's ID, or "" outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
