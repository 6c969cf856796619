"""Request context for correlating workflow activity.

This module provides request context propagation using Python's contextvars
so that log entries and audit events written during one request share a
correlation ID and carry the caller's network metadata.

Usage:
    from trustgate.core.context import RequestContext, request_context

    ctx = RequestContext(ip_address="203.0.113.7", user_agent="Mozilla/5.0")

    with request_context(ctx):
        await orchestrator.run_mvr_screening(renter_id)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, Field
from uuid_utils.compat import uuid7


class RequestContext(BaseModel):
    """Metadata describing the request that triggered a workflow."""

    correlation_id: UUID = Field(default_factory=uuid7)
    ip_address: str | None = None
    user_agent: str | None = None
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


_request_context: ContextVar[RequestContext | None] = ContextVar("request_context", default=None)


def get_current_context_or_none() -> RequestContext | None:
    """Get the current request context, or None outside a request."""
    return _request_context.get()


def set_context(ctx: RequestContext) -> Token[RequestContext | None]:
    """Set the current request context.

    Args:
        ctx: The context to make current

    Returns:
        Token used to restore the previous context
    """
    return _request_context.set(ctx)


def reset_context(token: Token[RequestContext | None]) -> None:
    """Restore the context that was current before set_context()."""
    _request_context.reset(token)


@contextmanager
def request_context(ctx: RequestContext) -> Iterator[RequestContext]:
    """Context manager that makes ctx current for the enclosed block."""
    token = set_context(ctx)
    try:
        yield ctx
    finally:
        reset_context(token)
