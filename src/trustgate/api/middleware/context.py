"""Request context middleware for propagating context through the request lifecycle."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from uuid_utils.compat import uuid7

from trustgate.core.context import RequestContext, request_context

# Paths that don't require request context
SKIP_CONTEXT_PATHS = {
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
}


def get_client_ip(request: Request) -> str | None:
    """Extract client IP from request, considering proxy headers."""
    # Check X-Forwarded-For first (for reverse proxies)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Take first IP in the chain (original client)
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    if request.client:
        return request.client.host

    return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that sets up RequestContext for each request.

    The context carries the correlation ID shared by every log entry and
    audit event of the request, plus the caller's IP and user agent.

    Sets:
        request.state.request_id: The generated request ID (UUIDv7)
        X-Request-ID response header: For client correlation
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request within a RequestContext."""
        request_id = uuid7()
        request.state.request_id = request_id

        if self._should_skip_context(request.url.path):
            response = await call_next(request)
            response.headers["X-Request-ID"] = str(request_id)
            return response

        ctx = RequestContext(
            correlation_id=request_id,
            ip_address=get_client_ip(request),
            user_agent=request.headers.get("User-Agent"),
        )

        with request_context(ctx):
            response = await call_next(request)

        response.headers["X-Request-ID"] = str(request_id)
        response.headers["X-Correlation-ID"] = str(ctx.correlation_id)

        return response

    def _should_skip_context(self, path: str) -> bool:
        """Check if path should skip context setup."""
        return path in SKIP_CONTEXT_PATHS or path.startswith(("/docs", "/redoc"))
