"""Request logging middleware."""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from trustgate.core.logging import get_logger

from .context import get_client_ip

logger = get_logger("trustgate.api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every HTTP request with its outcome and latency.

    Compliance events are written by the workflows through the audit sink;
    this middleware only produces operational logs.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request and log request/response."""
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._log_request(request, response, duration_ms)

        return response

    def _log_request(self, request: Request, response: Response, duration_ms: float) -> None:
        """Log the completed request at a level matching its status code."""
        status_code = response.status_code
        if status_code >= 500:
            log = logger.error
        elif status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "http_request",
            request_id=str(getattr(request.state, "request_id", "unknown")),
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(duration_ms, 2),
            client_ip=get_client_ip(request),
            user_agent=request.headers.get("User-Agent"),
        )
