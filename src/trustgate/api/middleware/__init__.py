"""API middleware components."""

from .context import RequestContextMiddleware, get_client_ip
from .errors import EXCEPTION_MAP, ErrorHandlingMiddleware
from .logging import RequestLoggingMiddleware

__all__ = [
    "EXCEPTION_MAP",
    "ErrorHandlingMiddleware",
    "RequestContextMiddleware",
    "RequestLoggingMiddleware",
    "get_client_ip",
]
