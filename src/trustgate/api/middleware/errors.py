"""Error handling middleware for mapping exceptions to HTTP responses."""

from datetime import UTC, datetime
from typing import Any, Callable
from uuid import UUID

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from trustgate.api.schemas.errors import APIError, ErrorCode
from trustgate.core.exceptions import (
    ConsentRequiredError,
    MissingLicenseDataError,
    PersistenceError,
    ProfileNotFoundError,
    ScreeningNotFoundError,
)
from trustgate.core.logging import get_logger
from trustgate.providers.types import ProviderConfigurationError, ProviderError

logger = get_logger(__name__)

# Exception to HTTP status/error code mapping
# Format: Exception -> (status_code, error_code)
EXCEPTION_MAP: dict[type[Exception], tuple[int, str]] = {
    ConsentRequiredError: (403, ErrorCode.CONSENT_MISSING.value),
    ProfileNotFoundError: (404, ErrorCode.NOT_FOUND.value),
    ScreeningNotFoundError: (404, ErrorCode.NOT_FOUND.value),
    MissingLicenseDataError: (422, ErrorCode.VALIDATION_ERROR.value),
    ValidationError: (422, ErrorCode.VALIDATION_ERROR.value),
    ProviderError: (502, ErrorCode.PROVIDER_ERROR.value),
    ProviderConfigurationError: (503, ErrorCode.PROVIDER_UNAVAILABLE.value),
    PersistenceError: (503, ErrorCode.SERVICE_UNAVAILABLE.value),
}


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware that catches exceptions and returns standardized error responses.

    Maps domain exceptions to HTTP status codes through EXCEPTION_MAP and
    formats every error using the APIError schema.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request and handle any exceptions."""
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Convert exception to JSON error response."""
        request_id = self._get_request_id(request)
        status_code, error_code = self._lookup(exc)
        message, details = self._describe(exc, debug=self._is_debug(request))

        if status_code >= 500:
            logger.error(
                "request_failed",
                path=request.url.path,
                status_code=status_code,
                error_type=type(exc).__name__,
                error=str(exc),
                exc_info=status_code == 500,
            )
        else:
            logger.info(
                "request_rejected",
                path=request.url.path,
                status_code=status_code,
                error_code=error_code,
            )

        error = APIError(
            error_code=error_code,
            message=message,
            details=details,
            request_id=request_id,
            timestamp=datetime.now(UTC),
        )

        return JSONResponse(
            status_code=status_code,
            content=error.model_dump(mode="json"),
            headers={"X-Request-ID": request_id},
        )

    def _get_request_id(self, request: Request) -> str:
        """Extract request ID from state or generate placeholder."""
        if hasattr(request.state, "request_id"):
            rid = request.state.request_id
            return str(rid) if isinstance(rid, UUID) else rid
        return "unknown"

    def _lookup(self, exc: Exception) -> tuple[int, str]:
        """Find the mapping for the exception's nearest mapped class."""
        for cls in type(exc).__mro__:
            if cls in EXCEPTION_MAP:
                return EXCEPTION_MAP[cls]
        return 500, ErrorCode.INTERNAL_ERROR.value

    def _describe(self, exc: Exception, *, debug: bool) -> tuple[str, dict[str, Any] | None]:
        """Build the (message, details) pair for the response body."""
        if isinstance(exc, ConsentRequiredError):
            return exc.args[0], {
                "policy_key": exc.policy_key,
                "policy_version": exc.policy_version,
            }

        if isinstance(exc, ProfileNotFoundError):
            return exc.args[0], {"renter_id": exc.renter_id}

        if isinstance(exc, ScreeningNotFoundError):
            return exc.args[0], {"screening_id": str(exc.screening_id)}

        if isinstance(exc, MissingLicenseDataError):
            return exc.args[0], {"missing_fields": exc.missing_fields}

        if isinstance(exc, ValidationError):
            return "Request validation failed", {"errors": exc.errors(include_url=False, include_context=False)}

        if isinstance(exc, ProviderConfigurationError):
            return "Screening provider is not configured", {"provider": exc.provider_id}

        if isinstance(exc, ProviderError):
            return "Screening unavailable, please retry", {"provider": exc.provider_id}

        if isinstance(exc, PersistenceError):
            return "Screening unavailable, please retry", None

        # Generic exceptions
        return (
            "Internal server error",
            {"type": type(exc).__name__} if debug else None,
        )

    def _is_debug(self, request: Request) -> bool:
        """Check if the application runs in debug mode."""
        settings = getattr(request.app.state, "settings", None)
        return bool(settings and settings.DEBUG)
