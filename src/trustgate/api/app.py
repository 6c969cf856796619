"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from trustgate.api.middleware import (
    ErrorHandlingMiddleware,
    RequestContextMiddleware,
    RequestLoggingMiddleware,
)
from trustgate.api.routers import health_router, v1_router
from trustgate.config.settings import Settings, get_settings
from trustgate.core.logging import get_logger, setup_logging
from trustgate.db.config import close_db, init_db
from trustgate.providers.factory import ScreeningProviderConfig, get_screening_provider
from trustgate.providers.protocol import ScreeningProvider

logger = get_logger("trustgate.api")


def create_app(
    settings: Settings | None = None,
    provider: ScreeningProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The screening provider is built once here and shared by every request.
    Selecting Checkr without an API key fails at this point rather than on
    the first screening.

    Args:
        settings: Optional settings override (useful for testing)
        provider: Optional provider instance to use instead of the configured one

    Returns:
        Configured FastAPI application

    Raises:
        ProviderConfigurationError: If the configured provider lacks required settings

    Example:
        # Run with uvicorn
        uvicorn trustgate.api.app:create_app --factory
    """
    if settings is None:
        settings = get_settings()

    if provider is None:
        provider = get_screening_provider(ScreeningProviderConfig.from_settings(settings))

    app = FastAPI(
        title="TrustGate API",
        description="Renter screening and compliance workflows",
        version="0.1.0",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=_lifespan,
    )

    # Store shared state for access in dependencies
    app.state.settings = settings
    app.state.provider = provider

    _configure_middleware(app)
    _configure_routers(app)

    logger.info(
        "app_created",
        environment=settings.ENVIRONMENT,
        provider=provider.provider_id,
    )
    return app


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and verifies the database on startup, and releases
    pooled connections on shutdown.
    """
    setup_logging(log_level=app.state.settings.log_level)
    logger.info("app_starting")

    await init_db()

    yield

    logger.info("app_stopping")
    await close_db()


def _configure_middleware(app: FastAPI) -> None:
    """Configure middleware stack.

    Middleware order (outermost to innermost execution):
    1. RequestLoggingMiddleware - Logs all requests
    2. ErrorHandlingMiddleware - Converts exceptions to HTTP responses
    3. RequestContextMiddleware - Sets ContextVar for request context

    Note: Middleware is added in reverse order because Starlette
    processes them from last-added to first-added.
    """
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)


def _configure_routers(app: FastAPI) -> None:
    """Configure API routers."""
    # Health check endpoints (no prefix - at root level)
    app.include_router(health_router)

    app.include_router(v1_router)
