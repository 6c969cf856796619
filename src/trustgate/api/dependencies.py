"""FastAPI dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.compliance.consent import ConsentLedger
from trustgate.config.settings import Settings
from trustgate.core.context import RequestContext, get_current_context_or_none
from trustgate.db.config import get_db
from trustgate.providers.factory import ScreeningProviderConfig
from trustgate.providers.protocol import ScreeningProvider
from trustgate.screening.orchestrator import ScreeningOrchestrator

# Re-export database dependency for convenience
__all__ = [
    "get_db",
    "get_settings_from_app",
    "get_provider",
    "get_request_context",
    "get_consent_ledger",
    "get_orchestrator",
]


def get_settings_from_app(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_provider(request: Request) -> ScreeningProvider:
    """Get the application's screening provider.

    A single instance is shared by all requests so that results stored by
    the mock provider remain retrievable across calls.
    """
    return request.app.state.provider


def get_request_context() -> RequestContext:
    """Get the current request context, or an empty one outside the middleware."""
    return get_current_context_or_none() or RequestContext()


def get_consent_ledger(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ConsentLedger:
    """Get a ConsentLedger bound to the request's database session."""
    return ConsentLedger(db)


def get_orchestrator(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings_from_app)],
    provider: Annotated[ScreeningProvider, Depends(get_provider)],
) -> ScreeningOrchestrator:
    """Get a ScreeningOrchestrator bound to the request's database session."""
    return ScreeningOrchestrator(
        db, ScreeningProviderConfig.from_settings(settings), provider=provider
    )
