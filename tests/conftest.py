"""Pytest fixtures for TrustGate tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from trustgate.config.settings import Settings
from trustgate.db.config import get_db
from trustgate.db.models.base import Base
from trustgate.db.models.profile import RenterProfile
from trustgate.providers.mock import MockScreeningProvider


# =============================================================================
# Structlog Configuration Fixture
# =============================================================================


@pytest.fixture(scope="function", autouse=True)
def reset_structlog_after_test():
    """Reset structlog configuration after each test.

    This ensures tests that modify structlog global state
    don't affect other tests.
    """
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Create settings for testing."""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        ENVIRONMENT="test",
        DEBUG=True,
        log_level="DEBUG",
        use_checkr=False,
        checkr_api_key=None,
    )


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    # StaticPool keeps every session on the one in-memory connection
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_provider() -> MockScreeningProvider:
    """A fresh deterministic provider."""
    return MockScreeningProvider()


@pytest.fixture
def add_profile(db_session: AsyncSession):
    """Factory fixture that stores a renter profile.

    Usage:
        await add_profile("user_fail@example.com")
    """

    async def _add(
        renter_id: str,
        *,
        full_name: str | None = "Jane Q Renter",
        email: str | None = None,
        drivers_license_number: str | None = "D1234567",
        drivers_license_state: str | None = "CA",
    ) -> RenterProfile:
        profile = RenterProfile(
            renter_id=renter_id,
            user_id=f"auth-{renter_id}",
            full_name=full_name,
            email=email,
            drivers_license_number=drivers_license_number,
            drivers_license_state=drivers_license_state,
        )
        db_session.add(profile)
        await db_session.commit()
        return profile

    return _add


# =============================================================================
# API test fixtures
# =============================================================================


@pytest.fixture
def test_app(
    test_settings: Settings,
    mock_provider: MockScreeningProvider,
    session_factory: async_sessionmaker[AsyncSession],
) -> FastAPI:
    """Create a FastAPI test application backed by the test database."""
    from trustgate.api.app import create_app

    app = create_app(settings=test_settings, provider=mock_provider)

    async def _get_test_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    return app


@pytest_asyncio.fixture
async def test_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for API testing.

    Provides an httpx.AsyncClient configured to call the test application
    directly without network overhead.
    """
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
