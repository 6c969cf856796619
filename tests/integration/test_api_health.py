"""Integration tests for the health check endpoint."""

import pytest
from httpx import AsyncClient

from trustgate.api.schemas.health import HealthStatus


@pytest.mark.asyncio
class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    async def test_health_returns_200(self, test_client: AsyncClient):
        """Test basic health check returns 200."""
        response = await test_client.get("/health")

        assert response.status_code == 200

    async def test_health_returns_healthy_status(self, test_client: AsyncClient):
        """Test health check returns healthy status."""
        response = await test_client.get("/health")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "timestamp" in data

    async def test_health_reports_provider(self, test_client: AsyncClient):
        """Test health check names the active screening provider."""
        response = await test_client.get("/health")

        assert response.json()["provider"] == "mock"

    async def test_health_has_request_id(self, test_client: AsyncClient):
        """Test health responses carry a request id but no correlation id."""
        response = await test_client.get("/health")

        assert "X-Request-ID" in response.headers
        assert "X-Correlation-ID" not in response.headers

    async def test_status_values_match_responses(self, test_client: AsyncClient):
        """Test every advertised health status is one the endpoint returns."""
        response = await test_client.get("/health")

        assert [status.value for status in HealthStatus] == [response.json()["status"]]
