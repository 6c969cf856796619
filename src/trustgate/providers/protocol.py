"""Screening provider protocol.

This module defines the interface every screening provider implements.
The orchestrator talks only to this interface, so the deterministic mock
and real vendor integrations are interchangeable at the call site.
"""

from typing import Protocol, runtime_checkable

from .types import (
    MvrRequestInput,
    ProviderReference,
    ScreeningResult,
    ScreeningType,
    SoftCreditRequestInput,
)


@runtime_checkable
class ScreeningProvider(Protocol):
    """Interface all screening providers must implement.

    Example implementation:
        class AcmeProvider(BaseScreeningProvider):
            def __init__(self):
                super().__init__("acme")

            async def request_mvr(self, input):
                response = await self._client.post("/mvr", json=...)
                return ProviderReference(provider_ref=response.json()["id"])
            ...
    """

    @property
    def provider_id(self) -> str:
        """Get the unique provider identifier.

        Returns:
            String identifier recorded on screening rows (e.g., "mock", "checkr").
        """
        ...

    async def request_mvr(self, input: MvrRequestInput) -> ProviderReference:
        """Request a Motor Vehicle Record check.

        Args:
            input: Renter identity and driver's license details.

        Returns:
            Reference used to look up the result.

        Raises:
            ProviderRequestError: If the provider cannot accept the request.
        """
        ...

    async def request_soft_credit(self, input: SoftCreditRequestInput) -> ProviderReference:
        """Request a soft credit check.

        Args:
            input: Renter identity, optional email and postal address.

        Returns:
            Reference used to look up the result.

        Raises:
            ProviderRequestError: If the provider cannot accept the request.
        """
        ...

    async def get_result(
        self, provider_ref: str, screening_type: ScreeningType
    ) -> ScreeningResult:
        """Get the result of a screening request.

        An unknown reference yields a PENDING result, not an error, so
        "not found yet" and "not ready yet" look the same to pollers.

        Raises:
            ProviderResultError: If the provider cannot produce a result.
        """
        ...


class BaseScreeningProvider:
    """Base class for screening provider implementations.

    Subclasses override the three screening operations.
    """

    def __init__(self, provider_id: str):
        """Initialize the provider.

        Args:
            provider_id: Identifier recorded on screening rows.
        """
        self._provider_id = provider_id

    @property
    def provider_id(self) -> str:
        """Get the unique provider identifier."""
        return self._provider_id

    async def request_mvr(self, input: MvrRequestInput) -> ProviderReference:
        """Subclasses must implement this method."""
        raise NotImplementedError("Subclasses must implement request_mvr")

    async def request_soft_credit(self, input: SoftCreditRequestInput) -> ProviderReference:
        """Subclasses must implement this method."""
        raise NotImplementedError("Subclasses must implement request_soft_credit")

    async def get_result(
        self, provider_ref: str, screening_type: ScreeningType
    ) -> ScreeningResult:
        """Subclasses must implement this method."""
        raise NotImplementedError("Subclasses must implement get_result")
